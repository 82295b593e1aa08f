"""Normalization of tool results into conversation text."""

import json
from typing import Any, Sequence


def _as_dict(item: Any) -> Any:
    if hasattr(item, "model_dump"):
        return item.model_dump(mode="json", by_alias=True, exclude_none=True)
    return item


def tool_result_text(content: Sequence[Any]) -> str:
    """Collapse a tool's content items into a single string.

    All ``text`` items are joined with newlines, skipping empty ones. When
    the result carries no usable text (images, embedded resources,
    structured objects) the whole content list is serialized as JSON instead.

    Args:
        content: Content items as dicts or MCP SDK content models

    Returns:
        str: Text suitable for a ``tool`` role message
    """
    items = [_as_dict(item) for item in content]

    text_parts = []
    for item in items:
        if not isinstance(item, dict) or item.get("type") != "text":
            continue
        text = item.get("text")
        text = "" if text is None else str(text)
        if text:
            text_parts.append(text)

    if text_parts:
        return "\n".join(text_parts)

    return json.dumps(items, separators=(",", ":"), ensure_ascii=False)
