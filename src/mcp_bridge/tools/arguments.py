"""Decoding of tool-call argument payloads."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def parse_tool_arguments(raw: Any, tool_name: str = "") -> dict[str, Any]:
    """Decode the raw ``arguments`` of a tool call.

    Never raises. Anything that does not decode to a JSON object yields an
    empty dict, so a malformed call still reaches the tool.

    Args:
        raw: The JSON string sent by the model (or an already-decoded dict)
        tool_name: Tool name, only used for log messages

    Returns:
        dict: The decoded arguments, or ``{}``
    """
    if isinstance(raw, dict):
        return raw
    if not raw:
        return {}

    try:
        arguments = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(
            f"Invalid JSON arguments for tool '{tool_name}', using empty arguments: {e}"
        )
        return {}

    if not isinstance(arguments, dict):
        logger.warning(
            f"Arguments for tool '{tool_name}' are not a JSON object "
            f"({type(arguments).__name__}), using empty arguments"
        )
        return {}

    return arguments
