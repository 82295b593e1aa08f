"""Assistant API endpoint.

This module provides the endpoint that runs one prompt through the agent
loop and maps failures to HTTP status codes.
"""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from mcp_bridge.dependencies import get_assistant_session
from mcp_bridge.errors import ConfigurationError, UpstreamUnavailableError
from mcp_bridge.models.assistant import AssistantRequest, AssistantResponse
from mcp_bridge.sessions.session import AssistantSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/assistant", tags=["assistant"])


def _error_detail(code: str, message: str, details: dict | None = None) -> dict:
    return {"error": {"code": code, "message": message, "details": details or {}}}


def _invalid_request() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=_error_detail("invalid_request", "Invalid request body"),
    )


@router.post("", response_model=AssistantResponse)
async def run_assistant(
    request: Request,
    session: AssistantSession = Depends(get_assistant_session),
) -> AssistantResponse:
    """Answer a prompt, letting the model call MCP tools as needed.

    The body is read by hand so that malformed JSON is reported as 400
    like any other invalid prompt.

    Args:
        request: FastAPI request object, body expected to be ``{"prompt": "..."}``
        session: Injected per-request assistant session

    Returns:
        AssistantResponse with the final answer and tool-call count

    Raises:
        HTTPException: 400 for an invalid body, 500 for missing configuration
            or unexpected failures, 502 if an upstream is unreachable
    """
    try:
        payload = await request.json()
    except ValueError:
        raise _invalid_request()

    try:
        request_body = AssistantRequest.model_validate(payload)
    except ValidationError:
        raise _invalid_request()

    try:
        outcome = await session.run(request_body.prompt)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_error_detail("env_incomplete", str(e)),
        )
    except UpstreamUnavailableError as e:
        logger.error(f"Upstream unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_error_detail("upstream_unavailable", str(e)),
        )
    except httpx.TransportError as e:
        # Network failure that escaped the client wrappers
        logger.error(f"Upstream connection failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=_error_detail("upstream_unavailable", "Upstream service unavailable"),
        )
    except Exception as e:
        logger.exception("Assistant run failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=_error_detail("assistant_error", str(e)),
        )

    return AssistantResponse(answer=outcome.answer, tool_calls=outcome.tool_calls)
