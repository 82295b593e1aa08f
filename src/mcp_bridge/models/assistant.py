"""Pydantic models for the assistant endpoint."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class AssistantRequest(BaseModel):
    """Request body for POST /api/v1/assistant."""

    prompt: StrictStr = Field(description="The user's request, non-empty after trimming")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"prompt": "List my events for tomorrow"},
                {"prompt": "Book a meeting next Wednesday at 17 in Helsinki"},
            ]
        }
    )

    @field_validator("prompt")
    @classmethod
    def _strip_prompt(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("prompt must not be empty")
        return value


class AssistantResponse(BaseModel):
    """Response body for POST /api/v1/assistant."""

    answer: str = Field(description="The model's final answer")
    tool_calls: int = Field(
        alias="toolCalls",
        description="Number of MCP tool calls executed while answering",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {"answer": "You have no events tomorrow.", "toolCalls": 1}
        },
    )
