"""Configuration module for mcp-bridge using pydantic-settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gpt-4o"


class McpBridgeSettings(BaseSettings):
    """Main configuration settings for mcp-bridge.

    All settings can be overridden via environment variables (or a ``.env``
    file) named after the field, e.g. MCP_SERVER_URL overrides mcp_server_url.

    The two endpoint URLs have no default. Their absence does not stop the
    server from starting; every assistant request fails with a
    ConfigurationError until they are set.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Upstream endpoints
    mcp_server_url: str | None = None
    openai_proxy_url: str | None = None
    openai_model: str = DEFAULT_MODEL

    # Agent loop
    max_rounds: int = Field(default=6, ge=1)

    # HTTP timeout (seconds) for chat-completion requests; None waits forever
    request_timeout: float | None = None

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("openai_model", mode="before")
    @classmethod
    def _default_empty_model(cls, value: object) -> object:
        """Treat an empty model name as unset."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_MODEL
        return value

    @property
    def is_configured(self) -> bool:
        """Whether both required endpoint URLs are present."""
        return bool(self.mcp_server_url) and bool(self.openai_proxy_url)
