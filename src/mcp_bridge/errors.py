"""Exception types raised by mcp-bridge.

The HTTP layer maps these to status codes:

- ``ConfigurationError`` -> 500 ``env incomplete``
- ``UpstreamUnavailableError`` -> 502
- anything else -> 500 with the error message
"""


class McpBridgeError(Exception):
    """Base class for all mcp-bridge errors."""


class ConfigurationError(McpBridgeError):
    """Required endpoint configuration is missing."""

    def __init__(self, message: str = "env incomplete") -> None:
        super().__init__(message)


class TransportError(McpBridgeError):
    """A chat-completion or tool-hosting call failed at the HTTP level."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnavailableError(TransportError):
    """An upstream service could not be reached at all (network-level failure)."""
