"""CLI entry point for mcp-bridge.

This module provides the command-line interface for starting the mcp-bridge
server. It can be invoked as `mcp-bridge` (via the script entry point) or
`python -m mcp_bridge`.
"""

import argparse
import sys

import uvicorn

from mcp_bridge import __version__, create_app
from mcp_bridge.config import McpBridgeSettings


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the mcp-bridge CLI."""
    parser = argparse.ArgumentParser(
        prog="mcp-bridge",
        description="Headless FastAPI server that lets a chat model call MCP tools",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"mcp-bridge {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via PORT)",
    )

    parser.add_argument(
        "--mcp-server-url",
        type=str,
        default=None,
        help="MCP server streamable-HTTP URL (can be set via MCP_SERVER_URL)",
    )

    parser.add_argument(
        "--openai-proxy-url",
        type=str,
        default=None,
        help="Chat-completion proxy base URL (can be set via OPENAI_PROXY_URL)",
    )

    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model identifier (default: gpt-4o, can be set via OPENAI_MODEL)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via LOG_LEVEL)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    return parser


def settings_from_args(args: argparse.Namespace) -> McpBridgeSettings:
    """Build settings, CLI args override environment variables."""
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.mcp_server_url is not None:
        settings_kwargs["mcp_server_url"] = args.mcp_server_url
    if args.openai_proxy_url is not None:
        settings_kwargs["openai_proxy_url"] = args.openai_proxy_url
    if args.model is not None:
        settings_kwargs["openai_model"] = args.model
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    return McpBridgeSettings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the mcp-bridge CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=args.reload,
    )


if __name__ == "__main__":
    sys.exit(main())
