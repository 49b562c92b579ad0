"""CLI entry point for the Coolify MCP tools server."""

from __future__ import annotations

import asyncio
import logging
import sys

import uvicorn
from fastmcp import FastMCP

from .config import Settings, get_settings
from .coolify_client import ConfigurationError, CoolifyError
from .logging import configure_logging
from .server import CoolifyMcpServer, Runner, build_context, build_http_app

logger = logging.getLogger(__name__)


def _runner(settings: Settings, server: CoolifyMcpServer) -> Runner:
    transport = settings.adapter_transport.lower()

    async def run_stdio(mcp: FastMCP) -> None:
        await mcp.run_stdio_async()

    async def run_http(mcp: FastMCP) -> None:
        app = build_http_app(server)
        if not app:
            raise RuntimeError(f"HTTP app unavailable for transport={transport}")
        config = uvicorn.Config(app, host=settings.adapter_host, port=settings.adapter_port)
        await uvicorn.Server(config).serve()

    if transport == "stdio":
        return run_stdio
    if transport in {"http", "streamable-http", "streamablehttp", "sse"}:
        return run_http
    raise ConfigurationError(f"Unsupported transport: {settings.adapter_transport}")


async def _run() -> None:
    settings = get_settings()
    configure_logging(settings.adapter_log_level)

    if not settings.coolify_access_token:
        raise ConfigurationError("COOLIFY_ACCESS_TOKEN environment variable is required")

    context = build_context(settings)
    await context.server.connect(_runner(settings, context.server))


def main() -> None:
    try:
        asyncio.run(_run())
    except CoolifyError as exc:
        logger.error("Fatal error: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
