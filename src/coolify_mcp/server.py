"""MCP server setup for the Coolify tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import PrivateAttr, ValidationError

from .config import Settings
from .coolify_client import CoolifyClient, CoolifyError
from .models import ToolDefinition
from .service import AdapterService
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)

Runner = Callable[[FastMCP], Awaitable[None]]


class ServerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    VALIDATED = "validated"
    READY = "ready"


class CoolifyTool(Tool):
    """FastMCP tool backed by a :class:`ToolDefinition`."""

    _definition: ToolDefinition = PrivateAttr()
    _service: AdapterService = PrivateAttr()

    @classmethod
    def from_definition(cls, definition: ToolDefinition, service: AdapterService) -> "CoolifyTool":
        tool = cls(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_model.model_json_schema(),
            annotations=ToolAnnotations(destructiveHint=definition.destructive),
        )
        tool._definition = definition
        tool._service = service
        return tool

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        try:
            result = await self._service.execute_tool(self._definition, arguments)
        except (ValidationError, CoolifyError) as exc:
            raise ToolError(str(exc)) from exc
        return ToolResult(
            content=[TextContent(type="text", text=block["text"]) for block in result["content"]]
        )


class CoolifyMcpServer:
    """Owns the FastMCP instance and the startup sequence.

    ``connect`` moves through ``uninitialized -> validated -> ready``: the
    Coolify connection is checked first, tools are registered once, then the
    transport runner takes over. A failed validation leaves no tools
    registered and never starts the transport.
    """

    def __init__(
        self,
        settings: Settings,
        client: CoolifyClient,
        service: Optional[AdapterService] = None,
    ) -> None:
        self.settings = settings
        self.client = client
        self.service = service or AdapterService()
        self.registry = ToolRegistry(client)
        self.mcp = FastMCP(settings.service_name, instructions=_instructions())
        self.state = ServerState.UNINITIALIZED
        self.tools: Dict[str, ToolDefinition] = {}

    async def connect(self, runner: Runner) -> None:
        if self.state is not ServerState.UNINITIALIZED:
            raise RuntimeError(f"Server already started (state={self.state.value})")

        logger.info("Validating connection to %s", self.client.base_url)
        await self.client.validate_connection()
        self.state = ServerState.VALIDATED

        self._register_tools()
        self.state = ServerState.READY
        logger.info("Server ready with %d tools", len(self.tools))

        await runner(self.mcp)

    def _register_tools(self) -> None:
        allowlist = self.settings.tool_allowlist()
        for definition in self.registry.build():
            if allowlist and definition.name not in allowlist:
                continue
            self.mcp.add_tool(CoolifyTool.from_definition(definition, self.service))
            self.tools[definition.name] = definition
            logger.debug("Registered tool: %s", definition.name)


@dataclass
class AppContext:
    settings: Settings
    client: CoolifyClient
    service: AdapterService
    server: CoolifyMcpServer


def build_context(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> AppContext:
    client = CoolifyClient(
        base_url=settings.coolify_base_url,
        access_token=settings.coolify_access_token,
        timeout_seconds=settings.coolify_timeout_seconds,
        transport=transport,
    )
    service = AdapterService()
    server = CoolifyMcpServer(settings, client, service)
    return AppContext(settings=settings, client=client, service=service, server=server)


def build_http_app(server: CoolifyMcpServer):  # type: ignore[no-untyped-def]
    transport = server.settings.adapter_transport.lower()
    if transport == "http":
        app = server.mcp.http_app(transport="http", stateless_http=True, json_response=True)
    elif transport in {"streamable-http", "streamablehttp"}:
        app = server.mcp.http_app(
            transport="streamable-http", stateless_http=True, json_response=True
        )
    elif transport == "sse":
        app = server.mcp.http_app(transport="sse")
    else:
        return None
    _attach_cors(app)
    _attach_healthcheck(app, server)
    return app


def _attach_healthcheck(app, server: CoolifyMcpServer) -> None:  # type: ignore[no-untyped-def]
    async def healthcheck(_request):  # type: ignore[no-untyped-def]
        from starlette.responses import JSONResponse

        # Served only once connect() has reached READY.
        return JSONResponse({"status": "ok", "state": server.state.value})

    app.add_route("/health", healthcheck, methods=["GET"])


def _attach_cors(app) -> None:  # type: ignore[no-untyped-def]
    from starlette.middleware.cors import CORSMiddleware

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _instructions() -> str:
    return (
        "Coolify infrastructure tools. "
        "Manage servers, projects, applications, databases and services on a Coolify instance. "
        "Destructive tools require confirm=true."
    )
