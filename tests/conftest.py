"""Test fixtures for the Coolify MCP tools."""

from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from coolify_mcp.config import Settings
from coolify_mcp.coolify_client import CoolifyClient
from coolify_mcp.models import ToolDefinition
from coolify_mcp.service import AdapterService
from coolify_mcp.tool_registry import ToolRegistry

BASE_URL = "https://coolify.example.com"
TOKEN = "test-token"


class FakeCoolify:
    """In-process stand-in for the Coolify API, served through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
    ) -> None:
        def respond(_request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)

        self.routes[(method, f"/api/v1{path}")] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "not_found", "status": 404, "message": "Not found"})
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def unreachable_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.fixture
def fake_coolify() -> FakeCoolify:
    """Create an empty fake Coolify API."""
    return FakeCoolify()


@pytest.fixture
def client(fake_coolify: FakeCoolify) -> CoolifyClient:
    """Create a client wired to the fake API."""
    return CoolifyClient(BASE_URL, TOKEN, transport=fake_coolify.transport)


@pytest.fixture
def tools(client: CoolifyClient) -> Dict[str, ToolDefinition]:
    """Build every tool definition keyed by name."""
    return {tool.name: tool for tool in ToolRegistry(client).build()}


@pytest.fixture
def service() -> AdapterService:
    return AdapterService()


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(coolify_base_url=BASE_URL, coolify_access_token=TOKEN)
