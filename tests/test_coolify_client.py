"""Tests for the Coolify API client."""

import json

import httpx
import pytest

from coolify_mcp.coolify_client import (
    ConfigurationError,
    CoolifyAPIError,
    CoolifyClient,
    CoolifyConnectionError,
    CoolifyDecodeError,
    CoolifyTimeoutError,
)
from coolify_mcp.models import DeleteOptions

from .conftest import BASE_URL, TOKEN, unreachable_transport


class TestConstruction:
    """Tests for connection config checks."""

    def test_missing_base_url(self):
        with pytest.raises(ConfigurationError, match="Coolify base URL is required"):
            CoolifyClient("", TOKEN)

    def test_missing_access_token(self):
        with pytest.raises(ConfigurationError, match="Coolify access token is required"):
            CoolifyClient(BASE_URL, "")

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            CoolifyClient("", "")

    @pytest.mark.parametrize(
        "base_url, expected",
        [
            ("https://coolify.example.com/", "https://coolify.example.com"),
            ("https://coolify.example.com", "https://coolify.example.com"),
            ("https://coolify.example.com//", "https://coolify.example.com/"),
            ("http://localhost:8000/coolify/", "http://localhost:8000/coolify"),
        ],
    )
    def test_strips_single_trailing_slash(self, base_url, expected):
        assert CoolifyClient(base_url, TOKEN).base_url == expected


class TestRequest:
    """Tests for the shared request routine."""

    @pytest.mark.asyncio
    async def test_sends_auth_and_content_type(self, client, fake_coolify):
        fake_coolify.add("GET", "/servers", json=[{"uuid": "s1"}])

        servers = await client.list_servers()

        assert servers == [{"uuid": "s1"}]
        request = fake_coolify.requests[0]
        assert str(request.url) == f"{BASE_URL}/api/v1/servers"
        assert request.headers["Authorization"] == f"Bearer {TOKEN}"
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_json_body_for_mutations(self, client, fake_coolify):
        fake_coolify.add("PATCH", "/projects/p1", json={"uuid": "p1", "name": "renamed"})

        await client.update_project("p1", {"name": "renamed"})

        request = fake_coolify.requests[0]
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"name": "renamed"}

    @pytest.mark.asyncio
    async def test_api_error_uses_message_field(self, client, fake_coolify):
        fake_coolify.add(
            "GET",
            "/applications/missing",
            json={"error": "x", "status": 404, "message": "Not found"},
            status_code=404,
        )

        with pytest.raises(CoolifyAPIError) as exc_info:
            await client.get_application("missing")

        assert str(exc_info.value) == "Not found"
        assert exc_info.value.status_code == 404
        assert exc_info.value.payload["error"] == "x"

    @pytest.mark.asyncio
    async def test_api_error_without_message(self, client, fake_coolify):
        fake_coolify.add("GET", "/servers/s1", json={}, status_code=500)

        with pytest.raises(CoolifyAPIError, match=r"^HTTP 500: Internal Server Error$"):
            await client.get_server("s1")

    @pytest.mark.asyncio
    async def test_non_json_body_is_decode_error(self, client, fake_coolify):
        fake_coolify.add("GET", "/servers", text="<html>gateway</html>", status_code=502)

        with pytest.raises(CoolifyDecodeError):
            await client.list_servers()

    @pytest.mark.asyncio
    async def test_connection_failure_names_base_url(self):
        client = CoolifyClient(BASE_URL, TOKEN, transport=unreachable_transport())

        with pytest.raises(CoolifyConnectionError, match=BASE_URL):
            await client.list_servers()

    @pytest.mark.asyncio
    async def test_timeout_is_reported_separately(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = CoolifyClient(
            BASE_URL, TOKEN, timeout_seconds=5, transport=httpx.MockTransport(handler)
        )

        with pytest.raises(CoolifyTimeoutError) as exc_info:
            await client.list_servers()

        message = str(exc_info.value)
        assert BASE_URL in message
        assert "did not respond within 5 seconds" in message
        assert "check if the server is running" not in message
        assert isinstance(exc_info.value, CoolifyConnectionError)


class TestValidateConnection:
    """Tests for startup connection validation."""

    @pytest.mark.asyncio
    async def test_success(self, client, fake_coolify):
        fake_coolify.add("GET", "/servers", json=[])

        await client.validate_connection()

        assert [r.url.path for r in fake_coolify.requests] == ["/api/v1/servers"]

    @pytest.mark.asyncio
    async def test_wraps_api_error(self, client, fake_coolify):
        fake_coolify.add("GET", "/servers", json={"message": "Unauthenticated."}, status_code=401)

        with pytest.raises(CoolifyConnectionError) as exc_info:
            await client.validate_connection()

        assert str(exc_info.value) == "Failed to connect to Coolify server: Unauthenticated."

    @pytest.mark.asyncio
    async def test_wraps_unreachable_server(self):
        client = CoolifyClient(BASE_URL, TOKEN, transport=unreachable_transport())

        with pytest.raises(CoolifyConnectionError, match="^Failed to connect to Coolify server: "):
            await client.validate_connection()


class TestQueryOptions:
    """Tests for boolean option flags rendered as query parameters."""

    @pytest.mark.asyncio
    async def test_delete_without_options(self, client, fake_coolify):
        fake_coolify.add("DELETE", "/applications/abc", json={"message": "deleted"})

        await client.delete_application("abc")

        assert fake_coolify.requests[0].url.query == b""

    @pytest.mark.asyncio
    async def test_delete_options_keep_false_values(self, client, fake_coolify):
        fake_coolify.add("DELETE", "/databases/db1", json={"message": "deleted"})

        await client.delete_database(
            "db1", DeleteOptions(delete_volumes=True, docker_cleanup=False)
        )

        params = fake_coolify.requests[0].url.params
        assert dict(params) == {"delete_volumes": "true", "docker_cleanup": "false"}

    @pytest.mark.asyncio
    async def test_start_flags_only_when_true(self, client, fake_coolify):
        fake_coolify.add("GET", "/applications/abc/start", json={"message": "queued"})

        await client.start_application("abc", force=True, instant_deploy=False)

        assert dict(fake_coolify.requests[0].url.params) == {"force": "true"}

    @pytest.mark.asyncio
    async def test_deploy_by_tag_and_uuid(self, client, fake_coolify):
        fake_coolify.add("GET", "/deploy", json={"deployments": []})

        await client.deploy(tag="prod", uuid="a,b", force=True)

        params = fake_coolify.requests[0].url.params
        assert dict(params) == {"tag": "prod", "uuid": "a,b", "force": "true"}

    @pytest.mark.asyncio
    async def test_deploy_without_arguments(self, client, fake_coolify):
        fake_coolify.add("GET", "/deploy", json={"deployments": []})

        await client.deploy()

        assert fake_coolify.requests[0].url.query == b""


class TestVariants:
    """Tests for tagged creation variants."""

    @pytest.mark.asyncio
    async def test_database_engine_path(self, client, fake_coolify):
        fake_coolify.add("POST", "/databases/clickhouse", json={"uuid": "db1"})

        result = await client.create_clickhouse_database({"project_uuid": "p", "server_uuid": "s"})

        assert result == {"uuid": "db1"}

    @pytest.mark.asyncio
    async def test_unknown_database_engine(self, client, fake_coolify):
        with pytest.raises(ValueError, match="Unknown database engine"):
            await client.create_database("oracle", {})
        assert fake_coolify.requests == []

    @pytest.mark.asyncio
    async def test_application_source_path(self, client, fake_coolify):
        fake_coolify.add("POST", "/applications/private-deploy-key", json={"uuid": "a1"})

        await client.create_private_deploy_key_application({"private_key_uuid": "k1"})

        assert fake_coolify.requests[0].url.path == "/api/v1/applications/private-deploy-key"

    @pytest.mark.asyncio
    async def test_unknown_application_source(self, client):
        with pytest.raises(ValueError, match="Unknown application source"):
            await client.create_application("svn", {})


class TestUtilityEndpoints:
    """Tests for the plain-text utility endpoints."""

    @pytest.mark.asyncio
    async def test_version_plain_text(self, client, fake_coolify):
        fake_coolify.add("GET", "/version", text="4.0.0-beta.380")

        assert await client.get_version() == "4.0.0-beta.380"

    @pytest.mark.asyncio
    async def test_health_json_string(self, client, fake_coolify):
        fake_coolify.add("GET", "/health", json="OK")

        assert await client.healthcheck() == "OK"

    @pytest.mark.asyncio
    async def test_plain_text_error_is_still_decode_error(self, client, fake_coolify):
        fake_coolify.add("GET", "/version", text="Server Error", status_code=500)

        with pytest.raises(CoolifyDecodeError):
            await client.get_version()
