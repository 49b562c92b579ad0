"""Coolify REST API client."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from .models import DeleteOptions

logger = logging.getLogger(__name__)


APPLICATION_SOURCES: Dict[str, str] = {
    "public": "/applications/public",
    "private-github-app": "/applications/private-github-app",
    "private-deploy-key": "/applications/private-deploy-key",
    "dockerfile": "/applications/dockerfile",
    "dockerimage": "/applications/dockerimage",
    "dockercompose": "/applications/dockercompose",
}

DATABASE_ENGINES = (
    "postgresql",
    "mysql",
    "mariadb",
    "mongodb",
    "redis",
    "keydb",
    "clickhouse",
    "dragonfly",
)


class CoolifyError(Exception):
    pass


class ConfigurationError(CoolifyError, ValueError):
    pass


class CoolifyConnectionError(CoolifyError):
    pass


class CoolifyTimeoutError(CoolifyConnectionError):
    pass


class CoolifyAPIError(CoolifyError):
    def __init__(self, message: str, status_code: int, payload: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class CoolifyDecodeError(CoolifyError):
    pass


class CoolifyClient:
    """Thin async wrapper over the Coolify ``/api/v1`` surface.

    Each method interpolates identifiers into the path, turns option flags into
    query parameters and hands JSON bodies to :meth:`_request`. Nothing is
    retried or cached.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise ConfigurationError("Coolify base URL is required")
        if not access_token:
            raise ConfigurationError("Coolify access token is required")
        # Only a single trailing separator is removed.
        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self.access_token = access_token
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.access_token}",
        }

    async def _request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        params: Optional[Dict[str, str]] = None,
        allow_text: bool = False,
    ) -> Any:
        url = f"{self.base_url}/api/v1{path}"
        content = json.dumps(body) if body is not None else None

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.request(
                    method,
                    url,
                    headers=self._headers(),
                    params=params or None,
                    content=content,
                )
        except httpx.TimeoutException as exc:
            logger.warning("Coolify request timed out: %s %s (%s)", method, path, exc)
            raise CoolifyTimeoutError(
                f"Coolify server at {self.base_url} did not respond within "
                f"{self.timeout_seconds} seconds ({method} {path})"
            ) from exc
        except httpx.TransportError as exc:
            logger.warning("Coolify request failed: %s %s (%s)", method, path, exc)
            raise CoolifyConnectionError(
                f"Failed to connect to Coolify server at {self.base_url}. "
                "Please check if the server is running and the URL is correct."
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            if allow_text and response.is_success:
                return response.text
            raise CoolifyDecodeError(
                f"Invalid JSON response from Coolify for {method} {path} "
                f"(HTTP {response.status_code})"
            ) from exc

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            raise CoolifyAPIError(
                message or f"HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
                payload=data,
            )

        logger.debug("Coolify %s %s -> %s", method, path, response.status_code)
        return data

    async def validate_connection(self) -> None:
        try:
            await self.list_servers()
        except CoolifyError as exc:
            raise CoolifyConnectionError(f"Failed to connect to Coolify server: {exc}") from exc

    # Servers

    async def list_servers(self) -> List[Dict[str, Any]]:
        return await self._request("/servers")

    async def get_server(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/servers/{uuid}")

    async def create_server(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("/servers", "POST", data)

    async def update_server(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/servers/{uuid}", "PATCH", data)

    async def delete_server(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/servers/{uuid}", "DELETE")

    async def get_server_resources(self, uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/servers/{uuid}/resources")

    async def get_server_domains(self, uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/servers/{uuid}/domains")

    async def validate_server(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/servers/{uuid}/validate")

    # Projects and environments

    async def list_projects(self) -> List[Dict[str, Any]]:
        return await self._request("/projects")

    async def get_project(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/projects/{uuid}")

    async def create_project(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("/projects", "POST", data)

    async def update_project(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/projects/{uuid}", "PATCH", data)

    async def delete_project(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/projects/{uuid}", "DELETE")

    async def get_project_environment(
        self, project_uuid: str, environment_name_or_uuid: str
    ) -> Dict[str, Any]:
        return await self._request(f"/projects/{project_uuid}/{environment_name_or_uuid}")

    async def list_project_environments(self, project_uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/projects/{project_uuid}/environments")

    async def create_project_environment(
        self, project_uuid: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._request(f"/projects/{project_uuid}/environments", "POST", data)

    async def delete_project_environment(
        self, project_uuid: str, environment_name_or_uuid: str
    ) -> Dict[str, Any]:
        return await self._request(
            f"/projects/{project_uuid}/environments/{environment_name_or_uuid}", "DELETE"
        )

    # Applications

    async def list_applications(self) -> List[Dict[str, Any]]:
        return await self._request("/applications")

    async def get_application(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}")

    async def create_application(self, kind: str, data: Dict[str, Any]) -> Dict[str, Any]:
        path = APPLICATION_SOURCES.get(kind)
        if path is None:
            raise ValueError(f"Unknown application source: {kind}")
        return await self._request(path, "POST", data)

    async def create_public_application(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_application("public", data)

    async def create_private_github_app_application(
        self, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.create_application("private-github-app", data)

    async def create_private_deploy_key_application(
        self, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.create_application("private-deploy-key", data)

    async def create_dockerfile_application(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_application("dockerfile", data)

    async def create_docker_image_application(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_application("dockerimage", data)

    async def create_docker_compose_application(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_application("dockercompose", data)

    async def update_application(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}", "PATCH", data)

    async def delete_application(
        self, uuid: str, options: Optional[DeleteOptions] = None
    ) -> Dict[str, Any]:
        params = options.to_params() if options else None
        return await self._request(f"/applications/{uuid}", "DELETE", params=params)

    async def start_application(
        self, uuid: str, force: bool = False, instant_deploy: bool = False
    ) -> Dict[str, Any]:
        params: Dict[str, str] = {}
        if force:
            params["force"] = "true"
        if instant_deploy:
            params["instant_deploy"] = "true"
        return await self._request(f"/applications/{uuid}/start", params=params)

    async def stop_application(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/stop")

    async def restart_application(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/restart")

    async def execute_application_command(self, uuid: str, command: str) -> Dict[str, Any]:
        return await self._request(
            f"/applications/{uuid}/execute", "POST", {"command": command}
        )

    async def deploy_application(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/deploy", "POST")

    async def get_application_logs(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/logs")

    # Application environment variables

    async def list_application_envs(self, uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/applications/{uuid}/envs")

    async def create_application_env(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/envs", "POST", data)

    async def update_application_env(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/envs", "PATCH", data)

    async def bulk_update_application_envs(
        self, uuid: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/envs/bulk", "PATCH", data)

    async def delete_application_env(self, uuid: str, env_uuid: str) -> Dict[str, Any]:
        return await self._request(f"/applications/{uuid}/envs/{env_uuid}", "DELETE")

    # Databases

    async def list_databases(self) -> List[Dict[str, Any]]:
        return await self._request("/databases")

    async def get_database(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}")

    async def update_database(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}", "PATCH", data)

    async def delete_database(
        self, uuid: str, options: Optional[DeleteOptions] = None
    ) -> Dict[str, Any]:
        params = options.to_params() if options else None
        return await self._request(f"/databases/{uuid}", "DELETE", params=params)

    async def create_database(self, engine: str, data: Dict[str, Any]) -> Dict[str, Any]:
        if engine not in DATABASE_ENGINES:
            raise ValueError(f"Unknown database engine: {engine}")
        return await self._request(f"/databases/{engine}", "POST", data)

    async def create_postgres_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("postgresql", data)

    async def create_mysql_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("mysql", data)

    async def create_mariadb_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("mariadb", data)

    async def create_mongodb_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("mongodb", data)

    async def create_redis_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("redis", data)

    async def create_keydb_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("keydb", data)

    async def create_clickhouse_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("clickhouse", data)

    async def create_dragonfly_database(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create_database("dragonfly", data)

    async def start_database(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}/start")

    async def stop_database(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}/stop")

    async def restart_database(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}/restart")

    # Database backups

    async def list_database_backups(self, uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/databases/{uuid}/backups")

    async def create_database_backup(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}/backups", "POST", data)

    async def update_database_backup(
        self, uuid: str, backup_uuid: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}/backups/{backup_uuid}", "PATCH", data)

    async def delete_database_backup(self, uuid: str, backup_uuid: str) -> Dict[str, Any]:
        return await self._request(f"/databases/{uuid}/backups/{backup_uuid}", "DELETE")

    async def list_backup_executions(
        self, uuid: str, backup_uuid: str
    ) -> List[Dict[str, Any]]:
        return await self._request(f"/databases/{uuid}/backups/{backup_uuid}/executions")

    async def delete_backup_execution(
        self, uuid: str, backup_uuid: str, execution_uuid: str
    ) -> Dict[str, Any]:
        return await self._request(
            f"/databases/{uuid}/backups/{backup_uuid}/executions/{execution_uuid}", "DELETE"
        )

    # Services

    async def list_services(self) -> List[Dict[str, Any]]:
        return await self._request("/services")

    async def get_service(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}")

    async def create_service(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("/services", "POST", data)

    async def update_service(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}", "PATCH", data)

    async def delete_service(
        self, uuid: str, options: Optional[DeleteOptions] = None
    ) -> Dict[str, Any]:
        params = options.to_params() if options else None
        return await self._request(f"/services/{uuid}", "DELETE", params=params)

    async def start_service(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/start")

    async def stop_service(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/stop")

    async def restart_service(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/restart")

    # Service environment variables

    async def list_service_envs(self, uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/services/{uuid}/envs")

    async def create_service_env(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/envs", "POST", data)

    async def update_service_env(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/envs", "PATCH", data)

    async def bulk_update_service_envs(self, uuid: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/envs/bulk", "PATCH", data)

    async def delete_service_env(self, uuid: str, env_uuid: str) -> Dict[str, Any]:
        return await self._request(f"/services/{uuid}/envs/{env_uuid}", "DELETE")

    # Private keys

    async def list_private_keys(self) -> List[Dict[str, Any]]:
        return await self._request("/security/keys")

    async def get_private_key(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/security/keys/{uuid}")

    async def create_private_key(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("/security/keys", "POST", data)

    async def update_private_key(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("/security/keys", "PATCH", data)

    async def delete_private_key(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/security/keys/{uuid}", "DELETE")

    # GitHub Apps

    async def list_github_apps(self) -> List[Dict[str, Any]]:
        return await self._request("/github-apps")

    async def create_github_app(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("/github-apps", "POST", data)

    async def update_github_app(self, app_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(f"/github-apps/{app_id}", "PATCH", data)

    async def delete_github_app(self, app_id: int) -> Dict[str, Any]:
        return await self._request(f"/github-apps/{app_id}", "DELETE")

    async def list_github_app_repositories(self, app_id: int) -> List[Dict[str, Any]]:
        return await self._request(f"/github-apps/{app_id}/repositories")

    async def list_github_app_branches(
        self, app_id: int, owner: str, repo: str
    ) -> List[Dict[str, Any]]:
        return await self._request(
            f"/github-apps/{app_id}/repositories/{owner}/{repo}/branches"
        )

    # Teams

    async def list_teams(self) -> List[Dict[str, Any]]:
        return await self._request("/teams")

    async def get_team(self, team_id: int) -> Dict[str, Any]:
        return await self._request(f"/teams/{team_id}")

    async def get_team_members(self, team_id: int) -> List[Dict[str, Any]]:
        return await self._request(f"/teams/{team_id}/members")

    async def get_current_team(self) -> Dict[str, Any]:
        return await self._request("/teams/current")

    async def get_current_team_members(self) -> List[Dict[str, Any]]:
        return await self._request("/teams/current/members")

    # Deployments

    async def list_deployments(self) -> List[Dict[str, Any]]:
        return await self._request("/deployments")

    async def get_deployment(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/deployments/{uuid}")

    async def get_deployments_by_application(self, uuid: str) -> List[Dict[str, Any]]:
        return await self._request(f"/deployments/applications/{uuid}")

    async def cancel_deployment(self, uuid: str) -> Dict[str, Any]:
        return await self._request(f"/deployments/{uuid}/cancel", "POST")

    async def deploy(
        self,
        tag: Optional[str] = None,
        uuid: Optional[str] = None,
        force: bool = False,
    ) -> Dict[str, Any]:
        params: Dict[str, str] = {}
        if tag:
            params["tag"] = tag
        if uuid:
            params["uuid"] = uuid
        if force:
            params["force"] = "true"
        return await self._request("/deploy", params=params)

    # Utility

    async def get_version(self) -> Any:
        return await self._request("/version", allow_text=True)

    async def healthcheck(self) -> Any:
        return await self._request("/health", allow_text=True)

    async def list_resources(self) -> List[Dict[str, Any]]:
        return await self._request("/resources")

    async def enable_api(self) -> Dict[str, Any]:
        return await self._request("/enable")

    async def disable_api(self) -> Dict[str, Any]:
        return await self._request("/disable")
