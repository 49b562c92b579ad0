"""Tool registry for the Coolify MCP server."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from .coolify_client import CoolifyClient
from .models import (
    BACKUP_FIELDS,
    BUILD_FIELDS,
    CONFIRM,
    DATABASE_BASE_FIELDS,
    DATABASE_ENGINE_FIELDS,
    DELETE_OPTION_FIELDS,
    DOMAIN_FIELDS,
    ENV_VAR_FIELDS,
    GIT_SOURCE_FIELDS,
    GITHUB_APP_FIELDS,
    HEALTH_CHECK_FIELDS,
    LIMIT_FIELDS,
    PLACEMENT_FIELDS,
    SERVER_FIELDS,
    BuildPack,
    DeleteOptions,
    Fragment,
    ToolDefinition,
    build_input_model,
    list_of_env_vars,
    optional,
    required,
    uuid_field,
)
from .policy import validate_command

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], Awaitable[Any]]

NO_ARGUMENTS: Fragment = {}


def _without(arguments: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    return {key: value for key, value in arguments.items() if key not in keys}


def _model_name(tool_name: str) -> str:
    return "".join(part.capitalize() for part in tool_name.split("_"))


def _check_command(arguments: Dict[str, Any]) -> None:
    validate_command(arguments["command"])


class ToolRegistry:
    """Declares every Coolify tool on top of a :class:`CoolifyClient`.

    Definitions are built in a single pass by :meth:`build`; the registry keeps
    no state between calls.
    """

    def __init__(self, client: CoolifyClient) -> None:
        self.client = client

    def build(self) -> List[ToolDefinition]:
        tools: List[ToolDefinition] = [
            *self._server_tools(),
            *self._project_tools(),
            *self._application_tools(),
            *self._env_tools("application", "Application"),
            *self._database_tools(),
            *self._backup_tools(),
            *self._service_tools(),
            *self._env_tools("service", "Service"),
            *self._private_key_tools(),
            *self._github_app_tools(),
            *self._team_tools(),
            *self._deployment_tools(),
            *self._utility_tools(),
        ]

        seen: set[str] = set()
        for tool in tools:
            if tool.name in seen:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            seen.add(tool.name)
        logger.debug("Built %d tool definitions", len(tools))
        return tools

    def _define(
        self,
        name: str,
        description: str,
        handler: Handler,
        *fragments: Fragment,
        sanitize: bool = False,
        destructive: bool = False,
        guard: Optional[Callable[[Dict[str, Any]], None]] = None,
    ) -> ToolDefinition:
        if destructive:
            fragments = (*fragments, CONFIRM)
        return ToolDefinition(
            name=name,
            description=description,
            input_model=build_input_model(_model_name(name), *fragments),
            handler=handler,
            # Deletion and disable confirmations echo remote text back.
            sanitize=sanitize or destructive,
            destructive=destructive,
            guard=guard,
        )

    def _server_tools(self) -> List[ToolDefinition]:
        c = self.client
        return [
            self._define("list_servers", "List all Coolify servers", lambda a: c.list_servers(), NO_ARGUMENTS),
            self._define(
                "get_server",
                "Get details about a specific Coolify server",
                lambda a: c.get_server(a["uuid"]),
                uuid_field("UUID of the server"),
            ),
            self._define(
                "create_server",
                "Create a new Coolify server",
                lambda a: c.create_server(a),
                {
                    "ip": required(str, "Server IP address"),
                    "private_key_uuid": required(str, "UUID of the private key for SSH"),
                },
                SERVER_FIELDS,
            ),
            self._define(
                "update_server",
                "Update a Coolify server",
                lambda a: c.update_server(a["uuid"], _without(a, "uuid")),
                uuid_field("UUID of the server"),
                {
                    "ip": optional(str, "Server IP address"),
                    "private_key_uuid": optional(str, "UUID of the private key for SSH"),
                },
                SERVER_FIELDS,
            ),
            self._define(
                "delete_server",
                "Delete a Coolify server",
                lambda a: c.delete_server(a["uuid"]),
                uuid_field("UUID of the server"),
                destructive=True,
            ),
            self._define(
                "get_server_resources",
                "Get resources running on a server",
                lambda a: c.get_server_resources(a["uuid"]),
                uuid_field("UUID of the server"),
            ),
            self._define(
                "get_server_domains",
                "Get domains for a server",
                lambda a: c.get_server_domains(a["uuid"]),
                uuid_field("UUID of the server"),
            ),
            self._define(
                "validate_server",
                "Validate a server connection",
                lambda a: c.validate_server(a["uuid"]),
                uuid_field("UUID of the server"),
            ),
        ]

    def _project_tools(self) -> List[ToolDefinition]:
        c = self.client
        environment_ref: Fragment = {
            "project_uuid": required(str, "UUID of the project"),
            "environment_name_or_uuid": required(str, "Environment name or UUID"),
        }
        return [
            self._define("list_projects", "List all Coolify projects", lambda a: c.list_projects(), NO_ARGUMENTS),
            self._define(
                "get_project",
                "Get project details",
                lambda a: c.get_project(a["uuid"]),
                uuid_field("UUID of the project"),
            ),
            self._define(
                "create_project",
                "Create a new project",
                lambda a: c.create_project(a),
                {"name": required(str, "Project name"), "description": optional(str)},
            ),
            self._define(
                "update_project",
                "Update a project",
                lambda a: c.update_project(a["uuid"], _without(a, "uuid")),
                uuid_field("UUID of the project"),
                {"name": optional(str, "Project name"), "description": optional(str)},
            ),
            self._define(
                "delete_project",
                "Delete a project",
                lambda a: c.delete_project(a["uuid"]),
                uuid_field("UUID of the project"),
                destructive=True,
            ),
            self._define(
                "get_project_environment",
                "Get project environment details",
                lambda a: c.get_project_environment(a["project_uuid"], a["environment_name_or_uuid"]),
                environment_ref,
            ),
            self._define(
                "list_project_environments",
                "List all environments for a project",
                lambda a: c.list_project_environments(a["project_uuid"]),
                {"project_uuid": required(str, "UUID of the project")},
            ),
            self._define(
                "create_project_environment",
                "Create a new environment for a project",
                lambda a: c.create_project_environment(a["project_uuid"], {"name": a["name"]}),
                {
                    "project_uuid": required(str, "UUID of the project"),
                    "name": required(str, "Environment name"),
                },
            ),
            self._define(
                "delete_project_environment",
                "Delete a project environment",
                lambda a: c.delete_project_environment(a["project_uuid"], a["environment_name_or_uuid"]),
                environment_ref,
                destructive=True,
            ),
        ]

    def _application_tools(self) -> List[ToolDefinition]:
        c = self.client
        app_uuid = uuid_field("Application UUID")

        async def update_application(a: Dict[str, Any]) -> Any:
            data = _without(a, "uuid", "domains")
            if "domains" in a:
                data["fqdn"] = a["domains"]
            return await c.update_application(a["uuid"], data)

        async def start_application(a: Dict[str, Any]) -> Any:
            return await c.start_application(
                a["uuid"],
                force=bool(a.get("force")),
                instant_deploy=bool(a.get("instant_deploy")),
            )

        return [
            self._define(
                "list_applications",
                "List all applications",
                lambda a: c.list_applications(),
                NO_ARGUMENTS,
                sanitize=True,
            ),
            self._define(
                "get_application",
                "Get application details",
                lambda a: c.get_application(a["uuid"]),
                app_uuid,
                sanitize=True,
            ),
            self._define(
                "create_public_application",
                "Create application from public git repository",
                lambda a: c.create_public_application(a),
                PLACEMENT_FIELDS,
                GIT_SOURCE_FIELDS,
                {"git_repository": required(str, "Public git repository URL")},
                DOMAIN_FIELDS,
                BUILD_FIELDS,
                HEALTH_CHECK_FIELDS,
                LIMIT_FIELDS,
            ),
            self._define(
                "create_private_ghapp_application",
                "Create application from private GitHub App repository",
                lambda a: c.create_private_github_app_application(a),
                PLACEMENT_FIELDS,
                {"github_app_uuid": required(str, "UUID of the GitHub App")},
                GIT_SOURCE_FIELDS,
                DOMAIN_FIELDS,
                BUILD_FIELDS,
                HEALTH_CHECK_FIELDS,
                LIMIT_FIELDS,
            ),
            self._define(
                "create_private_deploykey_application",
                "Create application from private repository using deploy key",
                lambda a: c.create_private_deploy_key_application(a),
                PLACEMENT_FIELDS,
                {"private_key_uuid": required(str, "UUID of the deploy key")},
                GIT_SOURCE_FIELDS,
                DOMAIN_FIELDS,
                BUILD_FIELDS,
                HEALTH_CHECK_FIELDS,
                LIMIT_FIELDS,
            ),
            self._define(
                "create_dockerfile_application",
                "Create application from Dockerfile",
                lambda a: c.create_dockerfile_application(a),
                PLACEMENT_FIELDS,
                {
                    "dockerfile": required(str, "Dockerfile content"),
                    "ports_exposes": optional(str, 'Ports to expose (e.g. "3000")'),
                    "base_directory": optional(str),
                },
                DOMAIN_FIELDS,
                HEALTH_CHECK_FIELDS,
                LIMIT_FIELDS,
            ),
            self._define(
                "create_dockerimage_application",
                "Create application from Docker image",
                lambda a: c.create_docker_image_application(a),
                PLACEMENT_FIELDS,
                {
                    "docker_registry_image_name": required(str, "Docker image name (e.g. nginx)"),
                    "docker_registry_image_tag": optional(str, "Docker image tag (e.g. latest)"),
                    "ports_exposes": required(str, 'Ports to expose (e.g. "80")'),
                },
                DOMAIN_FIELDS,
                HEALTH_CHECK_FIELDS,
                LIMIT_FIELDS,
            ),
            self._define(
                "create_dockercompose_application",
                "Create application from Docker Compose",
                lambda a: c.create_docker_compose_application(a),
                PLACEMENT_FIELDS,
                {"docker_compose_raw": required(str, "Docker Compose YAML content")},
            ),
            self._define(
                "update_application",
                "Update an application",
                update_application,
                app_uuid,
                {
                    "name": optional(str),
                    "description": optional(str),
                    "git_repository": optional(str),
                    "git_branch": optional(str),
                    "git_commit_sha": optional(str),
                    "build_pack": optional(BuildPack, "Build pack: nixpacks, static, dockerfile or dockercompose"),
                    "ports_exposes": optional(str),
                    "dockerfile": optional(str),
                    "docker_compose_raw": optional(str),
                    "instant_deploy": optional(bool),
                },
                DOMAIN_FIELDS,
                BUILD_FIELDS,
                HEALTH_CHECK_FIELDS,
                LIMIT_FIELDS,
            ),
            self._define(
                "delete_application",
                "Delete an application",
                lambda a: c.delete_application(a["uuid"], DeleteOptions.from_arguments(a)),
                app_uuid,
                DELETE_OPTION_FIELDS,
                destructive=True,
            ),
            self._define(
                "start_application",
                "Start an application",
                start_application,
                app_uuid,
                {
                    "force": optional(bool, "Force rebuild"),
                    "instant_deploy": optional(bool, "Skip queuing"),
                },
            ),
            self._define(
                "stop_application",
                "Stop an application",
                lambda a: c.stop_application(a["uuid"]),
                app_uuid,
            ),
            self._define(
                "restart_application",
                "Restart an application",
                lambda a: c.restart_application(a["uuid"]),
                app_uuid,
            ),
            self._define(
                "deploy_application",
                "Deploy an application",
                lambda a: c.deploy_application(a["uuid"]),
                app_uuid,
            ),
            self._define(
                "get_application_logs",
                "Get application logs",
                lambda a: c.get_application_logs(a["uuid"]),
                app_uuid,
                sanitize=True,
            ),
            self._define(
                "execute_application_command",
                "Execute a command in application container",
                lambda a: c.execute_application_command(a["uuid"], a["command"]),
                app_uuid,
                {"command": required(str, "Command to execute")},
                sanitize=True,
                guard=_check_command,
            ),
        ]

    def _env_tools(self, kind: str, label: str) -> List[ToolDefinition]:
        c = self.client
        owner = uuid_field(f"{label} UUID")
        list_envs = getattr(c, f"list_{kind}_envs")
        create_env = getattr(c, f"create_{kind}_env")
        update_env = getattr(c, f"update_{kind}_env")
        bulk_update_envs = getattr(c, f"bulk_update_{kind}_envs")
        delete_env = getattr(c, f"delete_{kind}_env")
        return [
            self._define(
                f"list_{kind}_envs",
                f"List {kind} environment variables",
                lambda a: list_envs(a["uuid"]),
                owner,
                sanitize=True,
            ),
            self._define(
                f"create_{kind}_env",
                f"Create {kind} environment variable",
                lambda a: create_env(a["uuid"], _without(a, "uuid")),
                owner,
                ENV_VAR_FIELDS,
            ),
            self._define(
                f"update_{kind}_env",
                f"Update {kind} environment variable",
                lambda a: update_env(a["uuid"], _without(a, "uuid")),
                owner,
                ENV_VAR_FIELDS,
            ),
            self._define(
                f"bulk_update_{kind}_envs",
                f"Bulk update {kind} environment variables",
                lambda a: bulk_update_envs(a["uuid"], {"data": a["data"]}),
                owner,
                {"data": list_of_env_vars()},
            ),
            self._define(
                f"delete_{kind}_env",
                f"Delete {kind} environment variable",
                lambda a: delete_env(a["uuid"], a["env_uuid"]),
                owner,
                {"env_uuid": required(str, "Environment variable UUID")},
                destructive=True,
            ),
        ]

    def _database_tools(self) -> List[ToolDefinition]:
        c = self.client
        db_uuid = uuid_field("Database UUID")
        engines = [
            ("create_postgres_database", "PostgreSQL", "postgresql", c.create_postgres_database),
            ("create_mysql_database", "MySQL", "mysql", c.create_mysql_database),
            ("create_mariadb_database", "MariaDB", "mariadb", c.create_mariadb_database),
            ("create_mongodb_database", "MongoDB", "mongodb", c.create_mongodb_database),
            ("create_redis_database", "Redis", "redis", c.create_redis_database),
            ("create_keydb_database", "KeyDB", "keydb", c.create_keydb_database),
            ("create_clickhouse_database", "ClickHouse", "clickhouse", c.create_clickhouse_database),
            ("create_dragonfly_database", "Dragonfly", "dragonfly", c.create_dragonfly_database),
        ]

        tools = [
            self._define("list_databases", "List all databases", lambda a: c.list_databases(), NO_ARGUMENTS),
            self._define(
                "get_database",
                "Get database details",
                lambda a: c.get_database(a["uuid"]),
                db_uuid,
            ),
            self._define(
                "update_database",
                "Update a database",
                lambda a: c.update_database(a["uuid"], a["data"]),
                db_uuid,
                {"data": required(Dict[str, Any], "Database update fields")},
            ),
            self._define(
                "delete_database",
                "Delete a database",
                lambda a: c.delete_database(a["uuid"], DeleteOptions.from_arguments(a)),
                db_uuid,
                DELETE_OPTION_FIELDS,
                destructive=True,
            ),
        ]
        for name, label, engine, create in engines:
            tools.append(
                self._define(
                    name,
                    f"Create a {label} database",
                    lambda a, create=create: create(a),
                    DATABASE_BASE_FIELDS,
                    DATABASE_ENGINE_FIELDS[engine],
                )
            )
        tools.extend(
            [
                self._define(
                    "start_database",
                    "Start a database",
                    lambda a: c.start_database(a["uuid"]),
                    db_uuid,
                ),
                self._define(
                    "stop_database",
                    "Stop a database",
                    lambda a: c.stop_database(a["uuid"]),
                    db_uuid,
                ),
                self._define(
                    "restart_database",
                    "Restart a database",
                    lambda a: c.restart_database(a["uuid"]),
                    db_uuid,
                ),
            ]
        )
        return tools

    def _backup_tools(self) -> List[ToolDefinition]:
        c = self.client
        db_uuid = uuid_field("Database UUID")
        backup_ref: Fragment = {
            **db_uuid,
            "backup_uuid": required(str, "Backup configuration UUID"),
        }
        return [
            self._define(
                "list_database_backups",
                "List scheduled backups for a database",
                lambda a: c.list_database_backups(a["uuid"]),
                db_uuid,
            ),
            self._define(
                "create_database_backup",
                "Create a scheduled backup configuration for a database",
                lambda a: c.create_database_backup(a["uuid"], _without(a, "uuid")),
                db_uuid,
                {"frequency": required(str, "Backup frequency (cron expression)")},
                BACKUP_FIELDS,
            ),
            self._define(
                "update_database_backup",
                "Update a scheduled backup configuration",
                lambda a: c.update_database_backup(
                    a["uuid"], a["backup_uuid"], _without(a, "uuid", "backup_uuid")
                ),
                backup_ref,
                {"frequency": optional(str, "Backup frequency (cron expression)")},
                BACKUP_FIELDS,
            ),
            self._define(
                "delete_database_backup",
                "Delete a scheduled backup configuration",
                lambda a: c.delete_database_backup(a["uuid"], a["backup_uuid"]),
                backup_ref,
                destructive=True,
            ),
            self._define(
                "list_backup_executions",
                "List backup executions for a scheduled backup",
                lambda a: c.list_backup_executions(a["uuid"], a["backup_uuid"]),
                backup_ref,
            ),
            self._define(
                "delete_backup_execution",
                "Delete a specific backup execution",
                lambda a: c.delete_backup_execution(a["uuid"], a["backup_uuid"], a["execution_uuid"]),
                backup_ref,
                {"execution_uuid": required(str, "Backup execution UUID")},
                destructive=True,
            ),
        ]

    def _service_tools(self) -> List[ToolDefinition]:
        c = self.client
        service_uuid = uuid_field("Service UUID")
        return [
            self._define("list_services", "List all one-click services", lambda a: c.list_services(), NO_ARGUMENTS),
            self._define(
                "get_service",
                "Get service details",
                lambda a: c.get_service(a["uuid"]),
                service_uuid,
            ),
            self._define(
                "create_service",
                "Create a one-click service (e.g. penpot, n8n, wordpress)",
                lambda a: c.create_service(a),
                {
                    "type": required(
                        str,
                        "Service template type (e.g. penpot, n8n, wordpress-with-mysql, "
                        "activepieces, appwrite). See the Coolify documentation for the full list.",
                    ),
                },
                PLACEMENT_FIELDS,
            ),
            self._define(
                "update_service",
                "Update a service",
                lambda a: c.update_service(a["uuid"], _without(a, "uuid")),
                service_uuid,
                {
                    "name": optional(str),
                    "description": optional(str),
                    "domains": optional(str, "Service domains"),
                    "instant_deploy": optional(bool),
                },
            ),
            self._define(
                "delete_service",
                "Delete a service",
                lambda a: c.delete_service(a["uuid"], DeleteOptions.from_arguments(a)),
                service_uuid,
                DELETE_OPTION_FIELDS,
                destructive=True,
            ),
            self._define(
                "start_service",
                "Start a service",
                lambda a: c.start_service(a["uuid"]),
                service_uuid,
            ),
            self._define(
                "stop_service",
                "Stop a service",
                lambda a: c.stop_service(a["uuid"]),
                service_uuid,
            ),
            self._define(
                "restart_service",
                "Restart a service",
                lambda a: c.restart_service(a["uuid"]),
                service_uuid,
            ),
        ]

    def _private_key_tools(self) -> List[ToolDefinition]:
        c = self.client
        key_fields: Fragment = {
            "private_key": required(str, "The private key content"),
            "name": optional(str),
            "description": optional(str),
        }
        return [
            self._define("list_private_keys", "List all private keys", lambda a: c.list_private_keys(), NO_ARGUMENTS),
            self._define(
                "get_private_key",
                "Get private key details",
                lambda a: c.get_private_key(a["uuid"]),
                uuid_field("UUID of the private key"),
            ),
            self._define(
                "create_private_key",
                "Create a new private key",
                lambda a: c.create_private_key(a),
                key_fields,
            ),
            self._define(
                "update_private_key",
                "Update a private key",
                lambda a: c.update_private_key(a),
                uuid_field("UUID of the private key"),
                key_fields,
            ),
            self._define(
                "delete_private_key",
                "Delete a private key",
                lambda a: c.delete_private_key(a["uuid"]),
                uuid_field("UUID of the private key"),
                destructive=True,
            ),
        ]

    def _github_app_tools(self) -> List[ToolDefinition]:
        c = self.client
        app_id: Fragment = {"id": required(int, "GitHub App ID in Coolify")}
        return [
            self._define("list_github_apps", "List all GitHub Apps", lambda a: c.list_github_apps(), NO_ARGUMENTS),
            self._define(
                "create_github_app",
                "Create a new GitHub App integration",
                lambda a: c.create_github_app(a),
                GITHUB_APP_FIELDS,
                {
                    "name": required(str, "GitHub App name"),
                    "app_id": required(int, "GitHub App ID"),
                    "installation_id": required(int, "GitHub App installation ID"),
                    "client_id": required(str, "GitHub App client ID"),
                    "client_secret": required(str, "GitHub App client secret"),
                    "webhook_secret": required(str, "GitHub App webhook secret"),
                    "private_key": required(str, "GitHub App private key"),
                },
            ),
            self._define(
                "update_github_app",
                "Update a GitHub App integration",
                lambda a: c.update_github_app(a["id"], _without(a, "id")),
                app_id,
                GITHUB_APP_FIELDS,
            ),
            self._define(
                "delete_github_app",
                "Delete a GitHub App integration",
                lambda a: c.delete_github_app(a["id"]),
                app_id,
                destructive=True,
            ),
            self._define(
                "list_github_app_repositories",
                "List repositories accessible by a GitHub App",
                lambda a: c.list_github_app_repositories(a["id"]),
                app_id,
            ),
            self._define(
                "list_github_app_branches",
                "List branches for a repository accessible by a GitHub App",
                lambda a: c.list_github_app_branches(a["id"], a["owner"], a["repo"]),
                app_id,
                {
                    "owner": required(str, "Repository owner"),
                    "repo": required(str, "Repository name"),
                },
            ),
        ]

    def _team_tools(self) -> List[ToolDefinition]:
        c = self.client
        team_id: Fragment = {"id": required(int, "Team ID")}
        return [
            self._define("list_teams", "List all teams", lambda a: c.list_teams(), NO_ARGUMENTS),
            self._define("get_team", "Get team details", lambda a: c.get_team(a["id"]), team_id),
            self._define(
                "get_team_members",
                "Get team members",
                lambda a: c.get_team_members(a["id"]),
                team_id,
            ),
            self._define(
                "get_current_team",
                "Get currently authenticated team",
                lambda a: c.get_current_team(),
                NO_ARGUMENTS,
            ),
            self._define(
                "get_current_team_members",
                "Get members of currently authenticated team",
                lambda a: c.get_current_team_members(),
                NO_ARGUMENTS,
            ),
        ]

    def _deployment_tools(self) -> List[ToolDefinition]:
        c = self.client
        return [
            self._define(
                "list_deployments",
                "List currently running deployments",
                lambda a: c.list_deployments(),
                NO_ARGUMENTS,
            ),
            self._define(
                "get_deployment",
                "Get deployment details",
                lambda a: c.get_deployment(a["uuid"]),
                uuid_field("Deployment UUID"),
                sanitize=True,
            ),
            self._define(
                "get_deployments_by_application",
                "Get all deployments for a specific application",
                lambda a: c.get_deployments_by_application(a["uuid"]),
                uuid_field("Application UUID"),
                sanitize=True,
            ),
            self._define(
                "cancel_deployment",
                "Cancel a running deployment",
                lambda a: c.cancel_deployment(a["uuid"]),
                uuid_field("Deployment UUID"),
            ),
            self._define(
                "deploy",
                "Deploy by tag or UUID (can deploy multiple resources)",
                lambda a: c.deploy(tag=a.get("tag"), uuid=a.get("uuid"), force=bool(a.get("force"))),
                {
                    "tag": optional(str, "Tag name(s), comma separated"),
                    "uuid": optional(str, "Resource UUID(s), comma separated"),
                    "force": optional(bool, "Force rebuild without cache"),
                },
            ),
        ]

    def _utility_tools(self) -> List[ToolDefinition]:
        c = self.client

        async def get_version(a: Dict[str, Any]) -> Any:
            return {"version": await c.get_version()}

        async def healthcheck(a: Dict[str, Any]) -> Any:
            return {"status": await c.healthcheck()}

        return [
            self._define("list_resources", "List all resources", lambda a: c.list_resources(), NO_ARGUMENTS),
            self._define("get_version", "Get Coolify version", get_version, NO_ARGUMENTS),
            self._define("healthcheck", "Check Coolify API health", healthcheck, NO_ARGUMENTS),
            self._define("enable_api", "Enable the Coolify API", lambda a: c.enable_api(), NO_ARGUMENTS),
            self._define(
                "disable_api",
                "Disable the Coolify API",
                lambda a: c.disable_api(),
                NO_ARGUMENTS,
                destructive=True,
            ),
        ]
