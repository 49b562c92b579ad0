"""Tool definitions and the field fragments their input models are built from."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Annotated, Any, Awaitable, Callable, Dict, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, create_model

FieldSpec = Tuple[Any, Any]
Fragment = Dict[str, FieldSpec]

BuildPack = Literal["nixpacks", "static", "dockerfile", "dockercompose"]
ProxyType = Literal["traefik", "caddy", "none"]
RedirectType = Literal["www", "non-www", "both"]

CONFIRM_DESCRIPTION = "Must be set to true to confirm this destructive operation"


def _require_true(value: Any) -> Any:
    if value is not True:
        raise ValueError(CONFIRM_DESCRIPTION)
    return value


Confirmation = Annotated[Literal[True], BeforeValidator(_require_true)]


@dataclass(frozen=True)
class DeleteOptions:
    delete_configurations: Optional[bool] = None
    delete_volumes: Optional[bool] = None
    docker_cleanup: Optional[bool] = None
    delete_connected_networks: Optional[bool] = None

    @classmethod
    def from_arguments(cls, arguments: Dict[str, Any]) -> "DeleteOptions":
        return cls(**{key: arguments.get(key) for key in DELETE_OPTION_FIELDS})

    def to_params(self) -> Dict[str, str]:
        return {
            key: "true" if value else "false"
            for key, value in asdict(self).items()
            if value is not None
        }


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[Dict[str, Any]], Awaitable[Any]]
    sanitize: bool = False
    destructive: bool = False
    guard: Optional[Callable[[Dict[str, Any]], None]] = None


def required(annotation: Any, description: Optional[str] = None) -> FieldSpec:
    return (annotation, Field(..., description=description))


def optional(annotation: Any, description: Optional[str] = None) -> FieldSpec:
    # Omitted means unset; an explicit null is rejected.
    return (annotation, Field(None, description=description))


def build_input_model(name: str, *fragments: Fragment, **fields: FieldSpec) -> Type[BaseModel]:
    """Merge fragments left to right (later keys win) into one pydantic model."""
    merged: Dict[str, FieldSpec] = {}
    for fragment in fragments:
        merged.update(fragment)
    merged.update(fields)
    model_config = ConfigDict(extra="ignore")
    return create_model(f"{name}Input", __config__=model_config, **merged)


# Field fragments

CONFIRM: Fragment = {"confirm": required(Confirmation, CONFIRM_DESCRIPTION)}

DELETE_OPTION_FIELDS: Fragment = {
    "delete_configurations": optional(bool, "Delete configuration files"),
    "delete_volumes": optional(bool, "Delete persistent volumes"),
    "docker_cleanup": optional(bool, "Run docker cleanup after deletion"),
    "delete_connected_networks": optional(bool, "Delete connected docker networks"),
}

ENV_VAR_FIELDS: Fragment = {
    "key": required(str, "The key of the environment variable"),
    "value": required(str, "The value of the environment variable"),
    "is_preview": optional(bool, "Use in preview deployments"),
    "is_build_time": optional(bool, "Use at build time"),
    "is_literal": optional(bool, "Literal value (nothing escaped)"),
    "is_multiline": optional(bool, "Multiline value"),
    "is_shown_once": optional(bool, "Show value on UI"),
}

EnvironmentVariableInput = build_input_model("EnvironmentVariable", ENV_VAR_FIELDS)

PLACEMENT_FIELDS: Fragment = {
    "project_uuid": required(str, "UUID of the project"),
    "server_uuid": required(str, "UUID of the server"),
    "environment_name": optional(str, "Environment name (environment_name or environment_uuid is required)"),
    "environment_uuid": optional(str, "Environment UUID"),
    "destination_uuid": optional(str, "Destination UUID when the server has several"),
    "name": optional(str),
    "description": optional(str),
    "instant_deploy": optional(bool, "Deploy immediately after creation"),
}

GIT_SOURCE_FIELDS: Fragment = {
    "git_repository": required(str, "Git repository URL"),
    "git_branch": required(str, "Git branch"),
    "build_pack": required(BuildPack, "Build pack: nixpacks, static, dockerfile or dockercompose"),
    "ports_exposes": required(str, 'Ports to expose (e.g. "3000")'),
    "git_commit_sha": optional(str),
}

BUILD_FIELDS: Fragment = {
    "install_command": optional(str),
    "build_command": optional(str),
    "start_command": optional(str),
    "base_directory": optional(str),
    "publish_directory": optional(str),
    "ports_mappings": optional(str, 'Port mappings (e.g. "8080:80")'),
}

HEALTH_CHECK_FIELDS: Fragment = {
    "health_check_enabled": optional(bool),
    "health_check_path": optional(str),
    "health_check_port": optional(str),
    "health_check_interval": optional(int),
    "health_check_timeout": optional(int),
    "health_check_retries": optional(int),
}

LIMIT_FIELDS: Fragment = {
    "limits_memory": optional(str, 'Memory limit (e.g. "512m")'),
    "limits_cpus": optional(str, 'CPU limit (e.g. "1.5")'),
}

DOMAIN_FIELDS: Fragment = {
    "domains": optional(str, "Comma separated list of domains"),
    "redirect": optional(RedirectType, "Redirect: www, non-www or both"),
}

DATABASE_BASE_FIELDS: Fragment = {
    **PLACEMENT_FIELDS,
    "image": optional(str, "Docker image override"),
    "is_public": optional(bool, "Expose the database publicly"),
    "public_port": optional(int),
    **LIMIT_FIELDS,
}

DATABASE_ENGINE_FIELDS: Dict[str, Fragment] = {
    "postgresql": {
        "postgres_user": optional(str),
        "postgres_password": optional(str),
        "postgres_db": optional(str),
        "postgres_initdb_args": optional(str),
        "postgres_host_auth_method": optional(str),
        "postgres_conf": optional(str),
    },
    "mysql": {
        "mysql_root_password": optional(str),
        "mysql_user": optional(str),
        "mysql_password": optional(str),
        "mysql_database": optional(str),
    },
    "mariadb": {
        "mariadb_root_password": optional(str),
        "mariadb_user": optional(str),
        "mariadb_password": optional(str),
        "mariadb_database": optional(str),
        "mariadb_conf": optional(str),
    },
    "mongodb": {
        "mongo_initdb_root_username": optional(str),
        "mongo_initdb_root_password": optional(str),
        "mongo_initdb_database": optional(str),
        "mongo_conf": optional(str),
    },
    "redis": {
        "redis_password": optional(str),
        "redis_conf": optional(str),
    },
    "keydb": {
        "keydb_password": optional(str),
        "keydb_conf": optional(str),
    },
    "clickhouse": {
        "clickhouse_admin_user": optional(str),
        "clickhouse_admin_password": optional(str),
    },
    "dragonfly": {
        "dragonfly_password": optional(str),
    },
}

BACKUP_FIELDS: Fragment = {
    "enabled": optional(bool, "Enable the backup schedule"),
    "save_s3": optional(bool, "Save backup to S3"),
    "s3_storage_id": optional(int, "S3 storage ID"),
    "databases_to_backup": optional(str, "Specific databases to backup"),
}

SERVER_FIELDS: Fragment = {
    "name": optional(str, "Server name"),
    "description": optional(str),
    "port": optional(int, "SSH port (default 22)"),
    "user": optional(str, "SSH user (default root)"),
    "is_build_server": optional(bool),
    "instant_validate": optional(bool),
    "proxy_type": optional(ProxyType, "Proxy type: traefik, caddy or none"),
}

GITHUB_APP_FIELDS: Fragment = {
    "name": optional(str, "GitHub App name"),
    "organization": optional(str, "GitHub organization"),
    "app_id": optional(int, "GitHub App ID"),
    "installation_id": optional(int, "GitHub App installation ID"),
    "client_id": optional(str, "GitHub App client ID"),
    "client_secret": optional(str, "GitHub App client secret"),
    "webhook_secret": optional(str, "GitHub App webhook secret"),
    "private_key": optional(str, "GitHub App private key"),
    "is_system_wide": optional(bool, "Make available system-wide"),
}


def uuid_field(description: str = "UUID of the resource") -> Fragment:
    return {"uuid": required(str, description)}


def list_of_env_vars() -> FieldSpec:
    return required(List[EnvironmentVariableInput], "Array of environment variables")
