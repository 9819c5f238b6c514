"""Project configuration: pgkit.yml parsing and defaults."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from pgkit.engine.dsn import make_postgresql_dsn

CONFIG_FILE_NAME = "pgkit.yml"


class ConnectionConfig(BaseModel):
    """Where and how to reach the PostgreSQL server."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    host: str = "localhost"
    port: int | str = 5432
    database: str = ""
    user: str = ""
    password: str = ""
    parameters: str = ""  # key=value&... without the leading '?'
    schema_name: str = Field(default="public", alias="schema")

    @property
    def schema(self) -> str:
        return self.schema_name

    def dsn(self) -> str:
        return make_postgresql_dsn(
            self.host,
            self.port,
            self.database,
            self.user,
            self.password,
            self.parameters,
        )


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = "default"
    connection: ConnectionConfig = Field(default_factory=ConnectionConfig)
    environments: dict[str, dict[str, Any]] = Field(default_factory=dict)
    active_environment: str | None = None
    project_dir: Path = Field(default_factory=Path.cwd)


def _expand_env_vars(value: Any) -> Any:
    """Expand ${ENV_VAR} references in string values."""
    if isinstance(value, str):
        return re.sub(
            r"\$\{(\w+)\}",
            lambda m: os.environ.get(m.group(1), m.group(0)),
            value,
        )
    if isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(v) for v in value]
    return value


def _format_parameters(raw: Any) -> str:
    """Accept parameters as a verbatim string or a mapping joined as k=v&k=v."""
    if raw is None:
        return ""
    if isinstance(raw, dict):
        return "&".join(f"{k}={v}" for k, v in raw.items())
    return str(raw)


def _parse_connection(conn_raw: dict[str, Any]) -> ConnectionConfig:
    conn_raw = dict(conn_raw)
    if "parameters" in conn_raw:
        conn_raw["parameters"] = _format_parameters(conn_raw["parameters"])
    # YAML turns bare values into ints/None; the DSN wants text
    for key in ("database", "user", "password"):
        if key in conn_raw:
            conn_raw[key] = "" if conn_raw[key] is None else str(conn_raw[key])
    return ConnectionConfig(**conn_raw)


def load_project(project_dir: Path | None = None, env: str | None = None) -> ProjectConfig:
    """Load pgkit.yml from the given directory (or cwd).

    Args:
        project_dir: Path to the project directory.
        env: Environment name to activate (e.g. "dev", "prod").
             If environments are defined and env is None, defaults to "dev".
    """
    from pgkit.engine.secrets import load_env

    project_dir = Path(project_dir) if project_dir else Path.cwd()
    config_path = project_dir / CONFIG_FILE_NAME

    # Load .env secrets into environment before expanding vars
    load_env(project_dir)

    if not config_path.exists():
        return ProjectConfig(project_dir=project_dir)

    raw = yaml.safe_load(config_path.read_text()) or {}
    raw = _expand_env_vars(raw)

    conn_raw = dict(raw.get("connection") or {})

    environments: dict[str, dict[str, Any]] = {
        name: dict(env_raw or {}) for name, env_raw in (raw.get("environments") or {}).items()
    }

    # Apply environment overrides
    active_env = env
    if environments and active_env is None:
        active_env = "dev" if "dev" in environments else None
    if active_env and active_env in environments:
        conn_raw.update(environments[active_env])

    return ProjectConfig(
        name=raw.get("name", project_dir.name),
        connection=_parse_connection(conn_raw),
        environments=environments,
        active_environment=active_env if active_env and active_env in environments else None,
        project_dir=project_dir,
    )
