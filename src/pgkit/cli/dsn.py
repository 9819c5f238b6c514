"""Connection string command: dsn."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from pgkit.cli import EnvOption, ProjectOption, _load_config, app, console


@app.command()
def dsn(
    host: Annotated[Optional[str], typer.Option("--host", help="Database host")] = None,
    port: Annotated[Optional[str], typer.Option("--port", help="Database port")] = None,
    database: Annotated[Optional[str], typer.Option("--database", "-d", help="Database name")] = None,
    user: Annotated[Optional[str], typer.Option("--user", "-U", help="Username")] = None,
    password: Annotated[Optional[str], typer.Option("--password", help="Password (used only with a username)")] = None,
    parameters: Annotated[Optional[str], typer.Option("--parameters", help="key=value&... list appended after '?'")] = None,
    redact: Annotated[bool, typer.Option("--redact", help="Hide the password")] = False,
    env: EnvOption = None,
    project_dir: ProjectOption = None,
) -> None:
    """Print the connection string for the project, with flag overrides."""
    from pgkit.engine.secrets import redact_dsn

    config = _load_config(project_dir, env)
    overrides = {
        "host": host,
        "port": port,
        "database": database,
        "user": user,
        "password": password,
        "parameters": parameters,
    }
    conn = config.connection.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    result = conn.dsn()
    if redact:
        result = redact_dsn(result)
    console.print(result, markup=False, highlight=False, soft_wrap=True)
