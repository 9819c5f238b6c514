"""Catalog commands: table-exists, procedure-exists."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from rich.markup import escape as escape_markup

from pgkit.cli import (
    EXIT_ERROR,
    EXIT_FOUND,
    EXIT_NOT_FOUND,
    EnvOption,
    ProjectOption,
    _load_config,
    app,
    console,
)
from pgkit.engine.errors import BadSymbolError

logger = logging.getLogger("pgkit.cli")

SchemaOption = Annotated[
    Optional[str], typer.Option("--schema", "-s", help="Schema to look in (default: from config)")
]


def _close_quietly(conn) -> None:
    try:
        conn.close()
    except Exception as e:
        logger.warning("Failed to close connection after query error: %s", e)


def _run_check(
    kind: str,
    name: str,
    schema: str | None,
    env: str | None,
    project_dir: Path | None,
    validator: Callable[[str], str],
    check: Callable[..., bool],
) -> None:
    from pgkit.engine.database import connect

    try:
        config = _load_config(project_dir, env)
    except Exception as e:
        logger.debug("Config load failed", exc_info=True)
        console.print(f"[red]Config error:[/red] {escape_markup(str(e))}", highlight=False)
        raise typer.Exit(EXIT_ERROR)
    # Sent as a bound parameter, so any schema name is accepted
    schema = schema or config.connection.schema

    try:
        validator(name)
    except BadSymbolError as e:
        console.print(f"[red]Invalid {e.label}:[/red] {escape_markup(str(e))}", highlight=False)
        raise typer.Exit(EXIT_ERROR)

    try:
        conn = connect(config.connection.dsn())
    except Exception as e:
        logger.debug("Connection failed", exc_info=True)
        console.print(f"[red]Connection error:[/red] {escape_markup(str(e))}", highlight=False)
        raise typer.Exit(EXIT_ERROR)

    try:
        exists = check(conn, schema, name)
    except Exception as e:
        console.print(f"[red]Query error:[/red] {escape_markup(str(e))}", highlight=False)
        _close_quietly(conn)
        raise typer.Exit(EXIT_ERROR)

    try:
        conn.close()
    except Exception as e:
        console.print(f"[red]Connection error:[/red] {escape_markup(str(e))}", highlight=False)
        raise typer.Exit(EXIT_ERROR)

    target = escape_markup(f"{schema}.{name}")
    if exists:
        console.print(f"[green]{kind} {target} exists[/green]", highlight=False)
        raise typer.Exit(EXIT_FOUND)
    console.print(f"[yellow]{kind} {target} does not exist[/yellow]", highlight=False)
    raise typer.Exit(EXIT_NOT_FOUND)


@app.command("table-exists")
def table_exists_cmd(
    name: Annotated[str, typer.Argument(help="Table name")],
    schema: SchemaOption = None,
    env: EnvOption = None,
    project_dir: ProjectOption = None,
) -> None:
    """Check whether a table exists. Exit code 0: yes, 1: no, 2: error."""
    from pgkit.engine.catalog import table_exists
    from pgkit.engine.utils import validate_table_name

    _run_check("Table", name, schema, env, project_dir, validate_table_name, table_exists)


@app.command("procedure-exists")
def procedure_exists_cmd(
    name: Annotated[str, typer.Argument(help="Procedure or function name")],
    schema: SchemaOption = None,
    env: EnvOption = None,
    project_dir: ProjectOption = None,
) -> None:
    """Check whether a procedure exists. Exit code 0: yes, 1: no, 2: error."""
    from pgkit.engine.catalog import procedure_exists
    from pgkit.engine.utils import validate_procedure_name

    _run_check("Procedure", name, schema, env, project_dir, validate_procedure_name, procedure_exists)
