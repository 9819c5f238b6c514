"""Identifier and literal commands: validate, escape."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

import typer
from rich.markup import escape as escape_markup

from pgkit.cli import app, console
from pgkit.engine.errors import BadSymbolError
from pgkit.engine.utils import (
    escape_single_quotes,
    validate_identifier,
    validate_procedure_name,
    validate_table_name,
)


class IdentifierKind(str, Enum):
    identifier = "identifier"
    table = "table"
    procedure = "procedure"


_VALIDATORS = {
    IdentifierKind.identifier: validate_identifier,
    IdentifierKind.table: validate_table_name,
    IdentifierKind.procedure: validate_procedure_name,
}


@app.command()
def validate(
    names: Annotated[list[str], typer.Argument(help="Names to check")],
    kind: Annotated[IdentifierKind, typer.Option("--kind", "-k", help="What the names are used for")] = IdentifierKind.identifier,
) -> None:
    """Check that names only use letters, digits and underscores."""
    validator = _VALIDATORS[kind]
    for name in names:
        try:
            validator(name)
        except BadSymbolError as e:
            console.print(f"[red]Invalid {e.label}[/red] {escape_markup(repr(name))}: {escape_markup(str(e))}", highlight=False)
            raise typer.Exit(1)
        console.print(f"[green]OK[/green] {escape_markup(repr(name))}", highlight=False)


@app.command()
def escape(
    text: Annotated[str, typer.Argument(help="Text to place inside a '...' literal")],
) -> None:
    """Print TEXT with every single quote doubled."""
    console.print(escape_single_quotes(text), markup=False, highlight=False, soft_wrap=True)
