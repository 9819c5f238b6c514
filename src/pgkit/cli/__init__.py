"""CLI interface for pgkit.

The Typer app and shared helpers live here; each module registers its commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

app = typer.Typer(
    name="pgkit",
    help="PostgreSQL helpers: build DSNs, validate identifiers, check catalog objects.",
    no_args_is_help=True,
)
console = Console()

# Exit codes for the existence checks.
EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2


@app.callback()
def main(
    log_level: Annotated[str, typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")] = "WARNING",
) -> None:
    from pgkit import setup_logging

    setup_logging(log_level)


def _load_config(project_dir: Path | None = None, env: str | None = None):
    """Load project config with optional environment override."""
    from pgkit.config import load_project
    return load_project(project_dir or Path.cwd(), env=env)


ProjectOption = Annotated[
    Optional[Path], typer.Option("--project", "-p", help="Project directory (default: current dir)")
]
EnvOption = Annotated[Optional[str], typer.Option("--env", "-e", help="Environment to use")]


# Import submodules so they register their commands on `app`.
from pgkit.cli import catalog  # noqa: E402, F401
from pgkit.cli import dsn  # noqa: E402, F401
from pgkit.cli import identifiers  # noqa: E402, F401
