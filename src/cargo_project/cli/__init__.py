"""CLI shared utilities used across commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from cargo_project.core.models import Project
from cargo_project.errors import CargoProjectError
from cargo_project.project.resolver import resolve

console = Console()


def cli_error(message: str) -> NoReturn:
    """Print a red error message and exit with code 1."""
    # Paths and TOML snippets may contain square brackets.
    console.print(f"[red]{escape(message)}[/red]", highlight=False)
    raise typer.Exit(code=1)


def require_project(path: Path) -> Project:
    """Resolve the project containing *path* or exit with an error message."""
    try:
        return resolve(path)
    except CargoProjectError as exc:
        cli_error(str(exc))
