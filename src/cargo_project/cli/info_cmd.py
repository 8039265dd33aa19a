"""``info`` -- show what was resolved for a project."""

from __future__ import annotations

import enum
import json
from pathlib import Path

import typer
import yaml
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cargo_project.cli import console, require_project
from cargo_project.core.models import Project


class OutputFormat(str, enum.Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


def info_command(
    path: Path = typer.Argument(
        Path("."), help="Any path inside the project (defaults to the current directory)."
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.TEXT, "--format", "-f", help="Output format.", case_sensitive=False
    ),
) -> None:
    """Show the resolved project: name, default target, target directory."""
    project = require_project(path)

    if fmt is OutputFormat.JSON:
        typer.echo(json.dumps(_as_dict(project), indent=2))
        return
    if fmt is OutputFormat.YAML:
        typer.echo(
            yaml.safe_dump(_as_dict(project), default_flow_style=False, sort_keys=False),
            nl=False,
        )
        return

    lines = [
        f"[bold]{escape(project.name)}[/bold]",
        f"Manifest:   {escape(str(project.toml))}",
        f"Target dir: {escape(str(project.target_dir))}",
        f"Target:     {project.target or '-'}",
        f"Workspace:  {escape(str(project.workspace_root or '-'))}",
    ]
    console.print(Panel("\n".join(lines), title="Project", border_style="blue"), highlight=False)

    if project.binaries:
        table = Table(title="Binaries")
        table.add_column("Name", style="cyan")
        table.add_column("Path")
        for binary in project.binaries:
            table.add_row(binary.name, binary.path)
        console.print(table)


def _as_dict(project: Project) -> dict:
    return project.model_dump(mode="json")
