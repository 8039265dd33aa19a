"""``path`` -- print where Cargo puts a build artifact."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from cargo_project.cli import cli_error, require_project
from cargo_project.core.models import Artifact, Profile
from cargo_project.errors import UnknownTarget
from cargo_project.project.artifacts import derive_path
from cargo_project.targets import get_available_resolvers
from cargo_project.targets.rustc import detect_host_triple

logger = logging.getLogger(__name__)


def path_command(
    bin_name: Optional[str] = typer.Option(None, "--bin", help="Binary target name."),
    example: Optional[str] = typer.Option(None, "--example", help="Example name."),
    lib: bool = typer.Option(False, "--lib", help="The package's library."),
    release: bool = typer.Option(False, "--release", help="Use the release profile."),
    target: Optional[str] = typer.Option(None, "--target", "-t", help="Target triple."),
    host: Optional[str] = typer.Option(
        None, "--host", help="Host triple (detected via rustc if omitted)."
    ),
    use_rustc: bool = typer.Option(
        False, "--rustc", help="Classify targets with `rustc --print cfg`."
    ),
    project_path: Path = typer.Option(
        Path("."), "--project", "-p", help="Any path inside the project."
    ),
) -> None:
    """Print the path of a build artifact."""
    artifact = _select_artifact(bin_name, example, lib)
    project = require_project(project_path)
    profile = Profile.RELEASE if release else Profile.DEV

    if host is None:
        host = detect_host_triple()
        logger.debug("Detected host triple %s", host)

    resolvers = get_available_resolvers()
    platforms = resolvers["rustc" if use_rustc else "builtin"]

    try:
        path = derive_path(project, artifact, profile, target, host, platforms=platforms)
    except UnknownTarget as exc:
        cli_error(str(exc))

    typer.echo(str(path))


def _select_artifact(bin_name: str | None, example: str | None, lib: bool) -> Artifact:
    selected = [s for s in (bin_name is not None, example is not None, lib) if s]
    if len(selected) != 1:
        cli_error("Specify exactly one of --bin NAME, --example NAME or --lib.")
    try:
        if bin_name is not None:
            return Artifact.bin(bin_name)
        if example is not None:
            return Artifact.example(example)
        return Artifact.lib()
    except ValueError as exc:
        cli_error(f"Invalid artifact: {exc}.")
