import logging
from importlib.metadata import version as pkg_version
from typing import Optional

import typer

from cargo_project.cli.info_cmd import info_command
from cargo_project.cli.path_cmd import path_command

app = typer.Typer(
    name="cargo-project",
    help="Locate Cargo projects and their build artifacts.",
    no_args_is_help=True,
)

app.command("info")(info_command)
app.command("path")(path_command)


def version_callback(value: bool):
    if value:
        typer.echo(f"cargo-project {pkg_version('cargo-project')}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging.",
    ),
):
    """Locate Cargo projects and their build artifacts."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=logging.WARNING, format="%(name)s %(levelname)s: %(message)s")
    logging.getLogger("cargo_project").setLevel(level)


if __name__ == "__main__":
    app()
