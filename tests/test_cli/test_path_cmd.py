"""Tests for the ``path`` command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from cargo_project.main import app
from cargo_project.targets.base import PlatformAttributes

runner = CliRunner()

LINUX = "x86_64-unknown-linux-gnu"


def _path(*args: str) -> list[str]:
    return ["path", *args]


class TestPath:
    def test_bin(self, project_dir: Path):
        result = runner.invoke(
            app, _path("--bin", "my-app", "--host", LINUX, "-p", str(project_dir))
        )
        assert result.exit_code == 0
        assert result.output.strip() == str(project_dir / "target" / "debug" / "my-app")

    def test_release_example_for_target(self, project_dir: Path):
        result = runner.invoke(
            app,
            _path(
                "--example", "blinky", "--release", "--target", "thumbv7m-none-eabi",
                "--host", LINUX, "-p", str(project_dir),
            ),
        )
        assert result.exit_code == 0
        assert Path(result.output.strip()) == (
            project_dir / "target" / "thumbv7m-none-eabi" / "release" / "examples" / "blinky"
        )

    def test_lib(self, project_dir: Path):
        result = runner.invoke(app, _path("--lib", "--host", LINUX, "-p", str(project_dir)))
        assert result.exit_code == 0
        assert Path(result.output.strip()).name == "libmy_app.rlib"

    def test_windows_host(self, project_dir: Path):
        result = runner.invoke(
            app,
            _path("--bin", "app", "--host", "x86_64-pc-windows-msvc", "-p", str(project_dir)),
        )
        assert result.exit_code == 0
        assert result.output.strip().endswith("app.exe")

    def test_detects_host_when_omitted(self, project_dir: Path):
        with patch(
            "cargo_project.cli.path_cmd.detect_host_triple", return_value=LINUX
        ) as detect:
            result = runner.invoke(app, _path("--bin", "x", "-p", str(project_dir)))
        assert result.exit_code == 0
        detect.assert_called_once()

    def test_rustc_resolver(self, project_dir: Path):
        with patch(
            "cargo_project.targets.rustc.RustcPlatformResolver.resolve",
            return_value=PlatformAttributes(arch="x86_64", family="windows", os="windows"),
        ) as resolve:
            result = runner.invoke(
                app, _path("--bin", "x", "--rustc", "--host", LINUX, "-p", str(project_dir))
            )
        assert result.exit_code == 0
        assert result.output.strip().endswith("x.exe")
        resolve.assert_called_once_with(LINUX)

    def test_requires_exactly_one_artifact(self, project_dir: Path):
        result = runner.invoke(app, _path("--host", LINUX, "-p", str(project_dir)))
        assert result.exit_code == 1
        assert "exactly one" in result.output

        result = runner.invoke(
            app, _path("--bin", "a", "--lib", "--host", LINUX, "-p", str(project_dir))
        )
        assert result.exit_code == 1

    def test_empty_artifact_name(self, project_dir: Path):
        for flag in ("--bin", "--example"):
            result = runner.invoke(
                app, _path(flag, "", "--host", LINUX, "-p", str(project_dir))
            )
            assert result.exit_code == 1
            assert result.exception is None or isinstance(result.exception, SystemExit)
            assert "require a name" in result.output

    def test_unknown_target(self, project_dir: Path):
        result = runner.invoke(
            app,
            _path("--bin", "a", "--target", "z80-acme-os", "--host", LINUX, "-p", str(project_dir)),
        )
        assert result.exit_code == 1
        assert "unknown target triple" in result.output

    def test_not_a_project(self, tmp_path: Path):
        result = runner.invoke(app, _path("--lib", "--host", LINUX, "-p", str(tmp_path)))
        assert result.exit_code == 1
        assert "not a Cargo project" in result.output
