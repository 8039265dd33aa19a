"""Shared test fixtures -- helpers for building Cargo project trees on disk."""

from __future__ import annotations

from pathlib import Path

import pytest


class CargoTree:
    """Writes manifests and configs under a canonical temporary directory."""

    def __init__(self, base: Path):
        self.base = base

    def manifest(self, rel: str, name: str, extra: str = "") -> Path:
        """Write a package ``Cargo.toml`` into *rel*; return the directory."""
        directory = self.base / rel
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "Cargo.toml").write_text(
            f'[package]\nname = "{name}"\nversion = "0.1.0"\n{extra}'
        )
        return directory

    def workspace(self, rel: str, members: list[str]) -> Path:
        """Write a virtual workspace ``Cargo.toml`` into *rel*; return the directory."""
        directory = self.base / rel
        directory.mkdir(parents=True, exist_ok=True)
        quoted = ", ".join(f'"{m}"' for m in members)
        (directory / "Cargo.toml").write_text(f"[workspace]\nmembers = [{quoted}]\n")
        return directory

    def config(self, rel: str, body: str, filename: str = "config") -> Path:
        """Write ``<rel>/.cargo/<filename>``; return the file path."""
        cargo_dir = self.base / rel / ".cargo"
        cargo_dir.mkdir(parents=True, exist_ok=True)
        path = cargo_dir / filename
        path.write_text(body)
        return path


@pytest.fixture
def cargo(tmp_path: Path) -> CargoTree:
    return CargoTree(tmp_path.resolve())


@pytest.fixture
def project_dir(cargo: CargoTree) -> Path:
    """A standalone binary crate named ``my-app`` with nested source dirs."""
    root = cargo.manifest("my-app", "my-app")
    (root / "src" / "bin").mkdir(parents=True)
    (root / "src" / "main.rs").write_text("fn main() {}\n")
    return root


@pytest.fixture(autouse=True)
def _no_target_dir_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CARGO_TARGET_DIR", raising=False)
