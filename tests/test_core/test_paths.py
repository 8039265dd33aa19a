from __future__ import annotations

import os
from pathlib import Path

from cargo_project.core.paths import ancestors, find_config, search


class TestAncestors:
    def test_starts_with_self_and_ends_at_root(self, tmp_path: Path):
        chain = list(ancestors(tmp_path))
        assert chain[0] == tmp_path
        assert chain[1] == tmp_path.parent
        assert chain[-1] == Path(tmp_path.anchor)


class TestSearch:
    def test_finds_file_in_start_directory(self, tmp_path: Path):
        (tmp_path / "Cargo.toml").write_text("")
        assert search(tmp_path, "Cargo.toml") == tmp_path

    def test_finds_closest_ancestor(self, tmp_path: Path):
        (tmp_path / "Cargo.toml").write_text("")
        inner = tmp_path / "a" / "b"
        inner.mkdir(parents=True)
        (tmp_path / "a" / "Cargo.toml").write_text("")
        assert search(inner, "Cargo.toml") == tmp_path / "a"

    def test_nested_relative_path(self, tmp_path: Path):
        (tmp_path / ".cargo").mkdir()
        (tmp_path / ".cargo" / "config").write_text("")
        inner = tmp_path / "x" / "y"
        inner.mkdir(parents=True)
        assert search(inner, Path(".cargo") / "config") == tmp_path

    def test_not_found(self, tmp_path: Path):
        assert search(tmp_path, "definitely-not-here-8c1f.toml") is None

    def test_symlinked_file_counts(self, tmp_path: Path):
        (tmp_path / "real.toml").write_text("")
        (tmp_path / "Cargo.toml").symlink_to(tmp_path / "real.toml")
        assert search(tmp_path, "Cargo.toml") == tmp_path


class TestFindConfig:
    def test_prefers_config_over_config_toml(self, tmp_path: Path):
        (tmp_path / ".cargo").mkdir()
        (tmp_path / ".cargo" / "config").write_text("")
        (tmp_path / ".cargo" / "config.toml").write_text("")
        assert find_config(tmp_path) == tmp_path / ".cargo" / "config"

    def test_accepts_config_toml(self, tmp_path: Path):
        (tmp_path / ".cargo").mkdir()
        (tmp_path / ".cargo" / "config.toml").write_text("")
        assert find_config(tmp_path) == tmp_path / ".cargo" / "config.toml"

    def test_closest_directory_wins(self, tmp_path: Path):
        (tmp_path / ".cargo").mkdir()
        (tmp_path / ".cargo" / "config").write_text("")
        inner = tmp_path / "crate"
        (inner / ".cargo").mkdir(parents=True)
        (inner / ".cargo" / "config.toml").write_text("")
        assert find_config(inner) == inner / ".cargo" / "config.toml"


class TestUnreadableDirectories:
    """A directory we may not stat into must read as a miss, not an error."""

    @staticmethod
    def _deny(monkeypatch, blocked: Path) -> None:
        real_stat = os.stat

        def fake_stat(path, *args, **kwargs):
            if str(path).startswith(str(blocked)):
                raise PermissionError(13, "Permission denied", str(path))
            return real_stat(path, *args, **kwargs)

        monkeypatch.setattr(os, "stat", fake_stat)

    def test_search_skips_unreadable_entry(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".cargo").mkdir()
        (tmp_path / ".cargo" / "config").write_text("")
        inner = tmp_path / "proj"
        inner.mkdir()
        self._deny(monkeypatch, tmp_path / ".cargo")
        assert search(inner, Path(".cargo") / "config") is None

    def test_find_config_skips_unreadable_entry(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".cargo").mkdir()
        (tmp_path / ".cargo" / "config").write_text("")
        self._deny(monkeypatch, tmp_path / ".cargo")
        assert find_config(tmp_path) is None
