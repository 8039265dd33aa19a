"""Directory search -- the upward walk used to find manifests and configs."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_FILE = "Cargo.toml"
# Checked in this order within a single directory.
CONFIG_FILES = (Path(".cargo") / "config", Path(".cargo") / "config.toml")
TARGET_DIR_ENV = "CARGO_TARGET_DIR"
DEFAULT_TARGET_DIR = "target"


def exists(path: Path) -> bool:
    """Existence check that treats unreadable paths as missing."""
    return os.path.exists(path)


def ancestors(start: Path) -> Iterator[Path]:
    """Yield *start* and then each of its parents, closest first."""
    yield start
    yield from start.parents


def search(start: Path, relative: str | Path) -> Path | None:
    """Return the closest ancestor of *start* (inclusive) containing *relative*.

    Only existence is checked, so symlinked files and directories count, and
    paths hidden behind a directory we may not read count as missing.
    Returns ``None`` once the filesystem root has been checked without a match.
    """
    for directory in ancestors(start):
        if exists(directory / relative):
            logger.debug("search(%s, %s): found in %s", start, relative, directory)
            return directory
    return None


def find_config(start: Path) -> Path | None:
    """Return the nearest ``.cargo/config`` (or ``config.toml``) at or above *start*."""
    for directory in ancestors(start):
        for candidate in CONFIG_FILES:
            path = directory / candidate
            if exists(path):
                logger.debug("Found build configuration at %s", path)
                return path
    return None
