"""Project resolution -- from any path inside a Cargo project to a ``Project``.

Resolution happens in three steps:

1. find the closest ``Cargo.toml`` at or above the queried path (the project
   root) and read the package name from it;
2. work out the default target and target directory from ``CARGO_TARGET_DIR``
   and the nearest ``.cargo/config``;
3. walk further up looking for a workspace whose ``members`` globs include
   the project root, whose ``target`` directory then becomes the fallback.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from cargo_project.core.documents import load_document, probe_document
from cargo_project.core.globbing import (
    BaseGlobExpander,
    FilesystemGlobExpander,
    join_pattern,
    validate_pattern,
)
from cargo_project.core.models import Binary, BuildConfig, Manifest, Project, WorkspaceManifest
from cargo_project.core.paths import (
    DEFAULT_TARGET_DIR,
    MANIFEST_FILE,
    TARGET_DIR_ENV,
    exists,
    find_config,
    search,
)
from cargo_project.errors import IoFailure, NotAProject

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Workspace probe results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WorkspaceFound:
    """*root* is a workspace and the project is one of its members."""

    root: Path


@dataclass(frozen=True)
class NotAMember:
    """*root* is a workspace, but none of its member globs match the project."""

    root: Path


@dataclass(frozen=True)
class NotAWorkspace:
    """*root* has a ``Cargo.toml`` that does not parse as a workspace manifest."""

    root: Path


WorkspaceProbe = WorkspaceFound | NotAMember | NotAWorkspace


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve(
    start_path: str | Path,
    *,
    environ: Mapping[str, str] | None = None,
    glob_expander: BaseGlobExpander | None = None,
) -> Project:
    """Resolve the Cargo project containing *start_path*.

    Raises ``NotAProject``, ``ConfigInvalid``, ``IoFailure`` or
    ``InvalidGlobPattern``.
    """
    env = os.environ if environ is None else environ
    expander = glob_expander or FilesystemGlobExpander()

    path = _canonicalize(Path(start_path))
    root = search(path, MANIFEST_FILE)
    if root is None:
        raise NotAProject(path)
    logger.debug("resolve(path=%s): root=%s", path, root)

    toml = root / MANIFEST_FILE
    manifest = load_document(toml, Manifest)

    target, target_dir = _build_settings(root, env)

    workspace_root = find_workspace(root, expander)
    if target_dir is None and workspace_root is not None:
        target_dir = workspace_root / DEFAULT_TARGET_DIR
    if target_dir is None:
        target_dir = root / DEFAULT_TARGET_DIR

    return Project(
        name=manifest.package.name,
        target=target,
        target_dir=target_dir,
        toml=toml,
        workspace_root=workspace_root,
        binaries=_binaries(root, manifest),
    )


def find_workspace(root: Path, expander: BaseGlobExpander) -> Path | None:
    """Return the root of the workspace *root* belongs to, if any.

    Every ancestor with a ``Cargo.toml`` is probed, closest first. An ancestor
    that is not a workspace, or is a workspace that doesn't list *root*, does
    not end the search.
    """
    cursor: Path | None = root.parent if root.parent != root else None
    while cursor is not None:
        logger.debug("workspace search: cwd=%s", cursor)
        candidate = search(cursor, MANIFEST_FILE)
        if candidate is None:
            break

        probe = probe_workspace(candidate, root, expander)
        if isinstance(probe, WorkspaceFound):
            logger.debug("found workspace: root=%s, member=%s", probe.root, root)
            return probe.root

        cursor = candidate.parent if candidate.parent != candidate else None

    return None


def probe_workspace(candidate: Path, member: Path, expander: BaseGlobExpander) -> WorkspaceProbe:
    """Classify *candidate* as a workspace containing *member*, or not."""
    manifest = probe_document(candidate / MANIFEST_FILE, WorkspaceManifest)
    if manifest is None:
        return NotAWorkspace(candidate)

    logger.debug(
        "workspace candidate: root=%s, members=%s", candidate, manifest.workspace.members
    )
    for member_glob in manifest.workspace.members:
        validate_pattern(member_glob)
        for member_dir in expander.expand(join_pattern(candidate, member_glob)):
            logger.debug("member_dir=%s", member_dir)
            if Path(os.path.normpath(candidate / member_dir)) == member:
                return WorkspaceFound(candidate)

    return NotAMember(candidate)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _canonicalize(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        raise IoFailure(path, reason) from exc


def _build_settings(root: Path, env: Mapping[str, str]) -> tuple[str | None, Path | None]:
    """Return ``(default target, target dir)`` from the environment and config."""
    target: str | None = None
    target_dir: Path | None = None

    env_dir = env.get(TARGET_DIR_ENV)
    if env_dir:
        target_dir = _absolute(Path(env_dir), Path.cwd())
        logger.debug("%s=%s", TARGET_DIR_ENV, target_dir)

    config_path = find_config(root)
    if config_path is not None:
        config = load_document(config_path, BuildConfig)
        if config.build is not None:
            target = config.build.target
            if target_dir is None and config.build.target_dir is not None:
                # Relative to the directory holding ``.cargo``.
                target_dir = _absolute(Path(config.build.target_dir), config_path.parent.parent)

    return target, target_dir


def _absolute(path: Path, base: Path) -> Path:
    return path if path.is_absolute() else base / path


def _binaries(root: Path, manifest: Manifest) -> list[Binary]:
    if manifest.bin:
        return list(manifest.bin)
    if exists(root / "src" / "main.rs"):
        return [Binary(name=manifest.package.name, path="src/main.rs")]
    return []
