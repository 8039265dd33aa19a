"""Artifact path derivation.

Predicts where Cargo writes a build artifact. Nothing here touches the
filesystem: the returned path may not exist yet.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cargo_project.core.models import Artifact, ArtifactKind, Profile, Project
from cargo_project.targets.base import BasePlatformResolver, PlatformAttributes
from cargo_project.targets.builtin import BuiltinPlatformResolver

logger = logging.getLogger(__name__)


def derive_path(
    project: Project,
    artifact: Artifact,
    profile: Profile,
    target: str | None,
    host: str,
    *,
    platforms: BasePlatformResolver | None = None,
) -> Path:
    """Return the path to a build artifact of *project*.

    - *artifact* is the kind of artifact: ``--bin``, ``--example`` or ``--lib``
    - *profile* is the compilation profile (``--release`` or not)
    - *target* is the explicit compilation target (``--target``)
    - *host* is the host triple; it only drives the file extension rules when
      neither *target* nor the project's default target is set, and never
      adds a directory segment

    Raises ``UnknownTarget`` if the effective triple can't be classified.
    """
    resolver = platforms or BuiltinPlatformResolver()
    path = project.target_dir

    explicit = target or project.target
    if explicit:
        path = path / explicit

    attrs = resolver.resolve(explicit or host)
    path = path / profile.directory

    if artifact.kind is ArtifactKind.BIN:
        path = _with_executable_suffix(path / artifact.name, attrs)
    elif artifact.kind is ArtifactKind.EXAMPLE:
        path = _with_executable_suffix(path / "examples" / artifact.name, attrs)
    else:
        path = path / library_file_name(project.name)

    logger.debug(
        "derive_path(%s, %s, target=%s, host=%s) -> %s",
        artifact, profile.value, target, host, path,
    )
    return path


def library_file_name(package_name: str) -> str:
    """``my-crate`` -> ``libmy_crate.rlib``."""
    return f"lib{package_name.replace('-', '_')}.rlib"


def _with_executable_suffix(path: Path, attrs: PlatformAttributes) -> Path:
    if attrs.is_wasm:
        return path.with_suffix(".wasm")
    if attrs.is_windows:
        return path.with_suffix(".exe")
    return path
