"""Retrieve information about a Cargo project.

Useful for tools built on top of Cargo that need to find the project's build
outputs without re-implementing Cargo's directory layout and workspace rules.
"""

from __future__ import annotations

from cargo_project.core.models import Artifact, ArtifactKind, Binary, Profile, Project
from cargo_project.errors import (
    CargoProjectError,
    ConfigInvalid,
    InvalidGlobPattern,
    IoFailure,
    NotAProject,
    UnknownTarget,
)
from cargo_project.project import derive_path, resolve

__all__ = [
    "Artifact",
    "ArtifactKind",
    "Binary",
    "CargoProjectError",
    "ConfigInvalid",
    "InvalidGlobPattern",
    "IoFailure",
    "NotAProject",
    "Profile",
    "Project",
    "UnknownTarget",
    "derive_path",
    "resolve",
]
