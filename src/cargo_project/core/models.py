from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Cargo.toml
# ---------------------------------------------------------------------------

class Package(BaseModel):
    name: str
    version: str | None = None
    description: str | None = None


class Binary(BaseModel):
    """A binary target in the project."""

    name: str
    path: str


class Manifest(BaseModel):
    package: Package
    bin: list[Binary] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Cargo.toml -- workspace root variant
# ---------------------------------------------------------------------------

class Workspace(BaseModel):
    members: list[str]


class WorkspaceManifest(BaseModel):
    workspace: Workspace


# ---------------------------------------------------------------------------
# .cargo/config
# ---------------------------------------------------------------------------

class Build(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    target: str | None = None
    target_dir: str | None = Field(default=None, alias="target-dir")


class BuildConfig(BaseModel):
    build: Build | None = None


# ---------------------------------------------------------------------------
# Request parameters
# ---------------------------------------------------------------------------

class ArtifactKind(str, enum.Enum):
    BIN = "bin"
    EXAMPLE = "example"
    LIB = "lib"


@dataclass(frozen=True)
class Artifact:
    """Build artifact: ``--bin NAME``, ``--example NAME`` or ``--lib``."""

    kind: ArtifactKind
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is ArtifactKind.LIB:
            if self.name is not None:
                raise ValueError("library artifacts take no name")
        elif not self.name:
            raise ValueError(f"{self.kind.value} artifacts require a name")

    @classmethod
    def bin(cls, name: str) -> Artifact:
        return cls(ArtifactKind.BIN, name)

    @classmethod
    def example(cls, name: str) -> Artifact:
        return cls(ArtifactKind.EXAMPLE, name)

    @classmethod
    def lib(cls) -> Artifact:
        return cls(ArtifactKind.LIB)


class Profile(str, enum.Enum):
    DEV = "dev"
    RELEASE = "release"

    @property
    def is_release(self) -> bool:
        return self is Profile.RELEASE

    @property
    def directory(self) -> str:
        """Name of the directory Cargo uses for this profile's outputs."""
        return "release" if self.is_release else "debug"


# ---------------------------------------------------------------------------
# Resolved project
# ---------------------------------------------------------------------------

class Project(BaseModel):
    """Information about a Cargo project, resolved once from a path inside it."""

    model_config = ConfigDict(frozen=True)

    name: str
    target: str | None = None
    target_dir: Path
    toml: Path
    workspace_root: Path | None = None
    binaries: list[Binary] = Field(default_factory=list)

    @field_validator("target_dir", "toml", "workspace_root")
    @classmethod
    def require_absolute(cls, value: Path | None) -> Path | None:
        if value is not None and not value.is_absolute():
            raise ValueError(f"must be an absolute path, got {value}")
        return value

    @property
    def root(self) -> Path:
        """Directory that contains the project's ``Cargo.toml``."""
        return self.toml.parent

    @classmethod
    def query(cls, path: str | Path) -> Project:
        """Retrieve information about the Cargo project containing *path*.

        *path* can be any point within the project, not only the directory
        holding ``Cargo.toml``.
        """
        from cargo_project.project.resolver import resolve

        return resolve(path)

    def path(
        self,
        artifact: Artifact,
        profile: Profile,
        target: str | None,
        host: str,
    ) -> Path:
        """Return the path where Cargo places *artifact*.

        *host* is used as the compilation target for platform rules when no
        *target* is given and the project declares no default build target.
        """
        from cargo_project.project.artifacts import derive_path

        return derive_path(self, artifact, profile, target, host)
