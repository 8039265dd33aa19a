"""Error taxonomy for project resolution and artifact path derivation."""

from __future__ import annotations

from pathlib import Path


class CargoProjectError(Exception):
    """Base class for every error raised by cargo_project."""


class NotAProject(CargoProjectError):
    """Raised when no ``Cargo.toml`` exists at or above the queried path."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"not a Cargo project: {path}")


class ConfigInvalid(CargoProjectError):
    """Raised when a required document exists but does not match its shape."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid {path.name} at {path}: {reason}")


class IoFailure(CargoProjectError):
    """Raised when a filesystem operation fails. Never retried."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"I/O error on {path}: {reason}")


class InvalidGlobPattern(CargoProjectError):
    """Raised when a workspace member pattern cannot be expanded."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid workspace member pattern {pattern!r}: {reason}")


class UnknownTarget(CargoProjectError):
    """Raised when a target triple's platform attributes cannot be determined."""

    def __init__(self, triple: str, reason: str | None = None):
        self.triple = triple
        self.reason = reason
        msg = f"unknown target triple: {triple}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
