from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformAttributes:
    """The parts of a target's ``cfg`` that decide artifact file names."""

    arch: str
    family: str | None = None
    os: str | None = None

    @property
    def is_wasm(self) -> bool:
        return self.arch == "wasm32"

    @property
    def is_windows(self) -> bool:
        return self.family == "windows"


class BasePlatformResolver(ABC):
    """Answers "what architecture and OS family is this target triple?"."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Resolver identifier (e.g. 'builtin', 'rustc')."""

    @abstractmethod
    def resolve(self, triple: str) -> PlatformAttributes:
        """Return the platform attributes of *triple*.

        Raises ``UnknownTarget`` if the triple is not recognised.
        """
