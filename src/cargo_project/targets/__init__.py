from __future__ import annotations

from cargo_project.targets.base import BasePlatformResolver, PlatformAttributes
from cargo_project.targets.builtin import BuiltinPlatformResolver
from cargo_project.targets.rustc import RustcPlatformResolver, detect_host_triple

__all__ = [
    "BasePlatformResolver",
    "PlatformAttributes",
    "BuiltinPlatformResolver",
    "RustcPlatformResolver",
    "detect_host_triple",
    "get_available_resolvers",
]


def get_available_resolvers() -> dict[str, BasePlatformResolver]:
    """Return all platform resolvers, keyed by their name."""
    resolvers: list[BasePlatformResolver] = [
        BuiltinPlatformResolver(),
        RustcPlatformResolver(),
    ]
    return {r.name: r for r in resolvers}
