"""Offline platform lookup that classifies a triple by its components.

Mirrors the ``target_arch`` / ``target_family`` / ``target_os`` values rustc
reports, for the architectures and operating systems listed below.
"""

from __future__ import annotations

import logging
import re

from cargo_project.errors import UnknownTarget
from cargo_project.targets.base import BasePlatformResolver, PlatformAttributes

logger = logging.getLogger(__name__)

# Leading triple component -> rustc target_arch. Checked in order, first match wins.
_ARCH_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^x86_64h?$"), "x86_64"),
    (re.compile(r"^i[3-6]86$"), "x86"),
    (re.compile(r"^(aarch64(_be)?|arm64(e|_32|ec)?)$"), "aarch64"),
    (re.compile(r"^(arm|armeb|armv[4-8]\w*|armebv7r|thumbv[4-8]\w*(\.\w+)?)$"), "arm"),
    (re.compile(r"^riscv32\w*$"), "riscv32"),
    (re.compile(r"^riscv64\w*$"), "riscv64"),
    (re.compile(r"^wasm32$"), "wasm32"),
    (re.compile(r"^wasm64$"), "wasm64"),
    (re.compile(r"^mips(el)?(isa32r6(el)?)?$"), "mips"),
    (re.compile(r"^mips64(el)?(isa64r6(el)?)?$"), "mips64"),
    (re.compile(r"^powerpc$"), "powerpc"),
    (re.compile(r"^powerpc64(le)?$"), "powerpc64"),
    (re.compile(r"^s390x$"), "s390x"),
    (re.compile(r"^(sparc64|sparcv9)$"), "sparc64"),
    (re.compile(r"^sparc$"), "sparc"),
    (re.compile(r"^loongarch64$"), "loongarch64"),
    (re.compile(r"^msp430$"), "msp430"),
    (re.compile(r"^avr$"), "avr"),
    (re.compile(r"^nvptx64$"), "nvptx64"),
    (re.compile(r"^bpf(el|eb)$"), "bpf"),
    (re.compile(r"^hexagon$"), "hexagon"),
    (re.compile(r"^xtensa$"), "xtensa"),
    (re.compile(r"^csky$"), "csky"),
    (re.compile(r"^m68k$"), "m68k"),
]

# Triple component -> (target_os, target_family)
_OPERATING_SYSTEMS: dict[str, tuple[str, str | None]] = {
    "windows": ("windows", "windows"),
    "linux": ("linux", "unix"),
    "android": ("android", "unix"),
    "androideabi": ("android", "unix"),
    "darwin": ("macos", "unix"),
    "ios": ("ios", "unix"),
    "tvos": ("tvos", "unix"),
    "watchos": ("watchos", "unix"),
    "visionos": ("visionos", "unix"),
    "freebsd": ("freebsd", "unix"),
    "netbsd": ("netbsd", "unix"),
    "openbsd": ("openbsd", "unix"),
    "dragonfly": ("dragonfly", "unix"),
    "solaris": ("solaris", "unix"),
    "illumos": ("illumos", "unix"),
    "haiku": ("haiku", "unix"),
    "redox": ("redox", "unix"),
    "fuchsia": ("fuchsia", "unix"),
    "hurd": ("hurd", "unix"),
    "aix": ("aix", "unix"),
    "nto": ("nto", "unix"),
    "vxworks": ("vxworks", "unix"),
    "espidf": ("espidf", "unix"),
    "emscripten": ("emscripten", "unix"),
    "wasi": ("wasi", "wasm"),
    "wasip1": ("wasi", "wasm"),
    "wasip2": ("wasi", "wasm"),
    "uefi": ("uefi", None),
    "cuda": ("cuda", None),
    "none": ("none", None),
}


class BuiltinPlatformResolver(BasePlatformResolver):
    """Classifies triples without invoking any toolchain."""

    @property
    def name(self) -> str:
        return "builtin"

    def resolve(self, triple: str) -> PlatformAttributes:
        parts = triple.split("-")
        if len(parts) < 2 or not all(parts):
            raise UnknownTarget(triple, "expected <arch>-<vendor>-<os>[-<env>]")

        arch = _match_arch(parts[0])
        if arch is None:
            raise UnknownTarget(triple, f"unrecognised architecture {parts[0]!r}")

        family: str | None = None
        known = [p for p in parts[1:] if p in _OPERATING_SYSTEMS]
        if known:
            # armv7-linux-androideabi is Android, not Linux.
            chosen = next((p for p in known if p.startswith("android")), known[0])
            os_name, family = _OPERATING_SYSTEMS[chosen]
        elif arch.startswith("wasm"):
            # wasm32-unknown-unknown
            os_name, family = "unknown", "wasm"
        else:
            os_name = "none"

        attrs = PlatformAttributes(arch=arch, family=family, os=os_name)
        logger.debug("resolve(%s) -> %s", triple, attrs)
        return attrs


def _match_arch(component: str) -> str | None:
    for pattern, arch in _ARCH_PATTERNS:
        if pattern.match(component):
            return arch
    return None
