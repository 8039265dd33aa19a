"""Platform lookup backed by the installed ``rustc``."""

from __future__ import annotations

import logging
import platform
import subprocess
import sys

from cargo_project.errors import UnknownTarget
from cargo_project.targets.base import BasePlatformResolver, PlatformAttributes

logger = logging.getLogger(__name__)

_MACHINE_ARCH = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "i386": "i686",
    "i686": "i686",
    "x86": "i686",
}

_PLATFORM_SUFFIX = {
    "linux": "unknown-linux-gnu",
    "darwin": "apple-darwin",
    "win32": "pc-windows-msvc",
    "cygwin": "pc-windows-gnu",
    "freebsd": "unknown-freebsd",
}


def _run_rustc(args: list[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["rustc", *args],
        capture_output=True,
        text=True,
        check=False,
    )


def parse_cfg(output: str) -> dict[str, list[str]]:
    """Parse ``rustc --print cfg`` output into ``{key: [values]}``.

    Bare flags such as ``unix`` or ``debug_assertions`` map to ``[]``.
    """
    cfg: dict[str, list[str]] = {}
    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        key, sep, value = line.partition("=")
        values = cfg.setdefault(key, [])
        if sep:
            values.append(value.strip('"'))
    return cfg


class RustcPlatformResolver(BasePlatformResolver):
    """Asks ``rustc --print cfg --target <triple>``."""

    @property
    def name(self) -> str:
        return "rustc"

    def resolve(self, triple: str) -> PlatformAttributes:
        try:
            result = _run_rustc(["--print", "cfg", "--target", triple])
        except FileNotFoundError as exc:
            raise UnknownTarget(triple, "rustc not found on PATH") from exc

        if result.returncode != 0:
            reason = result.stderr.strip().splitlines()[0] if result.stderr.strip() else None
            raise UnknownTarget(triple, reason)

        cfg = parse_cfg(result.stdout)
        arches = cfg.get("target_arch")
        if not arches:
            raise UnknownTarget(triple, "rustc reported no target_arch")

        families = cfg.get("target_family") or [None]
        oses = cfg.get("target_os") or [None]
        attrs = PlatformAttributes(arch=arches[0], family=families[0], os=oses[0])
        logger.debug("rustc cfg for %s -> %s", triple, attrs)
        return attrs


def detect_host_triple() -> str:
    """Return the host triple reported by ``rustc -vV``.

    Without a working rustc, guess it from the running interpreter's platform.
    """
    try:
        result = _run_rustc(["-vV"])
    except FileNotFoundError:
        logger.debug("rustc not found; guessing host triple from platform")
    else:
        if result.returncode == 0:
            for line in result.stdout.splitlines():
                if line.startswith("host:"):
                    return line.split(":", 1)[1].strip()

    machine = platform.machine().lower()
    arch = _MACHINE_ARCH.get(machine, machine)
    for prefix, suffix in _PLATFORM_SUFFIX.items():
        if sys.platform.startswith(prefix):
            return f"{arch}-{suffix}"
    return f"{arch}-unknown-{sys.platform}"
