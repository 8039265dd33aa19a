"""Glob expansion for workspace ``members`` patterns.

The resolver only talks to :class:`BaseGlobExpander`, so tests can swap in an
expander that returns a fixed set of paths without touching the filesystem.
"""

from __future__ import annotations

import glob
import logging
import os
import re
from abc import ABC, abstractmethod
from pathlib import Path

from cargo_project.errors import InvalidGlobPattern

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else r"/")


def validate_pattern(pattern: str) -> None:
    """Raise ``InvalidGlobPattern`` if *pattern* cannot be used as a glob.

    Rejected: NUL bytes, text the filesystem encoding cannot represent,
    ``**`` mixed with other characters inside one path component, and
    unterminated ``[`` character classes.
    """
    if "\x00" in pattern:
        raise InvalidGlobPattern(pattern, "contains a NUL character")
    try:
        os.fsencode(pattern)
    except UnicodeEncodeError as exc:
        raise InvalidGlobPattern(pattern, "not representable as a filesystem path") from exc

    for component in _SEPARATORS.split(pattern):
        if "**" in component and component != "**":
            raise InvalidGlobPattern(
                pattern, "recursive wildcards must form an entire path component"
            )

    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            # A ']' directly after '[' or '[!' is a literal member of the class.
            start = i + 2 if pattern[i + 1 : i + 2] == "!" else i + 1
            close = pattern.find("]", start + 1)
            if close == -1:
                raise InvalidGlobPattern(pattern, "unterminated character class")
            i = close
        i += 1


def join_pattern(root: Path, pattern: str) -> str:
    """Anchor *pattern* at *root*, escaping any glob syntax in *root* itself."""
    return os.path.join(glob.escape(str(root)), pattern)


class BaseGlobExpander(ABC):
    """Maps a glob pattern to the set of existing paths it matches."""

    @abstractmethod
    def expand(self, pattern: str) -> list[Path]:
        """Return every existing path matching *pattern*."""


class FilesystemGlobExpander(BaseGlobExpander):
    """Expands patterns against the real filesystem."""

    def expand(self, pattern: str) -> list[Path]:
        validate_pattern(pattern)
        matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
        logger.debug("expand(%s) -> %d match(es)", pattern, len(matches))
        return [Path(m) for m in matches]
