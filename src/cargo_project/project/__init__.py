from __future__ import annotations

from cargo_project.project.artifacts import derive_path, library_file_name
from cargo_project.project.resolver import find_workspace, resolve

__all__ = [
    "derive_path",
    "find_workspace",
    "library_file_name",
    "resolve",
]
