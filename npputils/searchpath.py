"""Reading the executable search path and finding programs in it."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from npputils.text import split

__all__ = ["read_path", "program_path"]

_DEFAULT_PATH = (
    "/usr/local/bin",
    "/usr/local/sbin",
    "/usr/bin",
    "/usr/sbin",
    "/bin",
    "/sbin",
)


def read_path() -> List[Path]:
    """The directories of ``PATH``, or a default list when it is unset."""
    value = os.environ.get("PATH")
    if value is None:
        return [Path(directory) for directory in _DEFAULT_PATH]
    return [Path(directory) for directory in split(value, ":")]


def program_path(program_name: str) -> Optional[Path]:
    """Absolute path of the first regular file named ``program_name`` in PATH.

    Returns None if there is none; raises ValueError for names that are
    paths rather than plain program names.
    """
    if "/" in program_name or program_name in (".", ".."):
        raise ValueError(f"Invalid program name: {program_name}")
    for directory in read_path():
        candidate = directory / program_name
        if candidate.is_file():
            return Path(os.path.abspath(candidate))
    return None