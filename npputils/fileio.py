"""Whole-file reading and writing."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

__all__ = ["write_to_file", "read_file_text", "read_file_binary"]

PathLike = Union[str, os.PathLike]


def write_to_file(filename: PathLike, data: Union[bytes, bytearray, memoryview, str]) -> None:
    """Replace the file's contents with ``data`` (text is written as UTF-8)."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    Path(filename).write_bytes(raw)


def read_file_text(filename: PathLike) -> str:
    """Read a whole UTF-8 file, keeping line endings as they are."""
    with open(filename, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def read_file_binary(filename: PathLike) -> bytes:
    """Read a whole file as bytes."""
    return Path(filename).read_bytes()