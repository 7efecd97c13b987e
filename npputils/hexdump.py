"""Hexadecimal dumping and loading of byte strings."""

from __future__ import annotations

import sys
from typing import Callable, Optional

__all__ = ["byte_to_string", "hexdump", "load_hex"]

_BYTES_PER_LINE = 16
_GROUP = 4
_LOWER_HEX = "0123456789abcdef"


def byte_to_string(value: int) -> str:
    """Two lower-case hex digits for a byte value."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Not a byte value: {value}")
    return f"{value:02x}"


def _stdout_printer(text: str) -> None:
    sys.stdout.write(text)


def hexdump(data: bytes, printer: Optional[Callable[[str], None]] = None) -> None:
    """Print ``data`` as rows of 16 bytes in groups of 4, through ``printer``."""
    emit = printer if printer is not None else _stdout_printer
    for start in range(0, len(data), _BYTES_PER_LINE):
        row = data[start:start + _BYTES_PER_LINE]
        for position, value in enumerate(row):
            emit(byte_to_string(value))
            emit(" ")
            if position % _GROUP == _GROUP - 1:
                emit(" ")
        emit("\n")


def _hex_digit(char: str) -> int:
    index = _LOWER_HEX.find(char)
    if index < 0 or len(char) != 1:
        raise ValueError("Bad hexadecimal character")
    return index


def load_hex(text: str, with_prefix: bool = False) -> bytes:
    """Parse a string of lower-case hex digits, optionally prefixed by ``0x``."""
    digits = text
    if with_prefix and text.startswith("0x"):
        digits = text[2:]
    if len(text) % 2 == 1 or not text:
        raise ValueError("Bad hexadecimal string size")
    return bytes(
        (_hex_digit(high) << 4) | _hex_digit(low)
        for high, low in zip(digits[::2], digits[1::2])
    )