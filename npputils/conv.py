"""Strict parsing of integers and booleans from text."""

from __future__ import annotations

import re

__all__ = ["parse_int", "parse_bool"]

_SIGNED = re.compile(r"-?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")


def parse_int(text: str, bits: int = 64, signed: bool = True) -> int:
    """Parse a decimal integer that must fit in a ``bits``-wide integer type.

    The whole string must be digits, with a leading ``-`` allowed only when
    ``signed``; anything else, or a value out of range, raises ValueError.
    """
    if bits <= 0:
        raise ValueError(f"Bad integer width: {bits}")
    pattern = _SIGNED if signed else _UNSIGNED
    if pattern.fullmatch(text) is None:
        raise ValueError("Bad integer")
    value = int(text)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise ValueError("Bad integer")
    return value


def parse_bool(text: str) -> bool:
    """Parse exactly ``true`` or ``false``."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("Bad boolean")