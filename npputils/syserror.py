"""Turning an OS error number into an exception."""

from __future__ import annotations

__all__ = ["error_from_errno"]


def error_from_errno(code: int) -> None:
    """Raise the OSError subclass for ``code``, unless it is zero."""
    if code != 0:
        raise OSError(code, f"Got system error {code}")