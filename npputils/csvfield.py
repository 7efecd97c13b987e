"""Quoting of a single CSV field."""

__all__ = ["csv_field"]

_QUOTE = '"'


def csv_field(data: str) -> str:
    """Return ``data`` wrapped in double quotes, with inner quotes doubled."""
    return _QUOTE + data.replace(_QUOTE, _QUOTE * 2) + _QUOTE