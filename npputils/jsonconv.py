"""Conversion of decoded JSON values to Python types."""

from __future__ import annotations

import enum
import functools
import math
import os
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Dict, Hashable, Optional

__all__ = [
    "JsonTypeError",
    "TimeUnit",
    "register_converter",
    "converter_for",
    "convert_json",
]

Converter = Callable[[Any], Any]


class JsonTypeError(TypeError):
    """A JSON value does not have the type that a conversion needs."""


class TimeUnit(enum.Enum):
    """Units in which a JSON number is read as a duration."""

    MICROSECONDS = timedelta(microseconds=1)
    MILLISECONDS = timedelta(milliseconds=1)
    SECONDS = timedelta(seconds=1)
    MINUTES = timedelta(minutes=1)
    HOURS = timedelta(hours=1)


def _kind(data: Any) -> str:
    if data is None:
        return "null"
    if isinstance(data, bool):
        return "boolean"
    if isinstance(data, (int, float)):
        return "number"
    if isinstance(data, str):
        return "string"
    if isinstance(data, list):
        return "array"
    if isinstance(data, dict):
        return "object"
    return type(data).__name__


def _require_number(data: Any) -> None:
    if isinstance(data, bool) or not isinstance(data, (int, float)):
        raise JsonTypeError(f"type must be number, but is {_kind(data)}")


def _to_int(data: Any) -> int:
    _require_number(data)
    if isinstance(data, float):
        if not math.isfinite(data):
            raise JsonTypeError("cannot convert a non-finite number to an integer")
        return int(data)
    return data


def _to_float(data: Any) -> float:
    _require_number(data)
    return float(data)


def _to_str(data: Any) -> str:
    if not isinstance(data, str):
        raise JsonTypeError(f"type must be string, but is {_kind(data)}")
    return data


def _to_bool(data: Any) -> bool:
    if not isinstance(data, bool):
        raise JsonTypeError(f"type must be boolean, but is {_kind(data)}")
    return data


def _to_path(data: Any) -> Path:
    text = _to_str(data)
    return Path(os.path.normpath(text)) if text else Path()


def _to_duration(unit: TimeUnit, data: Any) -> timedelta:
    return unit.value * _to_int(data)


_CONVERTERS: Dict[Hashable, Converter] = {
    int: _to_int,
    float: _to_float,
    str: _to_str,
    bool: _to_bool,
    Path: _to_path,
}
_CONVERTERS.update({unit: functools.partial(_to_duration, unit) for unit in TimeUnit})


def register_converter(target: Hashable, converter: Converter) -> None:
    """Make ``convert_json(data, target)`` use ``converter(data)``."""
    _CONVERTERS[target] = converter


def converter_for(target: Any) -> Optional[Converter]:
    """The converter registered for ``target``, or None."""
    try:
        return _CONVERTERS.get(target)
    except TypeError:
        return None


def convert_json(data: Any, target: Any) -> Any:
    """Convert a decoded JSON value to ``target`` (a type or a TimeUnit).

    Raises JsonTypeError when the value has the wrong JSON type, and
    TypeError when no converter is registered for ``target``.
    """
    converter = converter_for(target)
    if converter is None:
        raise TypeError(f"No JSON converter registered for {target!r}")
    return converter(data)