"""Reading of keys from a decoded JSON object, with conversion and defaults."""

from __future__ import annotations

from typing import Any, Callable, Tuple

from npputils.jsonconv import converter_for

__all__ = ["JsonReader"]


class JsonReader:
    """Reads keys of a JSON object, converting each value on the way.

    ``convert`` is either a target registered with
    :func:`npputils.jsonconv.register_converter` (``int``, ``str``, ...)
    or a callable taking the raw JSON value.
    """

    def __init__(self, data: Any) -> None:
        self._data = data

    @property
    def data(self) -> Any:
        return self._data

    def _lookup(self, key: str) -> Tuple[bool, Any]:
        if isinstance(self._data, dict) and key in self._data:
            return True, self._data[key]
        return False, None

    @staticmethod
    def _convert(value: Any, convert: Any) -> Any:
        converter = converter_for(convert)
        if converter is not None:
            return converter(value)
        if callable(convert):
            return convert(value)
        raise TypeError(f"No JSON converter registered for {convert!r}")

    def read(self, key: str, convert: Any) -> Any:
        """The converted value of ``key``; raises KeyError if it is missing."""
        found, value = self._lookup(key)
        if not found:
            raise KeyError(f"Key {key} not found")
        return self._convert(value, convert)

    def read_opt(self, key: str, convert: Any, default: Any = None) -> Any:
        """The converted value of ``key``, or the default if it is missing.

        A callable default is called to provide the value.
        """
        found, value = self._lookup(key)
        if not found:
            return default() if callable(default) else default
        return self._convert(value, convert)

    def recurse(self, key: str, recursor: Callable[["JsonReader"], Any]) -> Any:
        """Call ``recursor`` with a reader over the value of ``key``."""
        found, value = self._lookup(key)
        if not found:
            raise KeyError(f"Key {key} not found")
        return recursor(JsonReader(value))

    def recurse_opt(self, key: str, recursor: Callable[["JsonReader"], Any]) -> Any:
        """Like :meth:`recurse`, but return None if ``key`` is missing."""
        found, value = self._lookup(key)
        if not found:
            return None
        return recursor(JsonReader(value))