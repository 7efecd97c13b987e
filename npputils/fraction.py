"""Exact fractions of integers, always kept in lowest terms."""

from __future__ import annotations

import math
from typing import Union

__all__ = ["Fraction"]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Fraction:
    """A reduced fraction with a positive denominator."""

    __slots__ = ("_num", "_den")

    def __init__(self, num: int, den: int = 1) -> None:
        if den == 0:
            raise ZeroDivisionError("Fraction denominator cannot be zero")
        if num == 0:
            self._num, self._den = 0, 1
            return
        gcd = math.gcd(num, den)
        num, den = num // gcd, den // gcd
        if den < 0:
            num, den = -num, -den
        self._num, self._den = num, den

    @property
    def num(self) -> int:
        return self._num

    @property
    def den(self) -> int:
        return self._den

    def inv(self) -> Fraction:
        """The reciprocal; raises ZeroDivisionError for zero."""
        return Fraction(self._den, self._num)

    def quotient(self) -> int:
        """Integer quotient, truncated towards zero."""
        return _truncating_div(self._num, self._den)

    def compute(self) -> float:
        return self._num / self._den

    def floor(self) -> int:
        return self._num // self._den

    def ceil(self) -> int:
        return -(-self._num // self._den)

    @staticmethod
    def _coerce(value: object) -> Union[Fraction, None]:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int):
            return Fraction(value)
        return None

    def __mul__(self, other: Union[Fraction, int]) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return Fraction(self._num * f._num, self._den * f._den)

    def __truediv__(self, other: Union[Fraction, int]) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return Fraction(self._num * f._den, self._den * f._num)

    def __add__(self, other: Union[Fraction, int]) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        gcd = math.gcd(self._den, f._den)
        den1, den2 = self._den // gcd, f._den // gcd
        return Fraction(self._num * den2 + f._num * den1, self._den * den2)

    def __sub__(self, other: Union[Fraction, int]) -> Fraction:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        gcd = math.gcd(self._den, f._den)
        den1, den2 = self._den // gcd, f._den // gcd
        return Fraction(self._num * den2 - f._num * den1, self._den * den2)

    def __eq__(self, other: object) -> bool:
        f = self._coerce(other)
        if f is None:
            return NotImplemented
        return self._num == f._num and self._den == f._den

    def __hash__(self) -> int:
        return hash((self._num, self._den))

    def __repr__(self) -> str:
        return f"Fraction({self._num}, {self._den})"

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"