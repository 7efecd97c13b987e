"""Complex numbers with explicit division-by-zero errors."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Union

from npputils.vec2 import Vec2

__all__ = ["Complex"]


def _fmt(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


@dataclass(eq=False)
class Complex:
    """A complex number ``re + i*im``."""

    re: float
    im: float = 0.0

    @classmethod
    def polar(cls, modulus: float, argument: float) -> Complex:
        """Build a complex number from its modulus and argument."""
        return cls(modulus * math.cos(argument), modulus * math.sin(argument))

    def modulus(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    def argument(self) -> float:
        return math.atan2(self.im, self.re)

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def vec(self) -> Vec2:
        """The point ``(re, im)`` as a real vector."""
        return Vec2(self.re, self.im)

    @staticmethod
    def _coerce(value: object) -> Union[Complex, None]:
        if isinstance(value, Complex):
            return value
        if isinstance(value, numbers.Real):
            return Complex(float(value), 0.0)
        return None

    def __add__(self, other: Union[Complex, float]) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(self.re + c.re, self.im + c.im)

    def __sub__(self, other: Union[Complex, float]) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(self.re - c.re, self.im - c.im)

    def __mul__(self, other: Union[Complex, float]) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return Complex(
            self.re * c.re - self.im * c.im,
            self.re * c.im + self.im * c.re,
        )

    def __truediv__(self, other: Union[Complex, float]) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        if c.im == 0:
            if c.re == 0:
                raise ZeroDivisionError("complex division by zero")
            return Complex(self.re / c.re, self.im / c.re)
        den = c.re * c.re + c.im * c.im
        if den == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex(
            (self.re * c.re + self.im * c.im) / den,
            (self.im * c.re - self.re * c.im) / den,
        )

    def __radd__(self, other: float) -> Complex:
        return self.__add__(other)

    def __rsub__(self, other: float) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c - self

    def __rmul__(self, other: float) -> Complex:
        return self.__mul__(other)

    def __rtruediv__(self, other: float) -> Complex:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return c / self

    def __eq__(self, other: object) -> bool:
        c = self._coerce(other)
        if c is None:
            return NotImplemented
        return self.re == c.re and self.im == c.im

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.im == 0:
            return _fmt(self.re)
        if self.re == 0:
            return f"{_fmt(self.im)}i"
        if self.im < 0:
            return f"{_fmt(self.re)} - {_fmt(-self.im)}i"
        return f"{_fmt(self.re)} + {_fmt(self.im)}i"