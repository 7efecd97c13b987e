"""RGB, RGBA, HSL and HSV colours, with parsing, formatting and conversions."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

__all__ = [
    "RGB",
    "RGBA",
    "HSL",
    "HSV",
    "rgb_to_rgba",
    "rgba_to_rgb",
    "rgb_to_hsl",
    "rgb_to_hsv",
    "hsl_to_rgb",
    "hsv_to_rgb",
    "hsl_to_hsv",
    "hsv_to_hsl",
]


def _hex_value(char: str) -> int:
    if char not in string.hexdigits:
        raise ValueError("Invalid hex character in RGBA string")
    return int(char, 16)


def _strip_hash(text: str) -> str:
    return text[1:] if text.startswith("#") else text


def _parse_bytes(digits: str) -> list[int]:
    return [
        (_hex_value(high) << 4) + _hex_value(low)
        for high, low in zip(digits[::2], digits[1::2])
    ]


@dataclass(frozen=True)
class RGB:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    @classmethod
    def parse(cls, text: str) -> RGB:
        """Parse ``#rrggbb`` or ``rrggbb`` (hex digits in either case)."""
        digits = _strip_hash(text)
        if len(digits) != 6:
            raise ValueError("Bad RGB string length")
        return cls(*_parse_bytes(digits))

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError("invalid RGB colour format")
        return str(self)


@dataclass(frozen=True)
class RGBA:
    """An 8-bit-per-channel RGB colour with an alpha channel."""

    r: int
    g: int
    b: int
    a: int

    @classmethod
    def parse(cls, text: str) -> RGBA:
        """Parse ``#rrggbb[aa]``; the alpha defaults to 0xff."""
        digits = _strip_hash(text)
        if len(digits) not in (6, 8):
            raise ValueError("Bad RGBA string length")
        channels = _parse_bytes(digits)
        if len(channels) == 3:
            channels.append(0xFF)
        return cls(*channels)

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def __format__(self, spec: str) -> str:
        if spec:
            raise ValueError("invalid RGBA colour format")
        return str(self)


@dataclass(frozen=True)
class HSL:
    """Hue (degrees), saturation and lightness."""

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class HSV:
    """Hue (degrees), saturation and value."""

    h: float
    s: float
    v: float


def _ratio(num: float, den: float) -> float:
    if den == 0:
        if num == 0:
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _round_half_away(x: float) -> int:
    if x >= 0:
        return math.floor(x + 0.5)
    return -math.floor(-x + 0.5)


@dataclass(frozen=True)
class _HueBase:
    min: float
    max: float
    chroma: float
    hue: float


def _hue_base(col: RGB) -> _HueBase:
    low = min(col.r, col.g, col.b)
    high = max(col.r, col.g, col.b)
    chroma = float(high - low)
    hue = 0.0
    if chroma != 0:
        if high == col.r:
            hue = math.fmod((col.g - col.b) / chroma, 6)
        elif high == col.g:
            hue = (col.b - col.r) / chroma + 2.0
        else:
            hue = (col.r - col.g) / chroma + 4.0
    return _HueBase(min=low / 255.0, max=high / 255.0, chroma=chroma, hue=hue * 60.0)


def _partial_rgb(hue: float, chroma: float) -> tuple[float, float, float]:
    h = hue / 60
    x = chroma * (1 - abs(math.fmod(h, 2) - 1))
    if h < 1:
        return chroma, x, 0.0
    if h < 2:
        return x, chroma, 0.0
    if h < 3:
        return 0.0, chroma, x
    if h < 4:
        return 0.0, x, chroma
    if h < 5:
        return x, 0.0, chroma
    return chroma, 0.0, x


def _rgb_from_cylindrical(hue: float, chroma: float, low: float) -> RGB:
    r, g, b = (
        _round_half_away((channel + low) * 255.0) for channel in _partial_rgb(hue, chroma)
    )
    return RGB(r, g, b)


def rgb_to_rgba(col: RGB) -> RGBA:
    """Add a fully opaque alpha channel."""
    return RGBA(col.r, col.g, col.b, 255)


def rgba_to_rgb(col: RGBA) -> RGB:
    """Drop the alpha channel."""
    return RGB(col.r, col.g, col.b)


def rgb_to_hsl(col: RGB) -> HSL:
    base = _hue_base(col)
    lightness = (base.min + base.max) / 2.0
    saturation = _ratio(base.chroma, 1 - abs(2.0 * lightness - 1.0))
    return HSL(h=base.hue, s=saturation, l=lightness)


def rgb_to_hsv(col: RGB) -> HSV:
    base = _hue_base(col)
    return HSV(h=base.hue, s=_ratio(base.chroma, base.max), v=base.max)


def hsl_to_rgb(col: HSL) -> RGB:
    chroma = (1.0 - abs(2 * col.l - 1)) * col.s
    return _rgb_from_cylindrical(col.h, chroma, col.l - chroma / 2)


def hsv_to_rgb(col: HSV) -> RGB:
    chroma = col.v * col.s
    return _rgb_from_cylindrical(col.h, chroma, col.v - chroma)


def hsl_to_hsv(col: HSL) -> HSV:
    v = col.l + col.s * min(col.l, 1.0 - col.l)
    s = 0.0 if v == 0 else 2.0 * (1.0 - col.l / v)
    return HSV(h=col.h, s=s, v=v)


def hsv_to_hsl(col: HSV) -> HSL:
    lightness = col.v * (1.0 - col.s / 2.0)
    if lightness in (0, 1):
        s = 0.0
    else:
        s = (col.v - lightness) / min(lightness, 1.0 - lightness)
    return HSL(h=col.h, s=s, l=lightness)