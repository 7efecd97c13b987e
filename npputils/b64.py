"""Base64 and base64url encoding and decoding with optional padding."""

from __future__ import annotations

from typing import Iterator, Union

__all__ = ["base64_encode", "base64url_encode", "base64_decode", "base64url_decode"]

_COMMON = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
_STANDARD = _COMMON + "+/"
_URLSAFE = _COMMON + "-_"

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _encode(data: BytesLike, padding: bool, alphabet: str) -> str:
    raw = _as_bytes(data)
    out: list[str] = []
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        value = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        chars = [alphabet[(value >> shift) & 0x3F] for shift in (18, 12, 6, 0)]
        used = len(chunk) + 1
        out.append("".join(chars[:used]))
        if padding:
            out.append("=" * (4 - used))
    return "".join(out)


def _sextets(chunk: str, alphabet: str) -> Iterator[int]:
    for char in chunk:
        index = alphabet.find(char)
        if index < 0:
            raise ValueError(f"Bad base64 character: \\x{ord(char):x}")
        yield index


def _decode_chunk(chunk: str, alphabet: str) -> bytes:
    s = list(_sextets(chunk, alphabet))
    out = [((s[0] << 2) | (s[1] >> 4)) & 0xFF]
    if len(s) > 2:
        out.append(((s[1] << 4) | (s[2] >> 2)) & 0xFF)
    if len(s) > 3:
        out.append(((s[2] << 6) | s[3]) & 0xFF)
    return bytes(out)


def _decode(text: str, alphabet: str) -> bytes:
    if len(text) % 4 == 1:
        raise ValueError("Bad base64 encoded string length")
    if len(text) % 4 == 0:
        if text.endswith("=="):
            text = text[:-2]
        elif text.endswith("="):
            text = text[:-1]
    return b"".join(
        _decode_chunk(text[start:start + 4], alphabet) for start in range(0, len(text), 4)
    )


def base64_encode(data: BytesLike, padding: bool = True) -> str:
    """Encode with the standard alphabet (``+`` and ``/``)."""
    return _encode(data, padding, _STANDARD)


def base64url_encode(data: BytesLike, padding: bool = True) -> str:
    """Encode with the URL-safe alphabet (``-`` and ``_``)."""
    return _encode(data, padding, _URLSAFE)


def base64_decode(text: str) -> bytes:
    """Decode standard base64; padding is optional, unused trailing bits are ignored."""
    return _decode(text, _STANDARD)


def base64url_decode(text: str) -> bytes:
    """Decode URL-safe base64; padding is optional, unused trailing bits are ignored."""
    return _decode(text, _URLSAFE)