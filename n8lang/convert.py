"""Number conversions used by the language: byte packing and literal parsing."""

from __future__ import annotations

import math
import re
import struct

_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL_FLOAT = re.compile(r"[+-]?(?:inf(?:inity)?|nan)", re.IGNORECASE)
_PREFIXES = {"0b": 2, "0t": 3, "0c": 8, "0x": 16}


def to_double(data: bytes) -> float:
    """Decode eight big-endian bytes as an IEEE 754 double."""
    if data is None or len(data) != 8:
        raise ValueError("Byte array must be non-null and have length 8")
    return struct.unpack(">d", bytes(data))[0]


def to_bytes(number: float) -> bytes:
    """Encode a number as eight big-endian IEEE 754 bytes."""
    return struct.pack(">d", float(number))


def _parse_int(text: str, base: int) -> float:
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]

    valid = _DIGITS[:base]
    digits = ""
    for ch in stripped:
        if ch.lower() not in valid:
            break
        digits += ch

    if not digits:
        raise ValueError(f"Invalid base-{base} number: {text!r}")

    value = sign * int(digits, base)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"Number out of range: {text!r}")
    return float(value)


def _parse_decimal(text: str) -> float:
    stripped = text.lstrip()
    special = _SPECIAL_FLOAT.match(stripped)
    if special:
        return float(special.group(0))

    match = _FLOAT_PREFIX.match(stripped)
    if not match:
        raise ValueError(f"Invalid number: {text!r}")

    value = float(match.group(0))
    if math.isinf(value):
        raise OverflowError(f"Number out of range: {text!r}")
    return value


def translate_digit(image: str) -> float:
    """Turn a numeric literal (binary, base 3, octal, hex or decimal) into a float."""
    if not image:
        raise ValueError("Input string is null or empty")

    base = _PREFIXES.get(image[:2])
    if base is not None:
        return _parse_int(image[2:], base)
    return _parse_decimal(image)