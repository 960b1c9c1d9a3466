"""Element-wise arithmetic on equally sized lists of numbers."""

from __future__ import annotations

import math
from typing import Callable, List, Sequence

_INT64_SPAN = 2 ** 64
_INT64_HALF = 2 ** 63


def _pairwise(
    left: Sequence[float],
    right: Sequence[float],
    op: Callable[[float, float], float],
) -> List[float]:
    if len(left) != len(right):
        raise ValueError("Vectors must be of the same size.")
    return [float(op(a, b)) for a, b in zip(left, right)]


def _wrap64(value: int) -> int:
    return (value + _INT64_HALF) % _INT64_SPAN - _INT64_HALF


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _remainder(a: float, b: float) -> int:
    dividend, divisor = int(a), int(b)
    if divisor == 0:
        raise ZeroDivisionError("integer remainder by zero")
    result = abs(dividend) % abs(divisor)
    return -result if dividend < 0 else result


def _shift_left(a: float, b: float) -> int:
    count = int(b)
    if count < 0:
        raise ValueError("negative shift count")
    return _wrap64(int(a) << min(count, 64))


def _shift_right(a: float, b: float) -> int:
    count = int(b)
    if count < 0:
        raise ValueError("negative shift count")
    return int(a) >> count


def add(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise sum."""
    return _pairwise(left, right, lambda a, b: a + b)


def sub(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise difference."""
    return _pairwise(left, right, lambda a, b: a - b)


def div(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise floating division; division by zero gives infinity or NaN."""
    return _pairwise(left, right, _divide)


def mul(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise product."""
    return _pairwise(left, right, lambda a, b: a * b)


def rem(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise integer remainder, truncating toward zero."""
    return _pairwise(left, right, _remainder)


def bitwise_and(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise bitwise AND of the integer parts."""
    return _pairwise(left, right, lambda a, b: int(a) & int(b))


def bitwise_or(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise bitwise OR of the integer parts."""
    return _pairwise(left, right, lambda a, b: int(a) | int(b))


def bitwise_xor(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise bitwise XOR of the integer parts."""
    return _pairwise(left, right, lambda a, b: int(a) ^ int(b))


def shift_left(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise left shift on 64-bit signed integers."""
    return _pairwise(left, right, _shift_left)


def shift_right(left: Sequence[float], right: Sequence[float]) -> List[float]:
    """Element-wise arithmetic right shift of the integer parts."""
    return _pairwise(left, right, _shift_right)


__all__ = [
    "add",
    "sub",
    "div",
    "mul",
    "rem",
    "bitwise_and",
    "bitwise_or",
    "bitwise_xor",
    "shift_left",
    "shift_right",
]