"""Comparison and selection helpers on unsigned 32-bit integers."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF


def _u32(value: int) -> int:
    if not 0 <= value <= _UINT32_MASK:
        raise ValueError(f"value out of 32-bit range: {value}")
    return value


def _i32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _sign_bit_clear(diff: int) -> int:
    # ^(diff >> 31) & 1 on a signed 32-bit value
    return (~(_i32(diff) >> 31)) & 1


def branchless_greater(a: int, b: int) -> int:
    """1 if a > b (for differences below 2**31), else 0."""
    return _sign_bit_clear(_u32(a) - _u32(b) - 1)


def branchless_greater_equal(a: int, b: int) -> int:
    return _sign_bit_clear(_u32(a) - _u32(b))


def branchless_less(a: int, b: int) -> int:
    return _sign_bit_clear(_u32(b) - _u32(a) - 1)


def branchless_less_equal(a: int, b: int) -> int:
    return _sign_bit_clear(_u32(b) - _u32(a))


def branchless_equal(a: int, b: int) -> int:
    diff = _u32(a) ^ _u32(b)
    return ((~diff & (diff - 1)) & _UINT32_MASK) >> 31


def branchless_min(a: int, b: int) -> int:
    mask = (_i32(_u32(a) - _u32(b)) >> 31) & _UINT32_MASK
    return (a & mask) | (b & ~mask & _UINT32_MASK)


def branchless_max(a: int, b: int) -> int:
    mask = (_i32(_u32(a) - _u32(b)) >> 31) & _UINT32_MASK
    return (b & mask) | (a & ~mask & _UINT32_MASK)


def branchless_select(condition: int, if_true: int, if_false: int) -> int:
    """``if_true`` when the low bit of ``condition`` is set, else ``if_false``."""
    mask = (-(_u32(condition) & 1)) & _UINT32_MASK
    return (_u32(if_true) & mask) | (_u32(if_false) & ~mask & _UINT32_MASK)


def branchless_and(a: int, b: int) -> int:
    return _u32(a) & _u32(b)


def branchless_or(a: int, b: int) -> int:
    return _u32(a) | _u32(b)


def branchless_not(a: int) -> int:
    return ~_u32(a) & _UINT32_MASK


def branchless_xor(a: int, b: int) -> int:
    return _u32(a) ^ _u32(b)