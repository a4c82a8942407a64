"""Deterministic string-keyed PRNG.

``seeded_rand(seed)(tag)`` hashes ``seed + tag`` and runs one xorshift32
step over the result. The algorithm is fixed bit-for-bit so that any
implementation, in any language, reproduces the same floats:

1. For each UTF-16 code unit ``c`` of the combined string,
   ``h = int32(h * 31 + c)``. This is the classic ``(h << 5) - h + c``
   string hash wrapped to a signed 32-bit integer.
2. ``x = abs(h)``, giving a value in ``[0, 2**31]``.
3. On the unsigned 32-bit pattern of ``x``:
   ``x ^= x << 13``, ``x ^= x >> 17`` (logical), ``x ^= x << 5``.
4. Return ``x / 2**32``, which lies in ``[0, 1)``.
"""
from __future__ import annotations

from typing import Callable

HASH_MULTIPLIER = 31
XORSHIFT_A = 13
XORSHIFT_B = 17
XORSHIFT_C = 5

UINT32_MASK = 0xFFFFFFFF
UINT32_RANGE = 0x100000000
_INT32_SIGN = 0x80000000


def _utf16_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]


def _to_int32(value: int) -> int:
    value &= UINT32_MASK
    return value - UINT32_RANGE if value & _INT32_SIGN else value


def hash_string(text: str) -> int:
    """Signed 32-bit ``h * 31 + c`` hash over UTF-16 code units."""
    h = 0
    for unit in _utf16_units(text):
        h = _to_int32(h * HASH_MULTIPLIER + unit)
    return h


def xorshift32(x: int) -> int:
    x &= UINT32_MASK
    x ^= (x << XORSHIFT_A) & UINT32_MASK
    x ^= x >> XORSHIFT_B
    x ^= (x << XORSHIFT_C) & UINT32_MASK
    return x


def seeded_rand(seed: str) -> Callable[[str], float]:
    """Return ``rand(tag) -> float in [0, 1)``, pure in ``(seed, tag)``."""

    def rand(tag: str) -> float:
        return xorshift32(abs(hash_string(seed + tag))) / UINT32_RANGE

    return rand
