"""Bit-level helpers for scalars: bit decomposition, powers of two, sampling."""

from __future__ import annotations

import os
from typing import Protocol

from bls_scalar.limbs import LIMB_COUNT, MASK64, from_limbs, to_limbs
from bls_scalar.scalar import Scalar

__all__ = ["to_bits", "pow_of_2", "uni_random", "shift_right"]

_BITS = 256


class _ByteSource(Protocol):
    def randbytes(self, n: int) -> bytes: ...


def to_bits(scalar: Scalar) -> tuple[int, ...]:
    """The 256 bits of the canonical value, least significant first."""
    value = int.from_bytes(scalar.to_bytes(), "little")
    return tuple((value >> i) & 1 for i in range(_BITS))


def pow_of_2(exponent: int) -> Scalar:
    """Return 2^exponent in the field, for an unsigned 64-bit exponent."""
    if not 0 <= exponent <= MASK64:
        raise ValueError("exponent must be an unsigned 64-bit integer")
    return Scalar.from_int(2).pow(exponent)


def uni_random(rng: _ByteSource | None = None) -> Scalar:
    """A uniformly distributed scalar, drawn by rejection sampling."""
    while True:
        data = bytearray(os.urandom(32) if rng is None else rng.randbytes(32))
        data[-1] &= 0x7F
        try:
            return Scalar.from_bytes(bytes(data))
        except ValueError:
            continue


def shift_right(scalar: Scalar, n: int) -> Scalar:
    """Shift the internal limbs right by ``n`` bits; 256 or more gives zero."""
    if n < 0:
        raise ValueError("shift amount must be non-negative")
    if n >= _BITS:
        return Scalar.zero()
    value = from_limbs(scalar.internal_repr()) >> n
    return Scalar(to_limbs(value, LIMB_COUNT))