"""Multi-precision helpers on 64-bit limbs and Montgomery reduction modulo q.

The scalar field modulus is
q = 0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001.
Field elements are kept in Montgomery form, a * 2^256 mod q.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "LIMB_BITS",
    "MASK64",
    "LIMB_COUNT",
    "MODULUS",
    "MODULUS_BITS",
    "INV",
    "R",
    "R2",
    "R3",
    "adc",
    "sbb",
    "mac",
    "to_limbs",
    "from_limbs",
    "montgomery_reduce",
]

LIMB_BITS = 64
MASK64 = (1 << LIMB_BITS) - 1
LIMB_COUNT = 4

MODULUS = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001
"""The order q of the scalar field."""

MODULUS_BITS = 255

INV = 0xFFFF_FFFE_FFFF_FFFF
"""-(q^-1 mod 2^64) mod 2^64."""

_RADIX = 1 << (LIMB_BITS * LIMB_COUNT)

R = _RADIX % MODULUS
"""2^256 mod q, the Montgomery form of one."""

R2 = (R * R) % MODULUS
"""2^512 mod q."""

R3 = (R2 * R) % MODULUS
"""2^768 mod q."""


def _check_word(name: str, value: int) -> None:
    if not 0 <= value <= MASK64:
        raise ValueError(f"{name} must be a 64-bit unsigned integer, got {value!r}")


def adc(a: int, b: int, carry: int) -> tuple[int, int]:
    """Return (a + b + carry) split into its low word and the carry out."""
    for name, word in (("a", a), ("b", b), ("carry", carry)):
        _check_word(name, word)
    total = a + b + carry
    return total & MASK64, total >> LIMB_BITS


def sbb(a: int, b: int, borrow: int) -> tuple[int, int]:
    """Return a - (b + borrow_bit) as (low word, new borrow).

    The incoming borrow counts only through its top bit; the outgoing borrow
    is 0xffff_ffff_ffff_ffff when the subtraction underflowed and 0 otherwise.
    """
    for name, word in (("a", a), ("b", b), ("borrow", borrow)):
        _check_word(name, word)
    diff = (a - (b + (borrow >> (LIMB_BITS - 1)))) % (1 << (2 * LIMB_BITS))
    return diff & MASK64, diff >> LIMB_BITS


def mac(a: int, b: int, c: int, carry: int) -> tuple[int, int]:
    """Return a + b * c + carry split into its low word and the carry out."""
    for name, word in (("a", a), ("b", b), ("c", c), ("carry", carry)):
        _check_word(name, word)
    total = a + b * c + carry
    return total & MASK64, total >> LIMB_BITS


def to_limbs(value: int, count: int) -> tuple[int, ...]:
    """Split a non-negative integer into `count` little-endian 64-bit limbs."""
    if count < 1:
        raise ValueError("count must be at least 1")
    if value < 0:
        raise ValueError("value must be non-negative")
    if value >> (LIMB_BITS * count):
        raise ValueError(f"value does not fit in {count} limbs")
    return tuple((value >> (LIMB_BITS * i)) & MASK64 for i in range(count))


def from_limbs(limbs: Iterable[int]) -> int:
    """Join little-endian 64-bit limbs into one integer."""
    value = 0
    for position, limb in enumerate(limbs):
        _check_word(f"limb {position}", limb)
        value |= limb << (LIMB_BITS * position)
    return value


def montgomery_reduce(value: int) -> int:
    """Return value * 2^-256 mod q, fully reduced.

    The input must lie in [0, q * 2^256), which covers every product of two
    reduced field elements.
    """
    if not 0 <= value < MODULUS * _RADIX:
        raise ValueError("value must lie in [0, q * 2^256)")
    for _ in range(LIMB_COUNT):
        k = ((value & MASK64) * INV) & MASK64
        value = (value + k * MODULUS) >> LIMB_BITS
    return value - MODULUS if value >= MODULUS else value