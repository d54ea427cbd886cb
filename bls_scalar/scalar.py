"""Elements of the BLS12-381 scalar field, held in Montgomery form."""

from __future__ import annotations

import functools
import os
from collections.abc import Iterable, Sequence
from typing import Protocol, Union

from bls_scalar.limbs import (
    LIMB_BITS,
    LIMB_COUNT,
    MASK64,
    MODULUS,
    R,
    R2,
    R3,
    from_limbs,
    montgomery_reduce,
    to_limbs,
)

__all__ = [
    "Scalar",
    "MODULUS_HEX",
    "TWO_ADACITY",
    "GENERATOR",
    "ROOT_OF_UNITY",
    "ROOT_OF_UNITY_INV",
    "TWO_INV",
    "DELTA",
]

MODULUS_HEX = "0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001"

TWO_ADACITY = 32
"""The largest s with 2^s dividing q - 1."""

SIZE = 32
WIDE_SIZE = 64

_WIDTH = LIMB_BITS * LIMB_COUNT
_MASK256 = (1 << _WIDTH) - 1

Exponent = Union[int, Sequence[int]]


class _ByteSource(Protocol):
    def randbytes(self, n: int) -> bytes: ...


def _sub(a: int, b: int) -> int:
    diff = a - b
    if diff < 0:
        diff = (diff + MODULUS) & _MASK256
    return diff


def _add(a: int, b: int) -> int:
    return _sub((a + b) & _MASK256, MODULUS)


def _mul(a: int, b: int) -> int:
    return montgomery_reduce(a * b)


def _exponent_value(exponent: Exponent) -> int:
    if isinstance(exponent, int):
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        to_limbs(exponent, LIMB_COUNT)
        return exponent
    limbs = tuple(exponent)
    if len(limbs) != LIMB_COUNT:
        raise ValueError(f"exponent must have {LIMB_COUNT} limbs")
    return from_limbs(limbs)


@functools.total_ordering
class Scalar:
    """An element of the scalar field F_q.

    The constructor takes the internal Montgomery representation (a * 2^256
    mod q) as four little-endian 64-bit limbs; use ``from_raw``,
    ``from_int`` or ``from_bytes`` to build a scalar from its value.
    """

    __slots__ = ("_value",)

    def __init__(self, limbs: Iterable[int]) -> None:
        limbs = tuple(limbs)
        if len(limbs) != LIMB_COUNT:
            raise ValueError(f"a scalar has {LIMB_COUNT} limbs, got {len(limbs)}")
        self._value = from_limbs(limbs)

    @classmethod
    def _from_montgomery(cls, value: int) -> Scalar:
        scalar = cls.__new__(cls)
        scalar._value = value
        return scalar

    @property
    def _canonical(self) -> int:
        return montgomery_reduce(self._value)

    # Construction

    @classmethod
    def zero(cls) -> Scalar:
        """The additive identity."""
        return cls._from_montgomery(0)

    @classmethod
    def one(cls) -> Scalar:
        """The multiplicative identity."""
        return cls._from_montgomery(R)

    @classmethod
    def from_int(cls, value: int) -> Scalar:
        """Build a scalar from an unsigned 64-bit integer."""
        if not 0 <= value <= MASK64:
            raise ValueError("value must be an unsigned 64-bit integer")
        return cls._from_montgomery(_mul(value, R2))

    @classmethod
    def from_raw(cls, limbs: Iterable[int]) -> Scalar:
        """Build a scalar congruent to the little-endian 4-limb integer."""
        limbs = tuple(limbs)
        if len(limbs) != LIMB_COUNT:
            raise ValueError(f"expected {LIMB_COUNT} limbs, got {len(limbs)}")
        return cls._from_montgomery(_mul(from_limbs(limbs), R2))

    @classmethod
    def from_bytes(cls, data: bytes) -> Scalar:
        """Parse 32 little-endian bytes; raise ValueError if not canonical."""
        data = bytes(data)
        if len(data) != SIZE:
            raise ValueError(f"a scalar encoding is {SIZE} bytes, got {len(data)}")
        value = int.from_bytes(data, "little")
        if value >= MODULUS:
            raise ValueError("scalar encoding is not canonical")
        return cls._from_montgomery(_mul(value, R2))

    @classmethod
    def from_bytes_wide(cls, data: bytes) -> Scalar:
        """Reduce a 64-byte little-endian integer modulo q."""
        data = bytes(data)
        if len(data) != WIDE_SIZE:
            raise ValueError(f"expected {WIDE_SIZE} bytes, got {len(data)}")
        return cls.from_u512(to_limbs(int.from_bytes(data, "little"), 2 * LIMB_COUNT))

    @classmethod
    def from_u512(cls, limbs: Iterable[int]) -> Scalar:
        """Reduce a 512-bit integer, given as 8 little-endian limbs, modulo q."""
        limbs = tuple(limbs)
        if len(limbs) != 2 * LIMB_COUNT:
            raise ValueError(f"expected {2 * LIMB_COUNT} limbs, got {len(limbs)}")
        low = from_limbs(limbs[:LIMB_COUNT])
        high = from_limbs(limbs[LIMB_COUNT:])
        return cls._from_montgomery(_add(_mul(low, R2), _mul(high, R3)))

    @classmethod
    def random(cls, rng: _ByteSource | None = None) -> Scalar:
        """Draw 64 random bytes from ``rng`` (or the OS) and reduce them."""
        data = os.urandom(WIDE_SIZE) if rng is None else rng.randbytes(WIDE_SIZE)
        return cls.from_bytes_wide(data)

    # Representation

    def to_bytes(self) -> bytes:
        """The canonical 32-byte little-endian encoding."""
        return self._canonical.to_bytes(SIZE, "little")

    def internal_repr(self) -> tuple[int, ...]:
        """The Montgomery-form limbs, little-endian."""
        return to_limbs(self._value, LIMB_COUNT)

    def reduce(self) -> Scalar:
        """A scalar whose internal limbs are this scalar's canonical value."""
        return Scalar._from_montgomery(self._canonical)

    # Field operations

    def square(self) -> Scalar:
        return Scalar._from_montgomery(_mul(self._value, self._value))

    def double(self) -> Scalar:
        return Scalar._from_montgomery(_add(self._value, self._value))

    def pow(self, exponent: Exponent) -> Scalar:
        """Raise to an exponent given as an int or as 4 little-endian limbs."""
        power = pow(self._canonical, _exponent_value(exponent), MODULUS)
        return Scalar._from_montgomery(power * R % MODULUS)

    def pow_vartime(self, exponent: Exponent) -> Scalar:
        """Same result as ``pow``; kept for callers that use this name."""
        return self.pow(exponent)

    def invert(self) -> Scalar:
        """The multiplicative inverse; raise ZeroDivisionError for zero."""
        value = self._canonical
        if value == 0:
            raise ZeroDivisionError("zero has no inverse in the scalar field")
        return Scalar._from_montgomery(pow(value, -1, MODULUS) * R % MODULUS)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == R

    def is_odd(self) -> bool:
        return bool(self._canonical & 1)

    # Operators

    def __add__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar._from_montgomery(_add(self._value, other._value))

    def __sub__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar._from_montgomery(_sub(self._value, other._value))

    def __mul__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar._from_montgomery(_mul(self._value, other._value))

    def __neg__(self) -> Scalar:
        if self._value == 0:
            return Scalar.zero()
        return Scalar._from_montgomery((MODULUS - self._value) & _MASK256)

    def __xor__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar._from_montgomery(_mul(self._canonical ^ other._canonical, R2))

    def __and__(self, other: object) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar._from_montgomery(_mul(self._canonical & other._canonical, R2))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return "0x" + self.to_bytes()[::-1].hex()

    def __str__(self) -> str:
        return repr(self)

    def __bytes__(self) -> bytes:
        return self.to_bytes()


GENERATOR = Scalar(
    [0x0000_000E_FFFF_FFF1, 0x17E3_63D3_0018_9C0F, 0xFF9C_5787_6F84_57B0, 0x3513_3220_8FC5_A8C4]
)
"""7, a generator of the multiplicative group and a quadratic non-residue."""

ROOT_OF_UNITY = Scalar(
    [0xB9B5_8D8C_5F0E_466A, 0x5B1B_4C80_1819_D7EC, 0x0AF5_3AE3_52A3_1E64, 0x5BF3_ADDA_19E9_B27B]
)
"""GENERATOR^t, a primitive 2^32-th root of unity."""

ROOT_OF_UNITY_INV = Scalar(
    [0x4256_481A_DCF3_219A, 0x45F3_7B7F_96B6_CAD3, 0xF9C3_F1D7_5F7A_3B27, 0x2D2F_C049_658A_FD43]
)

TWO_INV = Scalar(
    [0x0000_0000_FFFF_FFFF, 0xAC42_5BFD_0001_A401, 0xCCC6_27F7_F65E_27FA, 0x0C12_58AC_D662_82B7]
)

DELTA = Scalar(
    [0x70E3_10D3_D146_F96A, 0x4B64_C089_19E2_99E6, 0x51E1_1418_6A8B_970D, 0x6185_D066_27C0_67CB]
)
"""GENERATOR^(2^32), a t-th root of unity."""