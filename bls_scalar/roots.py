"""Square roots in the scalar field, found with the Tonelli-Shanks method."""

from __future__ import annotations

from bls_scalar.limbs import MODULUS
from bls_scalar.scalar import ROOT_OF_UNITY, TWO_ADACITY, Scalar

__all__ = ["sqrt", "is_square"]

_T = (MODULUS - 1) >> TWO_ADACITY
"""The odd part t of q - 1 = t * 2^s."""

_EULER = (MODULUS - 1) // 2


def _value(scalar: Scalar) -> int:
    return int.from_bytes(scalar.to_bytes(), "little")


def _scalar(value: int) -> Scalar:
    return Scalar.from_bytes(value.to_bytes(32, "little"))


def is_square(scalar: Scalar) -> bool:
    """Whether the scalar is a quadratic residue (zero counts as one)."""
    value = _value(scalar)
    return value == 0 or pow(value, _EULER, MODULUS) == 1


def sqrt(scalar: Scalar) -> Scalar:
    """Return a square root of ``scalar``; raise ValueError if it has none."""
    a = _value(scalar)
    if a == 0:
        return Scalar.zero()
    if pow(a, _EULER, MODULUS) != 1:
        raise ValueError("the scalar is not a square")

    m = TWO_ADACITY
    c = _value(ROOT_OF_UNITY)
    x = pow(a, (_T + 1) // 2, MODULUS)
    b = pow(a, _T, MODULUS)
    while b != 1:
        i = 0
        probe = b
        while probe != 1:
            probe = probe * probe % MODULUS
            i += 1
        step = pow(c, 1 << (m - i - 1), MODULUS)
        x = x * step % MODULUS
        c = step * step % MODULUS
        b = b * c % MODULUS
        m = i
    return _scalar(x)