"""Turning output keying material from message expansion into a scalar."""

from __future__ import annotations

from bls_scalar.scalar import Scalar

__all__ = ["OKM_LENGTH", "from_okm"]

OKM_LENGTH = 48
"""Bytes per scalar: ceil((255 + 128) / 8)."""


def from_okm(okm: bytes) -> Scalar:
    """Read 48 bytes as a big-endian integer and reduce it modulo q."""
    okm = bytes(okm)
    if len(okm) != OKM_LENGTH:
        raise ValueError(f"expected {OKM_LENGTH} bytes, got {len(okm)}")
    value = int.from_bytes(okm, "big")
    return Scalar.from_bytes_wide(value.to_bytes(64, "little"))