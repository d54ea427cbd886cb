"""Arithmetic in the BLS12-381 scalar field: elements, roots, bits and hashing to the field."""

__version__ = "0.1.0"
__all__ = ["limbs", "scalar", "roots", "bits", "okm"]