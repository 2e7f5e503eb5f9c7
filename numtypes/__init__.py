"""Small numeric and container types: complex numbers, rationals and a bounded stack."""

__version__ = "0.1.0"
__all__ = ["complexnum", "rational", "stack"]