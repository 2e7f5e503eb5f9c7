"""Complex numbers over floating-point components."""

from __future__ import annotations

import sys
from typing import Union

Real = Union[int, float]

_ZERO_DIVISION = "attempting to divide by zero"


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Complex:
    """An immutable complex number with float real and imaginary parts."""

    __slots__ = ("_real", "_imag")

    def __init__(self, real: Real = 0.0, imag: Real = 0.0) -> None:
        if not (_is_real(real) and _is_real(imag)):
            raise TypeError("complex components must be real numbers")
        self._real = float(real)
        self._imag = float(imag)

    def re(self) -> float:
        """Return the real part."""
        return self._real

    def im(self) -> float:
        """Return the imaginary part."""
        return self._imag

    def conj(self) -> Complex:
        """Return the complex conjugate."""
        return Complex(self._real, -self._imag)

    def __add__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            return Complex(self._real + other._real, self._imag + other._imag)
        if _is_real(other):
            return Complex(self._real + other, self._imag)
        return NotImplemented

    def __radd__(self, other: object) -> Complex:
        if _is_real(other):
            return self + other
        return NotImplemented

    def __sub__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            return Complex(self._real - other._real, self._imag - other._imag)
        if _is_real(other):
            return Complex(self._real - other, self._imag)
        return NotImplemented

    def __mul__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            a, b = self._real, self._imag
            c, d = other._real, other._imag
            return Complex(a * c - b * d, a * d + c * b)
        if _is_real(other):
            return Complex(self._real * other, self._imag * other)
        return NotImplemented

    def __rmul__(self, other: object) -> Complex:
        if _is_real(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            a, b = self._real, self._imag
            c, d = other._real, other._imag
            if c == 0 and d == 0:
                raise ZeroDivisionError(_ZERO_DIVISION)
            norm = c * c + d * d
            return Complex((a * c + b * d) / norm, (b * c - a * d) / norm)
        if _is_real(other):
            if other == 0:
                raise ZeroDivisionError(_ZERO_DIVISION)
            return Complex(self._real / other, self._imag / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self._real == other._real and self._imag == other._imag
        if _is_real(other):
            return self._real == other and self._imag == 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._real, self._imag))

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imag!r})"

    def __str__(self) -> str:
        real, imag = self._real, self._imag
        if real == 0 and imag == 0:
            return "0"
        if imag == 0:
            return format(real, "g")
        sign = "+" if imag > 0 else ""
        return f"{real:g}{sign}{imag:g}i"


def main(argv: list[str] | None = None) -> int:
    """Print a tour of the complex-number operations."""
    del argv
    z1 = Complex(1, 1)
    z2 = Complex(-1, 1)
    z3 = Complex(5)
    z4 = Complex()

    lines = [
        ("z1 = ", z1),
        ("z2 = ", z2),
        ("z3 = ", z3),
        ("z4 = ", z4),
        ("re(z1)   = ", format(z1.re(), "g")),
        ("im(z1)   = ", format(z1.im(), "g")),
        ("conj(z1) = ", z1.conj()),
        ("z1\t+\tz2\t=\t", z1 + z2),
        ("z2\t+\tz1\t=\t", z2 + z1),
        ("z1\t+\t5\t=\t", z1 + 5.0),
        (" 5\t+\tz1\t=\t", 5.0 + z1),
        ("z1\t+=\tz2\t=\t", z1 + z2),
        ("z1\t+=\t5\t=\t", z1 + 5.0),
        ("z1\t-\tz2\t=\t", z1 - z2),
        ("z2\t-\tz1\t=\t", z2 - z1),
        ("z1\t-\t5\t=\t", z1 - 5.0),
        ("z1\t-=\tz2\t=\t", z1 - z2),
        ("z1\t-=\t5\t=\t", z1 - 5.0),
        ("z1\t*\tz2\t=\t", z1 * z2),
        ("z2\t*\tz1\t=\t", z2 * z1),
        ("z1\t*\t5\t=\t", z1 * 5.0),
        (" 5\t*\tz1\t=\t", 5.0 * z1),
        ("z1\t*=\tz2\t=\t", z1 * z2),
        ("z1\t*=\t5\t=\t", z1 * 5.0),
        ("z1\t/\tz2\t=\t", z1 / z2),
        ("z2\t/\tz1\t=\t", z2 / z1),
        ("z1\t/\t5\t=\t", z1 / 5.0),
        ("z1\t/=\tz2\t=\t", z1 / z2),
        ("z1\t/=\t5\t=\t", z1 / 5.0),
    ]
    for label, value in lines:
        sys.stdout.write(f"{label}{value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())