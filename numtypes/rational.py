"""Rational numbers over integers."""

from __future__ import annotations

import sys


def _check_int(value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("rational components must be integers")


def _trunc_rem(a: int, b: int) -> int:
    rem = abs(a) % abs(b)
    return -rem if a < 0 else rem


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncated remainder.

    The result may carry a sign; its magnitude is the greatest common divisor.
    """
    _check_int(a)
    _check_int(b)
    while b != 0:
        a, b = b, _trunc_rem(a, b)
    return a


class Rational:
    """A mutable fraction of two integers, simplified after each sum."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, num: int = 0, den: int = 1) -> None:
        _check_int(num)
        _check_int(den)
        self._num = num
        self._den = den

    def num(self) -> int:
        """Return the numerator."""
        return self._num

    def den(self) -> int:
        """Return the denominator."""
        return self._den

    def simplify(self) -> None:
        """Reduce to lowest terms with a non-negative denominator."""
        g = gcd(self._num, self._den)
        if g == 0:
            raise ZeroDivisionError("cannot simplify 0/0")
        self._num //= g
        self._den //= g
        if self._den < 0:
            self._num = -self._num
            self._den = -self._den

    def _copy(self) -> Rational:
        return Rational(self._num, self._den)

    def __iadd__(self, other: object) -> Rational:
        if isinstance(other, Rational):
            a, b = self._num, self._den
            c, d = other._num, other._den
            self._num = a * d + b * c
            self._den = b * d
        elif isinstance(other, int) and not isinstance(other, bool):
            self._num += other * self._den
        else:
            return NotImplemented
        self.simplify()
        return self

    def __add__(self, other: object) -> Rational:
        if not isinstance(other, (Rational, int)) or isinstance(other, bool):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __radd__(self, other: object) -> Rational:
        if isinstance(other, int) and not isinstance(other, bool):
            return self + other
        return NotImplemented

    def __neg__(self) -> Rational:
        return Rational(-self._num, self._den)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self._num * other._den < self._den * other._num

    def __abs__(self) -> Rational:
        if self < Rational(0):
            return -self
        return self._copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            other = Rational(other)
        if not isinstance(other, Rational):
            return NotImplemented
        return self._num * other._den == self._den * other._num

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    def __str__(self) -> str:
        if self._den != 1:
            return f"{self._num}/{self._den}"
        return str(self._num)


def inv(r: Rational) -> Rational:
    """Return the reciprocal of ``r``."""
    return Rational(r.den(), r.num())


def main(argv: list[str] | None = None) -> int:
    """Print a few rational-number sums."""
    del argv
    r1 = Rational(1, 3)
    r2 = Rational(1, 6)
    print(f"{r1} + {r2} = {r1 + r2}")
    r3 = r1 + r2
    print(f"The inverse of {r3} is {inv(r3)}; its opposite is {-r3}")
    print(f"3/4 + 2 = {Rational(3, 4) + 2}")
    print(f"3 + 5/8 = {3 + Rational(5, 8)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())