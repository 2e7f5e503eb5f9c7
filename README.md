# numtypes

A handful of small value and container types with plain, predictable behaviour:

- `numtypes.complexnum.Complex`: an immutable complex number with float real and imaginary parts.
- `numtypes.rational.Rational`: a mutable fraction of integers that simplifies itself after addition.
- `numtypes.stack.BoundedStack`: a last-in, first-out stack with a fixed capacity, and
  `numtypes.stack.MeteoData`, a small record of a weather reading.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Complex numbers

```python
from numtypes.complexnum import Complex

z1 = Complex(1.0, 1.0)
z2 = Complex(-1.0, 1.0)

print(z1 + z2)      # 0+2i
print(z1 * z2)      # -2
print(z1 / z2)      # 0-1i
print(5.0 * z1)     # 5+5i
print(z1 - 5.0)     # -4+1i
print(z1.conj())    # 1-1i
print(z1.re(), z1.im())   # 1.0 1.0
```

`Complex(real=0.0, imag=0.0)` takes real numbers (ints or floats) and stores
them as floats; other component types raise `TypeError`. A complex number can
be added to, subtracted from, multiplied by and divided by another complex
number or a real number; a real number may also stand on the left of `+` and
`*`. It compares equal to another complex number with the same parts, and to a
real number when its imaginary part is zero.

A number with zero real and imaginary parts prints as `0`, and one with no
imaginary part prints as its real part alone; otherwise both parts are printed,
as in `0+2i` or `1-1i`. Dividing by zero, whether a complex zero or a real
zero, raises `ZeroDivisionError`.

## Rational numbers

```python
from numtypes.rational import Rational, inv, gcd

r1 = Rational(1, 3)
r2 = Rational(1, 6)
r3 = r1 + r2
print(r3)                   # 1/2
print(inv(r3))              # 2
print(-r3)                  # -1/2
print(Rational(3, 4) + 2)   # 11/4
print(3 + Rational(5, 8))   # 29/8
print(abs(Rational(-2, 3))) # 2/3
print(gcd(12, 18))          # 6
```

`Rational(num=0, den=1)` takes integers; other types raise `TypeError`. A
rational is printed as `num/den`, or as just the numerator when the
denominator is 1. Construction does not reduce the fraction; `simplify()`
reduces it in place and moves the sign to the numerator, and every addition
(`+`, `+=`, with a rational or an integer) does so on its result. Simplifying
`0/0` raises `ZeroDivisionError`. Rationals compare with `<`, and with `==`
against other rationals or integers by value. `inv(r)` swaps numerator and
denominator. `gcd(a, b)` runs Euclid's algorithm with a truncated remainder, so
its result may carry a sign.

## Bounded stack

```python
from numtypes.stack import BoundedStack, MeteoData

stack = BoundedStack(capacity=8)
stack.push(MeteoData("Torino", 25.1, 1013.0))
stack.push(MeteoData("Milano", 23.1, 1015.0))
print(stack.pop())   # the Milano reading
print(len(stack), stack.empty(), stack.full())   # 1 False False
```

The capacity defaults to 8 and is available as `stack.capacity`; a negative
capacity raises `ValueError`, a non-integer one `TypeError`. `push` raises
`OverflowError` once the stack is full, and `pop` raises `IndexError` when the
stack is empty. `copy()` gives an independent stack with the same capacity and
contents.

## Demonstrations

Each type comes with a short command that prints a worked example:

```
numtypes-complex
numtypes-rational
numtypes-stack
```

These commands take no options.