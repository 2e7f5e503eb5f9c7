import pytest

from numtypes.rational import Rational, gcd, inv, main


def test_gcd_known_value():
    assert gcd(12, 18) == 6


def test_gcd_with_zero_returns_first():
    assert gcd(7, 0) == 7


@pytest.mark.parametrize("a,b", [(4, -6), (-4, 6), (35, 14), (-9, -12)])
def test_gcd_divides_both(a, b):
    g = gcd(a, b)
    assert a % g == 0
    assert b % g == 0


def test_gcd_magnitude_with_mixed_signs():
    assert abs(gcd(4, -6)) == 2


def test_default_is_zero_over_one():
    r = Rational()
    assert r.num() == 0
    assert r.den() == 1


def test_components_must_be_integers():
    with pytest.raises(TypeError):
        Rational(1.5, 2)


def test_construction_does_not_simplify():
    r = Rational(3, 6)
    assert r.num() == 3
    assert r.den() == 6


def test_simplify_reduces_to_lowest_terms():
    r = Rational(3, 6)
    r.simplify()
    assert (r.num(), r.den()) == (1, 2)


def test_simplify_moves_sign_to_numerator():
    r = Rational(1, -2)
    r.simplify()
    assert r.den() > 0
    assert r.num() < 0
    assert r == Rational(-1, 2)


def test_simplify_zero_over_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Rational(0, 0).simplify()


def test_addition_is_commutative():
    r1 = Rational(1, 3)
    r2 = Rational(1, 6)
    assert r1 + r2 == r2 + r1


def test_sum_is_in_lowest_terms():
    total = Rational(1, 3) + Rational(1, 6)
    assert gcd(total.num(), total.den()) == 1
    assert total.den() > 0


def test_addition_does_not_mutate_operands():
    r1 = Rational(1, 3)
    r1 + Rational(1, 6)
    assert (r1.num(), r1.den()) == (1, 3)


def test_add_integer_on_either_side():
    r = Rational(3, 4)
    assert r + 2 == 2 + r
    assert r + 0 == r


def test_iadd_mutates_in_place():
    r = Rational(1, 2)
    alias = r
    r += Rational(1, 2)
    assert alias is r
    assert str(alias) == "1"


def test_negation():
    r = Rational(2, 5)
    assert (-r).num() == -r.num()
    assert (-r).den() == r.den()
    assert -(-r) == r


def test_less_than():
    assert Rational(1, 3) < Rational(1, 2)
    assert not Rational(1, 2) < Rational(1, 3)


def test_abs():
    assert abs(Rational(-1, 2)) == Rational(1, 2)
    positive = Rational(3, 7)
    result = abs(positive)
    assert result == positive
    assert result is not positive


def test_inverse():
    r = Rational(2, 3)
    assert (inv(r).num(), inv(r).den()) == (3, 2)
    assert inv(inv(r)) == r


def test_str_forms():
    assert str(Rational(1, 3)) == "1/3"
    assert str(Rational(4, 1)) == "4"


def test_equality_with_integer():
    assert Rational(6, 3) == 2
    assert not Rational(5, 3) == 2


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Rational(1, 2) + 0.5


def test_main_prints_sums(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0] == "1/3 + 1/6 = " + str(Rational(1, 3) + Rational(1, 6))
    assert lines[2] == "3/4 + 2 = " + str(Rational(3, 4) + 2)
    assert lines[3] == "3 + 5/8 = " + str(3 + Rational(5, 8))