import pytest

from goldifri.field import MODULUS, FieldError
from goldifri.extension import (
    QuadraticExtension,
    inner_product,
    lookup,
    lookup2,
    mul_add,
    reduce_with_powers,
    sub_mul,
)

A = QuadraticExtension(4994088319481652598, 16489566008211790727)
B = QuadraticExtension(3797605683985595697, 13424401189265534004)
C = QuadraticExtension(7166004739148609569, 14655965871663555016)
EXPECTED = QuadraticExtension(15052319864161058789, 16841416332519902625)


def test_mul_matches_source_case():
    assert A * B == EXPECTED


def test_div_matches_source_case():
    assert A / C == EXPECTED


def test_inverse_times_self_is_one():
    for value in (A, B, C, QuadraticExtension(5, 0), QuadraticExtension(0, 3)):
        assert value * value.inverse() == QuadraticExtension.one()


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        QuadraticExtension.zero().inverse()
    with pytest.raises(ZeroDivisionError):
        A / QuadraticExtension.zero()


def test_component_out_of_field_rejected():
    with pytest.raises(FieldError):
        QuadraticExtension(MODULUS, 0)


def test_add_sub_round_trip():
    assert (A + B) - B == A
    assert A - A == QuadraticExtension.zero()


def test_sub_wraps_around():
    assert QuadraticExtension.zero() - QuadraticExtension.one() == QuadraticExtension(MODULUS - 1, 0)


@pytest.mark.parametrize("exponent", [0, 1, 2, 3, 5, 8, 13])
def test_pow_matches_repeated_multiplication(exponent):
    expected = QuadraticExtension.one()
    for _ in range(exponent):
        expected = expected * A
    assert A**exponent == expected


def test_pow_negative_raises():
    with pytest.raises(ValueError):
        pow(A, -1)
    assert pow(A, 1) == A


def test_scalar_mul_matches_embedding():
    assert A.scalar_mul(12345) == A * QuadraticExtension.from_base(12345)


def test_x_squared_is_w():
    x = QuadraticExtension(0, 1)
    assert x * x == QuadraticExtension.from_base(7)


def test_is_zero():
    assert QuadraticExtension.zero().is_zero()
    assert not QuadraticExtension(0, 1).is_zero()


def test_iteration_yields_coefficients():
    assert list(A) == [4994088319481652598, 16489566008211790727]


def test_mul_add_and_sub_mul():
    assert mul_add(A, B, C) == A * B + C
    assert sub_mul(A, B, C) == (A - B) * C


def test_inner_product():
    pairs = [(A, B), (B, C), (C, A)]
    expected = A + (A * B + B * C + C * A).scalar_mul(3)
    assert inner_product(3, A, pairs) == expected


def test_inner_product_empty_returns_accumulator():
    assert inner_product(9, B, []) == B


def test_reduce_with_powers():
    terms = [A, B, C]
    assert reduce_with_powers(terms, EXPECTED) == A + B * EXPECTED + C * EXPECTED**2
    assert reduce_with_powers([], A) == QuadraticExtension.zero()


def test_lookup_selects():
    assert lookup(0, A, B) == A
    assert lookup(1, A, B) == B


def test_lookup_rejects_non_bit():
    with pytest.raises(ValueError):
        lookup(2, A, B)


@pytest.mark.parametrize("index", range(4))
def test_lookup2_selects_index(index):
    values = [A, B, C, EXPECTED]
    assert lookup2(index & 1, index >> 1, *values) == values[index]