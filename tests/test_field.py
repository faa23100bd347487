import pytest

from goldifri import field
from goldifri.field import MODULUS, FieldError


@pytest.mark.parametrize("value", [1, 0, MODULUS - 1])
def test_range_check_accepts_canonical(value):
    assert field.range_check(value) == value


def test_range_check_rejects_modulus():
    with pytest.raises(FieldError):
        field.range_check(MODULUS)


@pytest.mark.parametrize("value", [-1, 2**64, 2**64 - 1])
def test_range_check_rejects_out_of_range(value):
    with pytest.raises(FieldError):
        field.range_check(value)


def test_mul_add_small():
    assert field.mul_add(1, 2, 3) == 5


def test_mul_add_large_operands():
    big = 9223372036854775808
    assert field.mul_add(big, big, 3) == 18446744068340842500


def test_mul_add_hint_rejects_non_field_operand():
    with pytest.raises(FieldError):
        field.mul_add_hint(MODULUS, 1, 0)


def test_mul_add_hint_values():
    assert field.mul_add_hint(MODULUS - 1, MODULUS - 1, 0) == divmod(
        (MODULUS - 1) ** 2, MODULUS
    )


def test_add_sub_mul():
    assert field.add(MODULUS - 1, 2) == 1
    assert field.sub(0, 1) == MODULUS - 1
    assert field.sub(10, 3) == 7
    assert field.mul(MODULUS - 1, MODULUS - 1) == 1


def test_no_reduce_variants_are_congruent():
    a, b, c = MODULUS - 5, MODULUS - 7, 11
    assert field.add_no_reduce(a, b) == a + b
    assert field.mul_no_reduce(a, b) == a * b
    assert field.mul_add_no_reduce(a, b, c) == a * b + c
    diff = field.sub_no_reduce(3, 5)
    assert diff >= 0
    assert field.reduce(diff) == MODULUS - 2


def test_reduce_and_hint():
    assert field.reduce_hint(MODULUS + 4) == (1, 4)
    assert field.reduce(3 * MODULUS + 9) == 9


def test_reduce_with_max_bits_limit():
    assert field.reduce_with_max_bits(MODULUS * (2**10 - 1) + 5, 10) == 5
    with pytest.raises(FieldError):
        field.reduce_with_max_bits(MODULUS * 2**10, 10)


def test_reduce_rejects_negative():
    with pytest.raises(FieldError):
        field.reduce(-1)


def test_inverse():
    value = 123456789
    inv, has_inv = field.inverse(value)
    assert has_inv is True
    assert inv * value % MODULUS == 1


def test_inverse_of_zero():
    assert field.inverse(0) == (0, False)
    assert field.inverse_hint(0) == 0


def test_inverse_hint_rejects_non_field():
    with pytest.raises(FieldError):
        field.inverse_hint(MODULUS)


def test_split_limbs_hint():
    assert field.split_limbs_hint(MODULUS - 1) == (2**32 - 1, 0)
    assert field.split_limbs_hint(2**32 + 7) == (1, 7)
    with pytest.raises(FieldError):
        field.split_limbs_hint(MODULUS)


def test_element_from_int_and_string():
    assert field.element(MODULUS) == 0
    assert field.element(2**64 - 1) == 2**32 - 2
    assert field.element("17615363392879944733") == 17615363392879944733


@pytest.mark.parametrize("value", [-1, 2**64, "abc"])
def test_element_rejects_invalid(value):
    with pytest.raises(FieldError):
        field.element(value)


def test_primitive_root_of_unity():
    assert field.primitive_root_of_unity(32) == 7277203076849721926
    assert field.primitive_root_of_unity(0) == 1
    assert field.primitive_root_of_unity(1) == MODULUS - 1
    for n_log in (3, 8, 16):
        root = field.primitive_root_of_unity(n_log)
        assert pow(root, 2**n_log, MODULUS) == 1
        assert pow(root, 2 ** (n_log - 1), MODULUS) == MODULUS - 1


def test_primitive_root_rejects_large_log():
    with pytest.raises(FieldError):
        field.primitive_root_of_unity(33)


def test_two_adic_subgroup():
    subgroup = field.two_adic_subgroup(3)
    assert len(subgroup) == 8
    assert subgroup[0] == 1
    assert len(set(subgroup)) == 8
    assert all(pow(x, 8, MODULUS) == 1 for x in subgroup)


def test_parse_decimal_strings():
    assert field.parse_decimal_strings(["0", "1", "3736710860384812976"]) == [
        0,
        1,
        3736710860384812976,
    ]
    with pytest.raises(FieldError):
        field.parse_decimal_strings(["12x"])


def test_elements_from_uint64s():
    assert field.elements_from_uint64s([1, MODULUS, MODULUS + 1]) == [1, 0, 1]