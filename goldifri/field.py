"""Arithmetic over the Goldilocks prime field.

Field elements are plain Python integers in ``[0, MODULUS)``. The functions
whose names end in ``_no_reduce`` return integers that are congruent to the
expected result but may lie outside that range; ``reduce`` brings them back.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable

MODULUS = 18446744069414584321
"""The Goldilocks prime, 2**64 - 2**32 + 1."""

MULTIPLICATIVE_GROUP_GENERATOR = 14293326489335486720
TWO_ADICITY = 32
POWER_OF_TWO_GENERATOR = 7277203076849721926

RANGE_CHECK_NB_BITS = 144
"""Maximum bit width of values that ``reduce`` accepts."""

EXPECTED_OPTIMAL_BASEWIDTH = 16
"""Limb width expected when range checks are batched by commitment."""

_UINT64_LIMIT = 1 << 64
_TWO_32 = 1 << 32


class FieldError(ValueError):
    """Raised when a value is not a valid or reducible field element."""


class RangeCheckerType(enum.Enum):
    """Strategies for enforcing range checks."""

    NATIVE = 0
    COMMIT = 1
    BIT_DECOMPOSITION = 2


def element(x: int | str) -> int:
    """Build a field element from a 64-bit unsigned integer or decimal string."""
    if isinstance(x, str):
        try:
            x = int(x, 10)
        except ValueError as exc:
            raise FieldError(f"not a decimal integer: {x!r}") from exc
    if not 0 <= x < _UINT64_LIMIT:
        raise FieldError(f"{x} is not a 64-bit unsigned integer")
    return x % MODULUS


def _require_in_field(*values: int) -> None:
    for value in values:
        if not 0 <= value < MODULUS:
            raise FieldError(f"{value} is not in the field")


def mul_add_hint(a: int, b: int, c: int) -> tuple[int, int]:
    """Return the quotient and remainder of ``a * b + c`` by the modulus."""
    _require_in_field(a, b, c)
    return divmod(a * b + c, MODULUS)


def mul_add(a: int, b: int, c: int) -> int:
    """Compute ``a * b + c`` reduced into the field."""
    quotient, remainder = mul_add_hint(a, b, c)
    range_check(quotient)
    range_check(remainder)
    return remainder


def mul_add_no_reduce(a: int, b: int, c: int) -> int:
    """Compute ``a * b + c`` without reducing."""
    return a * b + c


def add(a: int, b: int) -> int:
    """Add two field elements."""
    return mul_add(a, 1, b)


def add_no_reduce(a: int, b: int) -> int:
    """Add two values without reducing."""
    return a + b


def sub(a: int, b: int) -> int:
    """Subtract ``b`` from ``a`` in the field."""
    return mul_add(b, MODULUS - 1, a)


def sub_no_reduce(a: int, b: int) -> int:
    """Compute ``a - b`` as ``a + b * (MODULUS - 1)`` without reducing."""
    return a + b * (MODULUS - 1)


def mul(a: int, b: int) -> int:
    """Multiply two field elements."""
    return mul_add(a, b, 0)


def mul_no_reduce(a: int, b: int) -> int:
    """Multiply two values without reducing."""
    return a * b


def reduce_hint(x: int) -> tuple[int, int]:
    """Return the quotient and remainder of ``x`` by the modulus."""
    return divmod(x, MODULUS)


def reduce_with_max_bits(x: int, max_bits: int) -> int:
    """Reduce ``x``, requiring its quotient by the modulus to fit in ``max_bits`` bits."""
    if x < 0:
        raise FieldError(f"cannot reduce negative value {x}")
    quotient, remainder = reduce_hint(x)
    range_check_with_max_bits(quotient, max_bits)
    range_check(remainder)
    return remainder


def reduce(x: int) -> int:
    """Reduce a non-negative value of at most ``RANGE_CHECK_NB_BITS`` bits' quotient."""
    return reduce_with_max_bits(x, RANGE_CHECK_NB_BITS)


def inverse_hint(x: int) -> int:
    """Return the inverse of ``x``, or 0 when ``x`` is zero."""
    _require_in_field(x)
    if x == 0:
        return 0
    return pow(x, MODULUS - 2, MODULUS)


def inverse(x: int) -> tuple[int, bool]:
    """Return ``(x**-1, True)``, or ``(0, False)`` when ``x`` is zero."""
    result = range_check(inverse_hint(x))
    has_inverse = x != 0
    if has_inverse and mul(result, x) != 1:
        raise FieldError(f"inverse of {x} failed verification")
    return result, has_inverse


def split_limbs_hint(x: int) -> tuple[int, int]:
    """Split a field element into its high and low 32-bit limbs."""
    _require_in_field(x)
    return divmod(x, _TWO_32)


def range_check_with_max_bits(x: int, max_bits: int) -> int:
    """Check that ``0 <= x < 2**max_bits`` and return ``x``."""
    if not 0 <= x < (1 << max_bits):
        raise FieldError(f"{x} does not fit in {max_bits} bits")
    return x


def range_check(x: int) -> int:
    """Check that ``x`` is a canonical field element and return it."""
    range_check_with_max_bits(x, 64)
    high, low = divmod(x, _TWO_32)
    if high == _TWO_32 - 1 and low != 0:
        raise FieldError(f"{x} is not less than the modulus")
    return x


def primitive_root_of_unity(n_log: int) -> int:
    """Return a primitive ``2**n_log``-th root of unity."""
    if not 0 <= n_log <= TWO_ADICITY:
        raise FieldError("n_log is greater than the two-adicity")
    root = POWER_OF_TWO_GENERATOR
    for _ in range(TWO_ADICITY - n_log):
        root = root * root % MODULUS
    return root


def two_adic_subgroup(n_log: int) -> list[int]:
    """Return the subgroup of order ``2**n_log`` as successive powers of its generator."""
    root = primitive_root_of_unity(n_log)
    subgroup = [1]
    for _ in range((1 << n_log) - 1):
        subgroup.append(subgroup[-1] * root % MODULUS)
    return subgroup


def parse_decimal_strings(values: Iterable[str]) -> list[int]:
    """Parse decimal strings into integers."""
    result = []
    for value in values:
        try:
            result.append(int(value, 10))
        except ValueError as exc:
            raise FieldError(f"not a decimal integer: {value!r}") from exc
    return result


def elements_from_uint64s(values: Iterable[int]) -> list[int]:
    """Convert 64-bit unsigned integers into field elements."""
    return [element(value) for value in values]