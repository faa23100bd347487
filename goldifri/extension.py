"""The quadratic extension of the Goldilocks field, ``F[X] / (X**2 - W)``."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from goldifri import field

W = 7
"""The non-residue defining the extension."""

DTH_ROOT = 18446744069414584320
"""A primitive square root of unity in the base field (``-1``)."""

_Raw = tuple[int, int]


def _reduce_raw(x: _Raw) -> QuadraticExtension:
    return QuadraticExtension(field.reduce(x[0]), field.reduce(x[1]))


def _add_raw(a: _Raw, b: _Raw) -> _Raw:
    return field.add_no_reduce(a[0], b[0]), field.add_no_reduce(a[1], b[1])


def _sub_raw(a: _Raw, b: _Raw) -> _Raw:
    return field.sub_no_reduce(a[0], b[0]), field.sub_no_reduce(a[1], b[1])


def _mul_raw(a: _Raw, b: _Raw) -> _Raw:
    c0 = field.add_no_reduce(
        field.mul_no_reduce(a[0], b[0]),
        field.mul_no_reduce(field.mul_no_reduce(W, a[1]), b[1]),
    )
    c1 = field.add_no_reduce(field.mul_no_reduce(a[0], b[1]), field.mul_no_reduce(a[1], b[0]))
    return c0, c1


@dataclass(frozen=True)
class QuadraticExtension:
    """An element ``c0 + c1 * X`` with canonical base-field coefficients."""

    c0: int
    c1: int

    def __post_init__(self) -> None:
        field.range_check(self.c0)
        field.range_check(self.c1)

    @classmethod
    def zero(cls) -> QuadraticExtension:
        return cls(0, 0)

    @classmethod
    def one(cls) -> QuadraticExtension:
        return cls(1, 0)

    @classmethod
    def from_base(cls, value: int) -> QuadraticExtension:
        """Embed a base-field element."""
        return cls(value, 0)

    def _raw(self) -> _Raw:
        return self.c0, self.c1

    def __iter__(self) -> Iterator[int]:
        yield self.c0
        yield self.c1

    def __add__(self, other: QuadraticExtension) -> QuadraticExtension:
        return QuadraticExtension(field.add(self.c0, other.c0), field.add(self.c1, other.c1))

    def __sub__(self, other: QuadraticExtension) -> QuadraticExtension:
        return QuadraticExtension(field.sub(self.c0, other.c0), field.sub(self.c1, other.c1))

    def __mul__(self, other: QuadraticExtension) -> QuadraticExtension:
        return _reduce_raw(_mul_raw(self._raw(), other._raw()))

    def __truediv__(self, other: QuadraticExtension) -> QuadraticExtension:
        return self * other.inverse()

    def __pow__(self, exponent: int) -> QuadraticExtension:
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        if exponent == 0:
            return QuadraticExtension.one()
        if exponent == 1:
            return self
        current = self
        product = QuadraticExtension.one()
        for i in range(exponent.bit_length()):
            if i:
                current = current * current
            if (exponent >> i) & 1:
                product = product * current
        return product

    def scalar_mul(self, scalar: int) -> QuadraticExtension:
        """Multiply both coefficients by a base-field element."""
        return QuadraticExtension(field.mul(self.c0, scalar), field.mul(self.c1, scalar))

    def inverse(self) -> QuadraticExtension:
        """Return the multiplicative inverse; zero has none."""
        if self.is_zero():
            raise ZeroDivisionError("zero has no inverse in the extension field")
        conjugate = QuadraticExtension(self.c0, field.mul(self.c1, DTH_ROOT))
        norm = conjugate * self
        norm_inverse, _ = field.inverse(norm.c0)
        return conjugate.scalar_mul(norm_inverse)

    def is_zero(self) -> bool:
        return self.c0 == 0 and self.c1 == 0


def mul_add(
    a: QuadraticExtension, b: QuadraticExtension, c: QuadraticExtension
) -> QuadraticExtension:
    """Compute ``a * b + c`` with a single reduction."""
    return _reduce_raw(_add_raw(_mul_raw(a._raw(), b._raw()), c._raw()))


def sub_mul(
    a: QuadraticExtension, b: QuadraticExtension, c: QuadraticExtension
) -> QuadraticExtension:
    """Compute ``(a - b) * c`` with a single reduction."""
    return _reduce_raw(_mul_raw(_sub_raw(a._raw(), b._raw()), c._raw()))


def inner_product(
    constant: int,
    starting_acc: QuadraticExtension,
    pairs: Iterable[tuple[QuadraticExtension, QuadraticExtension]],
) -> QuadraticExtension:
    """Compute ``starting_acc + constant * sum(a * b for a, b in pairs)``."""
    acc = starting_acc._raw()
    for a, b in pairs:
        scaled = a.scalar_mul(constant)
        acc = _add_raw(_mul_raw(scaled._raw(), b._raw()), acc)
    return _reduce_raw(acc)


def reduce_with_powers(
    terms: Sequence[QuadraticExtension], scalar: QuadraticExtension
) -> QuadraticExtension:
    """Evaluate ``sum(terms[i] * scalar**i)`` by Horner's rule."""
    total = QuadraticExtension.zero()
    for term in reversed(terms):
        total = _reduce_raw(_add_raw(_mul_raw(total._raw(), scalar._raw()), term._raw()))
    return total


def _check_bit(bit: int) -> None:
    if bit not in (0, 1):
        raise ValueError(f"selector must be 0 or 1, got {bit!r}")


def lookup(bit: int, x: QuadraticExtension, y: QuadraticExtension) -> QuadraticExtension:
    """Return ``x`` when ``bit`` is 0 and ``y`` when it is 1."""
    _check_bit(bit)
    return y if bit else x


def lookup2(
    b0: int,
    b1: int,
    qe0: QuadraticExtension,
    qe1: QuadraticExtension,
    qe2: QuadraticExtension,
    qe3: QuadraticExtension,
) -> QuadraticExtension:
    """Return the value at index ``b0 + 2 * b1``."""
    return lookup(b1, lookup(b0, qe0, qe1), lookup(b0, qe2, qe3))