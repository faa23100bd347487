"""An algebra of degree two over the quadratic extension field.

Elements are pairs ``e0 + e1 * Y`` of extension-field elements with
``Y**2 = W``. The algebra is used to evaluate polynomials at points that are
themselves not in the extension field.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from goldifri.extension import W, QuadraticExtension, inner_product

D = 2
"""The degree of the algebra over the extension field."""


@dataclass(frozen=True)
class ExtensionAlgebra:
    """An element ``e0 + e1 * Y`` with extension-field coefficients."""

    e0: QuadraticExtension
    e1: QuadraticExtension

    @classmethod
    def zero(cls) -> ExtensionAlgebra:
        return cls(QuadraticExtension.zero(), QuadraticExtension.zero())

    @classmethod
    def one(cls) -> ExtensionAlgebra:
        return cls(QuadraticExtension.one(), QuadraticExtension.zero())

    @classmethod
    def from_extension(cls, value: QuadraticExtension) -> ExtensionAlgebra:
        """Embed an extension-field element."""
        return cls(value, QuadraticExtension.zero())

    @property
    def terms(self) -> tuple[QuadraticExtension, QuadraticExtension]:
        return self.e0, self.e1

    def __add__(self, other: ExtensionAlgebra) -> ExtensionAlgebra:
        return ExtensionAlgebra(*(a + b for a, b in zip(self.terms, other.terms)))

    def __sub__(self, other: ExtensionAlgebra) -> ExtensionAlgebra:
        return ExtensionAlgebra(*(a - b for a, b in zip(self.terms, other.terms)))

    def __mul__(self, other: ExtensionAlgebra) -> ExtensionAlgebra:
        inner: list[list[tuple[QuadraticExtension, QuadraticExtension]]] = [[] for _ in range(D)]
        inner_w: list[list[tuple[QuadraticExtension, QuadraticExtension]]] = [
            [] for _ in range(D)
        ]
        for i, a in enumerate(self.terms):
            for j, b in enumerate(other.terms):
                target = inner if i + j < D else inner_w
                target[(i + j) % D].append((a, b))
        product = (
            inner_product(1, inner_product(W, QuadraticExtension.zero(), inner_w[k]), inner[k])
            for k in range(D)
        )
        return ExtensionAlgebra(*product)

    def scalar_mul(self, scalar: QuadraticExtension) -> ExtensionAlgebra:
        """Multiply both coefficients by an extension-field element."""
        return ExtensionAlgebra(*(scalar * term for term in self.terms))


def partial_interpolate(
    domain: Sequence[int],
    values: Sequence[ExtensionAlgebra],
    barycentric_weights: Sequence[int],
    point: ExtensionAlgebra,
    initial_eval: ExtensionAlgebra,
    initial_partial_prod: ExtensionAlgebra,
) -> tuple[ExtensionAlgebra, ExtensionAlgebra]:
    """Continue a barycentric interpolation at ``point`` over another chunk of the domain.

    Returns the updated evaluation and the updated running product of
    ``point - x`` over the domain points seen so far.
    """
    if not values:
        raise ValueError("cannot interpolate with no values")
    if len(values) != len(domain):
        raise ValueError("domain and values must have the same length")
    if len(values) != len(barycentric_weights):
        raise ValueError("domain and barycentric weights must have the same length")

    evaluation = initial_eval
    partial_prod = initial_partial_prod
    for x, value, weight in zip(domain, values, barycentric_weights):
        term = point - ExtensionAlgebra.from_extension(QuadraticExtension.from_base(x))
        weighted = value.scalar_mul(QuadraticExtension.from_base(weight))
        evaluation = evaluation * term + weighted * partial_prod
        partial_prod = partial_prod * term
    return evaluation, partial_prod