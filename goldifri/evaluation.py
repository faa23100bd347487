"""Evaluation steps of FRI proof verification over the Goldilocks field.

These functions cover the arithmetic a verifier performs for one query:
combining the initial openings, folding cosets by interpolation and
evaluating the final polynomial.
"""

from __future__ import annotations

from collections.abc import Sequence

from goldifri import extension as ext
from goldifri import field
from goldifri.extension import QuadraticExtension
from goldifri.oracles import BatchInfo, InstanceInfo, Openings, PolynomialLayout

_MAX_ARITY_BITS = 8


def _check_bit(bit: int) -> None:
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, got {bit!r}")


def _reverse_bits(value: int, width: int) -> int:
    result = 0
    for _ in range(width):
        result = (result << 1) | (value & 1)
        value >>= 1
    return result


def get_instance(
    zeta: QuadraticExtension, layout: PolynomialLayout, degree_bits: int
) -> InstanceInfo:
    """Describe the openings at ``zeta`` and at ``zeta`` times the trace generator."""
    generator = QuadraticExtension.from_base(field.primitive_root_of_unity(degree_bits))
    zeta_batch = BatchInfo(point=zeta, polynomials=layout.all_polys())
    zeta_next_batch = BatchInfo(point=generator * zeta, polynomials=layout.zs_polys())
    return InstanceInfo(oracles=layout.oracles(), batches=[zeta_batch, zeta_next_batch])


def reduce_openings(openings: Openings, alpha: QuadraticExtension) -> list[QuadraticExtension]:
    """Combine each batch of opened values into one value using powers of ``alpha``."""
    return [ext.reduce_with_powers(batch.values, alpha) for batch in openings.batches]


def check_proof_of_work(pow_response: int, proof_of_work_bits: int) -> None:
    """Require at least ``proof_of_work_bits`` leading zeros in the 64-bit response.

    Raises ``FieldError`` when the response has too few leading zeros.
    """
    field.range_check_with_max_bits(pow_response, 64 - proof_of_work_bits)


def exp_from_bits_const_base(base: int, exponent_bits: Sequence[int]) -> int:
    """Raise a constant ``base`` to the exponent given by little-endian bits."""
    product = 1
    for i, bit in enumerate(exponent_bits):
        _check_bit(bit)
        base_pow_minus_one = field.element(pow(base, 1 << i, field.MODULUS) - 1)
        product = field.add(field.mul(field.mul(base_pow_minus_one, product), bit), product)
    return product


def calculate_subgroup_x(x_index_bits: Sequence[int], n_log: int) -> int:
    """Return the point of the shifted evaluation domain of size ``2**n_log`` at an index.

    The index bits are taken in reverse order, matching the bit-reversed
    layout of the committed evaluations.
    """
    base = field.primitive_root_of_unity(n_log)
    product = exp_from_bits_const_base(base, list(reversed(x_index_bits)))
    return field.mul(field.MULTIPLICATIVE_GROUP_GENERATOR, product)


def fri_combine_initial(
    instance: InstanceInfo,
    initial_evals: Sequence[Sequence[int]],
    fri_alpha: QuadraticExtension,
    subgroup_x: QuadraticExtension,
    precomputed_reduced_evals: Sequence[QuadraticExtension],
) -> QuadraticExtension:
    """Combine the initial oracle evaluations into one value for the query point.

    ``initial_evals`` holds, for each oracle, the leaf values opened at the
    query index. Raises ``ValueError`` when the number of batches and of
    precomputed reduced evaluations differ, and ``ZeroDivisionError`` when
    the query point equals a batch's opening point.
    """
    if len(instance.batches) != len(precomputed_reduced_evals):
        raise ValueError("number of batches does not match number of reduced openings")

    total = QuadraticExtension.zero()
    for batch, reduced_openings in zip(instance.batches, precomputed_reduced_evals):
        evals = [
            QuadraticExtension.from_base(
                initial_evals[poly.oracle_index][poly.polynomial_index]
            )
            for poly in batch.polynomials
        ]
        reduced_evals = ext.reduce_with_powers(evals, fri_alpha)
        numerator = reduced_evals - reduced_openings
        denominator = subgroup_x - batch.point
        total = (fri_alpha ** len(evals)) * total
        total = ext.mul_add(numerator, denominator.inverse(), total)
    return total


def final_poly_eval(
    coeffs: Sequence[QuadraticExtension], point: QuadraticExtension
) -> QuadraticExtension:
    """Evaluate a polynomial given by ascending coefficients at ``point``."""
    result = QuadraticExtension.zero()
    for coeff in reversed(coeffs):
        result = ext.mul_add(result, point, coeff)
    return result


def interpolate(
    x: QuadraticExtension,
    x_points: Sequence[QuadraticExtension],
    y_points: Sequence[QuadraticExtension],
    barycentric_weights: Sequence[QuadraticExtension],
) -> QuadraticExtension:
    """Evaluate at ``x`` the polynomial through the given points, in barycentric form.

    When ``x`` is one of ``x_points`` the matching ``y`` value is returned.
    """
    if not len(x_points) == len(y_points) == len(barycentric_weights):
        raise ValueError("length of x_points, y_points and barycentric_weights differ")

    matches = [y for x_i, y in zip(x_points, y_points) if x_i == x]
    if matches:
        return matches[-1]

    l_x = QuadraticExtension.one()
    for x_i in x_points:
        l_x = ext.sub_mul(x, x_i, l_x)

    total = QuadraticExtension.zero()
    for x_i, y_i, weight in zip(x_points, y_points, barycentric_weights):
        total = y_i * (weight / (x - x_i)) + total
    return l_x * total


def compute_evaluation(
    x: int,
    x_index_within_coset_bits: Sequence[int],
    arity_bits: int,
    evals: Sequence[QuadraticExtension],
    beta: QuadraticExtension,
) -> QuadraticExtension:
    """Fold one coset: interpolate its evaluations and evaluate the result at ``beta``.

    ``x`` is the query point, ``evals`` the coset evaluations in bit-reversed
    order and ``x_index_within_coset_bits`` the little-endian position of
    ``x`` within its coset.
    """
    arity = 1 << arity_bits
    if len(evals) != arity:
        raise ValueError(f"expected {arity} evaluations, got {len(evals)}")
    if arity_bits > _MAX_ARITY_BITS:
        raise ValueError(f"arity bits must be at most {_MAX_ARITY_BITS}")

    g = field.primitive_root_of_unity(arity_bits)
    g_inv = pow(g, arity - 1, field.MODULUS)

    permuted: list[QuadraticExtension] = [QuadraticExtension.zero()] * arity
    for i, value in enumerate(evals):
        permuted[_reverse_bits(i, arity_bits)] = value

    start = exp_from_bits_const_base(g_inv, list(reversed(x_index_within_coset_bits)))
    coset_start = field.mul(start, x)

    g_ext = QuadraticExtension.from_base(g)
    x_points = [QuadraticExtension.from_base(coset_start)]
    for _ in range(1, arity):
        x_points.append(x_points[-1] * g_ext)

    weights = []
    for i, x_i in enumerate(x_points):
        weight = QuadraticExtension.one()
        for j, x_j in enumerate(x_points):
            if i != j:
                weight = ext.sub_mul(x_i, x_j, weight)
        weights.append(weight.inverse())

    return interpolate(beta, x_points, permuted, weights)