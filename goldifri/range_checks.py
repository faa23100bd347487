"""Batched range checks and the cost model that picks their limb width.

Range checks that are collected and checked together are decomposed into
limbs of a common width. The width is the one that minimises an estimate of
the number of constraints the decomposition costs under the chosen frontend.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field as dataclass_field

from goldifri.field import EXPECTED_OPTIMAL_BASEWIDTH, FieldError, range_check_with_max_bits

_MIN_WIDTH = 2
_MAX_WIDTH = 18


class FrontendType(enum.Enum):
    """Constraint system families with different costs per operation."""

    R1CS = 0
    SCS = 1


@dataclass(frozen=True)
class CheckedVariable:
    """A value that must fit in ``bits`` bits."""

    value: int
    bits: int


CountFn = Callable[[int, Sequence[CheckedVariable]], int]


def decomp_size(var_size: int, limb_size: int) -> int:
    """Number of ``limb_size``-bit limbs needed to hold ``var_size`` bits."""
    return (var_size + limb_size - 1) // limb_size


def _nb_decomposed(base_length: int, collected: Sequence[CheckedVariable]) -> int:
    return sum(decomp_size(item.bits, base_length) for item in collected)


def nb_r1cs_constraints(base_length: int, collected: Sequence[CheckedVariable]) -> int:
    """Estimated R1CS constraint count for limbs of ``base_length`` bits."""
    nb_right = _nb_decomposed(base_length, collected)
    equations = len(collected)
    nb_left = 1 << base_length
    return nb_left + nb_right + equations + 1


def nb_plonk_constraints(base_length: int, collected: Sequence[CheckedVariable]) -> int:
    """Estimated PLONK constraint count for limbs of ``base_length`` bits."""
    nb_decomposed = _nb_decomposed(base_length, collected)
    equations = nb_decomposed
    nb_right = 3 * nb_decomposed
    nb_left = 3 * (1 << base_length)
    return nb_left + nb_right + equations + 1


def optimal_width(count_fn: CountFn, collected: Sequence[CheckedVariable]) -> int:
    """Return the limb width in ``[2, 18)`` with the lowest cost; ties go to the smaller."""
    return min(range(_MIN_WIDTH, _MAX_WIDTH), key=lambda width: count_fn(width, collected))


def optimal_basewidth(
    collected: Sequence[CheckedVariable],
    frontend_type: FrontendType | None = None,
) -> int:
    """Return the best limb width for the given frontend (R1CS when unknown)."""
    if frontend_type is FrontendType.SCS:
        return optimal_width(nb_plonk_constraints, collected)
    return optimal_width(nb_r1cs_constraints, collected)


@dataclass
class RangeCheckCollector:
    """Collects range checks and verifies them all at once in ``finish``."""

    frontend_type: FrontendType = FrontendType.R1CS
    _collected: list[CheckedVariable] = dataclass_field(default_factory=list, repr=False)

    @property
    def collected(self) -> tuple[CheckedVariable, ...]:
        """The checks gathered so far."""
        return tuple(self._collected)

    def check(self, value: int, nb_bits: int) -> None:
        """Record that ``value`` must fit in ``nb_bits`` bits."""
        self._collected.append(CheckedVariable(value, nb_bits))

    def finish(self) -> int:
        """Verify every collected check and return the limb width used.

        Raises ``FieldError`` when the optimal width is not the expected one,
        when a check's bit count is not a multiple of it, or when a value does
        not fit in its bits.
        """
        nb_bits = optimal_basewidth(self._collected, self.frontend_type)
        if nb_bits != EXPECTED_OPTIMAL_BASEWIDTH:
            raise FieldError(f"nbBits should be {EXPECTED_OPTIMAL_BASEWIDTH}, got {nb_bits}")
        for item in self._collected:
            if item.bits % nb_bits != 0:
                raise FieldError(f"{item.bits} bits is not aligned to {nb_bits}")
        for item in self._collected:
            range_check_with_max_bits(item.value, item.bits)
        return nb_bits