"""Which polynomials the PLONK oracles hold and how they are opened."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field as dataclass_field

from goldifri.extension import QuadraticExtension
from goldifri.field import MODULUS

_UINT64_MAX = (1 << 64) - 1


@dataclass(frozen=True)
class PolynomialInfo:
    """A polynomial identified by its oracle and its index within it."""

    oracle_index: int
    polynomial_index: int


@dataclass(frozen=True)
class OracleInfo:
    """How many polynomials an oracle commits to and whether it is blinded."""

    num_polys: int
    blinding: bool


class PlonkOracle(enum.Enum):
    """The four oracles of a PLONK proof, in commitment order."""

    CONSTANTS_SIGMAS = (0, False)
    WIRES = (1, True)
    ZS_PARTIAL_PRODUCTS = (2, True)
    QUOTIENT = (3, True)

    @property
    def index(self) -> int:
        return self.value[0]

    @property
    def blinding(self) -> bool:
        return self.value[1]


@dataclass(frozen=True)
class BatchInfo:
    """Polynomials opened together at one point."""

    point: QuadraticExtension
    polynomials: list[PolynomialInfo] = dataclass_field(default_factory=list)


@dataclass(frozen=True)
class InstanceInfo:
    """The oracles of a proof and the batches in which they are opened."""

    oracles: list[OracleInfo] = dataclass_field(default_factory=list)
    batches: list[BatchInfo] = dataclass_field(default_factory=list)


@dataclass(frozen=True)
class OpeningBatch:
    """Claimed values of a batch of polynomials at its point."""

    values: list[QuadraticExtension] = dataclass_field(default_factory=list)


@dataclass(frozen=True)
class Openings:
    """Claimed values for every batch."""

    batches: list[OpeningBatch] = dataclass_field(default_factory=list)


def polynomial_info_range(oracle_index: int, start: int, end: int) -> list[PolynomialInfo]:
    """Describe polynomials ``start`` up to, but not including, ``end`` of an oracle."""
    return [PolynomialInfo(oracle_index, i) for i in range(start, end)]


@dataclass(frozen=True)
class PolynomialLayout:
    """The circuit dimensions that fix how polynomials are spread over the oracles."""

    num_constants: int
    num_routed_wires: int
    num_wires: int
    num_challenges: int
    num_partial_products: int
    quotient_degree_factor: int

    def sigmas_range(self) -> list[int]:
        """Indices of the sigma polynomials in the constants-sigmas oracle, end included."""
        return list(range(self.num_constants, self.num_constants + self.num_routed_wires + 1))

    def num_preprocessed_polys(self) -> int:
        return self.sigmas_range()[-1]

    def num_zs_partial_products_polys(self) -> int:
        return self.num_challenges * (1 + self.num_partial_products)

    def num_quotient_polys(self) -> int:
        return self.num_challenges * self.quotient_degree_factor

    def preprocessed_polys(self) -> list[PolynomialInfo]:
        return polynomial_info_range(
            PlonkOracle.CONSTANTS_SIGMAS.index, 0, self.num_preprocessed_polys()
        )

    def wire_polys(self) -> list[PolynomialInfo]:
        return polynomial_info_range(PlonkOracle.WIRES.index, 0, self.num_wires)

    def zs_partial_products_polys(self) -> list[PolynomialInfo]:
        return polynomial_info_range(
            PlonkOracle.ZS_PARTIAL_PRODUCTS.index, 0, self.num_zs_partial_products_polys()
        )

    def quotient_polys(self) -> list[PolynomialInfo]:
        return polynomial_info_range(PlonkOracle.QUOTIENT.index, 0, self.num_quotient_polys())

    def zs_polys(self) -> list[PolynomialInfo]:
        return polynomial_info_range(
            PlonkOracle.ZS_PARTIAL_PRODUCTS.index, 0, self.num_challenges
        )

    def oracles(self) -> list[OracleInfo]:
        sizes = {
            PlonkOracle.CONSTANTS_SIGMAS: self.num_preprocessed_polys(),
            PlonkOracle.WIRES: self.num_wires,
            PlonkOracle.ZS_PARTIAL_PRODUCTS: self.num_zs_partial_products_polys(),
            PlonkOracle.QUOTIENT: self.num_quotient_polys(),
        }
        return [OracleInfo(sizes[oracle], oracle.blinding) for oracle in PlonkOracle]

    def all_polys(self) -> list[PolynomialInfo]:
        return [
            *self.preprocessed_polys(),
            *self.wire_polys(),
            *self.zs_partial_products_polys(),
            *self.quotient_polys(),
        ]


def assert_noncanonical_indices_ok(rate_bits: int) -> None:
    """Check that non-canonical index encodings are negligible for this rate.

    Raises ``ValueError`` when too large a share of 64-bit values lies at or
    above the modulus compared with the query error of the configuration.
    """
    num_ambiguous = _UINT64_MAX - MODULUS + 1
    query_error = 1.0 / (1 << rate_bits)
    p_ambiguous = num_ambiguous / MODULUS
    if p_ambiguous >= query_error * 1e-5:
        raise ValueError(
            "A non-negligible portion of field elements are in the range that permits "
            "non-canonical encodings."
        )