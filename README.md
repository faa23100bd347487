# goldifri

Arithmetic over the Goldilocks prime field (p = 2^64 - 2^32 + 1), its
quadratic extension and the degree-2 algebra over that extension, together
with the arithmetic a FRI verifier performs on a query round: combining the
initial openings, folding cosets by interpolation and evaluating the final
polynomial.

Field elements are plain Python integers. Functions whose names end in
`_no_reduce` return values congruent to the result but not necessarily in
`[0, p)`; `field.reduce` brings them back.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `goldifri.field`: base field operations (`add`, `sub`, `mul`, `mul_add`
  and their `_no_reduce` forms, `reduce`, `reduce_with_max_bits`,
  `inverse`, `range_check`, `range_check_with_max_bits`), the witness hints
  behind them (`mul_add_hint`, `reduce_hint`, `inverse_hint`,
  `split_limbs_hint`), roots of unity (`primitive_root_of_unity`,
  `two_adic_subgroup`) and conversions (`element`, `parse_decimal_strings`,
  `elements_from_uint64s`). Failed checks raise `FieldError`.
  `inverse(0)` returns `(0, False)`.
- `goldifri.range_checks`: constraint-count estimates for batched range
  checks (`nb_r1cs_constraints`, `nb_plonk_constraints`, `optimal_width`,
  `optimal_basewidth`) and `RangeCheckCollector`, whose `finish` verifies
  every collected check and requires a 16-bit limb width.
- `goldifri.extension`: `QuadraticExtension` with `+`, `-`, `*`, `/` and
  `**`, `scalar_mul`, `inverse` (raises `ZeroDivisionError` for zero) and
  `is_zero`; plus `mul_add`, `sub_mul`, `inner_product`,
  `reduce_with_powers`, `lookup` and `lookup2`.
- `goldifri.algebra`: `ExtensionAlgebra` (`+`, `-`, `*`, `scalar_mul`) and
  `partial_interpolate`.
- `goldifri.oracles`: the PLONK polynomial layout (`PolynomialLayout`,
  `PlonkOracle`), the FRI instance structures (`InstanceInfo`, `BatchInfo`,
  `OracleInfo`, `PolynomialInfo`, `Openings`, `OpeningBatch`) and
  `assert_noncanonical_indices_ok`.
- `goldifri.evaluation`: `get_instance`, `reduce_openings`,
  `check_proof_of_work`, `exp_from_bits_const_base`,
  `calculate_subgroup_x`, `fri_combine_initial`, `interpolate`,
  `compute_evaluation` and `final_poly_eval`.

## Example

```python
from goldifri import field
from goldifri.extension import QuadraticExtension

assert field.mul_add(1, 2, 3) == 5

a = QuadraticExtension(4994088319481652598, 16489566008211790727)
b = QuadraticExtension(3797605683985595697, 13424401189265534004)
assert a * b == QuadraticExtension(15052319864161058789, 16841416332519902625)
assert (a * b) / b == a

root = field.primitive_root_of_unity(4)
assert pow(root, 16, field.MODULUS) == 1
assert len(field.two_adic_subgroup(4)) == 16
```

## What this package does not do

It is a library of arithmetic steps, not a complete proof verifier. It does
not hash (no Poseidon), so it neither derives Fiat-Shamir challenges nor
checks Merkle authentication paths; it does not read proofs or circuit data
from files; it builds no constraint system and produces no proofs. It has no
command-line program.