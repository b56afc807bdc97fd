# circlestark

Arithmetic building blocks for STARK proofs over the circle group of the
Mersenne prime field `p = 2^31 - 1`. Pure Python, no dependencies.

## What is included

- `circlestark.m31`: the base field `M31`, with the module functions
  `reduce` (for values in `[0, p^2)`) and `partial_reduce` (for values in
  `[0, 2p)`), and `M31.sqrt`, which returns `None` for non-squares. The
  `M31` constructor does not reduce its argument.
- `circlestark.cm31`: the complex extension `CM31` (`i^2 = -1`).
- `circlestark.qm31`: the degree-four secure field `QM31` (`u^2 = 2 + i`),
  with `from_u32_unchecked`, `from_m31`, `from_m31_array` and
  `to_m31_array`. Extension elements can be combined with `M31` values
  directly (`+`, `-`, `*`).
- `circlestark.field`: the `FieldElement` base class shared by all field
  types (`square`, `pow`, `inverse`, `double`, `is_zero`, `is_one`,
  division). Inverting zero raises `ZeroDivisionError`. The module also has
  `batch_inverse`, which inverts a sequence with one field inversion, and
  `into_bytes`, which serialises elements as little-endian 32-bit base field
  coordinates.
- `circlestark.secure_column`: `SecureColumn`, a column of `QM31` values kept
  as four base field columns (`zeros`, `at`, `set`, `to_list`, `len()`).
- `circlestark.fft`: the `butterfly` and `ibutterfly` steps. Both return the
  new pair of values rather than updating their arguments.
- `circlestark.circle`: `CirclePoint` (group addition, `double`, `double_x`,
  `mul`, `log_order`, `conjugate`, `antipode`, `into_ef`,
  `complex_conjugate`, `get_point`), `CirclePointIndex` (the additive group
  modulo `2^31`, with `to_point`, `half` and `try_div`) and `Coset`
  (`create`, `subgroup`, `odds`, `half_odds`, iteration over points,
  `iter_indices`, `double`, `conjugate`, `shift`, `at`, `find`). The
  constants `M31_CIRCLE_GEN` and `SECURE_FIELD_CIRCLE_GEN` are generators of
  the circle over `M31` and over `QM31`.
- `circlestark.constraints`: `coset_vanishing`, `point_excluder`,
  `pair_vanishing`, `point_vanishing`, `complex_conjugate_line` and
  `complex_conjugate_line_coefficients`. The last two raise `ValueError` if
  the point's `y` coordinate equals its own complex conjugate.
- `circlestark.samples`: `PointSample` and `ColumnSampleBatch`, whose
  `new_vec` groups per-column samples by point.
- `circlestark.containers`: `TreeVec` and `ComponentVec`, list subclasses
  holding values for each commitment tree and each component. `TreeVec.zip`
  and `TreeVec.zip_cols` raise `ValueError` when shapes differ.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Field arithmetic:

```python
from circlestark.m31 import M31
from circlestark.qm31 import QM31

a = QM31.from_u32_unchecked(1, 2, 3, 4)
b = QM31.from_u32_unchecked(4, 5, 6, 7)
assert (a * b) / b == a
assert M31(8).inverse() * M31(8) == M31.one()
```

Cosets on the circle:

```python
from circlestark.circle import Coset
from circlestark.constraints import coset_vanishing

coset = Coset.half_odds(5)
assert all(coset_vanishing(coset, p).is_zero() for p in coset)
```

`Coset.find` returns the position of an index within a coset, or `None`
when the index is not in it.

## What it does not do

This package provides the arithmetic and geometry only. It has no
polynomial evaluation, interpolation or FFT over whole domains, no FRI
prover or verifier, no Merkle tree commitments, no hashing channel or random
point sampling, and no proof generation or verification. It offers no
command-line tool.