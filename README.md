# klft

Building blocks for lattice gauge theory in Python, built on numpy: gauge
fields on periodic 2D, 3D and 4D lattices, staples, colour-spin vectors,
Metropolis sweeps with the Wilson plaquette action, and a small cache of
kernel tilings.

## Modules

### `klft.gauge_field`

`GaugeField(dimensions, nc, links)` holds one `nc x nc` complex matrix per
site and direction; the number of directions equals the lattice rank (2, 3
or 4). Constructors:

- `GaugeField.filled(dimensions, nc, value)`: every entry of every link set
  to `value`;
- `GaugeField.from_matrix(dimensions, matrix)`: the same matrix on every link;
- `GaugeField.random(dimensions, nc, rng)`: real and imaginary parts drawn
  uniformly from [-1, 1) with a `numpy.random.Generator`.

Links are read and written as `field[site, mu]` or `field[i0, ..., mu]`;
out-of-range sites or directions raise `IndexError`, wrongly shaped matrices
`ValueError`. `copy()` returns an independent field and `rank` the number of
dimensions.

### `klft.sun_field`

`SUNField(dimensions, nc, values)` holds one `nc x nc` matrix per site, with
`SUNField.filled` and `SUNField.from_matrix`, and indexing by `field[site]`.

### `klft.staple`

- `shift_site(site, mu, step, dimensions)`: neighbour along `mu` with
  periodic wrapping.
- `staple(field, site, mu)`: sum of the forward and backward staples around
  the link `(site, mu)`.
- `open_bc(field, mu)`: sets every entry of the links in direction `mu` on
  the last slice along `mu` to machine epsilon.

### `klft.spinor`

`Spinor(data)` is an `nc x nd` complex array (colour by Dirac index) with
`Spinor.zeros`, `Spinor.ones` and `Spinor.random(nc, nd, rng, mean, var)`.
It supports `+`, `-`, equality, scaling by numbers, `U * s` and `s * U` for
colour matrices `U`, and `a * b` for two spinors, which gives the colour
matrix `sum_k a[i, k] b[j, k]`. `conj()`, `sqnorm()`, `inner(other)`
(`self^dagger other`) and `format(name)` complete it. `apply_gamma(gamma, s)`
and `apply_gamma_right(s, gamma)` act with a gamma matrix on the Dirac index.

### `klft.fermion_params`

- `DiracParams(dimensions, gammas, gamma5, kappa)`: four gamma matrices, the
  fifth one and the hopping parameter; `gamma_id` is the identity of the same
  size.
- `FermionParams(rank, nc, rep_dim, kappa, tol, fermion_type="Wilson",
  solver="")` with `describe()` returning a text summary.

### `klft.metropolis`

- `MetropolisParams(dimensions, nc, n_sweep, n_hits, beta, delta)` with
  `describe()`.
- `sublattice_parities(rank)`: the `2**rank` odd/even patterns.
- `sweep_metropolis(field, params, rng, propose, restore)`: visits each
  checkerboard sublattice in turn, tries `n_hits` updates per link and
  returns the acceptance rate. `propose(rng, delta)` must return a random
  group element near the identity and `restore(matrix)` must project a
  product back onto the group.
- `run_metropolis(field, params, rng, propose, restore, measure=None)`: runs
  `n_sweep` sweeps, calls `measure(field, step)` after each, and returns the
  list of acceptance rates.

The parameters must describe the same lattice and `nc` as the field, or
`ValueError` is raised.

### `klft.tuner`

`Tuner` calls `launch_for(functor_id, start, end, functor)` as
`functor(*index)` over every index of the box `[start, end)`. With
`enabled = False` (the default) it visits the box in order; when enabled it
stores a tiling per kernel identifier (`kernel_uid`) in a per-rank
`TuningTable` (`table(rank)`) and visits the box tile by tile.
`write_cache(path)` and `read_cache(path)` save and load the tables as text,
one `rank key tile...` line per kernel. `iterate_range(start, end)` yields
every index of a box.

### `klft.field_types`

`GaugeFieldKind` and `SpinorFieldKind` enumerations, and
`gauge_field_type(rank, nc, kind)` and `sun_field_type(rank, nc)`, which
return small descriptors (`GaugeFieldType`, `SUNFieldType`) that check a
field with `matches(field)`; `SUNFieldType` also builds fields with
`filled` and `from_matrix`.

## Example

```python
import numpy as np
from klft.gauge_field import GaugeField
from klft.staple import staple

field = GaugeField.from_matrix((4, 4, 4, 4), np.eye(3, dtype=complex))
s = staple(field, (0, 0, 0, 0), 0)
# with unit links every staple term is the identity: 2 * (rank - 1) of them
assert np.allclose(s, 6 * np.eye(3))
```

## What it does not do

- There are no command-line programs and no reading of run settings from
  input files; runs are set up in Python.
- No random SU(N) generation or projection onto the group is included:
  `sweep_metropolis` and `run_metropolis` take them as the `propose` and
  `restore` callables.
- No gauge observables are measured or written to files; pass your own
  `measure` callable.
- There is no Hybrid Monte Carlo, no Dirac operator application and no
  linear solver; `DiracParams` and `FermionParams` only hold settings.
- `GaugeFieldKind.PTBC` and `SpinorFieldKind.STAGGERED` are named, but no
  field of those kinds exists; a PTBC descriptor matches no field.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```