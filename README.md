# trotterpauli

Symbolic Suzuki–Trotter evolution of a quantum observable, written as a sum of
Pauli strings on a one-dimensional, translation-invariant qubit chain.

The Hamiltonian is given as a cycle term such as `XX+Z`, which stands for
`X_0 X_1 + Z_0`. It is repeated along the chain. Its terms are split into groups
of mutually commuting strings. Each group is coloured by translation. The
observable is then evolved in the Heisenberg picture for a given number of
Trotter steps. Coefficients are sympy expressions in the time step symbol `tau`.

The evolved observable is evaluated in a product state polarized along a unit
vector `(x, y, z)`. Its value is printed for each point of a time grid.

## Installation

```
pip install .
```

The only runtime dependency is `sympy`. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
trotterpauli --hamiltonian XX+Z --observable Z --steps 2 --density 0.1 --interval 1.0 --substitution 1,0,0
```

| Option           | Meaning                                   | Default |
|------------------|-------------------------------------------|---------|
| `--steps`        | number of Trotter steps (> 0)             | `1`     |
| `--density`      | time grid step (> 0)                      | `0.1`   |
| `--interval`     | end of the time interval (> 0)            | `1.0`   |
| `--substitution` | polarization `x,y,z` with x²+y²+z² = 1    | `1,0,0` |
| `--hamiltonian`  | cycle term such as `XX+Z` or `XX+Z+X`     | `XX+Z`  |
| `--observable`   | observable such as `Z` or `XY`            | `Z`     |

Each output line holds a time `t` and the expectation value at that time, which
is the real part of the sum. Time runs from `0` up to `--interval` in steps of
`--density`. At each grid point `tau` is set to `t / steps`.

An invalid option or value is printed to standard error as `Error: ...`, and the
command exits with status 1. `--help` prints the option list.

## Library use

```python
from trotterpauli.cli import build_hamiltonian, pauli_literal
from trotterpauli.calculator import EvolutionCalculator

calc = EvolutionCalculator(pauli_literal("Z"), build_hamiltonian("XX+Z"))
calc.advance(1)
for string, coef in calc.show():
    print(string, coef)
```

### `trotterpauli.pauli`

- `PauliMatrix`: `ONE`, `X`, `Z`, `Y`.
- `PauliString`: a frozen, ordered dataclass holding the bit masks `v` and `w`.
  It has these members:
  - `does_commute_with`
  - `translate`, which shifts the string along the chain
  - `sites`, which gives the bit mask of the sites the string acts on
  - `phase_adjustment`
  - `polarize`
  - `*`, which returns a `ScaledPauliString` carrying the sign
  - `str()`, which gives text such as `I[Y_0]` or `[X_0][X_1]`
- `ScaledPauliString`: a `pauli` string together with a coefficient `coef`.
- `single_site(site, matrix)` and `make_pauli_string(pairs)`. The second builds a
  string from `(site, PauliMatrix)` pairs, with the phase that makes `Y` sites
  proper `Y` matrices.
- `mask_to_vector(mask)` returns the set bit positions in ascending order.

### `trotterpauli.hamiltonian`

- `Hamiltonian(terms)` takes a mapping from `PauliString` to coefficient. It
  splits the terms into commuting `Group`s by greedy graph colouring.
  `groups()` returns the groups in the order they are applied.
- `Group` has the following members:
  - `strings`
  - `color_number()`
  - `emplace(string, coef)`
  - `do_coloring()`
  - `filter(color, site)`, which gives the translations of the base strings
    onto a site that carry a given colour

### `trotterpauli.calculator`

- `EvolutionCalculator(observable, hamiltonian)` has the following members:
  - `advance(count=1)`
  - `show()`, which returns the `(PauliString, coefficient)` terms
  - `show_strings()`
  - `tau`, the time step symbol
  - `steps`, the number of steps applied so far

### `trotterpauli.cli`

- `Config` holds the settings of one run.
- `parse_cli(argv)`
- `pauli_literal(text)`
- `build_hamiltonian(expression)`
- `evaluate(state, tau, config)`, which returns `(t, value)` pairs
- `main(argv=None)`

## Limits

- A chain has at most 64 sites.
- Hamiltonian terms in the expression carry no numeric factors. Each literal
  counts with coefficient 1, and repeated literals add up.
- The only output is the printed time series. Results are not stored, and
  nothing is plotted.