"""Command line tool: Suzuki-Trotter evolution of a quantum observable."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import sympy

from .calculator import EvolutionCalculator
from .hamiltonian import Hamiltonian
from .pauli import PauliMatrix, PauliString, ScaledPauliString, make_pauli_string

_LETTERS = {"X": PauliMatrix.X, "Y": PauliMatrix.Y, "Z": PauliMatrix.Z}


@dataclass(frozen=True)
class Config:
    """Settings of one run."""

    trotter_steps: int = 1
    dt: float = 0.1
    t_max: float = 1.0
    pol: tuple[float, float, float] = (1.0, 0.0, 0.0)
    hamiltonian: str = "XX+Z"
    observable: str = "Z"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise ValueError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="trotter", description="Suzuki-Trotter evolution simulator")
    parser.add_argument("--steps", type=int, default=1, help="Trotter steps")
    parser.add_argument("--density", type=float, default=0.1, help="Time grid step")
    parser.add_argument("--interval", type=float, default=1.0, help="End of time interval")
    parser.add_argument("--substitution", default="1,0,0", help="Polarization x,y,z")
    parser.add_argument(
        "--hamiltonian", default="XX+Z", help="Hamiltonian like XX+Z or XX+Z+X"
    )
    parser.add_argument("--observable", default="Z", help="Observable like Z or XY")
    return parser


def parse_cli(argv=None) -> Config:
    """Parse and validate command line arguments."""
    args = _build_parser().parse_args(argv)
    if args.steps < 1:
        raise ValueError("steps > 0 required")
    if args.density <= 0:
        raise ValueError("density > 0 required")
    if args.interval <= 0:
        raise ValueError("interval > 0 required")

    vec = [float(token) for token in args.substitution.split(",") if token]
    if len(vec) != 3:
        raise ValueError("substitution expects x,y,z")
    if abs(sum(component * component for component in vec) - 1.0) > 1e-6:
        raise ValueError("x^2+y^2+z^2 must equal 1")

    return Config(
        trotter_steps=args.steps,
        dt=args.density,
        t_max=args.interval,
        pol=(vec[0], vec[1], vec[2]),
        hamiltonian=args.hamiltonian,
        observable=args.observable,
    )


def pauli_literal(literal: str) -> ScaledPauliString:
    """Build a Pauli string from letters such as ``"XYZ"``, one per site."""
    pairs = []
    for site, letter in enumerate(literal):
        try:
            pairs.append((site, _LETTERS[letter]))
        except KeyError:
            raise ValueError("invalid Pauli char") from None
    return make_pauli_string(pairs)


def build_hamiltonian(expression: str) -> Hamiltonian:
    """Build a Hamiltonian from a sum of literals such as ``"XX+Z"``."""
    terms: dict[PauliString, object] = {}
    for part in expression.split("+"):
        scaled = pauli_literal(part)
        terms[scaled.pauli] = terms.get(scaled.pauli, sympy.Integer(0)) + scaled.coef
    return Hamiltonian(terms)


def evaluate(state, tau, config: Config) -> list[tuple[float, float]]:
    """Expectation value of the evolved observable on the time grid."""
    p_x, p_y, p_z = config.pol
    polarized = []
    for string, coef in state:
        pol = complex(string.polarize(p_x, p_y, p_z))
        if pol != 0:
            polarized.append((coef, pol))

    results = []
    t = 0.0
    while t <= config.t_max + 1e-12:
        step = t / config.trotter_steps
        total = sum(
            (complex(sympy.N(coef.subs(tau, step))) * pol for coef, pol in polarized),
            0j,
        )
        results.append((t, total.real))
        t += config.dt
    return results


def main(argv=None) -> int:
    """Run the simulator and print ``t value`` lines."""
    try:
        config = parse_cli(argv)
        hamiltonian = build_hamiltonian(config.hamiltonian)
        observable = pauli_literal(config.observable)
        calculator = EvolutionCalculator(observable, hamiltonian)
        calculator.advance(config.trotter_steps)
        for t, value in evaluate(calculator.show(), calculator.tau, config):
            print(f"{t:g} {value:g}")
    except Exception as error:  # reported like any other failure of the run
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())