"""Symbolic Trotterised Heisenberg evolution of a Pauli observable."""

from __future__ import annotations

import sympy

from .hamiltonian import Group, Hamiltonian
from .pauli import PauliString, ScaledPauliString, mask_to_vector


def _combine(terms: list[tuple[PauliString, object]]) -> list[tuple[PauliString, object]]:
    merged: dict[PauliString, object] = {}
    for string, coef in terms:
        merged[string] = merged.get(string, sympy.Integer(0)) + coef
    return [(string, coef) for string, coef in sorted(merged.items()) if coef != 0]


class EvolutionCalculator:
    """Evolves an observable under a Hamiltonian, one Trotter step at a time.

    The state is a list of ``(PauliString, coefficient)`` pairs whose
    coefficients are expressions in the time step symbol :attr:`tau`.
    """

    def __init__(self, observable: ScaledPauliString, hamiltonian: Hamiltonian) -> None:
        self.tau = sympy.Symbol("tau", positive=True)
        self.steps = 0
        self._hamiltonian = hamiltonian
        self._state: list[tuple[PauliString, object]] = [
            (observable.pauli, sympy.sympify(observable.coef))
        ]

    def advance(self, count: int = 1) -> None:
        """Apply ``count`` Trotter steps."""
        arg_coef = 2 * self.tau
        for _ in range(count):
            self.steps += 1
            for group in self._hamiltonian.groups():
                for color in range(group.color_number()):
                    self._apply_color(group, color, arg_coef)

    def _apply_color(self, group: Group, color: int, arg_coef) -> None:
        mask = 0
        for string, _ in self._state:
            mask |= string.sites()
        conflicts: dict[PauliString, object] = {}
        for site in mask_to_vector(mask):
            for string, coef in group.filter(color, site).items():
                conflicts.setdefault(string, coef)

        for pauli, pauli_coef in sorted(conflicts.items()):
            phase = pauli.phase_adjustment()
            arg = arg_coef * phase * pauli_coef
            new_state: list[tuple[PauliString, object]] = []
            for string, coef in self._state:
                if pauli.does_commute_with(string):
                    new_state.append((string, coef))
                    continue
                product = pauli * string
                new_state.append((string, sympy.cos(arg) * coef))
                new_state.append(
                    (
                        product.pauli,
                        product.coef
                        * sympy.conjugate(phase)
                        * sympy.I
                        * sympy.sin(arg)
                        * coef,
                    )
                )
            self._state = _combine(new_state)

    def show(self) -> list[tuple[PauliString, object]]:
        """The current terms of the evolved observable."""
        return list(self._state)

    def show_strings(self) -> list[PauliString]:
        """The Pauli strings of the current terms."""
        return [string for string, _ in self._state]