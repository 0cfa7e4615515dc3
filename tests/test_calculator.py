import pytest
import sympy

from trotterpauli.calculator import EvolutionCalculator
from trotterpauli.hamiltonian import Hamiltonian
from trotterpauli.pauli import PauliMatrix, make_pauli_string


def _scaled(*pairs):
    return make_pauli_string(list(pairs))


def _hamiltonian(*terms):
    return Hamiltonian({term.pauli: term.coef for term in terms})


XX = _scaled((0, PauliMatrix.X), (1, PauliMatrix.X))
Z0 = _scaled((0, PauliMatrix.Z))
Z2 = _scaled((2, PauliMatrix.Z))
X0 = _scaled((0, PauliMatrix.X))
Y0 = _scaled((0, PauliMatrix.Y))


def _value(expr, calc, tau):
    return complex(sympy.N(expr.subs(calc.tau, tau)))


def test_commuting_observable_is_unchanged():
    calc = EvolutionCalculator(Z0, _hamiltonian(Z0))
    calc.advance(3)
    assert calc.show() == [(Z0.pauli, 1)]


def test_advance_zero_keeps_initial_state():
    calc = EvolutionCalculator(Z2, _hamiltonian(XX, Z0))
    calc.advance(0)
    assert calc.show() == [(Z2.pauli, Z2.coef)]


def test_steps_are_counted():
    calc = EvolutionCalculator(Z0, _hamiltonian(X0))
    calc.advance(2)
    assert calc.steps == 2


def test_show_strings_matches_show():
    calc = EvolutionCalculator(Z2, _hamiltonian(XX, Z0))
    calc.advance()
    assert calc.show_strings() == [string for string, _ in calc.show()]
    assert calc.show_strings() == sorted(calc.show_strings())


def test_single_qubit_rotation_mixes_z_and_y():
    calc = EvolutionCalculator(Z0, _hamiltonian(X0))
    calc.advance(3)
    assert set(calc.show_strings()) == {Z0.pauli, Y0.pauli}


def test_coefficients_are_nonzero():
    calc = EvolutionCalculator(Z0, _hamiltonian(X0))
    calc.advance()
    magnitudes = [abs(_value(coef, calc, 0.3)) for _, coef in calc.show()]
    assert len(magnitudes) == 2
    assert min(magnitudes) > 1e-9


def test_tau_zero_recovers_observable():
    calc = EvolutionCalculator(Z2, _hamiltonian(XX, Z0))
    calc.advance()
    for string, coef in calc.show():
        expected = 1 if string == Z2.pauli else 0
        assert _value(coef, calc, 0) == pytest.approx(expected)


@pytest.mark.parametrize("tau", [0.1, 0.45, 1.3])
def test_norm_is_preserved(tau):
    calc = EvolutionCalculator(Z2, _hamiltonian(XX, Z0))
    calc.advance()
    norm = sum(abs(_value(coef, calc, tau)) ** 2 for _, coef in calc.show())
    assert norm == pytest.approx(1.0)


@pytest.mark.parametrize("tau", [0.2, 0.9])
def test_single_qubit_norm_over_several_steps(tau):
    calc = EvolutionCalculator(Z0, _hamiltonian(X0))
    calc.advance(3)
    norm = sum(abs(_value(coef, calc, tau)) ** 2 for _, coef in calc.show())
    assert norm == pytest.approx(1.0)