"""Symbolic Suzuki-Trotter evolution of Pauli-string observables, with a command line tool."""

__version__ = "1.0.0"
__all__ = ["pauli", "hamiltonian", "calculator", "cli"]