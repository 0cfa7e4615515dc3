"""Pauli strings: tensor products of single-qubit Pauli matrices on numbered sites."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

import sympy

QUBIT_BITS = 64
_MASK = (1 << QUBIT_BITS) - 1

_PHASES = (sympy.Integer(1), sympy.I, sympy.Integer(-1), -sympy.I)
_PHASE_TEXT = ("", "I", "-", "-I")
_MATRIX_TEXT = ("", "X", "Z", "Y")


class PauliMatrix(IntEnum):
    """Single-qubit Pauli matrix, encoded as the bit pair (v, w)."""

    ONE = 0
    X = 1
    Z = 2
    Y = 3


def _popcount(value: int) -> int:
    return bin(value).count("1")


def mask_to_vector(mask: int) -> list[int]:
    """Return the indices of the set bits of ``mask`` in ascending order."""
    result = []
    while mask:
        result.append((mask & -mask).bit_length() - 1)
        mask &= mask - 1
    return result


@dataclass(frozen=True, order=True)
class PauliString:
    """A multi-qubit Pauli operator in the binary (v, w) representation.

    A site with both bits set stands for ``X*Z``; the phase needed to turn
    those into proper ``Y`` matrices is given by :meth:`phase_adjustment`.
    """

    v: int = 0
    w: int = 0

    def does_commute_with(self, other: PauliString) -> bool:
        """Tell whether this string commutes with ``other``."""
        return (_popcount(self.v & other.w) ^ _popcount(self.w & other.v)) % 2 == 0

    def translate(self, shift: int) -> PauliString:
        """Shift every site by ``shift`` (negative shifts move towards site 0)."""
        if shift >= 0:
            return PauliString((self.v << shift) & _MASK, (self.w << shift) & _MASK)
        return PauliString(self.v >> -shift, self.w >> -shift)

    def sites(self) -> int:
        """Bit mask of the sites on which the string acts non-trivially."""
        return self.v | self.w

    def phase_adjustment(self):
        """Phase ``i**k`` where ``k`` is the number of Y sites."""
        return _PHASES[_popcount(self.v & self.w) % 4]

    def _matrices(self) -> Iterable[tuple[int, int]]:
        for site in mask_to_vector(self.sites()):
            yield site, (((self.v >> site) & 1) << 1) | ((self.w >> site) & 1)

    def polarize(self, p_x, p_y, p_z):
        """Substitute each matrix by a polarization component and multiply."""
        substitution = (1, p_x, p_z, p_y)
        result = self.phase_adjustment()
        for _, matrix in self._matrices():
            result = result * substitution[matrix]
        return result

    def __mul__(self, other: PauliString) -> ScaledPauliString:
        if not isinstance(other, PauliString):
            return NotImplemented
        sign = 1 if _popcount(self.w & other.v) % 2 == 0 else -1
        return ScaledPauliString(
            PauliString(self.v ^ other.v, self.w ^ other.w), sympy.Integer(sign)
        )

    def __str__(self) -> str:
        if self.v == 0 and self.w == 0:
            return "ONE"
        parts = [_PHASE_TEXT[_popcount(self.v & self.w) % 4]]
        parts.extend(
            f"[{_MATRIX_TEXT[matrix]}_{site}]" for site, matrix in self._matrices()
        )
        return "".join(parts)


@dataclass(frozen=True)
class ScaledPauliString:
    """A Pauli string together with a (possibly symbolic) coefficient."""

    pauli: PauliString
    coef: object


def single_site(site: int, matrix: PauliMatrix) -> PauliString:
    """Build a string holding one matrix at ``site`` (no phase correction)."""
    if not 0 <= site < QUBIT_BITS:
        raise ValueError(f"site must be in [0, {QUBIT_BITS}), got {site}")
    code = int(matrix)
    return PauliString(((code & 2) >> 1) << site, (code & 1) << site)


def make_pauli_string(init: Iterable[tuple[int, PauliMatrix]]) -> ScaledPauliString:
    """Build a properly phased Pauli string from ``(site, matrix)`` pairs."""
    v = w = 0
    for site, matrix in init:
        term = single_site(site, matrix)
        v ^= term.v
        w ^= term.w
    string = PauliString(v, w)
    return ScaledPauliString(string, sympy.conjugate(string.phase_adjustment()))