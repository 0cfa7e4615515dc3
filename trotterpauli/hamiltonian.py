"""Hamiltonians split into commuting groups, each with a translation colouring."""

from __future__ import annotations

from math import gcd
from typing import Mapping

import sympy

from .pauli import PauliString, mask_to_vector


class Group:
    """A set of mutually commuting base strings and their translation colouring.

    Translations of the base strings are sorted into colours so that all
    strings sharing a colour can be applied together.
    """

    def __init__(self) -> None:
        self._base: dict[PauliString, object] = {}
        self.starting_point: int | None = None
        self._block_size = 1
        self._period_length = 1

    @property
    def strings(self) -> dict[PauliString, object]:
        """The base strings with their coefficients, ordered by string."""
        return dict(sorted(self._base.items()))

    def color_number(self) -> int:
        """Number of colours used by the translation colouring."""
        return self._period_length

    def emplace(self, string: PauliString, coef) -> None:
        """Add a base string; an existing entry keeps its coefficient."""
        self._base.setdefault(string, sympy.sympify(coef))

    def do_coloring(self) -> None:
        """Work out block size and period from the sites the group touches."""
        mask = 0
        for string in self._base:
            mask |= string.sites()
        sites = mask_to_vector(mask)
        if not sites:
            raise ValueError("cannot colour a group that acts on no site")
        self.starting_point = sites[0]
        if len(sites) > 1:
            block = 0
            for previous, current in zip(sites, sites[1:]):
                block = gcd(block, current - previous)
                if block == 1:
                    break
            self._block_size = block
        self._period_length = (sites[-1] - sites[0]) // self._block_size + 1

    def _color_rule(self, shift: int) -> int:
        if shift >= 0:
            return (shift // self._block_size) % self._period_length
        shift = -shift - 1
        return self._period_length - 1 - shift // self._block_size

    def filter(self, color: int, site: int) -> dict[PauliString, object]:
        """Translations of the base strings onto ``site`` that carry ``color``."""
        result: dict[PauliString, object] = {}
        for string, coef in sorted(self._base.items()):
            for string_site in mask_to_vector(string.sites()):
                shift = site - string_site
                if self._color_rule(shift) == color:
                    result.setdefault(string.translate(shift), coef)
        return dict(sorted(result.items()))


class Hamiltonian:
    """A sum of Pauli strings split into groups of commuting terms."""

    def __init__(self, cycle_term: Mapping[PauliString, object]) -> None:
        items = sorted(cycle_term.items())
        if not items:
            raise ValueError("a Hamiltonian needs at least one term")
        self._groups = self._group_by_commutativity(items)
        for group in self._groups:
            group.do_coloring()
        self._groups.reverse()

    @staticmethod
    def _group_by_commutativity(items) -> list[Group]:
        strings = [string for string, _ in items]
        conflicts = [
            [not first.does_commute_with(second) for second in strings]
            for first in strings
        ]
        degrees = [sum(row) for row in conflicts]
        order = sorted(range(len(strings)), key=lambda index: -degrees[index])

        labels: list[int | None] = [None] * len(strings)
        for vertex in order:
            label = 0
            while any(
                clash and labels[other] == label
                for other, clash in enumerate(conflicts[vertex])
            ):
                label += 1
            labels[vertex] = label

        groups = [Group() for _ in range(max(labels) + 1)]
        for label, (string, coef) in zip(labels, items):
            groups[label].emplace(string, coef)
        return groups

    def groups(self) -> tuple[Group, ...]:
        """The groups in the order they are applied."""
        return tuple(self._groups)