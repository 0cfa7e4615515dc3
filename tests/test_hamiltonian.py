import pytest
import sympy

from trotterpauli.hamiltonian import Group, Hamiltonian
from trotterpauli.pauli import PauliMatrix, PauliString, make_pauli_string, mask_to_vector


def _term(*pairs):
    scaled = make_pauli_string(list(pairs))
    return scaled.pauli, scaled.coef


XX = _term((0, PauliMatrix.X), (1, PauliMatrix.X))
Z0 = _term((0, PauliMatrix.Z))
Z1 = _term((1, PauliMatrix.Z))


def _xx_plus_z():
    return Hamiltonian(dict([XX, Z0]))


def _xx_group():
    group = Group()
    group.emplace(*XX)
    group.do_coloring()
    return group


def test_groups_are_mutually_commuting():
    for group in _xx_plus_z().groups():
        strings = list(group.strings)
        assert all(a.does_commute_with(b) for a in strings for b in strings)


def test_groups_cover_all_terms():
    collected = {}
    for group in _xx_plus_z().groups():
        collected.update(group.strings)
    assert collected == dict([XX, Z0])


def test_anticommuting_terms_are_split():
    assert len(_xx_plus_z().groups()) == 2


def test_commuting_terms_share_a_group():
    groups = Hamiltonian(dict([Z0, Z1])).groups()
    assert len(groups) == 1
    assert groups[0].strings == dict([Z0, Z1])


def test_empty_hamiltonian_raises():
    with pytest.raises(ValueError):
        Hamiltonian({})


def test_identity_only_hamiltonian_raises():
    with pytest.raises(ValueError):
        Hamiltonian({PauliString(): sympy.Integer(1)})


def test_emplace_keeps_first_coefficient():
    group = Group()
    group.emplace(XX[0], 1)
    group.emplace(XX[0], 5)
    assert group.strings == {XX[0]: 1}


def test_color_number_follows_span():
    assert _xx_group().color_number() == 2
    single = Group()
    single.emplace(*Z0)
    single.do_coloring()
    assert single.color_number() == 1


def test_filter_strings_act_on_requested_site():
    group = _xx_group()
    for color in range(group.color_number()):
        for site in range(3, 8):
            for string in group.filter(color, site):
                assert site in mask_to_vector(string.sites())


def test_filter_colours_partition_translations():
    group = _xx_group()
    per_color = [set(group.filter(color, 5)) for color in range(group.color_number())]
    union = set().union(*per_color)
    assert union == {XX[0].translate(5), XX[0].translate(4)}
    assert sum(len(part) for part in per_color) == len(union)


def test_same_colour_translations_commute():
    group = _xx_group()
    for color in range(group.color_number()):
        strings = set()
        for site in range(2, 12):
            strings.update(group.filter(color, site))
        assert strings
        assert all(a.does_commute_with(b) for a in strings for b in strings)


def test_filter_keeps_coefficient():
    group = Group()
    group.emplace(XX[0], sympy.Rational(3, 2))
    group.do_coloring()
    values = [
        coef
        for color in range(group.color_number())
        for coef in group.filter(color, 4).values()
    ]
    assert values
    assert all(value == sympy.Rational(3, 2) for value in values)