# -*- coding: utf-8 -*-
#
#  Copyright 2021 Ramil Nugmanov <nougmanoff@protonmail.com>
#  This file is part of Abbrtools.
#
#  Abbrtools is free software; you can redistribute it and/or modify
#  it under the terms of the GNU Lesser General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  GNU Lesser General Public License for more details.
#
#  You should have received a copy of the GNU Lesser General Public License
#  along with this program; if not, see <https://www.gnu.org/licenses/>.
#
from abbrtools import Abbreviations, AbbreviationGroup, smiles
from abbrtools.abbreviations import PatternMode, SubstructureMatcher
from abbrtools.exceptions import MatchBudgetExceeded, PatternSyntaxError, ResourceError
from abbrtools.periodictable import Superatom
from pathlib import Path
from pytest import raises


def _check_invariants(groups, molecule):
    claimed = molecule.claimed_atoms
    seen = set()
    for g in groups:
        assert seen.isdisjoint(g.atoms)
        assert claimed.isdisjoint(g.atoms)
        seen.update(g.atoms)
        for inner, outer in g.bonds:
            assert inner in g.atoms
            assert outer not in g.atoms


def test_potassium_carbonate():
    mol = smiles('[K+].[O-]C(=O)[O-].[K+]')
    abbr = Abbreviations()
    pattern = abbr.add('[K+].[O-]C(=O)[O-].[K+] K2CO3')
    assert pattern.mode is PatternMode.EXACT
    groups = abbr.generate(mol)
    assert len(groups) == 1
    assert groups[0].label == 'K2CO3'
    assert len(groups[0].atoms) == 6
    assert groups[0].bonds == ()


def test_phenyl():
    mol = smiles('CCCCCCC(c1ccccc1)(c1ccccc1)c1ccccc1')
    abbr = Abbreviations()
    pattern = abbr.add('*c1ccccc1 Ph')
    assert pattern.mode is PatternMode.ATTACHMENT
    groups = abbr.generate(mol)
    assert len(groups) == 3
    for g in groups:
        assert g.label == 'Ph'
        assert len(g.atoms) == 6
        assert len(g.bonds) == 1
        assert g.bonds[0][1] == 7  # central carbon
    assert [min(g.atoms) for g in groups] == [8, 14, 20]
    _check_invariants(groups, mol)


def test_phenyl_should_not_match_benzene():
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    assert abbr.generate(smiles('c1ccccc1')) == []


def test_phenyl_should_not_match_disubstituted():
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    assert abbr.generate(smiles('Oc1ccc(O)cc1')) == []


def test_avoid_over_zealous_abbreviations():
    mol = smiles('Clc1ccccc1')
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    assert len(abbr.generate(mol)) == 1
    assert abbr.apply(mol) == 0
    assert len(mol) == 7


def test_phenyl_should_abbreviate_explicit_hydrogens():
    mol = smiles('CCCCc1ccc([H])cc1')
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    groups = abbr.generate(mol)
    assert len(groups) == 1
    assert groups[0].label == 'Ph'
    assert len(groups[0].atoms) == 7
    assert len(groups[0].bonds) == 1
    assert 9 in groups[0].atoms  # hydrogen


def test_phenyl_should_match_kekule_form():
    mol = smiles('CCCCC1=CC=CC=C1')
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    groups = abbr.generate(mol)
    assert len(groups) == 1
    assert groups[0].label == 'Ph'
    assert len(groups[0].atoms) == 6
    assert groups[0].bonds == ((5, 4),)


def test_kekule_pattern_should_match_aromatic_form():
    abbr = Abbreviations()
    abbr.add('*C1=CC=CC=C1 Ph')
    groups = abbr.generate(smiles('CCCCc1ccccc1'))
    assert len(groups) == 1
    assert len(groups[0].atoms) == 6


def test_nitro_groups():
    mol = smiles('O=N(=O)CCCC[N+]([O-])=O')
    abbr = Abbreviations()
    abbr.add('*N(=O)(=O) NO2')
    abbr.add('*[N+]([O-])(=O) NO2')
    groups = abbr.generate(mol)
    assert len(groups) == 2
    for g in groups:
        assert g.label == 'NO2'
        assert len(g.atoms) == 3
        assert len(g.bonds) == 1
    assert groups[0].atoms == {1, 2, 3}
    assert groups[1].atoms == {8, 9, 10}


def test_abbreviations_have_priority():
    mol = smiles('c1ccccc1CCC')
    abbr = Abbreviations()
    abbr.add('*CCC Pr')
    abbr.add('*CC Et')
    groups = abbr.generate(mol)
    assert len(groups) == 1
    assert groups[0].label == 'Pr'
    assert groups[0].atoms == {7, 8, 9}

    abbr = Abbreviations()
    abbr.add('*CC Et')
    abbr.add('*CCC Pr')
    groups = abbr.generate(mol)
    assert len(groups) == 1
    assert groups[0].label == 'Et'


def test_dont_overwrite_existing_groups():
    mol = smiles('c1ccccc1CCC')
    mol.abbreviations = [AbbreviationGroup('n-Bu', frozenset({7, 8, 9}))]
    assert mol.claimed_atoms == {7, 8, 9}
    abbr = Abbreviations()
    abbr.add('*CCC Bu')
    assert abbr.generate(mol) == []
    assert abbr.apply(mol) == 0
    assert len(mol) == 9

    mol.abbreviations = [('n-Bu', {9})]  # partially claimed
    assert abbr.generate(mol) == []


def test_load_from_file():
    abbr = Abbreviations()
    assert abbr.load_from_file('obabel_superatoms.smi') == 27
    assert abbr.load_from_file('/abbrtools/data/obabel_superatoms.smi') == 27
    assert len(abbr) == 54
    labels = abbr.library.labels
    assert len(labels) == 26  # NO2 has two definitions
    assert labels[:3] == ['Boc', 'Cbz', 'Ts']


def test_load_from_filesystem(tmp_path):
    import abbrtools.data

    file = Path(abbrtools.data.__file__).parent / 'obabel_superatoms.smi'
    abbr = Abbreviations()
    assert abbr.load_from_file(file) == 27
    assert abbr.load_from_file(str(file)) == 27

    definitions = tmp_path / 'custom.smi'
    definitions.write_text('# comment\n\n*c1ccccc1 Ph\n*C(* broken\n*CC\tEthyl group\n')
    abbr = Abbreviations()
    assert abbr.load_from_file(definitions) == 2
    assert [x.label for x in abbr.library] == ['Ph', 'Ethyl group']
    assert [x.ordinal for x in abbr.library] == [0, 1]


def test_load_missing_resource():
    abbr = Abbreviations()
    for source in ('missing.smi', '/abbrtools/data/missing.smi', '/not/existing/package/file.smi'):
        with raises(ResourceError):
            abbr.load_from_file(source)
    assert len(abbr) == 0


def test_pattern_syntax_errors():
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    for text in ('*C', '*C(C X', '**C X', 'C(*)* X', '* X', 'C*C X', '*C.C X', '*[Xx] X', '  '):
        with raises(PatternSyntaxError) as e:
            abbr.add(text)
        assert e.value.text == text
    with raises(PatternSyntaxError):
        abbr.add('*C', '  ')
    assert len(abbr) == 1
    assert abbr.library[0].label == 'Ph'


def test_label_with_spaces():
    abbr = Abbreviations()
    pattern = abbr.add('*C(=O)OC(C)(C)C  tert-butoxy carbonyl ')
    assert pattern.label == 'tert-butoxy carbonyl'
    assert pattern.smiles == '*C(=O)OC(C)(C)C'
    pattern = abbr.add('*C(=O)C', 'Ac')
    assert pattern.label == 'Ac'
    assert pattern.ordinal == 1


def test_enable_disable():
    mol = smiles('CCCCCCC(c1ccccc1)(c1ccccc1)c1ccccc1')
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    abbr.set_enabled('Ph', False)
    assert not abbr.is_enabled('Ph')
    assert abbr.generate(mol) == []
    abbr.set_enabled('Ph')
    assert abbr.is_enabled('Ph')
    assert len(abbr.generate(mol)) == 3


def test_packaged_library():
    mol = smiles('CC(C)(C)OC(=O)NC(Cc1ccccc1)C(=O)OC')
    abbr = Abbreviations()
    abbr.load_from_file('obabel_superatoms.smi')
    groups = abbr.generate(mol)
    assert [g.label for g in groups] == ['Boc', 'Bn', 'CO2Me']
    assert groups[0].atoms == {1, 2, 3, 4, 5, 6, 7}
    assert groups[0].bonds == ((6, 8),)
    assert groups[1].atoms == {10, 11, 12, 13, 14, 15, 16}
    assert groups[1].bonds == ((10, 9),)
    assert groups[2].atoms == {17, 18, 19, 20}
    assert groups[2].bonds == ((17, 9),)
    _check_invariants(groups, mol)
    assert abbr.generate(mol) == groups  # idempotent

    assert abbr.apply(mol) == 3
    assert len(mol) == 5
    assert mol.hydrogens(8) == 1
    assert mol.hydrogens(9) == 1
    labels = sorted(a.label for _, a in mol.atoms() if isinstance(a, Superatom))
    assert labels == ['Bn', 'Boc', 'CO2Me']


def test_generate_keeps_molecule():
    mol = smiles('CCCCC1=CC=CC=C1')
    orders = [(n, m, b.order) for n, m, b in mol.bonds()]
    hydrogens = [mol.hydrogens(n) for n in mol]
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')
    assert abbr.generate(mol) == abbr.generate(mol)
    assert [(n, m, b.order) for n, m, b in mol.bonds()] == orders
    assert [mol.hydrogens(n) for n in mol] == hydrogens


def test_contraction():
    mol = smiles('CCCCCCC(c1ccccc1)(c1ccccc1)c1ccccc1')
    abbr = Abbreviations()
    abbr.add('*c1ccccc1 Ph')

    contracted = abbr.contract(mol)
    assert len(mol) == 25
    assert len(contracted) == 10
    superatoms = [n for n, a in contracted.atoms() if isinstance(a, Superatom)]
    assert len(superatoms) == 3
    for n in superatoms:
        assert contracted.atom(n).label == 'Ph'
        assert contracted.has_bond(n, 7)
        assert contracted.bond(n, 7).order == 1
    assert contracted.hydrogens(7) == 0

    assert abbr.apply(mol) == 3
    assert len(mol) == 10
    assert abbr.apply(mol) == 0


def test_contraction_keeps_charge():
    mol = smiles('CCC(=O)[O-]')
    abbr = Abbreviations()
    abbr.add('*C(=O)[O-] CO2-')
    assert abbr.apply(mol) == 1
    n = next(n for n, a in mol.atoms() if isinstance(a, Superatom))
    assert mol.atom(n).charge == -1
    assert mol.charge(n) == 0
    assert mol.hydrogens(2) == 2


def test_custom_policy():
    abbr = Abbreviations(policy=lambda molecule, group, remaining: True)
    abbr.add('*c1ccccc1 Ph')
    mol = smiles('Clc1ccccc1')
    assert abbr.apply(mol) == 1
    assert len(mol) == 2

    abbr = Abbreviations(policy=lambda molecule, group, remaining: remaining >= 10)
    abbr.add('*c1ccccc1 Ph')
    mol = smiles('CCCCCCC(c1ccccc1)(c1ccccc1)c1ccccc1')
    assert abbr.apply(mol) == 2  # 19 and 13 atoms remain after first and second phenyl


def test_exact_component_should_be_whole():
    abbr = Abbreviations()
    abbr.add('[O-]C(=O)[O-] CO3')
    assert abbr.generate(smiles('[O-]C(=O)O')) == []
    groups = abbr.generate(smiles('[O-]C(=O)[O-].[Na+].[Na+]'))
    assert len(groups) == 1
    assert groups[0].atoms == {1, 2, 3, 4}
    assert abbr.apply(smiles('[O-]C(=O)[O-].[Na+].[Na+]')) == 1


def test_match_budget():
    mol = smiles('BrCCCCCCC(c1ccccc1)(c1ccccc1)c1ccccc1')
    abbr = Abbreviations(match_budget=10)
    assert abbr.match_budget == 10
    pattern = abbr.add('*c1ccccc1 Ph')
    abbr.add('*Br Br')
    groups = abbr.generate(mol)
    assert len(groups) == 1
    assert groups[0].label == 'Br'
    assert groups[0].bonds == ((1, 2),)

    matcher = SubstructureMatcher(10)
    with raises(MatchBudgetExceeded):
        list(matcher.match(pattern, mol))
    assert len(list(matcher.match(pattern, mol, budget=100000))) == 3

    with raises(ValueError):
        SubstructureMatcher(0)


def test_matcher_candidates():
    abbr = Abbreviations()
    pattern = abbr.add('*c1ccccc1 Ph')
    candidates = list(SubstructureMatcher().match(pattern, smiles('c1ccccc1-c1ccccc1')))
    assert len(candidates) == 2  # each ring with other as attachment point
    assert {c.anchor for c in candidates} == {1, 7}
    for c in candidates:
        assert c.pattern is pattern
        assert len(c.atoms) == 6
    assert abbr.apply(smiles('c1ccccc1-c1ccccc1')) == 1


def test_contraction_of_neighbor_groups():
    abbr = Abbreviations(policy=lambda molecule, group, remaining: True)
    abbr.add('*c1ccccc1 Ph')
    mol = smiles('c1ccccc1-c1ccccc1')
    groups = abbr.generate(mol)
    assert [g.bonds for g in groups] == [((6, 7),), ((7, 6),)]
    assert abbr.apply(mol) == 2
    assert len(mol) == 2
    assert mol.has_bond(13, 14)
    assert mol.bond(13, 14).order == 1
