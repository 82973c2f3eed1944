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
from abbrtools import smiles
from abbrtools.exceptions import IncorrectSmiles
from abbrtools.periodictable import AnyElement
from pytest import raises


def test_organic_subset_hydrogens():
    mol = smiles('CC(=O)O')
    assert [mol.hydrogens(n) for n in mol] == [3, 0, 0, 1]
    assert mol.bond(2, 3).order == 2

    mol = smiles('ClCBr')
    assert [mol.atom(n).atomic_symbol for n in mol] == ['Cl', 'C', 'Br']
    assert mol.hydrogens(2) == 2

    mol = smiles('O=N(=O)C')
    assert mol.hydrogens(2) == 0
    mol = smiles('CS(=O)(=O)C')
    assert mol.hydrogens(2) == 0


def test_bracket_atoms():
    mol = smiles('[NH4+]')
    assert mol.hydrogens(1) == 4
    assert mol.charge(1) == 1

    mol = smiles('[13CH3][O-:2]')
    assert mol.atom(1).isotope == 13
    assert mol.hydrogens(1) == 3
    assert mol.charge(2) == -1
    assert mol.hydrogens(2) == 0

    mol = smiles('[Na+].[Cl-]')
    assert mol.connected_components_count == 2
    assert mol.charge(1) == 1 and mol.charge(2) == -1

    mol = smiles('[C@@H](F)(Cl)Br')
    assert mol.hydrogens(1) == 1


def test_fixed_hydrogens_kept():
    mol = smiles('[CH3]C')
    mol.delete_bond(1, 2)
    assert mol.hydrogens(1) == 3
    assert mol.hydrogens(2) == 4


def test_aromatic_atoms():
    mol = smiles('c1ccccc1')
    assert all(b.order == 4 for *_, b in mol.bonds())
    assert all(mol.hydrogens(n) == 1 for n in mol)

    mol = smiles('c1cc[nH]c1')
    assert mol.hydrogens(4) == 1
    assert mol.bond(3, 4).order == 4

    mol = smiles('c1ccncc1')
    assert mol.hydrogens(4) == 0
    mol = smiles('c1ccsc1')
    assert mol.hydrogens(4) == 0


def test_closures_and_branches():
    mol = smiles('C%10CC%10')
    assert mol.bonds_count == 3
    assert mol.rings_count == 1

    mol = smiles('C1CC2CCC1CC2')
    assert mol.rings_count == 2

    mol = smiles('C=1CC=1')
    assert mol.bond(1, 3).order == 2

    mol = smiles('C/C=C/C')
    assert [b.order for *_, b in mol.bonds()] == [1, 2, 1]

    mol = smiles('CC(C)(C)C')
    assert mol.neighbors(2) == 4
    assert mol.hydrogens(2) == 0


def test_wildcard():
    mol = smiles('*C')
    assert isinstance(mol.atom(1), AnyElement)
    assert mol.atom(1).atomic_number == 0
    assert mol.hydrogens(1) == 0
    assert mol.hydrogens(2) == 3


def test_explicit_hydrogens():
    mol = smiles('[H]C([H])C')
    assert mol.hydrogens(2) == 1
    assert mol.explicit_hydrogens(2) == 2
    assert mol.total_hydrogens(2) == 3
    assert mol.neighbors(2) == 1


def test_invalid_valence():
    mol = smiles('CN(=O)(=O)=O')
    assert mol.hydrogens(2) is None
    assert mol.total_hydrogens(2) is None


def test_invalid_smiles():
    for s in ('', 'C((C))', 'C)', '(C', 'C1CC', 'C==C', 'C=', '=C', '[Xx]', 'Cx', 'Bz', '[C', 'C]', 'C[]',
              'C%', '[C+5]', 'C11', 'C.1CC1', 'C12C1', 'C12CC12'):
        with raises(IncorrectSmiles):
            smiles(s)
