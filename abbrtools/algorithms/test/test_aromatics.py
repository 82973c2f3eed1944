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


def test_benzene():
    mol = smiles('C1=CC=CC=C1')
    assert mol.thiele()
    assert all(b.order == 4 for *_, b in mol.bonds())
    assert all(mol.hydrogens(n) == 1 for n in mol)
    assert not mol.thiele()  # already aromatic


def test_substituted_benzene():
    mol = smiles('CC1=CC=C(C=C1)N(=O)=O')
    hydrogens = [mol.hydrogens(n) for n in mol]
    assert mol.thiele()
    assert [mol.hydrogens(n) for n in mol] == hydrogens
    assert mol.bond(1, 2).order == 1
    assert sum(b.order == 4 for *_, b in mol.bonds()) == 6
    assert mol.bond(8, 9).order == 2


def test_heterocycles():
    for s in ('C1=CNC=C1', 'C1=COC=C1', 'C1=CSC=C1', 'C1=CC=NC=C1'):
        mol = smiles(s)
        assert mol.thiele(), s
        assert all(b.order == 4 for *_, b in mol.bonds()), s


def test_not_aromatic():
    for s in ('C1=CCCCC1', 'C1CCCCC1', 'C1=CC=C1', 'C1=CC=CCC1'):
        mol = smiles(s)
        orders = [b.order for *_, b in mol.bonds()]
        assert not mol.thiele(), s
        assert [b.order for *_, b in mol.bonds()] == orders, s


def test_quinone():
    mol = smiles('O=C1C=CC(=O)C=C1')
    assert not mol.thiele()
    assert sum(b.order == 2 for *_, b in mol.bonds()) == 4


def test_naphthalene():
    mol = smiles('C1=CC2=CC=CC=C2C=C1')
    assert len(mol.sssr) == 2
    assert all(len(r) == 6 for r in mol.sssr)
    assert mol.thiele()
    assert mol.bonds_count == 11
    assert all(b.order == 4 for *_, b in mol.bonds())


def test_biphenyl_bridge():
    mol = smiles('c1ccccc1c1ccccc1')
    assert mol.bond(6, 7).order == 4
    mol.thiele()
    assert mol.bond(6, 7).order == 1
    assert sum(b.order == 4 for *_, b in mol.bonds()) == 12


def test_sssr():
    assert smiles('CCC').sssr == ()
    assert len(smiles('C1CCCCC1').sssr[0]) == 6
    assert sorted(len(x) for x in smiles('C1CCC2(CC1)CCC2').sssr) == [4, 6]
    cubane = smiles('C12C3C4C1C5C2C3C45')
    assert cubane.rings_count == 5
    assert len(cubane.sssr) == 5
    assert all(len(x) == 4 for x in cubane.sssr)
    assert len(cubane.ring_bonds) == 12


def test_components():
    mol = smiles('CC.O.[Na+]')
    assert mol.connected_components == ((1, 2), (3,), (4,))
    assert mol.atoms_components == {1: 0, 2: 0, 3: 1, 4: 2}
