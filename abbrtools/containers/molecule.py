# -*- coding: utf-8 -*-
#
#  Copyright 2017-2021 Ramil Nugmanov <nougmanoff@protonmail.com>
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
from CachedMethods import cached_args_method, cached_property
from typing import FrozenSet, Iterable, List, Optional, Set, Union
from .bonds import Bond
from .common import Graph
from .groups import AbbreviationGroup
from ..algorithms.aromatics import Aromatize
from ..exceptions import AtomNotFound, ValenceError
from ..periodictable import Element, pyrrole_like


class MoleculeContainer(Graph, Aromatize):
    __slots__ = ('_fixed_hydrogens', '_abbreviations')

    def __init__(self):
        self._fixed_hydrogens: Set[int] = set()
        self._abbreviations: List[AbbreviationGroup] = []
        super().__init__()

    def add_atom(self, atom: Union[Element, str], _map: Optional[int] = None, *, charge: int = 0,
                 hydrogens: Optional[int] = None) -> int:
        """
        Add new atom.

        :param hydrogens: fixed number of implicit hydrogens. If None, hydrogens will be calculated by valence
            rules and recalculated on each structure change.
        """
        if not isinstance(atom, Element):
            if isinstance(atom, str):
                atom = Element.from_symbol(atom)
            else:
                raise TypeError('Element object expected')
        if hydrogens is not None:
            if not isinstance(hydrogens, int):
                raise TypeError('hydrogens count should be int')
            elif hydrogens < 0:
                raise ValueError('hydrogens count should be positive')

        _map = super().add_atom(atom, _map, charge=charge)
        if hydrogens is None:
            self._calc_implicit(_map)
        else:
            self._fixed_hydrogens.add(_map)
            self._hydrogens[_map] = hydrogens
        return _map

    def add_bond(self, n: int, m: int, bond: Union[Bond, int]):
        """
        Connect atoms with bond.

        Implicit hydrogens of atoms with not fixed hydrogens count will be recalculated.
        """
        if not isinstance(bond, Bond):
            bond = Bond(bond)
        super().add_bond(n, m, bond)
        self._calc_implicit(n)
        self._calc_implicit(m)

    def delete_atom(self, n: int):
        """
        Remove atom. Atom also removed from abbreviations groups.
        """
        try:
            old_bonds = self._bonds[n]
        except KeyError:
            raise AtomNotFound(n)
        super().delete_atom(n)
        self._fixed_hydrogens.discard(n)

        for m in old_bonds:
            self._calc_implicit(m)

        groups = []
        for group in self._abbreviations:
            if n in group.atoms:
                atoms = group.atoms - {n}
                if not atoms:
                    continue
                group = AbbreviationGroup(group.label, atoms, tuple(x for x in group.bonds if n not in x))
            elif any(n in x for x in group.bonds):
                group = AbbreviationGroup(group.label, group.atoms, tuple(x for x in group.bonds if n not in x))
            groups.append(group)
        self._abbreviations = groups

    def delete_bond(self, n: int, m: int):
        """
        Disconnect atoms.
        """
        super().delete_bond(n, m)
        self._calc_implicit(n)
        self._calc_implicit(m)

    def copy(self, **kwargs) -> 'MoleculeContainer':
        copy = super().copy(**kwargs)
        copy._fixed_hydrogens = self._fixed_hydrogens.copy()
        copy._abbreviations = self._abbreviations.copy()
        return copy

    @cached_args_method
    def neighbors(self, n: int) -> int:
        """number of neighbors atoms excluding hydrogens"""
        atoms = self._atoms
        return sum(atoms[m].atomic_number != 1 for m in self._bonds[n])

    @cached_args_method
    def explicit_hydrogens(self, n: int) -> int:
        """
        Number of explicit hydrogen atoms connected to atom.
        """
        atoms = self._atoms
        return sum(atoms[m].atomic_number == 1 for m in self._bonds[n])

    def total_hydrogens(self, n: int) -> Optional[int]:
        """
        Number of implicit and explicit hydrogens. None if implicit hydrogens not computable.
        """
        h = self._hydrogens[n]
        if h is None:
            return
        return h + self.explicit_hydrogens(n)

    @property
    def abbreviations(self) -> List[AbbreviationGroup]:
        """
        Pre-existing abbreviations groups of molecule. Atoms of groups are excluded from new abbreviations.
        """
        return self._abbreviations.copy()

    @abbreviations.setter
    def abbreviations(self, groups: Iterable[Union[AbbreviationGroup, tuple]]):
        atoms = self._atoms
        out = []
        for group in groups:
            if not isinstance(group, AbbreviationGroup):
                group = AbbreviationGroup(*group)
            group = AbbreviationGroup(group.label, frozenset(group.atoms), tuple(group.bonds))
            if not group.atoms:
                raise ValueError('empty group')
            if not group.atoms.issubset(atoms):
                raise AtomNotFound(group.atoms - atoms.keys())
            out.append(group)
        self._abbreviations = out
        self.flush_cache()

    @cached_property
    def claimed_atoms(self) -> FrozenSet[int]:
        """
        Atoms covered by pre-existing abbreviations.
        """
        return frozenset(n for g in self._abbreviations for n in g.atoms)

    def _calc_implicit(self, n: int):
        if n in self._fixed_hydrogens:
            return
        atom = self._atoms[n]
        if atom.atomic_number == 1:
            self._hydrogens[n] = 0
            return
        try:
            valences = atom.valences(self._charges[n])
        except ValenceError:
            self._hydrogens[n] = 0
            return

        explicit_sum = 0
        aromatic = 0
        for bond in self._bonds[n].values():
            order = bond.order
            if order == 4:
                aromatic += 1
            elif order != 8:
                explicit_sum += order

        if aromatic:
            if atom.atomic_symbol in pyrrole_like or not valences:
                self._hydrogens[n] = 0
            else:  # aromatic ring atom has one extra electron in pi system
                self._hydrogens[n] = max(valences[0] - explicit_sum - aromatic - 1, 0)
            return

        for v in valences:
            if v >= explicit_sum:
                self._hydrogens[n] = v - explicit_sum
                break
        else:
            self._hydrogens[n] = None


__all__ = ['MoleculeContainer']
