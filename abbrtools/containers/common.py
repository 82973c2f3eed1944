# -*- coding: utf-8 -*-
#
#  Copyright 2018-2021 Ramil Nugmanov <nougmanoff@protonmail.com>
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
from abc import ABC, abstractmethod
from CachedMethods import cached_property
from typing import Dict, Iterator, Optional, Tuple
from .bonds import Bond
from ..algorithms.components import GraphComponents
from ..algorithms.sssr import SSSR
from ..exceptions import AtomNotFound
from ..periodictable import Element


class Graph(SSSR, GraphComponents, ABC):
    __slots__ = ('_atoms', '_bonds', '_meta', '_charges', '_hydrogens', '__dict__', '__weakref__')

    def __init__(self):
        """
        Empty data object initialization
        """
        self._atoms: Dict[int, Element] = {}
        self._charges: Dict[int, int] = {}
        self._hydrogens: Dict[int, Optional[int]] = {}
        self._bonds: Dict[int, Dict[int, Bond]] = {}
        self._meta = {}

    def __len__(self):
        return len(self._atoms)

    def __iter__(self):
        return iter(self._atoms)

    def __contains__(self, n: int):
        return n in self._atoms

    def __bool__(self):
        return bool(self._atoms)

    def atom(self, n: int) -> Element:
        try:
            return self._atoms[n]
        except KeyError:
            raise AtomNotFound(n)

    def has_atom(self, n: int) -> bool:
        return n in self._atoms

    def atoms(self) -> Iterator[Tuple[int, Element]]:
        """
        iterate over all atoms
        """
        return iter(self._atoms.items())

    def charge(self, n: int) -> int:
        """
        formal charge of atom
        """
        return self._charges[n]

    def hydrogens(self, n: int) -> Optional[int]:
        """
        number of implicit hydrogens. None if valence of atom is invalid
        """
        return self._hydrogens[n]

    def bond(self, n: int, m: int) -> Bond:
        try:
            return self._bonds[n][m]
        except KeyError:
            raise AtomNotFound((n, m))

    def has_bond(self, n: int, m: int) -> bool:
        try:
            self._bonds[n]  # check if atom exists
            return n in self._bonds[m]
        except KeyError:
            raise AtomNotFound

    def bonds(self) -> Iterator[Tuple[int, int, Bond]]:
        """
        iterate other all bonds
        """
        seen = set()
        for n, m_bond in self._bonds.items():
            seen.add(n)
            for m, bond in m_bond.items():
                if m not in seen:
                    yield n, m, bond

    @cached_property
    def bonds_count(self) -> int:
        return sum(len(x) for x in self._bonds.values()) // 2

    @property
    def meta(self) -> Dict:
        return self._meta

    @abstractmethod
    def add_atom(self, atom: Element, _map: Optional[int] = None, *, charge: int = 0) -> int:
        """
        new atom addition
        """
        if _map is None:
            _map = max(self._atoms, default=0) + 1
        elif not isinstance(_map, int):
            raise TypeError('mapping should be integer')
        elif _map in self._atoms:
            raise ValueError('atom with same number exists')

        self._atoms[_map] = atom
        self._charges[_map] = self._validate_charge(charge)
        self._bonds[_map] = {}
        self.__dict__.clear()
        return _map

    @abstractmethod
    def add_bond(self, n: int, m: int, bond: Bond):
        """
        new bond addition
        """
        if n == m:
            raise ValueError('atom loops impossible')
        if n not in self._bonds or m not in self._bonds:
            raise AtomNotFound('atoms not found')
        if n in self._bonds[m]:
            raise ValueError('atoms already bonded')

        self._bonds[n][m] = self._bonds[m][n] = bond
        self.__dict__.clear()

    def delete_atom(self, n: int):
        """
        implementation of atom removing
        """
        del self._atoms[n]
        del self._charges[n]
        del self._hydrogens[n]
        sb = self._bonds
        for m in sb.pop(n):
            del sb[m][n]
        self.__dict__.clear()

    def delete_bond(self, n: int, m: int):
        """
        implementation of bond removing
        """
        del self._bonds[n][m]
        del self._bonds[m][n]
        self.__dict__.clear()

    def copy(self, *, meta: bool = True):
        """
        copy of graph

        :param meta: include metadata
        """
        copy = object.__new__(self.__class__)
        copy._meta = self._meta.copy() if meta else {}
        copy._charges = self._charges.copy()
        copy._hydrogens = self._hydrogens.copy()

        copy._bonds = cb = {n: {} for n in self._bonds}
        seen = set()
        for n, m_bond in self._bonds.items():
            seen.add(n)
            for m, bond in m_bond.items():
                if m not in seen:
                    cb[n][m] = cb[m][n] = bond.copy()

        copy._atoms = {n: atom.copy() for n, atom in self._atoms.items()}
        return copy

    def flush_cache(self):
        self.__dict__.clear()

    @staticmethod
    def _validate_charge(charge):
        if not isinstance(charge, int):
            raise TypeError('formal charge should be int in range [-4, 4]')
        if charge > 4 or charge < -4:
            raise ValueError('formal charge should be in range [-4, 4]')
        return charge


__all__ = ['Graph']
