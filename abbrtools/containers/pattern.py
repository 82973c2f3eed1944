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
from CachedMethods import cached_property
from collections import defaultdict
from typing import Dict, List, Optional, Tuple, Union, TYPE_CHECKING
from .bonds import Bond
from .common import Graph
from ..periodictable import AnyElement, Element


if TYPE_CHECKING:
    from .molecule import MoleculeContainer


frequency = {0: 11,  # wildcard
             1: 10,  # H
             6: 9,  # C
             8: 8,  # O
             7: 7,  # N
             15: 6, 16: 6,  # P, S
             9: 5,  # F
             17: 4, 35: 4,  # Cl, Br
             53: 3,  # I
             5: 2, 14: 2,  # B, Si
             11: 1, 12: 1, 19: 1, 20: 1}  # Na, Mag,  K, Ca


def atom_frequency(x):
    return frequency.get(x.atomic_number, 0)


class PatternContainer(Graph):
    """
    Graph of abbreviation pattern. Hydrogens are always implicit and fixed.
    Wildcard atom marks the attachment point.
    """
    __slots__ = ()

    def add_atom(self, atom: Union[Element, str], _map: Optional[int] = None, *, charge: int = 0,
                 hydrogens: int = 0) -> int:
        if not isinstance(atom, Element):
            if isinstance(atom, str):
                atom = Element.from_symbol(atom)
            else:
                raise TypeError('Element object expected')
        if not isinstance(hydrogens, int):
            raise TypeError('hydrogens count should be int')
        elif hydrogens < 0:
            raise ValueError('hydrogens count should be positive')

        _map = super().add_atom(atom, _map, charge=charge)
        self._hydrogens[_map] = hydrogens
        return _map

    def add_bond(self, n: int, m: int, bond: Union[Bond, int]):
        if not isinstance(bond, Bond):
            bond = Bond(bond)
        super().add_bond(n, m, bond)

    @cached_property
    def wildcards(self) -> Tuple[int, ...]:
        """
        Numbers of wildcard atoms
        """
        return tuple(n for n, a in self._atoms.items() if isinstance(a, AnyElement))

    @property
    def wildcard(self) -> Optional[int]:
        """
        Attachment point atom number. None for exact patterns.
        """
        wildcards = self.wildcards
        if wildcards:
            return wildcards[0]

    def match_atom(self, n: int, molecule: 'MoleculeContainer', m: int) -> bool:
        """
        Compare pattern atom with molecule atom.

        Wildcard matches any not hydrogen atom. Other atoms should be the same element and isotope (if set) with
        same charge, same number of hydrogens (implicit and explicit) and same number of heavy neighbors.
        """
        atom = self._atoms[n]
        o_atom = molecule._atoms[m]
        if isinstance(atom, AnyElement):
            return o_atom.atomic_number != 1
        elif atom.atomic_number != o_atom.atomic_number:
            return False
        elif atom.isotope is not None and atom.isotope != o_atom.isotope:
            return False
        elif self._charges[n] != molecule._charges[m]:
            return False
        elif len(self._bonds[n]) != molecule.neighbors(m):
            return False
        return self._hydrogens[n] == molecule.total_hydrogens(m)

    @cached_property
    def _compiled_query(self) -> Tuple[List[List[Tuple[int, Optional[int], Optional[Bond]]]],
                                       Dict[int, List[Tuple[int, Bond]]]]:
        return self.__compile_query(self._atoms, self._bonds, {n: atom_frequency(a) for n, a in self._atoms.items()})

    @staticmethod
    def __compile_query(atoms, bonds, atoms_frequencies):
        """
        DFS ordered atoms of each component starting from the rarest element.
        Closures keep ring bonds to already visited atoms.
        """
        closures = defaultdict(list)
        components = []
        seen = set()
        while len(seen) < len(atoms):
            start = min(atoms.keys() - seen, key=lambda x: (atoms_frequencies[x], x))
            seen.add(start)
            stack = [(n, start, bond) for n, bond in sorted(bonds[start].items(), reverse=True,
                                                            key=lambda x: (atoms_frequencies[x[0]], x[0]))]
            order = [(start, None, None)]
            components.append(order)

            while stack:
                front, back, bond = atom = stack.pop()
                if front not in seen:
                    order.append(atom)
                    for n, b in sorted(bonds[front].items(), reverse=True,
                                       key=lambda x: (atoms_frequencies[x[0]], x[0])):
                        if n != back:
                            if n not in seen:
                                stack.append((n, front, b))
                            else:
                                closures[front].append((n, b))
                    seen.add(front)
        return components, closures

    @classmethod
    def from_molecule(cls, molecule: 'MoleculeContainer') -> 'PatternContainer':
        """
        Convert molecule to pattern. Explicit hydrogens bonded to single heavy atom are folded into
        hydrogens count of this atom.

        :raise ValueError: hydrogens count not computable or hydrogen atoms not foldable.
        """
        atoms = molecule._atoms
        bonds = molecule._bonds
        pattern = cls()
        for n, atom in atoms.items():
            if atom.atomic_number == 1:
                ms = bonds[n]
                if len(ms) == 1 and atoms[next(iter(ms))].atomic_number != 1:
                    continue
                raise ValueError('hydrogen atom should be bonded to single heavy atom')
            if isinstance(atom, AnyElement):
                hydrogens = 0
            else:
                hydrogens = molecule.total_hydrogens(n)
                if hydrogens is None:
                    raise ValueError(f'invalid valence of atom {n}')
            pattern.add_atom(atom.copy(), n, charge=molecule._charges[n], hydrogens=hydrogens)
        for n, m, bond in molecule.bonds():
            if n in pattern and m in pattern:
                pattern.add_bond(n, m, bond.copy())
        return pattern


__all__ = ['PatternContainer']
