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
from typing import Dict, Iterable
from ..containers import AbbreviationGroup, Bond, MoleculeContainer
from ..periodictable import Superatom


class ContractionApplier:
    """
    Replaces groups by superatoms.
    """
    __slots__ = ()

    @staticmethod
    def contract(molecule: MoleculeContainer, groups: Iterable[AbbreviationGroup]) -> Dict[int, AbbreviationGroup]:
        """
        Replace each group by single superatom in place. Boundary bonds reattached to superatom with the same
        order, aromatic bonds become single. Superatom keeps total charge of group.

        :return: superatoms numbers mapped to groups
        """
        charges = molecule._charges
        bonds = molecule._bonds
        replaced = {}  # atoms of already contracted groups: superatom
        out = {}
        for group in groups:
            charge = sum(charges[n] for n in group.atoms)
            s = molecule.add_atom(Superatom(group.label, charge), hydrogens=0)
            for inner, outer in group.bonds:
                outer = replaced.get(outer, outer)  # neighbor group contracted earlier
                bond = bonds[inner][outer]
                molecule.add_bond(s, outer, Bond(1) if bond.is_aromatic else bond.copy())
            for n in group.atoms:
                molecule.delete_atom(n)
                replaced[n] = s
            out[s] = group
        return out


__all__ = ['ContractionApplier']
