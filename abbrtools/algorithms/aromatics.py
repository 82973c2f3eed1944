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
from collections import defaultdict
from typing import TYPE_CHECKING, Union


if TYPE_CHECKING:
    from abbrtools import MoleculeContainer


class Aromatize:
    __slots__ = ()

    def thiele(self: Union['Aromatize', 'MoleculeContainer']) -> bool:
        """
        Convert structure to aromatic form (Huckel rule ignored). Return True if found any kekule ring.
        Implicit hydrogens counts are kept as is.
        """
        atoms = self._atoms
        bonds = self._bonds
        charges = self._charges

        self.__fix_bridges()

        rings = defaultdict(set)  # aromatic? skeleton. include quinones
        pyroles = set()
        for ring in self.sssr:
            lr = len(ring)
            if not 4 < lr < 8:  # skip 3-, 4-membered and big rings
                continue
            sp2 = sum(self._hybridization(n) == 2 and atoms[n].atomic_number in (5, 6, 7, 15) for n in ring)
            if sp2 != lr:  # not benzene like
                if lr != sp2 + 1:
                    continue
                # pyroles, furanes, etc
                try:
                    n = next(n for n in ring if self._hybridization(n) == 1)
                except StopIteration:  # exotic, just skip
                    continue
                if atoms[n].atomic_number not in (5, 7, 8, 15, 16, 34) or charges[n]:
                    continue
                if lr == 7 and atoms[n].atomic_number != 5:  # skip electron-rich 7-membered rings
                    continue
                pyroles.add(n)
            n, *_, m = ring
            rings[n].add(m)
            rings[m].add(n)
            for n, m in zip(ring, ring[1:]):
                rings[n].add(m)
                rings[m].add(n)

        if not rings:
            self.flush_cache()
            return False

        # delete quinones
        double_bonded = {n for n in rings if any(m not in rings and b.order == 2 for m, b in bonds[n].items())}
        if double_bonded:
            for n in double_bonded:
                for m in rings.pop(n):
                    rings[m].discard(n)

            for n in [n for n, ms in rings.items() if not ms]:  # imide leads to isolated atoms
                del rings[n]
            while True:
                try:
                    n = next(n for n, ms in rings.items() if len(ms) == 1)
                except StopIteration:
                    break
                m = rings.pop(n).pop()
                if n in pyroles:
                    rings[m].discard(n)
                else:
                    pm = rings.pop(m)
                    pm.discard(n)
                    for x in pm:
                        rings[x].discard(m)
            for n in [n for n, ms in rings.items() if not ms]:
                del rings[n]
        if not rings:
            self.flush_cache()
            return False

        n_sssr = sum(len(x) for x in rings.values()) // 2 - len(rings) + len(self._connected_components(rings))
        if not n_sssr:
            self.flush_cache()
            return False

        found = False
        for ring in self._sssr(rings, n_sssr):  # search rings again
            if len(ring) > 7:  # macrocycle formed by condensed rings skeleton
                continue
            found = True
            n, *_, m = ring
            bonds[n][m]._Bond__order = 4
            for n, m in zip(ring, ring[1:]):
                bonds[n][m]._Bond__order = 4
        self.flush_cache()
        return found

    def _hybridization(self: 'MoleculeContainer', n: int) -> int:
        """
        1 - sp3, 2 - sp2, 3 - sp, 4 - aromatic
        """
        hybridization = 1
        for bond in self._bonds[n].values():
            order = bond.order
            if order == 4:
                return 4
            elif order == 3:
                hybridization = 3
            elif order == 2:
                if hybridization == 2:
                    hybridization = 3
                elif hybridization == 1:
                    hybridization = 2
        return hybridization

    def __fix_bridges(self: 'MoleculeContainer'):
        """
        fix invalid smiles: c1ccccc1c2ccccc2 instead of c1ccccc1-c2ccccc2
        """
        ring_bonds = self.ring_bonds
        for n, m, bond in self.bonds():
            if bond.order == 4 and frozenset((n, m)) not in ring_bonds:
                bond._Bond__order = 1


__all__ = ['Aromatize']
