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
from CachedMethods import cached_property
from collections import deque
from typing import Any, Dict, FrozenSet, Set, Tuple, Union


class SSSR:
    """ SSSR calculation. Candidate rings are formed by bond and shortest paths from any atom to both ends of
        this bond (Horton set). Linearly independent (in terms of bonds sets) smallest candidates form the basis.
    """
    __slots__ = ()

    @cached_property
    def sssr(self) -> Tuple[Tuple[int, ...], ...]:
        """
        Smallest Set of Smallest Rings.

        :return rings atoms numbers
        """
        if self.rings_count:
            return self._sssr(self._bonds, self.rings_count)
        return ()

    @cached_property
    def rings_count(self) -> int:
        """
        Number of independent cycles in graph
        """
        return self.bonds_count - len(self._atoms) + self.connected_components_count

    @cached_property
    def ring_bonds(self) -> Set[FrozenSet[int]]:
        """
        Bonds included into SSSR rings
        """
        out = set()
        for ring in self.sssr:
            out.add(frozenset((ring[0], ring[-1])))
            out.update(frozenset(x) for x in zip(ring, ring[1:]))
        return out

    @classmethod
    def _sssr(cls, bonds: Dict[int, Union[Set[int], Dict[int, Any]]], n_sssr: int) -> Tuple[Tuple[int, ...], ...]:
        """
        Smallest Set of Smallest Rings of any adjacency matrix.
        Number of rings required.
        """
        bonds = cls._skin_graph(bonds)
        candidates = {}
        for root in bonds:
            tree = cls.__bfs_tree(bonds, root)
            for n, ms in bonds.items():
                if n not in tree:  # other component
                    continue
                pn = cls.__path(tree, n)
                for m in ms:
                    if n < m and tree[n] != m and tree[m] != n:  # skip tree bonds
                        pm = cls.__path(tree, m)
                        if set(pn).intersection(pm) != {root}:  # paths should meet only in root
                            continue
                        ring = pn[::-1] + pm[:-1]
                        key = frozenset(frozenset(x) for x in zip(ring, ring[1:] + ring[:1]))
                        if key not in candidates:
                            candidates[key] = ring

        edges = {}
        basis = {}  # gaussian elimination over GF(2). pivot bit: vector
        rings = []
        for key, ring in sorted(candidates.items(), key=lambda x: (len(x[1]), sorted(x[1]))):
            vector = 0
            for e in key:
                vector |= 1 << edges.setdefault(e, len(edges))
            while vector:
                pivot = vector.bit_length() - 1
                if pivot not in basis:
                    basis[pivot] = vector
                    rings.append(ring)
                    break
                vector ^= basis[pivot]
            if len(rings) == n_sssr:
                break
        return tuple(rings)

    @staticmethod
    def __bfs_tree(bonds, root):
        """
        shortest paths tree. atom: previous atom
        """
        tree = {root: None}
        queue = deque([root])
        while queue:
            current = queue.popleft()
            for n in bonds[current]:
                if n not in tree:
                    tree[n] = current
                    queue.append(n)
        return tree

    @staticmethod
    def __path(tree, n):
        path = []
        while n is not None:
            path.append(n)
            n = tree[n]
        return tuple(path)


__all__ = ['SSSR']
