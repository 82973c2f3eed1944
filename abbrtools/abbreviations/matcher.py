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
from itertools import count, permutations, product
from typing import Dict, FrozenSet, Iterator, List, NamedTuple, Optional, Tuple
from .library import Pattern, PatternMode
from ..containers import MoleculeContainer, PatternContainer
from ..exceptions import MatchBudgetExceeded


class MatchCandidate(NamedTuple):
    """
    Pattern occurrence in molecule.

    :param atoms: matched atoms including absorbed explicit hydrogens
    :param bonds: (inner, outer) bonds leaving group
    :param anchor: lowest matched heavy atom number
    """
    pattern: Pattern
    atoms: FrozenSet[int]
    bonds: Tuple[Tuple[int, int], ...]
    anchor: int


class SubstructureMatcher:
    """
    Patterns into molecule matching.

    Pattern atom matches molecule atom of the same element, isotope (if set in pattern) and charge with
    the same number of hydrogens and heavy neighbors. Wildcard matches any not hydrogen atom.
    Bonds compared in aromatic form, thus kekule and aromatic rings are equal.
    """
    __slots__ = ('budget',)

    def __init__(self, budget: int = 100000):
        """
        :param budget: maximal number of search states per pattern and molecule
        """
        if not isinstance(budget, int):
            raise TypeError('budget should be int')
        elif budget < 1:
            raise ValueError('budget should be positive')
        self.budget = budget

    @staticmethod
    def prepare(molecule: MoleculeContainer) -> MoleculeContainer:
        """
        Working copy of molecule in aromatic form.
        """
        molecule = molecule.copy()
        molecule.thiele()
        return molecule

    def match(self, pattern: Pattern, molecule: MoleculeContainer, *, budget: Optional[int] = None,
              prepared: bool = False) -> Iterator[MatchCandidate]:
        """
        Lazy iterator of pattern occurrences. Occurrences with same atoms reported once.

        :param budget: override of search states limit
        :param prepared: molecule already in aromatic form. otherwise working copy will be created
        :raise MatchBudgetExceeded: search states limit reached
        """
        if budget is None:
            budget = self.budget
        if not prepared:
            molecule = self.prepare(molecule)

        graph = pattern.graph
        counter = count(1)
        if pattern.mode is PatternMode.ATTACHMENT:
            mappings = self.__attachment_mapping(graph, molecule, counter, budget)
        else:
            mappings = self.__exact_mapping(graph, molecule, counter, budget)

        seen = set()
        for mapping in mappings:
            candidate = self._candidate(pattern, molecule, mapping)
            if candidate.atoms not in seen:
                seen.add(candidate.atoms)
                yield candidate

    def __attachment_mapping(self, graph: PatternContainer, molecule: MoleculeContainer, counter, budget):
        components, closures = graph._compiled_query
        atoms = molecule._atoms
        size = len(graph)
        for component in molecule.connected_components:
            if sum(atoms[n].atomic_number != 1 for n in component) < size:
                continue
            yield from self._get_mapping(components[0], closures, graph, molecule, set(component), counter, budget)

    def __exact_mapping(self, graph: PatternContainer, molecule: MoleculeContainer, counter, budget):
        """
        Each pattern component mapped to whole distinct molecule component of the same size.
        """
        components, closures = graph._compiled_query
        atoms = molecule._atoms
        scopes = [set(x) for x in molecule.connected_components]
        heavy = [sum(atoms[n].atomic_number != 1 for n in x) for x in scopes]
        sizes = [len(x) for x in components]
        cache: Dict[Tuple[int, int], List[Dict[int, int]]] = {}

        for candidates in permutations(range(len(scopes)), len(components)):
            self._tick(counter, budget)
            if any(heavy[i] != s for i, s in zip(candidates, sizes)):
                continue
            mappers = []
            for i, (order, j) in enumerate(zip(components, candidates)):
                try:
                    mappers.append(cache[(i, j)])
                except KeyError:
                    mappers.append(cache.setdefault((i, j), list(self._get_mapping(order, closures, graph, molecule,
                                                                                   scopes[j], counter, budget))))
            for match in product(*mappers):
                mapping = {}
                for m in match:
                    mapping.update(m)
                yield mapping

    @classmethod
    def _get_mapping(cls, linear_query, query_closures, graph: PatternContainer, molecule: MoleculeContainer,
                     scope, counter, budget) -> Iterator[Dict[int, int]]:
        """
        Backtracking search with explicit stack. Each popped state counted.
        """
        size = len(linear_query) - 1
        order_depth = {v[0]: k for k, v in enumerate(linear_query)}
        equal_cache = defaultdict(dict)
        o_bonds = molecule._bonds

        stack = []
        path = []
        mapping = {}
        reversed_mapping = {}

        s_n = linear_query[0][0]
        eqs = equal_cache[s_n]
        for n in sorted(scope, reverse=True):  # lowest numbers popped first
            eqs[n] = graph.match_atom(s_n, molecule, n)
            if eqs[n]:
                stack.append((n, 0))

        while stack:
            cls._tick(counter, budget)
            n, depth = stack.pop()
            current = linear_query[depth][0]
            if depth == size:
                yield {current: n, **mapping}
            else:
                if len(path) != depth:
                    for x in path[depth:]:
                        del mapping[reversed_mapping.pop(x)]
                    path = path[:depth]

                path.append(n)
                mapping[current] = n
                reversed_mapping[n] = current

                depth += 1
                s_n, back, s_bond = linear_query[depth]
                if back != current:
                    n = path[order_depth[back]]

                eqs = equal_cache[s_n]
                for o_n, o_bond in sorted(o_bonds[n].items(), reverse=True):
                    if o_n in scope and o_n not in reversed_mapping and s_bond.matches(o_bond):
                        if o_n not in eqs:
                            eqs[o_n] = graph.match_atom(s_n, molecule, o_n)
                        if eqs[o_n] and all(bond.matches(o_bonds[mapping[m]].get(o_n))
                                            for m, bond in query_closures[s_n]):
                            stack.append((o_n, depth))

    @staticmethod
    def _tick(counter, budget):
        if next(counter) > budget:
            raise MatchBudgetExceeded(f'search exceeded {budget} states')

    @staticmethod
    def _candidate(pattern: Pattern, molecule: MoleculeContainer, mapping: Dict[int, int]) -> MatchCandidate:
        graph = pattern.graph
        wildcard = graph.wildcard
        atoms = molecule._atoms
        heavy = {m for n, m in mapping.items() if n != wildcard}
        group = set(heavy)
        for n in heavy:
            group.update(m for m in molecule._bonds[n] if atoms[m].atomic_number == 1)

        if wildcard is None:
            bonds = ()
        else:
            inner = next(iter(graph._bonds[wildcard]))
            bonds = ((mapping[inner], mapping[wildcard]),)
        return MatchCandidate(pattern, frozenset(group), bonds, min(heavy))


__all__ = ['SubstructureMatcher', 'MatchCandidate']
