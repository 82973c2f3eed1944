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
from logging import warning
from typing import Callable, List, NamedTuple
from .library import PatternLibrary
from .matcher import SubstructureMatcher
from ..containers import AbbreviationGroup, MoleculeContainer
from ..exceptions import MatchBudgetExceeded


class UsefulnessPolicy(NamedTuple):
    """
    Decides whether group worth to be contracted.

    Attachment group accepted if at least `min_remaining` heavy atoms of its connected component stay
    not abbreviated. Exact groups (whole components) accepted if `keep_exact` set.
    """
    min_remaining: int = 2
    keep_exact: bool = True

    def __call__(self, molecule: MoleculeContainer, group: AbbreviationGroup, remaining: int) -> bool:
        if not group.bonds and self.keep_exact:
            return True
        return remaining >= self.min_remaining


class Assembler:
    """
    Disjoint groups selection from patterns occurrences.
    """
    __slots__ = ('_library', '_matcher')

    def __init__(self, library: PatternLibrary, matcher: SubstructureMatcher):
        self._library = library
        self._matcher = matcher

    def generate(self, molecule: MoleculeContainer) -> List[AbbreviationGroup]:
        """
        Groups of enabled patterns in priority order. Within pattern groups ordered by anchor atom.
        Atoms of pre-existing abbreviations and already accepted groups are not reused.
        Molecule not changed.
        """
        prepared = self._matcher.prepare(molecule)
        used = set(molecule.claimed_atoms)
        groups = []
        for pattern in self._library.enabled():
            try:
                candidates = list(self._matcher.match(pattern, prepared, prepared=True))
            except MatchBudgetExceeded as e:
                warning(f'pattern {pattern.label} ({pattern.smiles}) skipped: {e}')
                continue
            for candidate in sorted(candidates, key=lambda x: (x.anchor, sorted(x.atoms))):
                if used.isdisjoint(candidate.atoms):
                    used.update(candidate.atoms)
                    groups.append(AbbreviationGroup(pattern.label, candidate.atoms, candidate.bonds))
        return groups

    @staticmethod
    def select(molecule: MoleculeContainer, groups: List[AbbreviationGroup],
               policy: Callable[[MoleculeContainer, AbbreviationGroup, int], bool]) -> List[AbbreviationGroup]:
        """
        Usefulness filter. Groups visited in given order, remaining atoms count of component excludes
        pre-existing abbreviations, already accepted groups and group itself.
        """
        atoms = molecule._atoms
        components = molecule.connected_components
        atoms_components = molecule.atoms_components
        claimed = molecule.claimed_atoms

        committed = set()
        out = []
        for group in groups:
            heavy = {n for n in group.atoms if atoms[n].atomic_number != 1}
            component = components[atoms_components[min(heavy)]]
            remaining = sum(atoms[n].atomic_number != 1 and n not in claimed and n not in committed
                            and n not in heavy for n in component)
            if policy(molecule, group, remaining):
                committed.update(group.atoms)
                out.append(group)
        return out


__all__ = ['Assembler', 'UsefulnessPolicy']
