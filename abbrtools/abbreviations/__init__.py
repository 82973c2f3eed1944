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
"""
abbreviations (superatoms) detection and contraction
"""
from os import PathLike
from typing import Callable, List, Optional, Union
from .assembler import Assembler, UsefulnessPolicy
from .contraction import ContractionApplier
from .library import Pattern, PatternLibrary, PatternMode
from .loader import PatternLoader
from .matcher import MatchCandidate, SubstructureMatcher
from ..containers import AbbreviationGroup, MoleculeContainer


class Abbreviations:
    """
    Abbreviations generator.

    Patterns are registered by `add` or `load_from_file`. Earlier registered patterns have priority.

        abbr = Abbreviations()
        abbr.add('*c1ccccc1', 'Ph')
        groups = abbr.generate(molecule)  # molecule not changed
        abbr.apply(molecule)  # groups contracted into superatoms
    """
    __slots__ = ('_library', '_loader', '_matcher', '_assembler', '_contraction', '_policy')
    default_budget = 100000
    default_policy = UsefulnessPolicy()

    def __init__(self, *, match_budget: Optional[int] = None,
                 policy: Optional[Callable[[MoleculeContainer, AbbreviationGroup, int], bool]] = None):
        """
        :param match_budget: maximal number of search states per pattern and molecule.
            patterns exceeded it treated as not matched
        :param policy: usefulness filter of `apply`. callable(molecule, group, remaining heavy atoms) -> bool
        """
        if policy is not None and not callable(policy):
            raise TypeError('policy should be callable')
        self._library = PatternLibrary()
        self._loader = PatternLoader()
        self._matcher = SubstructureMatcher(self.default_budget if match_budget is None else match_budget)
        self._assembler = Assembler(self._library, self._matcher)
        self._contraction = ContractionApplier()
        self._policy = self.default_policy if policy is None else policy

    @property
    def library(self) -> PatternLibrary:
        return self._library

    @property
    def match_budget(self) -> int:
        return self._matcher.budget

    @property
    def policy(self) -> Callable[[MoleculeContainer, AbbreviationGroup, int], bool]:
        return self._policy

    def __len__(self):
        return len(self._library)

    def add(self, text: str, label: Optional[str] = None) -> Pattern:
        """
        Register pattern. Library unchanged on errors.

        :param text: SMILES with optional `*` attachment point. If label omitted, label should follow SMILES
            separated by whitespace
        :raise PatternSyntaxError: invalid pattern
        """
        return self._library.add(self._loader.parse(text, label))

    def load_from_file(self, source: Union[str, PathLike]) -> int:
        """
        Register patterns from file or packaged resource.

        :param source: path to file, name of resource in `abbrtools.data` package or absolute resource path
            like `/abbrtools/data/obabel_superatoms.smi`
        :return: number of registered patterns
        :raise ResourceError: resource not found or not readable
        """
        return self._loader.load(self._library, source)

    def set_enabled(self, label: str, flag: bool = True):
        """
        Enable or disable patterns with given label.
        """
        self._library.set_enabled(label, flag)

    def is_enabled(self, label: str) -> bool:
        return self._library.is_enabled(label)

    def generate(self, molecule: MoleculeContainer) -> List[AbbreviationGroup]:
        """
        Find disjoint abbreviations groups. Molecule not changed.
        """
        if not isinstance(molecule, MoleculeContainer):
            raise TypeError('MoleculeContainer expected')
        return self._assembler.generate(molecule)

    def select(self, molecule: MoleculeContainer) -> List[AbbreviationGroup]:
        """
        Groups passed usefulness filter.
        """
        return self._assembler.select(molecule, self.generate(molecule), self._policy)

    def apply(self, molecule: MoleculeContainer) -> int:
        """
        Contract useful groups in place.

        :return: number of contracted groups
        """
        return len(self._contraction.contract(molecule, self.select(molecule)))

    def contract(self, molecule: MoleculeContainer) -> MoleculeContainer:
        """
        Copy of molecule with useful groups contracted.
        """
        molecule = molecule.copy()
        self.apply(molecule)
        return molecule


__all__ = ['Abbreviations', 'Pattern', 'PatternMode', 'PatternLibrary', 'PatternLoader', 'SubstructureMatcher',
           'MatchCandidate', 'Assembler', 'UsefulnessPolicy', 'ContractionApplier']
