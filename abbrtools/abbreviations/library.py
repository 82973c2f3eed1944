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
from enum import Enum
from typing import Iterator, List, NamedTuple, Set
from ..containers import PatternContainer


class PatternMode(Enum):
    """
    ATTACHMENT - pattern has single wildcard atom with single bond. group connected to rest of molecule by this bond.
    EXACT - pattern without wildcard. matches whole connected components only.
    """
    ATTACHMENT = 'attachment'
    EXACT = 'exact'


class Pattern(NamedTuple):
    """
    Registered abbreviation pattern. Lower ordinal means higher priority.
    """
    ordinal: int
    label: str
    mode: PatternMode
    graph: PatternContainer
    smiles: str = ''

    def __repr__(self):
        return f'Pattern({self.ordinal}, {self.label!r}, {self.mode.name}, {self.smiles!r})'


class PatternLibrary:
    """
    Ordered collection of patterns. Registration order defines priority.
    """
    __slots__ = ('_patterns', '_disabled')

    def __init__(self):
        self._patterns: List[Pattern] = []
        self._disabled: Set[str] = set()

    def add(self, pattern: Pattern) -> Pattern:
        """
        Register pattern. Ordinal of given pattern replaced by next free one.

        :return: registered pattern
        """
        if not isinstance(pattern, Pattern):
            raise TypeError('Pattern expected')
        pattern = pattern._replace(ordinal=len(self._patterns))
        self._patterns.append(pattern)
        return pattern

    def __len__(self):
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __getitem__(self, ordinal: int) -> Pattern:
        return self._patterns[ordinal]

    def __bool__(self):
        return bool(self._patterns)

    def enabled(self) -> Iterator[Pattern]:
        """
        Iterate over patterns with enabled labels in priority order.
        """
        disabled = self._disabled
        return (x for x in self._patterns if x.label not in disabled)

    def set_enabled(self, label: str, flag: bool = True):
        """
        Enable or disable all patterns with given label.
        """
        if flag:
            self._disabled.discard(label)
        else:
            self._disabled.add(label)

    def is_enabled(self, label: str) -> bool:
        return label not in self._disabled

    @property
    def labels(self) -> List[str]:
        """
        Unique labels in registration order.
        """
        return list(dict.fromkeys(x.label for x in self._patterns))


__all__ = ['PatternMode', 'Pattern', 'PatternLibrary']
