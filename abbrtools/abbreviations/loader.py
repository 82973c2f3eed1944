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
from logging import info, warning
from os import PathLike
from typing import Optional, Union
from .library import Pattern, PatternLibrary, PatternMode
from ..containers import PatternContainer
from ..exceptions import IncorrectSmiles, PatternSyntaxError
from ..files import SMILESRead
from ..resources import read_lines


class PatternLoader:
    """
    Patterns definitions parser. Definition is SMILES with optional single `*` attachment point
    and label separated by whitespace: `*c1ccccc1 Ph`. Label can contain spaces.
    """
    __slots__ = ('_parser',)

    def __init__(self):
        self._parser = SMILESRead.create_parser()

    def parse(self, text: str, label: Optional[str] = None) -> Pattern:
        """
        Convert definition into pattern. Returned pattern not registered and has ordinal -1.

        :param text: SMILES of pattern or whole definition line if label not set
        :param label: abbreviation text
        :raise PatternSyntaxError: invalid SMILES, label or wildcard usage
        """
        if not isinstance(text, str):
            raise TypeError('pattern text should be string')
        elif not text.strip():
            raise PatternSyntaxError(text, 'empty pattern')
        elif label is None:
            smiles, *label = text.split(None, 1)
            label = label[0].strip() if label else ''
        else:
            smiles = text.strip()
            if not isinstance(label, str):
                raise TypeError('label should be string')
            label = label.strip()
        if not label:
            raise PatternSyntaxError(text, 'empty label')

        try:
            molecule = self._parser(smiles)
        except IncorrectSmiles as e:
            raise PatternSyntaxError(text, f'invalid SMILES ({e})') from e
        molecule.thiele()
        try:
            graph = PatternContainer.from_molecule(molecule)
        except ValueError as e:
            raise PatternSyntaxError(text, str(e)) from e

        wildcards = graph.wildcards
        if len(wildcards) > 1:
            raise PatternSyntaxError(text, 'only one attachment point allowed')
        elif len(graph) == len(wildcards):
            raise PatternSyntaxError(text, 'pattern without atoms')
        elif wildcards:
            if len(graph._bonds[wildcards[0]]) != 1:
                raise PatternSyntaxError(text, 'attachment point should have single bond')
            elif graph.connected_components_count != 1:
                raise PatternSyntaxError(text, 'attachment pattern should be connected')
            mode = PatternMode.ATTACHMENT
        else:
            mode = PatternMode.EXACT
        return Pattern(-1, label, mode, graph, smiles)

    def load(self, library: PatternLibrary, source: Union[str, PathLike]) -> int:
        """
        Register patterns from line-oriented resource. Empty and started with `#` lines are skipped.
        Invalid definitions are skipped with warning.

        :return: number of registered patterns
        :raise ResourceError: resource not found or not readable. nothing registered in this case
        """
        lines = read_lines(source)  # whole resource read before registration
        count = 0
        for number, line in enumerate(lines, start=1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            try:
                pattern = self.parse(line)
            except PatternSyntaxError as e:
                warning(f'{source}:{number} skipped: {e}')
                continue
            library.add(pattern)
            count += 1
        info(f'{count} patterns loaded from {source}')
        return count


__all__ = ['PatternLoader']
