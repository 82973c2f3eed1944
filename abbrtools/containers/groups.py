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
from typing import FrozenSet, NamedTuple, Tuple


class AbbreviationGroup(NamedTuple):
    """
    Group of atoms replaceable by label.

    :param label: abbreviation text
    :param atoms: numbers of atoms of group including absorbed hydrogens
    :param bonds: bonds leaving group as (inner atom, outer atom) pairs
    """
    label: str
    atoms: FrozenSet[int]
    bonds: Tuple[Tuple[int, int], ...] = ()


__all__ = ['AbbreviationGroup']
