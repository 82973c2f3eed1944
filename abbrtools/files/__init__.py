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
"""
contains SMILES parser of molecules and patterns
"""
from .SMILESrw import SMILESRead
from ..containers import MoleculeContainer


def smiles(data: str) -> MoleculeContainer:
    """
    SMILES string parser

    :raise IncorrectSmiles: invalid SMILES string
    """
    return SMILESRead.create_parser()(data)


__all__ = ['SMILESRead', 'smiles']
