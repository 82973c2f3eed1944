# -*- coding: utf-8 -*-
#
#  Copyright 2014-2021 Ramil Nugmanov <nougmanoff@protonmail.com>
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
Abbrtools main module. Contains molecules containers, SMILES parser and abbreviations generator
"""
from .abbreviations import Abbreviations, UsefulnessPolicy
from .containers import AbbreviationGroup, MoleculeContainer
from .files import smiles


__all__ = ['Abbreviations', 'UsefulnessPolicy', 'AbbreviationGroup', 'MoleculeContainer', 'smiles']
