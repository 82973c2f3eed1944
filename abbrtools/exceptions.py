# -*- coding: utf-8 -*-
#
#  Copyright 2019-2021 Ramil Nugmanov <nougmanoff@protonmail.com>
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


class ValenceError(ValueError):
    """
    atom valence can not be satisfied
    """


class AtomNotFound(KeyError):
    """
    atom with given number not found in graph
    """


class IncorrectSmiles(ValueError):
    """
    SMILES string syntax error
    """


class PatternSyntaxError(IncorrectSmiles):
    """
    pattern definition can not be registered. offending text stored in `text` attribute
    """
    def __init__(self, text, message='invalid pattern'):
        self.text = text
        super().__init__(f'{message}: {text!r}')


class ResourceError(IOError):
    """
    patterns definitions resource not found or not readable
    """


class MatchBudgetExceeded(Exception):
    """
    substructure search took more steps than allowed
    """


__all__ = ['ValenceError', 'AtomNotFound', 'IncorrectSmiles', 'PatternSyntaxError',
           'ResourceError', 'MatchBudgetExceeded']
