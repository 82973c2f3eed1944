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


class Bond:
    """
    chemical bond. orders: 1 - single, 2 - double, 3 - triple, 4 - aromatic, 8 - any (complexes, query)
    """
    __slots__ = ('__order',)

    def __init__(self, order):
        if not isinstance(order, int):
            raise TypeError('invalid order value')
        if order not in (1, 4, 2, 3, 8):
            raise ValueError('order should be from [1, 2, 3, 4, 8]')
        self.__order = order

    def __eq__(self, other):
        if isinstance(other, Bond):
            return self.__order == other.order
        return False

    def __hash__(self):
        return self.__order

    def __repr__(self):
        return f'{self.__class__.__name__}({self.__order})'

    @property
    def order(self) -> int:
        return self.__order

    @property
    def is_aromatic(self) -> bool:
        return self.__order == 4

    def matches(self, other: 'Bond') -> bool:
        """
        query bond to target bond comparison. any-bond matches everything
        """
        if other is None:
            return False
        return self.__order == 8 or self.__order == other.order

    def copy(self) -> 'Bond':
        copy = object.__new__(self.__class__)
        copy._Bond__order = self.__order
        return copy


__all__ = ['Bond']
