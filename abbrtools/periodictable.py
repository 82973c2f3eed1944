# -*- coding: utf-8 -*-
#
#  Copyright 2017-2021 Ramil Nugmanov <nougmanoff@protonmail.com>
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
periodic table of elements and valence rules used for implicit hydrogens calculation
"""
from typing import Optional, Tuple
from .exceptions import ValenceError


_table_e = '''H                                                  He
              Li Be                               B  C  N  O  F  Ne
              Na Mg                               Al Si P  S  Cl Ar
              K  Ca Sc Ti V  Cr Mn Fe Co Ni Cu Zn Ga Ge As Se Br Kr
              Rb Sr Y  Zr Nb Mo Tc Ru Rh Pd Ag Cd In Sn Sb Te I  Xe
              Cs Ba La

                    Ce Pr Nd Pm Sm Eu Gd Tb Dy Ho Er Tm Yb Lu

                       Hf Ta W  Re Os Ir Pt Au Hg Tl Pb Bi Po At Rn
              Fr Ra Ac

                    Th Pa U  Np Pu Am Cm Bk Cf Es Fm Md No Lr

                       Rf Db Sg Bh Hs Mt Ds Rg Cn Nh Fl Mc Lv Ts Og
           '''

elements = tuple(_table_e.split())
atomic_numbers = {e: n for n, e in enumerate(elements, start=1)}

# normal valences of organic subset. charged forms are isoelectronic shifted
valences = {'H': (1,), 'B': (3,), 'C': (4,), 'N': (3, 5), 'O': (2,), 'F': (1,), 'Si': (4,), 'P': (3, 5),
            'S': (2, 4, 6), 'Cl': (1,), 'As': (3, 5), 'Se': (2, 4, 6), 'Br': (1,), 'Te': (2, 4, 6), 'I': (1, 3, 5)}
# electron donors with lone pair in aromatic rings
pyrrole_like = {'O', 'S', 'Se', 'Te'}


class Element:
    __slots__ = ('__symbol', '__isotope')

    def __init__(self, symbol: str, isotope: Optional[int] = None):
        if symbol not in atomic_numbers:
            raise ValueError(f'invalid element symbol: {symbol}')
        if isotope is not None and not isinstance(isotope, int):
            raise TypeError('integer isotope number required')
        self.__symbol = symbol
        self.__isotope = isotope

    @classmethod
    def from_symbol(cls, symbol: str, isotope: Optional[int] = None) -> 'Element':
        if symbol == '*':
            return AnyElement()
        return cls(symbol, isotope)

    @property
    def atomic_symbol(self) -> str:
        return self.__symbol

    @property
    def atomic_number(self) -> int:
        return atomic_numbers[self.__symbol]

    @property
    def isotope(self) -> Optional[int]:
        return self.__isotope

    def valences(self, charge: int = 0) -> Tuple[int, ...]:
        """
        possible valences of atom with given formal charge
        """
        symbol = self.__symbol
        try:
            vs = valences[symbol]
        except KeyError:
            raise ValenceError(f'implicit hydrogens not computable for {symbol}')
        if not charge:
            return vs
        elif symbol in ('B', 'C', 'Si'):
            if symbol == 'B' and charge == -1:
                return 4,
            return tuple(x - abs(charge) for x in vs if x - abs(charge) >= 0)
        return tuple(x + charge for x in vs if x + charge >= 0)

    def copy(self) -> 'Element':
        copy = object.__new__(self.__class__)
        copy._Element__symbol = self.__symbol
        copy._Element__isotope = self.__isotope
        return copy

    def __eq__(self, other):
        if isinstance(other, Element):
            return self.atomic_symbol == other.atomic_symbol and self.isotope == other.isotope
        return False

    def __hash__(self):
        return hash((self.atomic_symbol, self.isotope))

    def __repr__(self):
        if self.__isotope:
            return f'{self.__class__.__name__}({self.__symbol!r}, {self.__isotope})'
        return f'{self.__class__.__name__}({self.__symbol!r})'


class AnyElement(Element):
    """
    wildcard atom of patterns. matches any heavy atom
    """
    __slots__ = ()

    def __init__(self):
        self._Element__symbol = '*'
        self._Element__isotope = None

    @property
    def atomic_number(self) -> int:
        return 0

    def valences(self, charge: int = 0) -> Tuple[int, ...]:
        raise ValenceError('wildcard has no valence')

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class Superatom(Element):
    """
    placeholder atom of contracted abbreviation group
    """
    __slots__ = ('__label', '__charge')

    def __init__(self, label: str, charge: int = 0):
        if not isinstance(label, str) or not label:
            raise ValueError('non empty label required')
        self._Element__symbol = '*'
        self._Element__isotope = None
        self.__label = label
        self.__charge = charge

    @property
    def label(self) -> str:
        return self.__label

    @property
    def charge(self) -> int:
        """
        total formal charge of contracted atoms
        """
        return self.__charge

    @property
    def atomic_number(self) -> int:
        return 0

    def valences(self, charge: int = 0) -> Tuple[int, ...]:
        raise ValenceError('superatom has no valence')

    def copy(self) -> 'Superatom':
        return Superatom(self.__label, self.__charge)

    def __eq__(self, other):
        if isinstance(other, Superatom):
            return self.__label == other.label
        return False

    def __hash__(self):
        return hash(('*', self.__label))

    def __repr__(self):
        return f'{self.__class__.__name__}({self.__label!r})'


__all__ = ['Element', 'AnyElement', 'Superatom', 'elements', 'atomic_numbers', 'pyrrole_like']
