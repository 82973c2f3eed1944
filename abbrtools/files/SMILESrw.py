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
from itertools import takewhile
from typing import Dict, List
from ..containers import MoleculeContainer
from ..exceptions import IncorrectSmiles
from ..periodictable import Element


# tokens structure:
# (type: int, value)
# types:
# 0: atom
# 1: bond
# 2: open chain (
# 3: close chain )
# 4: dot bond .
# 5: in bracket raw data []
# 6: closure number
# 7: raw closure number
# 8: aromatic atom

replace_dict = {'-': 1, '=': 2, '#': 3, ':': 4, '~': 8, '/': 1, '\\': 1, '.': None, '(': 2, ')': 3}
charge_dict = {'+': 1, '+1': 1, '++': 2, '+2': 2, '+3': 3, '+4': 4,
               '-': -1, '-1': -1, '--': -2, '-2': -2, '-3': -3, '-4': -4}
charge_dict = {tuple(k): v for k, v in charge_dict.items()}
charge_dict[()] = 0
aromatic_symbols = {'b', 'c', 'n', 'o', 'p', 's', 'as', 'se', 'te'}


class SMILESRead:
    """
    SMILES strings parser.

    Supported: organic subset atoms, bracket atoms with isotope, hydrogens count, charge and mapping,
    aromatic atoms, branches, ring closures (including %nn form), dot-disconnected components and
    `*` wildcard atom. Stereo marks (@, /, \\) are accepted and ignored. Atoms are numbered from 1
    in order of appearance, mapping numbers are ignored.

    Hydrogens of organic subset atoms are implicit and recalculated on structure changes.
    Bracket atoms have fixed hydrogens count.
    """
    @classmethod
    def create_parser(cls):
        """
        Create SMILES parser function
        """
        return cls().parse

    def parse(self, smiles: str) -> MoleculeContainer:
        """
        SMILES string parser

        :raise IncorrectSmiles: invalid SMILES string
        """
        if not isinstance(smiles, str):
            raise TypeError('SMILES string expected')
        smiles = smiles.strip()
        if not smiles:
            raise IncorrectSmiles('empty SMILES')
        tokens = self._raw_tokenize(smiles)
        tokens = self._fix_tokens(tokens)
        return self._convert_structure(self._parse_tokens(tokens))

    @staticmethod
    def _raw_tokenize(smiles):
        token_type = token = None
        tokens = []
        for s in smiles:
            if s == '[':  # open complex token
                if token_type == 5:  # two opened [
                    raise IncorrectSmiles('[...[')
                elif token:
                    tokens.append((token_type, token))
                elif token_type == 7:  # empty closure
                    raise IncorrectSmiles('invalid closure')
                token = []
                token_type = 5
            elif s == ']':  # close complex token
                if token_type != 5:
                    raise IncorrectSmiles(']..]')
                elif not token:
                    raise IncorrectSmiles('empty [] brackets')
                tokens.append((5, tuple(token)))
                token_type = token = None
            elif s in '()':
                if token_type == 5:
                    raise IncorrectSmiles('brackets in atom/bond token')
                elif token:
                    tokens.append((token_type, token))
                    token = None
                elif token_type == 7:  # empty closure
                    raise IncorrectSmiles('invalid closure')
                elif token_type == 2:  # barely opened
                    raise IncorrectSmiles('(( or ()')
                token_type = replace_dict[s]
                tokens.append((token_type, None))
            elif token_type == 5:  # grow token with brackets. skip validation
                token.append(s)
            elif s.isnumeric():  # closures
                if token_type == 7:  # % already found. collect number
                    if not token and s == '0':
                        raise IncorrectSmiles('number starts with 0')
                    token.append(s)
                else:
                    if token:
                        tokens.append((token_type, token))
                        token = None
                    token_type = 6
                    tokens.append((6, int(s)))
            elif s == '%':
                if token:
                    tokens.append((token_type, token))
                elif token_type == 7:
                    raise IncorrectSmiles('%%')
                token_type = 7
                token = []
            elif s in '=#:-~/\\':  # bonds found. stereo bonds are single
                if token:
                    tokens.append((token_type, token))
                    token = None
                elif token_type == 7:
                    raise IncorrectSmiles('invalid closure')
                token_type = 1
                tokens.append((1, replace_dict[s]))
            elif s == '.':
                if token:
                    tokens.append((token_type, token))
                    token = None
                elif token_type == 7:
                    raise IncorrectSmiles('invalid closure')
                token_type = 4
                tokens.append((4, None))
            elif s in 'NOPSFI*':  # organic atoms
                if token:
                    tokens.append((token_type, token))
                    token = None
                elif token_type == 7:
                    raise IncorrectSmiles('invalid closure')
                token_type = 0
                tokens.append((0, s))
            elif s in 'bcnops':  # aromatic ring atom
                if token:
                    tokens.append((token_type, token))
                    token = None
                elif token_type == 7:
                    raise IncorrectSmiles('invalid closure')
                token_type = 8
                tokens.append((8, s.upper()))
            elif s in 'CB':  # flag possible Cl or Br
                if token:
                    tokens.append((token_type, token))
                elif token_type == 7:
                    raise IncorrectSmiles('invalid closure')
                token_type = 0
                token = s
            elif token_type == 0 and token:
                if s == 'l' and token == 'C':
                    tokens.append((0, 'Cl'))
                elif s == 'r' and token == 'B':
                    tokens.append((0, 'Br'))
                else:
                    raise IncorrectSmiles(f'invalid element {token}{s}')
                token = None
            else:
                raise IncorrectSmiles(f'invalid symbol: {s}')

        if token_type == 5:
            raise IncorrectSmiles('atom description has not finished')
        elif token_type == 7 and not token:
            raise IncorrectSmiles('invalid closure')
        elif token:
            tokens.append((token_type, token))  # %closure or C or B
        return [(6, int(''.join(x[1]))) if x[0] == 7 else x for x in tokens]  # composite closures folding

    @classmethod
    def _fix_tokens(cls, tokens):
        out = []
        for token_type, token in tokens:
            if token_type in (0, 8):  # simple atom
                out.append((token_type, {'element': token, 'charge': 0, 'isotope': None, 'hydrogen': None}))
            elif token_type == 5:
                out.append(cls.__atom_parse(token))
            else:  # as is types: 1, 2, 3, 4, 6
                out.append((token_type, token))
        return out

    @staticmethod
    def __atom_parse(token):
        isotope = ''.join(takewhile(lambda x: x.isnumeric(), token))
        if isotope:
            token = token[len(isotope):]
            if not token:
                raise IncorrectSmiles('atom token invalid')
            isotope = int(isotope)
        else:
            isotope = None

        element, *token = token
        if element != '*':
            if not element.isalpha():
                raise IncorrectSmiles('invalid atom token')
            elif token and token[0].islower():  # two letters element
                element += token.pop(0)
        token = tuple(x for x in token if x != '@')  # stereo ignored

        if token and token[0] == 'H':  # implicit H
            h = ''.join(takewhile(lambda x: x.isnumeric(), token[1:]))
            token = token[len(h) + 1:]
            hydrogen = int(h) if h else 1
        else:
            hydrogen = 0

        if ':' in token:  # mapping
            i = token.index(':')
            if not all(x.isnumeric() for x in token[i + 1:]):
                raise IncorrectSmiles('invalid mapping token')
            token = token[:i]
        try:
            charge = charge_dict[token]
        except KeyError:
            raise IncorrectSmiles('charge token invalid')

        if element in aromatic_symbols:
            _type = 8
            element = element.capitalize()
        else:
            _type = 0
        return _type, {'element': element, 'charge': charge, 'isotope': isotope, 'hydrogen': hydrogen}

    @staticmethod
    def _parse_tokens(tokens) -> Dict[str, List]:
        t1 = tokens[0][0]
        if t1 == 2:
            if len(tokens) == 1 or tokens[1][0] not in (0, 8):
                raise IncorrectSmiles('not atom started')
        elif t1 not in (0, 8):
            raise IncorrectSmiles('not atom started')

        atoms = []
        bonds = []
        atoms_types = []
        atom_num = 0
        last_num = 0
        stack = []
        cycles = {}
        previous = None

        for token_type, token in tokens:
            if token_type == 2:  # ((((((
                if previous:
                    if previous[0] != 4:
                        raise IncorrectSmiles('bond before side chain')
                    previous = None
                stack.append(last_num)
            elif token_type == 3:  # ))))))
                if previous:
                    raise IncorrectSmiles('bond before closure')
                try:
                    last_num = stack.pop()
                except IndexError:
                    raise IncorrectSmiles('close chain more than open')
            elif token_type in (1, 4):  # bonds. only keeping for atoms connecting
                if previous:
                    raise IncorrectSmiles('2 bonds in a row')
                elif not atoms:
                    raise IncorrectSmiles('started from bond')
                previous = (token_type, token)
            elif token_type == 6:  # cycle
                if previous and previous[0] == 4:
                    raise IncorrectSmiles('dot-cycle pattern invalid')
                elif not atoms:
                    raise IncorrectSmiles('started from closure')
                elif token not in cycles:
                    cycles[token] = (last_num, previous)
                else:
                    a, b = cycles.pop(token)
                    if a == last_num:
                        raise IncorrectSmiles('atom loops impossible')
                    if b:
                        if previous and previous != b:
                            raise IncorrectSmiles('not equal cycle bonds')
                        previous = b
                    elif not previous:
                        previous = (1, 4) if atoms_types[last_num] == atoms_types[a] == 8 else (1, 1)
                    bonds.append((last_num, a, previous[1]))
                previous = None
            else:  # atom
                if atoms:
                    if not previous:
                        previous = (1, 4) if atoms_types[last_num] == token_type == 8 else (1, 1)
                    if previous[0] == 1:
                        bonds.append((atom_num, last_num, previous[1]))

                atoms.append(token)
                atoms_types.append(token_type)

                last_num = atom_num
                atom_num += 1
                previous = None

        if stack:
            raise IncorrectSmiles('number of ( does not equal to number of )')
        elif cycles:
            raise IncorrectSmiles('cycle is not finished')
        elif previous:
            raise IncorrectSmiles('bond on the end')
        return {'atoms': atoms, 'bonds': bonds}

    @staticmethod
    def _convert_structure(record: Dict[str, List]) -> MoleculeContainer:
        mol = MoleculeContainer()
        mapping: List[int] = []
        try:
            for atom in record['atoms']:
                element = Element.from_symbol(atom['element'], atom['isotope'])
                mapping.append(mol.add_atom(element, charge=atom['charge'], hydrogens=atom['hydrogen']))
            for n, m, order in record['bonds']:
                mol.add_bond(mapping[n], mapping[m], order)
        except ValueError as e:  # invalid element, charge or duplicated bond
            raise IncorrectSmiles(str(e)) from e
        return mol


__all__ = ['SMILESRead']
