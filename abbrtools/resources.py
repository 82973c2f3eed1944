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
line-oriented text resources access. resources are filesystem files or data files packaged with modules
"""
from importlib.resources import files
from os import PathLike
from pathlib import Path
from typing import List, TextIO, Union
from .exceptions import ResourceError


default_package = 'abbrtools.data'


def open_resource(source: Union[str, PathLike]) -> TextIO:
    """
    Open text resource.

    Existing filesystem path opened as is. Otherwise source treated as packaged resource:
    bare name (`obabel_superatoms.smi`) searched in `abbrtools.data` package,
    absolute path (`/abbrtools/data/obabel_superatoms.smi`) treated as package path with file name.

    :raise ResourceError: resource not found or not readable
    """
    try:
        path = Path(source)
        if path.is_file():
            return path.open(encoding='utf-8')

        name = str(source)
        if name.startswith('/'):
            package, _, resource = name.lstrip('/').rpartition('/')
            package = package.replace('/', '.')
        else:
            package, resource = default_package, name
        if not package or not resource:
            raise ResourceError(f'invalid resource path: {name}')
        return files(package).joinpath(resource).open('r', encoding='utf-8')
    except ResourceError:
        raise
    except (OSError, ImportError, ValueError, TypeError) as e:
        raise ResourceError(f'resource not accessible: {source}') from e


def read_lines(source: Union[str, PathLike]) -> List[str]:
    """
    Read whole resource as list of lines without line ends.

    :raise ResourceError: resource not found or not readable
    """
    with open_resource(source) as f:
        try:
            return f.read().splitlines()
        except (OSError, ValueError) as e:
            raise ResourceError(f'resource not readable: {source}') from e


__all__ = ['open_resource', 'read_lines']
