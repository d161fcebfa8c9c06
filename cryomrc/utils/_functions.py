###########################################################################
# This file is part of the cryomrc volume reader.
# Copyright (c) 2025 The cryomrc developers.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
###########################################################################

__all__ = ['get_extension',
           'is_extension',
           'to_decimal',
           'resolve_source',
          ]

import os
import numpy as np
from decimal import Decimal
from pathlib import Path
from os.path import splitext as split_ext
from urllib.parse import urlparse
from urllib.request import url2pathname

from cryomrc.utils.errors import MalformedSourceReference

###########################################

def get_extension(filename):
    _,ext = split_ext(str(filename))
    return ext

def is_extension(filename,extension):
    ext = get_extension(filename).lower()
    if( extension[0] == '.' ):
        return ext == extension
    else:
        return ext == '.'+extension

###########################################

def to_decimal(value):
    # Shortest repr of the widened float32, e.g. 0.1 -> 0.10000000149011612
    return Decimal(repr(float(np.float32(value))))

###########################################

def resolve_source(source):
    """Turn a file locator into (local path, source URI).

    Accepts a path (str or os.PathLike) or a 'file:' URI. Raises
    MalformedSourceReference without touching the file system.
    """
    if isinstance(source,os.PathLike):
        source = os.fspath(source)
    if isinstance(source,bytes):
        try:
            source = source.decode()
        except UnicodeDecodeError as e:
            raise MalformedSourceReference('Bad name for file: '+str(e)) from e
    if not isinstance(source,str):
        raise MalformedSourceReference('Bad name for file: %r' % (source,))
    if not source or '\x00' in source:
        raise MalformedSourceReference('Bad name for file: %r' % source)

    if source.lower().startswith('file:'):
        uri = urlparse(source)
        if uri.netloc not in ('','localhost'):
            raise MalformedSourceReference('Bad name for file: remote host in ' + source)
        path = url2pathname(uri.path)
        if not path:
            raise MalformedSourceReference('Bad name for file: ' + source)
        return path,Path(path).absolute().as_uri()

    if '://' in source:
        raise MalformedSourceReference('Bad name for file: unsupported scheme in ' + source)

    return source,Path(source).absolute().as_uri()
