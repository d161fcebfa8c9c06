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

from . import utils
from . import data
from . import io

from .io.mrc import read_all_datasets
from .data   import DataBundle,Volume
from .utils.datatypes import ReaderOptions

MRC_EXTENSIONS = ('.mrc','.mrcs','.map','.ali','.st','.rec')

def read(filename,options=None):
    if any(utils.is_extension(filename,ext) for ext in MRC_EXTENSIONS):
        return io.mrc.read(filename,options)
    else:
        raise ValueError('Unsupported file.')

__all__ = []
__all__.extend(['read','read_all_datasets','DataBundle','Volume','ReaderOptions'])
