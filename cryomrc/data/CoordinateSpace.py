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

import numpy as _np
from decimal import Decimal as _Decimal
from cryomrc.utils import to_decimal as _to_decimal

class CoordinateSpace:
    """Linear mapping from canonical (x,y,z) indices to physical coordinates."""

    def __init__(self,origins,spacings):
        if len(origins) != 3 or len(spacings) != 3:
            raise ValueError('Origins and spacings must have three values')
        self.origins  = tuple(o if isinstance(o,_Decimal) else _Decimal(str(o)) for o in origins)
        self.spacings = tuple(s if isinstance(s,_Decimal) else _Decimal(str(s)) for s in spacings)

    def to_world(self,index):
        return tuple(self.origins[i] + self.spacings[i]*_Decimal(int(index[i])) for i in range(3))

    def to_index(self,coords):
        return tuple(float((_Decimal(str(coords[i])) - self.origins[i])/self.spacings[i]) for i in range(3))

    def __eq__(self,other):
        if not isinstance(other,CoordinateSpace):
            return NotImplemented
        return self.origins == other.origins and self.spacings == other.spacings

    def __repr__(self):
        return 'CoordinateSpace(origins=%s, spacings=%s)' % (
            tuple(str(o) for o in self.origins),tuple(str(s) for s in self.spacings))

###########################################

def _spacing(length,grid):
    if grid == 0:
        return _np.float32(1)
    with _np.errstate(divide='ignore',invalid='ignore',over='ignore'):
        rslt = _np.float32(length)/_np.float32(grid)
    if rslt == 0 or not _np.isfinite(rslt):
        return _np.float32(1)
    return rslt

def build_coordinate_space(hdr,mapping):
    spacing = (_spacing(hdr.xlen,hdr.mx),
               _spacing(hdr.ylen,hdr.my),
               _spacing(hdr.zlen,hdr.mz))

    if hdr.has_map_marker:
        origin = hdr.origin_new
    else:
        origin = hdr.origin_old

    if hdr.swap_origin_sign:
        origin = tuple(-o for o in origin)

    origins  = [_Decimal(0)]*3
    spacings = [_Decimal(1)]*3
    for file_axis,canon in enumerate(mapping.dest):
        origins [canon] = _to_decimal(origin [file_axis])
        spacings[canon] = _to_decimal(spacing[file_axis])
    return CoordinateSpace(origins,spacings)
