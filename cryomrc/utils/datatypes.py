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

from dataclasses import dataclass as _dc
from dataclasses import field     as _field
from typing      import Optional  as _Optional

@_dc
class HeaderFields:
    cols:     int
    rows:     int
    sections: int
    mode:     int
    mx: int
    my: int
    mz: int
    xlen: float
    ylen: float
    zlen: float
    mapc: int
    mapr: int
    maps: int
    is_imod: bool
    flags:   int
    ext_header_size: int
    origin_new: tuple # (x,y,z)
    origin_old: tuple # (x,y,z), stored in the file as (z,x,y)
    has_map_marker: bool
    little_endian:  bool
    n_labels: int
    labels:   list = _field(default_factory=list) # 10 raw blocks of 80 bytes

    @property
    def signed_bytes(self):
        return self.is_imod and (self.flags & 1) == 1

    @property
    def swap_origin_sign(self):
        return self.is_imod and (self.flags & 4) == 4

@_dc(frozen=True)
class AxisMapping:
    """Canonical axis (0=X, 1=Y, 2=Z) receiving each file axis.

    dest is ordered (column, row, section). Nothing forces it to be a
    permutation: when two file axes share a slot the later one wins.
    """
    dest: tuple

    @property
    def is_permutation(self):
        return sorted(self.dest) == [0,1,2]

    @property
    def source(self):
        rslt = [None,None,None]
        for file_axis,canon in enumerate(self.dest):
            rslt[canon] = file_axis
        return tuple(rslt)

    def canonical_index(self,col,row,sec):
        idx = [0,0,0]
        for file_axis,value in enumerate((col,row,sec)):
            idx[self.dest[file_axis]] = value
        return tuple(idx)

    def canonical_dims(self,cols,rows,sections):
        dims = [1,1,1]
        for file_axis,value in enumerate((cols,rows,sections)):
            dims[self.dest[file_axis]] = value
        return tuple(dims)

@_dc
class ReaderOptions:
    # When set, each row of sample data is assumed to span this many bytes
    # and the bytes left after the samples are skipped.
    bytes_per_line: _Optional[int] = None
