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

"""Pixel formats of the MRC data block, indexed by the header mode.

Every format binds its row decoder once, so the assembly loop never
inspects sample types. All 16-bit encodings are read big-endian whatever
the byte order stamped in the header; only 32-bit values follow it.
"""

__all__ = ['PixelFormat','lookup','supported_modes','GAUSSIAN_INT16','RGB']

import math as _math
import numpy as _np
from numba import jit as _jit
from dataclasses import dataclass as _dc
from typing import Callable as _Callable

from cryomrc.utils.errors import UnsupportedPixelFormat as _UnsupportedPixelFormat

GAUSSIAN_INT16 = _np.dtype([('real',_np.int16),('imag',_np.int16)])
RGB            = _np.dtype([('r',_np.uint8),('g',_np.uint8),('b',_np.uint8)])

###########################################

@_dc(frozen=True)
class PixelFormat:
    mode:  int
    tag:   str
    width: float       # bytes per sample, 0.5 for packed nibbles
    dtype: _np.dtype   # dtype of the assembled volume
    decode_row: _Callable # (buffer,little_endian,count) -> ndarray

    @property
    def nbytes(self):
        # Physical read unit: two nibble samples share one byte
        return max(int(self.width),1)

    def row_nbytes(self,count):
        return int(_math.ceil(count*self.width))

    def decode(self,buffer,little_endian=False,even=True):
        count = 1 if (even or self.width >= 1) else 2
        return self.decode_row(bytes(buffer[:self.nbytes]),little_endian,count)[count-1]

###########################################

def _fixed(wire_le,wire_be,out_type):
    wire_le = _np.dtype(wire_le)
    wire_be = _np.dtype(wire_be)
    out_type = _np.dtype(out_type)
    def decode_row(buffer,little_endian,count):
        wire = wire_le if little_endian else wire_be
        return _np.frombuffer(buffer,dtype=wire,count=count).astype(out_type)
    return decode_row

@_jit(nopython=True,cache=True)
def _unpack_nibbles(packed,out):
    for i in range(out.shape[0]):
        b = packed[i//2]
        if (i & 1) == 0:
            out[i] = b & 0x0f
        else:
            out[i] = (b >> 4) & 0x0f

def _decode_nibbles(buffer,little_endian,count):
    packed = _np.frombuffer(buffer,dtype=_np.uint8,count=(count+1)//2)
    out = _np.empty(count,dtype=_np.uint8)
    _unpack_nibbles(packed,out)
    return out

_GAUSSIAN_INT16_BE = _np.dtype([('real','>i2'),('imag','>i2')])

_BYTE_FORMATS = {
    False: PixelFormat(0,'uint8',1,_np.dtype(_np.uint8),_fixed('u1','u1',_np.uint8)),
    True:  PixelFormat(0,'int8' ,1,_np.dtype(_np.int8 ),_fixed('i1','i1',_np.int8 )),
}

_FORMATS = {
      1: PixelFormat(  1,'int16'         ,2  ,_np.dtype(_np.int16)    ,_fixed('>i2','>i2',_np.int16)),
      2: PixelFormat(  2,'float32'       ,4  ,_np.dtype(_np.float32)  ,_fixed('<f4','>f4',_np.float32)),
      3: PixelFormat(  3,'gaussian_int16',4  ,GAUSSIAN_INT16          ,_fixed(_GAUSSIAN_INT16_BE,_GAUSSIAN_INT16_BE,GAUSSIAN_INT16)),
      4: PixelFormat(  4,'complex64'     ,8  ,_np.dtype(_np.complex64),_fixed('<c8','>c8',_np.complex64)),
      6: PixelFormat(  6,'uint16'        ,2  ,_np.dtype(_np.uint16)   ,_fixed('>u2','>u2',_np.uint16)),
     12: PixelFormat( 12,'float16'       ,2  ,_np.dtype(_np.float16)  ,_fixed('>f2','>f2',_np.float16)),
     16: PixelFormat( 16,'rgb'           ,3  ,RGB                     ,_fixed(RGB,RGB,RGB)),
    101: PixelFormat(101,'uint4'         ,0.5,_np.dtype(_np.uint8)    ,_decode_nibbles),
}

def lookup(mode,signed_bytes=False):
    if mode == 0:
        return _BYTE_FORMATS[bool(signed_bytes)]
    try:
        return _FORMATS[mode]
    except KeyError:
        raise _UnsupportedPixelFormat(mode) from None

def supported_modes():
    return tuple(sorted([0] + list(_FORMATS.keys())))
