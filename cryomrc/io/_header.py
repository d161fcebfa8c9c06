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

__all__ = ['HEADER_SIZE','parse_header','read_header','read_exactly','skip_bytes','extract_labels']

import logging
import numpy as _np

from cryomrc.utils.datatypes import HeaderFields as _HeaderFields
from cryomrc.utils.errors    import TruncatedHeader         as _TruncatedHeader
from cryomrc.utils.errors    import TruncatedExtendedHeader as _TruncatedExtendedHeader
from cryomrc.utils.errors    import MalformedHeader         as _MalformedHeader

logger = logging.getLogger(__name__)

HEADER_SIZE  = 1024
IMOD_STAMP   = 1146047817 # 'IMOD'
MAP_MARKER   = b'MAP '
LABEL_COUNT  = 10
LABEL_LENGTH = 80
LABEL_OFFSET = 224
SKIP_CHUNK   = 65536

def _byteorder(little_endian):
    return '<' if little_endian else '>'

def _int32(raw,offset,little_endian):
    return int(_np.frombuffer(raw,dtype=_byteorder(little_endian)+'i4',count=1,offset=offset)[0])

def _float32(raw,offset,little_endian):
    return _np.frombuffer(raw,dtype=_byteorder(little_endian)+'f4',count=1,offset=offset)[0]

def _is_little_endian(raw):
    # 0x44 0x44 (or 0x44 0x41) for little endian, 0x11 0x11 for big endian
    return raw[212] == 0x44 and raw[213] in (0x44,0x41)

def parse_header(raw):
    if len(raw) < HEADER_SIZE:
        raise _TruncatedHeader('Header has %d bytes, expected %d' % (len(raw),HEADER_SIZE))
    raw = bytes(raw[:HEADER_SIZE])
    le  = _is_little_endian(raw)

    def i32(offset): return _int32  (raw,offset,le)
    def f32(offset): return _float32(raw,offset,le)

    n_labels = min(max(i32(220),0),LABEL_COUNT)
    labels   = [raw[LABEL_OFFSET+LABEL_LENGTH*l : LABEL_OFFSET+LABEL_LENGTH*(l+1)] for l in range(LABEL_COUNT)]

    hdr = _HeaderFields(
        cols     = i32(0),
        rows     = i32(4),
        sections = i32(8),
        mode     = i32(12),
        mx = i32(28),
        my = i32(32),
        mz = i32(36),
        xlen = f32(40),
        ylen = f32(44),
        zlen = f32(48),
        mapc = i32(64),
        mapr = i32(68),
        maps = i32(72),
        is_imod = i32(152) == IMOD_STAMP,
        flags   = i32(156),
        ext_header_size = i32(92),
        origin_new = (f32(196),f32(200),f32(204)),
        origin_old = (f32(212),f32(216),f32(208)),
        has_map_marker = raw[208:212] == MAP_MARKER,
        little_endian  = le,
        n_labels = n_labels,
        labels   = labels,
    )
    return hdr

def read_exactly(fp,n):
    # Short only at end of stream
    chunks = []
    while n > 0:
        buffer = fp.read(n)
        if not buffer:
            break
        chunks.append(buffer)
        n -= len(buffer)
    return b''.join(chunks)

def skip_bytes(fp,n):
    # Discards up to n bytes in bounded reads, returns the count skipped
    skipped = 0
    while skipped < n:
        buffer = fp.read(min(n-skipped,SKIP_CHUNK))
        if not buffer:
            break
        skipped += len(buffer)
    return skipped

def read_header(fp):
    raw = read_exactly(fp,HEADER_SIZE)
    hdr = parse_header(raw)

    if hdr.ext_header_size < 0:
        raise _MalformedHeader('Invalid extended header size: %d' % hdr.ext_header_size)
    if hdr.ext_header_size > 0:
        skipped = skip_bytes(fp,hdr.ext_header_size)
        if skipped < hdr.ext_header_size:
            raise _TruncatedExtendedHeader('Extended header has %d bytes, expected %d' % (skipped,hdr.ext_header_size))

    logger.debug('MRC header: %dx%dx%d mode %d, %s endian, map order (%d,%d,%d), %d extended bytes',
                 hdr.cols,hdr.rows,hdr.sections,hdr.mode,
                 'little' if hdr.little_endian else 'big',
                 hdr.mapc,hdr.mapr,hdr.maps,hdr.ext_header_size)
    return hdr

def extract_labels(hdr):
    rslt = {}
    for l in range(hdr.n_labels):
        rslt['Label %d' % l] = hdr.labels[l].decode('latin-1')
    return rslt
