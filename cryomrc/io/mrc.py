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

__all__ = ['read','read_all_datasets','get_info','decode_stream','assemble_volume']

import logging
import numpy as _np
from pathlib import Path as _Path

from cryomrc.io._header  import read_header    as _read_header
from cryomrc.io._header  import read_exactly   as _read_exactly
from cryomrc.io._header  import extract_labels as _extract_labels
from cryomrc.io._formats import lookup         as _lookup_format
from cryomrc.io._axes    import remap_axes     as _remap_axes
from cryomrc.io._axes    import AXIS_NAMES     as _AXIS_NAMES

from cryomrc.data import Volume                 as _Volume
from cryomrc.data import DataBundle             as _DataBundle
from cryomrc.data import build_coordinate_space as _build_coordinate_space

from cryomrc.utils.datatypes import ReaderOptions as _ReaderOptions
from cryomrc.utils.errors    import MrcReadError        as _MrcReadError
from cryomrc.utils.errors    import MalformedHeader     as _MalformedHeader
from cryomrc.utils.errors    import TruncatedSampleData as _TruncatedSampleData
from cryomrc.utils           import resolve_source      as _resolve_source

logger = logging.getLogger(__name__)

###########################################

def _allocate(dims,fmt):
    nbytes = dims[0]*dims[1]*dims[2]*fmt.dtype.itemsize
    if nbytes > _np.iinfo(_np.intp).max:
        raise _MalformedHeader('Volume %dx%dx%d of %s exceeds the addressable size' % (dims+(fmt.tag,)))
    try:
        return _np.zeros(dims,dtype=fmt.dtype)
    except (MemoryError,ValueError) as e:
        raise _MalformedHeader('Cannot allocate %dx%dx%d volume of %s (%d bytes)' % (dims+(fmt.tag,nbytes))) from e

def assemble_volume(fp,hdr,fmt,mapping,options=None):
    """Stream the data block into a canonical [x,y,z] array.

    Rows are consumed in file order (section, row, column) and written
    along the canonical axes given by mapping. Nothing is returned if the
    stream ends early.
    """
    if options is None:
        options = _ReaderOptions()

    if min(hdr.cols,hdr.rows,hdr.sections) < 0:
        raise _MalformedHeader('Invalid dimensions %dx%dx%d' % (hdr.cols,hdr.rows,hdr.sections))
    if not mapping.is_permutation:
        raise _MalformedHeader('Axis order (%d,%d,%d) is not a permutation' % (hdr.mapc,hdr.mapr,hdr.maps))

    dims = mapping.canonical_dims(hdr.cols,hdr.rows,hdr.sections)
    vol  = _allocate(dims,fmt)
    if min(dims) == 0:
        return vol

    row_bytes = fmt.row_nbytes(hdr.cols)
    pad_bytes = 0
    if options.bytes_per_line is not None:
        pad_bytes = max(options.bytes_per_line - row_bytes,0)

    c_axis,r_axis,s_axis = mapping.dest
    idx = [slice(None)]*3
    for z in range(hdr.sections):
        idx[s_axis] = z
        for y in range(hdr.rows):
            idx[r_axis] = y
            buffer = _read_exactly(fp,row_bytes)
            if len(buffer) < row_bytes:
                raise _TruncatedSampleData('Sample data ended at section %d, row %d' % (z,y))
            vol[tuple(idx)] = fmt.decode_row(buffer,hdr.little_endian,hdr.cols)
            if pad_bytes > 0:
                if len(_read_exactly(fp,pad_bytes)) < pad_bytes:
                    raise _TruncatedSampleData('Row padding ended at section %d, row %d' % (z,y))
    return vol

def _stamp_metadata(vol,hdr,mapping):
    vol.value_type = 'intensity'
    vol.value_unit = ''
    for file_axis,canon in enumerate(mapping.dest):
        vol.set_axis(canon,_AXIS_NAMES[file_axis],'dist')
    vol.metadata.update(_extract_labels(hdr))

def decode_stream(fp,source='',options=None):
    """Decode one MRC volume from a binary stream.

    Raises the MrcReadError family; read_all_datasets is the variant that
    logs them instead.
    """
    hdr     = _read_header(fp)
    fmt     = _lookup_format(hdr.mode,hdr.signed_bytes)
    mapping = _remap_axes(hdr.mapc,hdr.mapr,hdr.maps)
    data    = assemble_volume(fp,hdr,fmt,mapping,options)

    vol = _Volume(data,fmt.tag,_build_coordinate_space(hdr,mapping),name='MRC format file',source=source)
    _stamp_metadata(vol,hdr,mapping)
    return vol

###########################################

def _stream_source(fp):
    name = getattr(fp,'name',None)
    if isinstance(name,str) and name:
        return _Path(name).absolute().as_uri()
    return '<stream>'

def read_all_datasets(source,bundle=None,options=None):
    if bundle is None:
        bundle = _DataBundle()

    try:
        if hasattr(source,'read'):
            source_uri = _stream_source(source)
            vol = decode_stream(source,source_uri,options)
        else:
            path,source_uri = _resolve_source(source)
            with open(path,'rb') as fp:
                vol = decode_stream(fp,source_uri,options)
    except _MrcReadError as e:
        logger.error('Could not decode %s: %s', source_uri, e)
        return bundle
    except OSError as e:
        logger.error('Could not read %s: %s', source_uri, e)
        return bundle

    bundle.add(vol.tag,vol)
    logger.info('Read %s volume %s from %s', vol.tag, 'x'.join(str(n) for n in vol.dims), source_uri)
    return bundle

def read(filename,options=None):
    vols = read_all_datasets(filename,options=options).bundle()
    if len(vols) == 0:
        return None
    return vols[0]

def get_info(filename):
    path,_ = _resolve_source(filename)
    with open(path,'rb') as fp:
        hdr = _read_header(fp)
    fmt     = _lookup_format(hdr.mode,hdr.signed_bytes)
    mapping = _remap_axes(hdr.mapc,hdr.mapr,hdr.maps)
    space   = _build_coordinate_space(hdr,mapping)

    mrc_shape = _np.array(mapping.canonical_dims(hdr.cols,hdr.rows,hdr.sections),dtype=_np.int64)
    pix_size  = _np.array([float(s) for s in space.spacings],dtype=_np.float32)
    return mrc_shape,pix_size,fmt.dtype
