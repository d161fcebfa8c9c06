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

from .CoordinateSpace import CoordinateSpace as _CoordinateSpace

class Volume:
    """Decoded 3D sample array, indexed [x,y,z] on the canonical axes."""

    def __init__(self,data,tag,coordinate_space=None,name='',source=''):
        if data.ndim != 3:
            raise ValueError('Volume must be three-dimensional')
        if coordinate_space is None:
            coordinate_space = _CoordinateSpace((0,0,0),(1,1,1))
        self.data             = data
        self.tag              = tag
        self.coordinate_space = coordinate_space
        self.axis_types       = ['','','']
        self.axis_units       = ['','','']
        self.value_type       = ''
        self.value_unit       = ''
        self.name             = name
        self.source           = source
        self.metadata         = {}

    def get_dims(self):  return tuple(int(n) for n in self.data.shape)
    def get_dtype(self): return self.data.dtype

    dims  = property(get_dims)
    dtype = property(get_dtype)

    def get(self,x,y,z):
        return self.data[x,y,z]

    def set_axis(self,axis,axis_type,unit):
        self.axis_types[axis] = axis_type
        self.axis_units[axis] = unit

    def world_coordinate(self,index):
        return self.coordinate_space.to_world(index)

    def __repr__(self):
        return "Volume(tag='%s', dims=%s, source='%s')" % (self.tag,self.dims,self.source)
