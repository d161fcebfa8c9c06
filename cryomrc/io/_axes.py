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

__all__ = ['remap_axes','AXIS_NAMES']

from cryomrc.utils.datatypes import AxisMapping as _AxisMapping

AXIS_NAMES = ('X','Y','Z')

def remap_axes(mapc,mapr,maps):
    dest = []
    for default,value in enumerate((mapc,mapr,maps),start=1):
        if value < 1 or value > 3:
            value = default
        dest.append(value-1)
    return _AxisMapping(tuple(dest))
