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

class DataBundle:
    """Decoded volumes grouped by pixel format tag."""

    def __init__(self):
        self._volumes = {}

    def add(self,tag,volume):
        self._volumes.setdefault(tag,[]).append(volume)

    def get(self,tag):
        return list(self._volumes.get(tag,[]))

    def tags(self):
        return list(self._volumes.keys())

    def bundle(self):
        rslt = []
        for volumes in self._volumes.values():
            rslt.extend(volumes)
        return rslt

    def counts(self):
        return { tag: len(volumes) for tag,volumes in self._volumes.items() }

    def __len__(self):
        return sum(len(volumes) for volumes in self._volumes.values())

    def __iter__(self):
        return iter(self.bundle())

    def __contains__(self,tag):
        return tag in self._volumes

    def __repr__(self):
        return 'DataBundle(%s)' % self.counts()
