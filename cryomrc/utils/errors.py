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

__all__ = ['MrcError',
           'MalformedSourceReference',
           'MrcReadError',
           'TruncatedHeader',
           'TruncatedExtendedHeader',
           'TruncatedSampleData',
           'UnsupportedPixelFormat',
           'MalformedHeader',
          ]

class MrcError(Exception):
    pass

class MalformedSourceReference(MrcError,ValueError):
    """The file locator cannot be turned into a readable source.

    This is the only error raised to the caller of the readers.
    """
    pass

###########################################

class MrcReadError(MrcError,IOError):
    """Base of the errors that abort the decoding of a single file.

    The readers catch these, log them and return without a volume.
    """
    pass

class TruncatedHeader(MrcReadError):
    pass

class TruncatedExtendedHeader(MrcReadError):
    pass

class TruncatedSampleData(MrcReadError):
    pass

class UnsupportedPixelFormat(MrcReadError):
    def __init__(self,mode):
        self.mode = mode
        super().__init__('Unidentified MRC pixel type: %d' % mode)

class MalformedHeader(MrcReadError):
    pass
