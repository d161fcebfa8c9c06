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

"""Command line summary of the volumes decoded from MRC files."""

import argparse
import logging

from cryomrc.io.mrc          import read_all_datasets
from cryomrc.data            import DataBundle
from cryomrc.utils.datatypes import ReaderOptions
from cryomrc.utils.errors    import MalformedSourceReference

def _build_parser():
    parser = argparse.ArgumentParser(
        prog="cryomrc",
        description="Decode MRC volumes and report what was read",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("files", metavar="FILE", nargs="+", help="MRC file path or file: URI.")
    parser.add_argument("--bytes-per-line", type=int, default=None,
                        help="Row stride of the data block; extra bytes after each row are skipped.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages.")
    return parser

def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    options = ReaderOptions(bytes_per_line=args.bytes_per_line)
    bundle  = DataBundle()
    for filename in args.files:
        print("GOING TO READ FILE: " + filename)
        try:
            read_all_datasets(filename,bundle,options)
        except MalformedSourceReference as e:
            parser.error(str(e))

    print()
    print("number of data files returned = %d" % len(bundle))
    for tag,count in bundle.counts().items():
        print("  %s: %d" % (tag,count))

    return 0 if len(bundle) > 0 else 1

if __name__ == '__main__':
    raise SystemExit(main())
