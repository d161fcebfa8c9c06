import unittest
from decimal import Decimal

from cryomrc.data import CoordinateSpace, build_coordinate_space
from cryomrc.io._axes import remap_axes
from cryomrc.io._header import parse_header

from _mrc_factory import make_header


def _space(axis_order=(1, 2, 3), **kwargs):
    hdr = parse_header(make_header(4, 4, 4, 2, axis_order=axis_order, **kwargs))
    return build_coordinate_space(hdr, remap_axes(*axis_order))


class TestSpacing(unittest.TestCase):

    def test_cell_over_grid(self):
        space = _space(grid=(50, 4, 8), cell=(100.0, 6.0, 2.0))
        self.assertEqual(space.spacings, (Decimal('2.0'), Decimal('1.5'), Decimal('0.25')))

    def test_zero_grid_defaults_to_one(self):
        space = _space(grid=(0, 0, 0), cell=(100.0, 6.0, 2.0))
        self.assertEqual(space.spacings, (Decimal(1), Decimal(1), Decimal(1)))

    def test_zero_cell_defaults_to_one(self):
        space = _space(grid=(4, 4, 4), cell=(0.0, 8.0, 4.0))
        self.assertEqual(space.spacings, (Decimal(1), Decimal(2), Decimal(1)))

    def test_float32_precision(self):
        space = _space(grid=(10, 1, 1), cell=(1.0, 1.0, 1.0))
        self.assertEqual(space.spacings[0], Decimal('0.10000000149011612'))

    def test_spacing_follows_axis_order(self):
        space = _space(axis_order=(2, 1, 3), grid=(5, 10, 1), cell=(10.0, 30.0, 7.0))
        self.assertEqual(space.spacings, (Decimal(3), Decimal(2), Decimal(7)))


class TestOrigin(unittest.TestCase):

    def test_map_marker_selects_new_origin(self):
        space = _space(origin_new=(1.5, 2.5, 3.5))
        self.assertEqual(space.origins, (Decimal('1.5'), Decimal('2.5'), Decimal('3.5')))

    def test_old_origin_without_marker(self):
        space = _space(little_endian=False, map_marker=False,
                       origin_new=(10.0, 20.0, 30.0), origin_old=(1.0, 2.0, 3.0))
        self.assertEqual(space.origins, (Decimal(1), Decimal(2), Decimal(3)))

    def test_almost_marker_selects_old_origin(self):
        raw = bytearray(make_header(4, 4, 4, 2, little_endian=False, map_marker=False,
                                    origin_new=(10.0, 20.0, 30.0), origin_old=(1.0, 2.0, 3.0)))
        raw[208:212] = b'MAP_'
        hdr = parse_header(bytes(raw))
        space = build_coordinate_space(hdr, remap_axes(1, 2, 3))
        self.assertEqual(space.origins[:2], (Decimal(1), Decimal(2)))

    def test_sign_inversion_with_imod_stamp(self):
        space = _space(origin_new=(1.5, -2.5, 3.0), imod=True, flags=4)
        self.assertEqual(space.origins, (Decimal('-1.5'), Decimal('2.5'), Decimal('-3.0')))

    def test_sign_flag_ignored_without_stamp(self):
        space = _space(origin_new=(1.5, -2.5, 3.0), imod=False, flags=4)
        self.assertEqual(space.origins, (Decimal('1.5'), Decimal('-2.5'), Decimal('3.0')))

    def test_origin_follows_axis_order(self):
        space = _space(axis_order=(3, 1, 2), origin_new=(1.0, 2.0, 3.0))
        # columns -> Z, rows -> X, sections -> Y
        self.assertEqual(space.origins, (Decimal(2), Decimal(3), Decimal(1)))


class TestCoordinateSpace(unittest.TestCase):

    def test_to_world_and_back(self):
        space = CoordinateSpace((10, -5, 0.5), (2, 0.5, 4))
        self.assertEqual(space.to_world((3, 4, 0)), (Decimal(16), Decimal(-3), Decimal('0.5')))
        self.assertEqual(space.to_index((16, -3, 8.5)), (3.0, 4.0, 2.0))

    def test_requires_three_axes(self):
        with self.assertRaises(ValueError):
            CoordinateSpace((0, 0), (1, 1))


if __name__ == '__main__':
    unittest.main()
