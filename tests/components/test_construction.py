"""
Construction through the Shapely kernel.
"""

import pytest
from feature_factory import Factory, GeometryVariant

SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
HOLE = [(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)]
BOWTIE = [(0, 0), (2, 2), (2, 0), (0, 2), (0, 0)]


class TestPoints:

    def test_xy_point(self, xy_factory):
        point = xy_factory.point(1, 2)
        assert point.variant == GeometryVariant.POINT
        assert (point.x, point.y) == (1.0, 2.0)
        assert point.z is None
        assert point.m is None

    def test_z_point(self, xyz_factory):
        point = xyz_factory.point(1, 2, 3)
        assert point.coordinates() == [(1.0, 2.0, 3.0)]
        assert point.z == 3.0
        assert point.m is None

    def test_m_point(self, xym_factory):
        point = xym_factory.point(1, 2, 9)
        assert point.m == 9.0
        assert point.z is None

    def test_missing_extra_defaults_to_zero(self, xyz_factory):
        assert xyz_factory.point(1, 2).z == 0.0

    def test_two_extras_on_z_factory_is_none(self, xyz_factory):
        assert xyz_factory.point(1, 2, 3, 4) is None

    def test_extra_on_xy_factory_is_none(self, xy_factory):
        assert xy_factory.point(1, 2, 3) is None


class TestLineStrings:

    def test_line_string(self, xy_factory):
        line = xy_factory.line_string([(0, 0), (1, 1), (2, 0)])
        assert line.variant == GeometryVariant.LINE_STRING
        assert line.num_points == 3

    def test_empty_line_string(self, xy_factory):
        assert xy_factory.line_string([]).is_empty

    def test_single_point_line_string_is_none(self, xy_factory):
        assert xy_factory.line_string([(0, 0)]) is None

    def test_line(self, xy_factory):
        line = xy_factory.line(xy_factory.point(0, 0), (5, 5))
        assert line.variant == GeometryVariant.LINE
        assert line.coordinates() == [(0.0, 0.0), (5.0, 5.0)]

    def test_point_from_z_factory_is_aligned(self, xy_factory, xyz_factory):
        line = xy_factory.line(xyz_factory.point(0, 0, 7), (1, 1))
        assert line.coordinates() == [(0.0, 0.0), (1.0, 1.0)]

    def test_linear_ring(self, xy_factory):
        ring = xy_factory.linear_ring(SQUARE)
        assert ring.variant == GeometryVariant.LINEAR_RING
        assert ring.is_closed

    def test_open_linear_ring_is_none(self, xy_factory):
        assert xy_factory.linear_ring(SQUARE[:-1]) is None

    def test_self_intersecting_ring_is_none(self, xy_factory):
        assert xy_factory.linear_ring(BOWTIE) is None


class TestPolygons:

    def test_polygon_with_hole(self, xy_factory):
        polygon = xy_factory.polygon(xy_factory.linear_ring(SQUARE), [HOLE])
        assert polygon.variant == GeometryVariant.POLYGON
        assert polygon.exterior_ring().num_points == 5
        assert [ring.num_points for ring in polygon.interior_rings()] == [5]

    def test_inner_rings_default(self, xy_factory):
        assert xy_factory.polygon(SQUARE).interior_rings() == []

    def test_invalid_polygon_is_none_when_strict(self, xy_factory):
        assert xy_factory.polygon(BOWTIE) is None

    def test_invalid_polygon_allowed_when_lenient(self, lenient_factory):
        polygon = lenient_factory.polygon(BOWTIE)
        assert polygon is not None
        assert polygon.variant == GeometryVariant.POLYGON

    def test_z_polygon(self, xyz_factory):
        polygon = xyz_factory.polygon(SQUARE)
        assert all(len(c) == 3 for c in polygon.coordinates())


class TestCollections:

    def test_multi_point(self, xy_factory):
        multi = xy_factory.multi_point([xy_factory.point(0, 0), xy_factory.point(1, 1)])
        assert multi.variant == GeometryVariant.MULTI_POINT
        assert [p.coordinates() for p in multi.geometries()] == [[(0.0, 0.0)], [(1.0, 1.0)]]

    @pytest.mark.parametrize("builder", ["collection", "multi_point", "multi_line_string", "multi_polygon"])
    def test_empty_members_are_legal(self, xy_factory, builder):
        result = getattr(xy_factory, builder)([])
        assert result is not None
        assert result.is_empty

    def test_multi_line_string_with_ring_member(self, xy_factory):
        ring = xy_factory.linear_ring(SQUARE)
        line = xy_factory.line((0, 0), (9, 9))
        multi = xy_factory.multi_line_string([ring, line])
        assert [m.variant for m in multi.geometries()] == [GeometryVariant.LINE_STRING] * 2

    def test_overlapping_multi_polygon_strict_and_lenient(self, xy_factory, lenient_factory):
        shifted = [(x + 1, y) for x, y in SQUARE]
        strict = [xy_factory.polygon(SQUARE), xy_factory.polygon(shifted)]
        assert xy_factory.multi_polygon(strict) is None
        lenient = [lenient_factory.polygon(SQUARE), lenient_factory.polygon(shifted)]
        assert lenient_factory.multi_polygon(lenient) is not None

    def test_collection_keeps_member_order(self, xy_factory):
        point = xy_factory.point(0, 0)
        line = xy_factory.line_string([(0, 0), (1, 1)])
        collection = xy_factory.collection((g for g in [line, point]))
        assert [m.variant for m in collection.geometries()] == [GeometryVariant.LINE_STRING, GeometryVariant.POINT]

    def test_members_from_z_factory_are_flattened(self, xy_factory, xyz_factory):
        multi = xy_factory.multi_point([xyz_factory.point(1, 2, 3)])
        assert multi.coordinates() == [(1.0, 2.0)]

    def test_wrong_member_family_is_none(self, xy_factory):
        assert xy_factory.multi_polygon([xy_factory.point(0, 0)]) is None


class TestParsing:

    def test_parse_wkt(self, xy_factory):
        point = xy_factory.parse_wkt("POINT (1 2)")
        assert point.variant == GeometryVariant.POINT
        assert point.factory == xy_factory

    def test_parse_malformed_wkt_is_none(self, xy_factory):
        assert xy_factory.parse_wkt("POINT (1 2") is None
        assert xy_factory.parse_wkt("NOT A GEOMETRY") is None

    def test_parse_wkt_aligns_dimension(self, xy_factory, xyz_factory):
        assert xy_factory.parse_wkt("POINT Z (1 2 3)").coordinates() == [(1.0, 2.0)]
        assert xyz_factory.parse_wkt("POINT (1 2)").coordinates() == [(1.0, 2.0, 0.0)]

    def test_parse_wkb_round_trip(self, xyz_factory):
        line = xyz_factory.line_string([(0, 0, 1), (1, 1, 2)])
        parsed = xyz_factory.parse_wkb(line.as_binary())
        assert parsed == line

    def test_parse_garbage_wkb_is_none(self, xy_factory):
        assert xy_factory.parse_wkb(b"\x01\x02") is None


class TestExtraOrdinateMeaning:

    def test_m_point_in_z_line_string_is_none(self, xym_factory, xyz_factory):
        assert xyz_factory.line_string([xym_factory.point(0, 0, 5), (1, 1, 1)]) is None

    def test_m_member_in_z_multi_point_is_none(self, xym_factory, xyz_factory):
        assert xyz_factory.multi_point([xym_factory.point(0, 0, 5)]) is None

    def test_m_ring_in_z_polygon_is_none(self, xym_factory, xyz_factory):
        ring = xym_factory.linear_ring([(0, 0, 1), (4, 0, 1), (4, 4, 1), (0, 0, 1)])
        assert xyz_factory.polygon(ring) is None

    def test_z_point_in_xy_line_string_is_flattened(self, xyz_factory, xy_factory):
        line = xy_factory.line_string([xyz_factory.point(0, 0, 5), (1, 1)])
        assert line.coordinates() == [(0.0, 0.0), (1.0, 1.0)]
