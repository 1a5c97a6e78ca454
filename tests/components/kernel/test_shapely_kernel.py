"""Unit tests for the Shapely kernel adapter"""

import numpy as np
import pytest
import shapely
from shapely.geometry import Point, LineString, Polygon, MultiPoint

from feature_factory import Factory, GeometryVariant, ShapelyKernel
from feature_factory.core import GeometryConstructionError, GeometryParseError
import feature_factory.components.kernel.shapely_kernel as shapely_kernel_module


@pytest.fixture
def kernel():
    return ShapelyKernel()


class TestShapelyKernel:

    def test_available_with_bundled_geos(self, kernel):
        assert kernel.is_available() is True

    def test_owns_shapely_geometries_only(self, kernel):
        assert kernel.owns(Point(0, 0))
        assert not kernel.owns((0, 0))

    def test_build_point(self, kernel):
        handle = kernel.build_primitive(GeometryVariant.POINT, np.array([1.0, 2.0, 3.0]))
        assert handle.has_z
        assert kernel.coordinate_sequence(handle) == [(1.0, 2.0, 3.0)]

    def test_build_line_is_a_line_string(self, kernel):
        handle = kernel.build_primitive(GeometryVariant.LINE, np.array([[0.0, 0.0], [1.0, 1.0]]))
        assert kernel.type_name(handle) == "LineString"

    def test_build_ring_rejects_self_intersection(self, kernel):
        bowtie = np.array([[0, 0], [2, 2], [2, 0], [0, 2], [0, 0]], dtype=float)
        with pytest.raises(GeometryConstructionError):
            kernel.build_primitive(GeometryVariant.LINEAR_RING, bowtie)

    def test_build_invalid_polygon(self, kernel):
        bowtie = np.array([[0, 0], [2, 2], [2, 0], [0, 2], [0, 0]], dtype=float)
        with pytest.raises(GeometryConstructionError):
            kernel.build_primitive(GeometryVariant.POLYGON, (bowtie, []))
        handle = kernel.build_primitive(GeometryVariant.POLYGON, (bowtie, []), lenient=True)
        assert not handle.is_valid

    def test_build_error_is_wrapped(self, kernel):
        with pytest.raises(GeometryConstructionError) as exc_info:
            kernel.build_primitive(GeometryVariant.LINE_STRING, np.array([[0.0, 0.0]]))
        assert exc_info.value.variant == "LineString"

    def test_multi_line_string_demotes_rings(self, kernel):
        ring = shapely.LinearRing([(0, 0), (1, 0), (1, 1), (0, 0)])
        handle = kernel.build_primitive(GeometryVariant.MULTI_LINE_STRING, [ring])
        assert [g.geom_type for g in handle.geoms] == ["LineString"]

    def test_parse(self, kernel):
        assert kernel.parse_wkt("POINT (1 2)").equals(Point(1, 2))
        assert kernel.parse_wkb(Point(1, 2).wkb).equals(Point(1, 2))

    def test_parse_errors_are_wrapped(self, kernel):
        with pytest.raises(GeometryParseError):
            kernel.parse_wkt("LINESTRING (0 0")
        with pytest.raises(GeometryParseError):
            kernel.parse_wkb(b"garbage")

    def test_rebind_aligns_dimension(self, kernel):
        xy, xyz = Factory.create(), Factory.create(support_z_coordinate=True)
        assert not kernel.rebind(Point(1, 2, 3), xy).has_z
        assert kernel.rebind(Point(1, 2), xyz).has_z
        handle = Point(1, 2)
        assert kernel.rebind(handle, xy) is handle

    def test_components(self, kernel):
        polygon = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)], [[(1, 1), (2, 1), (2, 2), (1, 1)]])
        assert [c.geom_type for c in kernel.components(polygon)] == ["LinearRing", "LinearRing"]
        assert len(kernel.components(MultiPoint([(0, 0), (1, 1)]))) == 2
        assert kernel.components(LineString([(0, 0), (1, 1)])) == []

    def test_buffer_error_is_wrapped(self, kernel):
        with pytest.raises(GeometryConstructionError):
            kernel.buffer(Point(0, 0), "wide", 1)

    def test_serialization(self, kernel):
        assert kernel.to_wkt(Point(1, 2)) == "POINT (1 2)"
        assert isinstance(kernel.to_wkb(Point(1, 2)), bytes)


class TestShapelyAvailability:

    def test_missing_shapely_is_soft(self, monkeypatch):
        monkeypatch.setattr(shapely_kernel_module, "SHAPELY_AVAILABLE", False)
        kernel = ShapelyKernel()
        assert kernel.is_available() is False
        assert not kernel.owns(Point(0, 0))
        assert Factory.create() is None

    def test_old_geos_is_soft(self, monkeypatch):
        monkeypatch.setattr(shapely, "geos_version", (3, 6, 0))
        monkeypatch.setattr(shapely, "geos_version_string", "3.6.0")
        assert ShapelyKernel().is_available() is False
        assert Factory.create(srid=4326) is None
