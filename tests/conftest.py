"""Shared fixtures: a recording fake kernel and Shapely-backed factories"""
from dataclasses import dataclass, field
from typing import Any, List, Tuple

import numpy as np
import pytest

from feature_factory import Factory, GeometryVariant, IGeometryKernel
from feature_factory.core import GeometryConstructionError, GeometryParseError


@dataclass(frozen=True)
class FakeHandle:
    """Opaque handle produced by RecordingKernel"""
    type_name: str
    coords: Tuple[Tuple[float, ...], ...] = ()
    members: Tuple['FakeHandle', ...] = ()


class RecordingKernel(IGeometryKernel):
    """
    Kernel double that records every validated input it receives

    Builds trivial handles so the factory and cast engine can be exercised
    without any real geometry engine.
    """

    _TYPE_NAMES = {
        GeometryVariant.LINE: "LineString",
    }

    def __init__(self, available: bool = True):
        self.available = available
        self.built: List[Tuple[GeometryVariant, Any, bool]] = []
        self.rebound: List[Any] = []
        self.fail_variants = set()
        self.wkt_table = {}
        self.fail_buffer = False

    def is_available(self) -> bool:
        return self.available

    def owns(self, handle: Any) -> bool:
        return isinstance(handle, FakeHandle)

    def build_primitive(self, variant, data, lenient=False):
        self.built.append((variant, data, lenient))
        if variant in self.fail_variants:
            raise GeometryConstructionError(variant.value, "rejected by test kernel")

        type_name = self._TYPE_NAMES.get(variant, variant.value)
        if variant == GeometryVariant.POINT:
            return FakeHandle(type_name, (tuple(data.tolist()),))
        if variant == GeometryVariant.POLYGON:
            shell, holes = data
            rings = tuple(FakeHandle("LinearRing", tuple(map(tuple, ring.tolist()))) for ring in [shell] + holes)
            return FakeHandle(type_name, sum((r.coords for r in rings), ()), rings)
        if isinstance(data, np.ndarray):
            return FakeHandle(type_name, tuple(map(tuple, data.tolist())))
        members = tuple(data)
        return FakeHandle(type_name, sum((m.coords for m in members), ()), members)

    def parse_wkt(self, text):
        if text not in self.wkt_table:
            raise GeometryParseError("WKT", f"unknown text {text!r}")
        return self.wkt_table[text]

    def parse_wkb(self, data):
        raise GeometryParseError("WKB", "not supported by test kernel")

    def rebind(self, handle, factory):
        self.rebound.append(handle)
        return handle

    def coordinate_sequence(self, handle):
        return list(handle.coords)

    def type_name(self, handle):
        return handle.type_name

    def components(self, handle):
        return list(handle.members)

    def is_simple(self, handle):
        return True

    def is_empty(self, handle):
        return not handle.coords and not handle.members

    def to_wkt(self, handle):
        return f"{handle.type_name} {handle.coords}"

    def to_wkb(self, handle):
        return repr(handle).encode()

    def buffer(self, handle, distance, resolution):
        if self.fail_buffer:
            raise GeometryConstructionError("buffer", "rejected by test kernel")
        return FakeHandle("Polygon", handle.coords)


@pytest.fixture
def recording_kernel():
    return RecordingKernel()


@pytest.fixture
def fake_factory(recording_kernel):
    return Factory.create(kernel=recording_kernel)


@pytest.fixture
def fake_z_factory(recording_kernel):
    return Factory.create(kernel=recording_kernel, support_z_coordinate=True)


@pytest.fixture
def xy_factory():
    return Factory.create()


@pytest.fixture
def xyz_factory():
    return Factory.create(support_z_coordinate=True)


@pytest.fixture
def xym_factory():
    return Factory.create(support_m_coordinate=True)


@pytest.fixture
def srid_factory():
    return Factory.create(srid=4326)


@pytest.fixture
def lenient_factory():
    return Factory.create(lenient_polygon_assertions=True)


@pytest.fixture
def unavailable_kernel():
    return RecordingKernel(available=False)


@pytest.fixture
def fake_handle():
    """The handle type built by RecordingKernel, for seeding its parse table"""
    return FakeHandle
