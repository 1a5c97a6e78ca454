from typing import Any, Callable, Dict, List, Tuple, TYPE_CHECKING
import logging

import numpy as np

try:
    import shapely
    from shapely.errors import GEOSException
    from shapely.geometry import (
        Point as ShapelyPoint,
        LineString as ShapelyLine,
        LinearRing as ShapelyRing,
        Polygon as ShapelyPolygon,
        MultiPoint as ShapelyMultiPoint,
        MultiLineString as ShapelyMultiLine,
        MultiPolygon as ShapelyMultiPolygon,
        GeometryCollection as ShapelyCollection,
    )
    SHAPELY_AVAILABLE = True
    _KERNEL_ERRORS: Tuple[type, ...] = (GEOSException, ValueError, TypeError)
except ImportError:
    SHAPELY_AVAILABLE = False
    _KERNEL_ERRORS = (ValueError, TypeError)

from feature_factory.core import (
    GeometryVariant,
    GeometryConstructionError,
    GeometryParseError,
    KERNEL_CONSTANTS,
)
from feature_factory.components.kernel.interfaces import IGeometryKernel

if TYPE_CHECKING:
    from feature_factory.components.factory import Factory

logger = logging.getLogger(__name__)


class ShapelyKernel(IGeometryKernel):
    """
    Geometry kernel backed by Shapely / GEOS

    Shapely stores at most one ordinate beyond X and Y, in its Z slot.
    Factories with M support keep their measure there as well; which of the
    two it means is recorded by the owning factory, not by the handle.
    """

    @staticmethod
    def _build_point(data: np.ndarray) -> 'ShapelyPoint':
        return ShapelyPoint(*data.tolist())

    @staticmethod
    def _build_line_string(data: np.ndarray) -> 'ShapelyLine':
        return ShapelyLine(data)

    @staticmethod
    def _build_linear_ring(data: np.ndarray) -> 'ShapelyRing':
        return ShapelyRing(data)

    @staticmethod
    def _build_polygon(data: Tuple[np.ndarray, List[np.ndarray]]) -> 'ShapelyPolygon':
        shell, holes = data
        return ShapelyPolygon(shell, holes)

    @staticmethod
    def _build_multi_line_string(members: List[Any]) -> 'ShapelyMultiLine':
        # LinearRing members are demoted to plain LineStrings
        lines = [ShapelyLine(shapely.get_coordinates(m, include_z=m.has_z)) for m in members]
        return ShapelyMultiLine(lines)

    # Strategy map: GeometryVariant -> builder function (Strategy Pattern)
    BUILDERS: Dict[GeometryVariant, Callable] = {
        GeometryVariant.POINT: _build_point.__func__,  # type: ignore
        GeometryVariant.LINE_STRING: _build_line_string.__func__,  # type: ignore
        GeometryVariant.LINE: _build_line_string.__func__,  # type: ignore
        GeometryVariant.LINEAR_RING: _build_linear_ring.__func__,  # type: ignore
        GeometryVariant.POLYGON: _build_polygon.__func__,  # type: ignore
        GeometryVariant.GEOMETRY_COLLECTION: lambda members: ShapelyCollection(list(members)),
        GeometryVariant.MULTI_POINT: lambda members: ShapelyMultiPoint(list(members)),
        GeometryVariant.MULTI_LINE_STRING: _build_multi_line_string.__func__,  # type: ignore
        GeometryVariant.MULTI_POLYGON: lambda members: ShapelyMultiPolygon(list(members)),
    }

    # Variants whose validity is asserted unless the factory is lenient
    _ASSERTED_VARIANTS = frozenset({GeometryVariant.POLYGON, GeometryVariant.MULTI_POLYGON})

    def is_available(self) -> bool:
        """Check that Shapely imports and links a recent enough GEOS"""
        if not SHAPELY_AVAILABLE:
            logger.info("[SHAPELY KERNEL]: Shapely is not installed")
            return False
        if tuple(shapely.geos_version) < KERNEL_CONSTANTS.MIN_GEOS_VERSION:
            logger.info(f"[SHAPELY KERNEL]: GEOS {shapely.geos_version_string} is older than required")
            return False
        return True

    def owns(self, handle: Any) -> bool:
        return SHAPELY_AVAILABLE and isinstance(handle, shapely.Geometry)

    def build_primitive(self, variant: GeometryVariant, data: Any, lenient: bool = False) -> Any:
        builder = self.BUILDERS.get(variant)
        if builder is None:
            raise GeometryConstructionError(str(variant), "no builder registered")

        try:
            geometry = builder(data)
        except _KERNEL_ERRORS as e:
            raise GeometryConstructionError(variant.value, f"{type(e).__name__}: {e}") from e

        if variant == GeometryVariant.LINEAR_RING and not geometry.is_simple:
            raise GeometryConstructionError(variant.value, "ring is not simple")

        if variant in self._ASSERTED_VARIANTS and not lenient and not geometry.is_valid:
            raise GeometryConstructionError(
                variant.value, f"invalid geometry ({shapely.is_valid_reason(geometry)})"
            )

        return geometry

    def parse_wkt(self, text: str) -> Any:
        try:
            geometry = shapely.from_wkt(text)
        except _KERNEL_ERRORS as e:
            raise GeometryParseError("WKT", f"{type(e).__name__}: {e}") from e
        if geometry is None:
            raise GeometryParseError("WKT", "no geometry in input")
        return geometry

    def parse_wkb(self, data: bytes) -> Any:
        try:
            geometry = shapely.from_wkb(data)
        except _KERNEL_ERRORS as e:
            raise GeometryParseError("WKB", f"{type(e).__name__}: {e}") from e
        if geometry is None:
            raise GeometryParseError("WKB", "no geometry in input")
        return geometry

    def rebind(self, handle: Any, factory: 'Factory') -> Any:
        # Shapely geometries are immutable and factory-agnostic; only the
        # ordinate count may need aligning
        if handle.is_empty:
            return handle
        if factory.coordinate_dimension == KERNEL_CONSTANTS.BASE_DIMENSION and handle.has_z:
            logger.debug("[SHAPELY KERNEL]: Dropping extra ordinate on rebind")
            return shapely.force_2d(handle)
        if factory.coordinate_dimension > KERNEL_CONSTANTS.BASE_DIMENSION and not handle.has_z:
            return shapely.force_3d(handle, z=KERNEL_CONSTANTS.DEFAULT_EXTRA_ORDINATE)
        return handle

    def coordinate_sequence(self, handle: Any) -> List[Tuple[float, ...]]:
        coords = shapely.get_coordinates(handle, include_z=handle.has_z)
        return [tuple(row) for row in coords.tolist()]

    def type_name(self, handle: Any) -> str:
        return handle.geom_type

    def components(self, handle: Any) -> List[Any]:
        if isinstance(handle, ShapelyPolygon):
            if handle.is_empty:
                return []
            return [handle.exterior] + list(handle.interiors)
        if hasattr(handle, "geoms"):
            return list(handle.geoms)
        return []

    def is_simple(self, handle: Any) -> bool:
        return bool(handle.is_simple)

    def is_empty(self, handle: Any) -> bool:
        return bool(handle.is_empty)

    def to_wkt(self, handle: Any) -> str:
        return handle.wkt

    def to_wkb(self, handle: Any) -> bytes:
        return handle.wkb

    def buffer(self, handle: Any, distance: float, resolution: int) -> Any:
        try:
            return handle.buffer(distance, quad_segs=resolution)
        except _KERNEL_ERRORS as e:
            raise GeometryConstructionError("buffer", f"{type(e).__name__}: {e}") from e
