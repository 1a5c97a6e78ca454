from typing import Any, List, Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass, replace
import logging

from feature_factory.core import GeometryVariant, FactoryFlag, VariantModel, KernelError

if TYPE_CHECKING:
    from feature_factory.components.factory import Factory
    from feature_factory.components.kernel import IGeometryKernel

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Geometry:
    """
    A kernel handle tagged with its declared variant and owning factory

    Geometries are immutable. Casting or rebinding produces a new instance
    and never touches the source.
    """
    variant: GeometryVariant
    factory: 'Factory'
    handle: Any

    @property
    def kernel(self) -> 'IGeometryKernel':
        return self.factory.kernel

    @property
    def geometry_type(self) -> str:
        """Get the declared variant name (e.g. "Line")"""
        return self.variant.value

    def coordinates(self) -> List[Tuple[float, ...]]:
        """
        Get the vertices of this geometry

        Polygons and collections return the vertices of all rings/members
        in order.
        """
        return self.kernel.coordinate_sequence(self.handle)

    @property
    def num_points(self) -> int:
        return len(self.coordinates())

    @property
    def is_empty(self) -> bool:
        return self.kernel.is_empty(self.handle)

    @property
    def is_simple(self) -> bool:
        return self.kernel.is_simple(self.handle)

    @property
    def is_closed(self) -> bool:
        """Check whether a LineString-family geometry starts where it ends"""
        if not VariantModel.is_line_string_family(self.variant):
            return False
        coords = self.coordinates()
        return bool(coords) and coords[0] == coords[-1]

    # Point accessors

    def _point_ordinate(self, index: int) -> Optional[float]:
        if self.variant != GeometryVariant.POINT:
            return None
        coords = self.coordinates()
        if not coords or len(coords[0]) <= index:
            return None
        return coords[0][index]

    @property
    def x(self) -> Optional[float]:
        return self._point_ordinate(0)

    @property
    def y(self) -> Optional[float]:
        return self._point_ordinate(1)

    @property
    def z(self) -> Optional[float]:
        """Z ordinate of a point (None unless the factory supports Z)"""
        if not self.factory.flags & FactoryFlag.SUPPORTS_Z:
            return None
        return self._point_ordinate(2)

    @property
    def m(self) -> Optional[float]:
        """M ordinate of a point (None unless the factory supports M)"""
        if not self.factory.flags & FactoryFlag.SUPPORTS_M:
            return None
        return self._point_ordinate(2)

    # Structure accessors

    def exterior_ring(self) -> Optional['Geometry']:
        """Get the outer ring of a polygon"""
        if self.variant != GeometryVariant.POLYGON:
            return None
        rings = self.kernel.components(self.handle)
        if not rings:
            return None
        return Geometry(GeometryVariant.LINEAR_RING, self.factory, rings[0])

    def interior_rings(self) -> List['Geometry']:
        """Get the inner rings of a polygon, in order"""
        if self.variant != GeometryVariant.POLYGON:
            return []
        rings = self.kernel.components(self.handle)
        return [Geometry(GeometryVariant.LINEAR_RING, self.factory, ring) for ring in rings[1:]]

    def geometries(self) -> List['Geometry']:
        """Get the members of a collection or multi-geometry, in order"""
        if self.variant in (GeometryVariant.POINT, GeometryVariant.POLYGON) or \
                VariantModel.is_line_string_family(self.variant):
            return []
        members = [self.factory.adopt(handle) for handle in self.kernel.components(self.handle)]
        return [member for member in members if member is not None]

    # Serialization and kernel operations

    def as_text(self) -> str:
        return self.kernel.to_wkt(self.handle)

    def as_binary(self) -> bytes:
        return self.kernel.to_wkb(self.handle)

    def buffer(self, distance: float) -> Optional['Geometry']:
        """
        Buffer this geometry using the owning factory's buffer resolution

        Args:
            distance: Buffer distance in coordinate units

        Returns:
            Resulting polygonal geometry, or None if the kernel fails
        """
        try:
            handle = self.kernel.buffer(self.handle, distance, self.factory.buffer_resolution)
        except KernelError as e:
            logger.debug(f"[GEOMETRY]: {e}")
            return None
        return self.factory.adopt(handle)

    # Factory binding

    def duplicate(self) -> 'Geometry':
        """Shallow copy sharing the same handle and factory"""
        return replace(self)

    def rebind(self, factory: 'Factory') -> 'Geometry':
        """
        Duplicate this geometry under another factory

        Coordinates are carried over; the kernel only aligns the ordinate
        count with the new factory.
        """
        return replace(self, factory=factory, handle=factory.kernel.rebind(self.handle, factory))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geometry):
            return NotImplemented
        return (
            self.variant == other.variant
            and self.factory == other.factory
            and self.as_binary() == other.as_binary()
        )

    def __hash__(self) -> int:
        return hash((self.variant, self.factory, self.as_binary()))

    def __repr__(self) -> str:
        return f"Geometry(variant={self.variant.value}, srid={self.factory.srid}, coordinates={self.coordinates()})"
