from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union
from dataclasses import dataclass, field
import logging

import numpy as np

from feature_factory.core import (
    GeometryVariant,
    FactoryFlag,
    EXTRA_ORDINATE_FLAGS,
    Capability,
    UnsupportedCapabilityError,
    KernelError,
    KERNEL_CONSTANTS,
    VariantModel,
)
from feature_factory.models import FactoryOptions, CastResult, leading_integer
from feature_factory.validation import (
    BaseValidator,
    CapabilityValidator,
    OrdinateValidator,
    PointCountValidator,
    ClosedRingValidator,
)
from feature_factory.components.geometry import Geometry
from feature_factory.components.kernel import IGeometryKernel, ShapelyKernel
from feature_factory.components.cast_engine import CastEngine

logger = logging.getLogger(__name__)

PointLike = Union[Geometry, Sequence[float]]


@dataclass(frozen=True)
class Factory:
    """
    Configuration-bound geometry factory

    Holds the spatial reference id, the buffer resolution and the flag set
    (polygon leniency, Z or M support). Two factories are equal when those
    three values are equal; the kernel is not part of a factory's identity.

    Construction methods never raise for bad data: anything the factory or
    the kernel rejects comes back as None.
    """
    srid: int = KERNEL_CONSTANTS.DEFAULT_SRID
    buffer_resolution: int = KERNEL_CONSTANTS.MIN_BUFFER_RESOLUTION
    flags: FactoryFlag = FactoryFlag.NONE
    kernel: IGeometryKernel = field(default_factory=ShapelyKernel, compare=False, repr=False)

    def __post_init__(self):
        flags = FactoryFlag(self.flags)
        self._assert_capabilities(flags)
        object.__setattr__(self, "flags", flags)
        object.__setattr__(self, "srid", leading_integer(self.srid))
        object.__setattr__(
            self, "buffer_resolution", KERNEL_CONSTANTS.clamp_buffer_resolution(leading_integer(self.buffer_resolution))
        )

    @classmethod
    def create(
        cls,
        options: Union[FactoryOptions, Dict[str, Any], None] = None,
        kernel: Optional[IGeometryKernel] = None,
        **overrides: Any
    ) -> Optional['Factory']:
        """
        Create a factory from validated options

        Args:
            options: FactoryOptions, dict of options, or None for defaults
            kernel: Geometry kernel to delegate to (default: ShapelyKernel)
            **overrides: Individual options applied on top of `options`

        Returns:
            New factory, or None if the kernel is unavailable on this host

        Raises:
            UnsupportedCapabilityError: If both Z and M support are requested
            InvalidConfigurationError: If `options` is neither FactoryOptions nor a mapping
        """
        parsed = FactoryOptions.from_value(options, **overrides)
        flags = parsed.to_flags()
        cls._assert_capabilities(flags)

        kernel = kernel if kernel is not None else ShapelyKernel()
        if not kernel.is_available():
            logger.info(f"[FACTORY]: Geometry kernel {type(kernel).__name__} unavailable, no factory created")
            return None

        logger.debug(f"[FACTORY]: Creating factory ({parsed.describe()})")
        return cls(
            srid=parsed.srid,
            buffer_resolution=parsed.buffer_resolution,
            flags=flags,
            kernel=kernel,
        )

    @staticmethod
    def _assert_capabilities(flags: FactoryFlag) -> None:
        result = CapabilityValidator().validate(flags)
        if not result.is_valid:
            raise UnsupportedCapabilityError(("Z", "M"), result.summary())

    # Configuration queries

    @property
    def lenient_polygon_assertions(self) -> bool:
        return bool(self.flags & FactoryFlag.LENIENT_POLYGON)

    @property
    def coordinate_dimension(self) -> int:
        """Ordinates per vertex: 2, or 3 when Z or M is supported"""
        if self.flags & EXTRA_ORDINATE_FLAGS:
            return KERNEL_CONSTANTS.BASE_DIMENSION + KERNEL_CONSTANTS.MAX_EXTRA_ORDINATES
        return KERNEL_CONSTANTS.BASE_DIMENSION

    def shares_extra_ordinate(self, other: 'Factory') -> bool:
        """
        Check whether geometries of `other` keep their meaning in this factory

        False only when both factories carry a third ordinate and one reads
        it as Z while the other reads it as M.
        """
        mine = self.flags & EXTRA_ORDINATE_FLAGS
        theirs = other.flags & EXTRA_ORDINATE_FLAGS
        return not mine or not theirs or mine == theirs

    def has_capability(self, name: Union[Capability, str]) -> Optional[bool]:

        """
        Check support for a named capability

        Args:
            name: Capability enum member or its string value

        Returns:
            True/False for recognized capabilities, None for unknown names
        """
        try:
            capability = Capability(name)
        except (ValueError, TypeError):
            return None

        capability_flags = {
            Capability.Z_COORDINATE: FactoryFlag.SUPPORTS_Z,
            Capability.M_COORDINATE: FactoryFlag.SUPPORTS_M,
        }
        return bool(self.flags & capability_flags[capability])

    # Parsing

    def parse_wkt(self, text: str) -> Optional[Geometry]:
        """Parse well-known text into a geometry of this factory (None on failure)"""
        try:
            handle = self.kernel.parse_wkt(text)
        except KernelError as e:
            logger.debug(f"[FACTORY]: {e}")
            return None
        return self.adopt(handle)

    def parse_wkb(self, data: bytes) -> Optional[Geometry]:
        """Parse well-known binary into a geometry of this factory (None on failure)"""
        try:
            handle = self.kernel.parse_wkb(data)
        except KernelError as e:
            logger.debug(f"[FACTORY]: {e}")
            return None
        return self.adopt(handle)

    def adopt(self, handle: Any) -> Optional[Geometry]:
        """
        Wrap a kernel handle as a geometry of this factory

        The variant is taken from the kernel's type name, so a two-point
        line comes back as a LineString rather than a Line.
        """
        variant = VariantModel.variant_for_type_name(self.kernel.type_name(handle))
        if variant is None:
            logger.debug(f"[FACTORY]: Unknown kernel geometry type '{self.kernel.type_name(handle)}'")
            return None
        return Geometry(variant, self, self.kernel.rebind(handle, self))

    # Construction dispatcher

    def point(self, x: float, y: float, *extra: Any) -> Optional[Geometry]:
        """
        Build a point

        Args:
            x, y: Base ordinates
            *extra: Optional Z or M ordinate; only allowed when the factory
                    supports one, and then at most one

        Returns:
            Point geometry, or None if the arguments are rejected
        """
        max_extra = self.coordinate_dimension - KERNEL_CONSTANTS.BASE_DIMENSION
        if len(extra) > max_extra:
            logger.debug(f"[FACTORY]: Point got {len(extra)} extra ordinates, factory accepts {max_extra}")
            return None

        try:
            ordinates = [float(x), float(y)]
            if max_extra:
                extra_value = extra[0] if extra and extra[0] is not None else KERNEL_CONSTANTS.DEFAULT_EXTRA_ORDINATE
                ordinates.append(float(extra_value))
        except (TypeError, ValueError) as e:
            logger.debug(f"[FACTORY]: Point ordinates are not numeric: {e}")
            return None

        return self._build(GeometryVariant.POINT, np.array(ordinates, dtype=float))

    def line_string(self, points: Iterable[PointLike]) -> Optional[Geometry]:
        """Build a line string from points or coordinate tuples"""
        vertices = self._normalize_vertices(list(points), "points")
        if vertices is None:
            return None
        return self._build(GeometryVariant.LINE_STRING, vertices)

    def line(self, start: PointLike, end: PointLike) -> Optional[Geometry]:
        """Build a two-point line"""
        vertices = self._normalize_vertices([start, end], "points", PointCountValidator())
        if vertices is None:
            return None
        return self._build(GeometryVariant.LINE, vertices)

    def linear_ring(self, points: Iterable[PointLike]) -> Optional[Geometry]:
        """Build a linear ring; the points must already be closed and simple"""
        vertices = self._normalize_vertices(list(points), "points", ClosedRingValidator())
        if vertices is None:
            return None
        return self._build(GeometryVariant.LINEAR_RING, vertices)

    def polygon(
        self,
        outer_ring: Union[Geometry, Iterable[PointLike]],
        inner_rings: Optional[Iterable[Union[Geometry, Iterable[PointLike]]]] = None
    ) -> Optional[Geometry]:
        """
        Build a polygon

        Args:
            outer_ring: LinearRing geometry or closed sequence of points
            inner_rings: Holes, in order (default: none)

        Returns:
            Polygon geometry, or None if a ring is rejected or, unless the
            factory is lenient, the polygon is invalid
        """
        inner_rings = [] if inner_rings is None else list(inner_rings)

        shell = self._ring_vertices(outer_ring, "outer_ring")
        if shell is None:
            return None

        holes = []
        for i, ring in enumerate(inner_rings):
            hole = self._ring_vertices(ring, f"inner_rings[{i}]")
            if hole is None:
                return None
            holes.append(hole)

        return self._build(GeometryVariant.POLYGON, (shell, holes))

    def collection(self, elems: Iterable[Geometry]) -> Optional[Geometry]:
        """Build a geometry collection from geometries of any variant"""
        return self._build_multi(GeometryVariant.GEOMETRY_COLLECTION, elems, None)

    def multi_point(self, elems: Iterable[Geometry]) -> Optional[Geometry]:
        return self._build_multi(
            GeometryVariant.MULTI_POINT, elems, lambda variant: variant == GeometryVariant.POINT
        )

    def multi_line_string(self, elems: Iterable[Geometry]) -> Optional[Geometry]:
        return self._build_multi(
            GeometryVariant.MULTI_LINE_STRING, elems, VariantModel.is_line_string_family
        )

    def multi_polygon(self, elems: Iterable[Geometry]) -> Optional[Geometry]:
        return self._build_multi(
            GeometryVariant.MULTI_POLYGON, elems, lambda variant: variant == GeometryVariant.POLYGON
        )

    # Casting

    def override_cast(
        self,
        original: Any,
        target_variant: Union[GeometryVariant, str],
        keep_subtype: bool = False,
        force_new: bool = False
    ) -> CastResult:
        """
        Produce a geometry of this factory with the requested variant

        Args:
            original: Geometry to cast
            target_variant: Requested variant
            keep_subtype: Keep the source variant when it is a subtype of the target
            force_new: Return a new object even when the source already fits

        Returns:
            CastResult: SUCCESS with the geometry, FAILED when the cast was
            attempted and rejected, NOT_APPLICABLE when this factory does not
            handle the cast and a generic conversion should be used instead
        """
        return CastEngine(self).cast(original, target_variant, keep_subtype, force_new)

    def align(self, coordinate: Sequence[float]) -> Tuple[float, ...]:
        """
        Fit a coordinate tuple to this factory's dimension

        Extra ordinates are dropped; a missing Z/M is filled with the default.
        """
        dimension = self.coordinate_dimension
        aligned = tuple(float(o) for o in coordinate[:dimension])
        return aligned + (KERNEL_CONSTANTS.DEFAULT_EXTRA_ORDINATE,) * (dimension - len(aligned))

    # Internal helpers

    def _build(self, variant: GeometryVariant, data: Any) -> Optional[Geometry]:
        try:
            handle = self.kernel.build_primitive(variant, data, lenient=self.lenient_polygon_assertions)
        except KernelError as e:
            logger.debug(f"[FACTORY]: {e}")
            return None
        return Geometry(variant, self, handle)

    def _vertex_of(self, value: Any) -> Any:
        # Point geometries are well-formed already and may come from a
        # factory with another dimension
        if isinstance(value, Geometry):
            if value.variant != GeometryVariant.POINT or value.is_empty:
                return value
            if not self.shares_extra_ordinate(value.factory):
                logger.debug("[FACTORY]: Point carries an M ordinate where Z is expected, or the reverse")
                return value
            return self.align(value.coordinates()[0])
        if isinstance(value, (list, tuple, np.ndarray)):
            return tuple(value)
        return value

    def _normalize_vertices(
        self,
        points: List[Any],
        parameter_name: str,
        structure_validator: Optional[BaseValidator] = None
    ) -> Optional[np.ndarray]:
        vertices = [self._vertex_of(p) for p in points]

        result = OrdinateValidator(self.coordinate_dimension, parameter_name).validate(vertices)
        if not result.is_valid:
            logger.debug(f"[FACTORY]: {result.summary()}")
            return None

        aligned = [self.align(v) for v in vertices]
        if structure_validator is not None:
            result = structure_validator.validate(aligned)
            if not result.is_valid:
                logger.debug(f"[FACTORY]: {result.summary()}")
                return None

        return np.array(aligned, dtype=float).reshape(len(aligned), self.coordinate_dimension)

    def _ring_vertices(self, ring: Any, parameter_name: str) -> Optional[np.ndarray]:
        if isinstance(ring, Geometry):
            if not VariantModel.is_line_string_family(ring.variant):
                logger.debug(f"[FACTORY]: {parameter_name} is a {ring.geometry_type}, not a ring")
                return None
            if not self.shares_extra_ordinate(ring.factory):
                logger.debug(f"[FACTORY]: {parameter_name} mixes Z and M ordinates")
                return None
            ring = [self.align(c) for c in ring.coordinates()]
        elif not isinstance(ring, (list, tuple, np.ndarray)):
            logger.debug(f"[FACTORY]: {parameter_name} must be a ring or point sequence")
            return None
        return self._normalize_vertices(list(ring), parameter_name, ClosedRingValidator(parameter_name=parameter_name))

    def _build_multi(
        self,
        variant: GeometryVariant,
        elems: Iterable[Geometry],
        accepts: Optional[Callable[[GeometryVariant], bool]]
    ) -> Optional[Geometry]:
        handles = []
        for i, member in enumerate(list(elems)):
            if not isinstance(member, Geometry) or not self.kernel.owns(member.handle):
                logger.debug(f"[FACTORY]: {variant.value} member {i} is not a geometry of this kernel")
                return None
            if accepts is not None and not accepts(member.variant):
                logger.debug(f"[FACTORY]: {variant.value} cannot hold a {member.geometry_type} (member {i})")
                return None
            if not self.shares_extra_ordinate(member.factory):
                logger.debug(f"[FACTORY]: {variant.value} member {i} mixes Z and M ordinates")
                return None
            handles.append(self.kernel.rebind(member.handle, self))

        return self._build(variant, handles)
