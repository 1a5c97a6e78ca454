"""
Cast engine for re-typing geometries into a factory.

Given a geometry, a target variant and a target factory, picks the cheapest
legal way to produce the result:

1. kernel unavailable              -> FAILED
2. geometry from another kernel    -> NOT_APPLICABLE
3. keep_subtype and the source is a subtype of the target
                                   -> target becomes the source variant
   Z geometry into an M factory, or the reverse
                                   -> NOT_APPLICABLE
4. same variant                    -> rebind to the factory (or reuse)
5. LineString family on both sides -> rebuild from the coordinates
6. anything else                   -> NOT_APPLICABLE
"""
from typing import Any, Callable, Dict, List, Optional, Tuple, Union, TYPE_CHECKING
import logging

from feature_factory.core import GeometryVariant, VariantModel
from feature_factory.models import CastResult
from feature_factory.validation import PointCountValidator
from feature_factory.components.geometry import Geometry

if TYPE_CHECKING:
    from feature_factory.components.factory import Factory

logger = logging.getLogger(__name__)


class CastEngine:
    """Decides between rebind, duplicate and reconstruction for one target factory"""

    @staticmethod
    def _reconstruct_line(factory: 'Factory', coords: List[Tuple[float, ...]]) -> Optional[Geometry]:
        result = PointCountValidator().validate(coords)
        if not result.is_valid:
            logger.debug(f"[CAST ENGINE]: {result.summary()}")
            return None
        return factory.line(coords[0], coords[1])

    # Strategy map: target variant -> rebuild function (Strategy Pattern)
    RECONSTRUCTORS: Dict[GeometryVariant, Callable] = {
        GeometryVariant.LINE_STRING: lambda factory, coords: factory.line_string(coords),
        GeometryVariant.LINE: _reconstruct_line.__func__,  # type: ignore
        GeometryVariant.LINEAR_RING: lambda factory, coords: factory.linear_ring(coords),
    }

    def __init__(self, factory: 'Factory'):
        """
        Initialize cast engine

        Args:
            factory: Target factory of every cast
        """
        self._factory = factory

    def cast(
        self,
        original: Any,
        target_variant: Union[GeometryVariant, str],
        keep_subtype: bool = False,
        force_new: bool = False
    ) -> CastResult:
        """
        Cast a geometry into the target factory

        Args:
            original: Geometry to cast
            target_variant: Requested variant
            keep_subtype: Keep the source variant when it is a subtype of the target
            force_new: Never hand back the source object itself

        Returns:
            CastResult with SUCCESS, FAILED or NOT_APPLICABLE
        """
        factory = self._factory

        if not factory.kernel.is_available():
            logger.debug("[CAST ENGINE]: Kernel unavailable")
            return CastResult.failed()

        if not isinstance(original, Geometry) or not factory.kernel.owns(original.handle):
            return CastResult.not_applicable()

        try:
            target = GeometryVariant(target_variant)
        except ValueError:
            logger.debug(f"[CAST ENGINE]: Unknown target variant {target_variant!r}")
            return CastResult.not_applicable()

        source = original.variant
        if keep_subtype and VariantModel.includes(target, source):
            target = source

        if not factory.shares_extra_ordinate(original.factory):
            logger.debug("[CAST ENGINE]: Source and target read the third ordinate differently (Z vs M)")
            return CastResult.not_applicable()

        if target == source:
            if original.factory != factory:
                return CastResult.success(original.rebind(factory))
            return CastResult.success(original.duplicate() if force_new else original)

        if VariantModel.is_line_string_family(source) and target in self.RECONSTRUCTORS:
            return CastResult.from_geometry(self._reconstruct(original, target))

        return CastResult.not_applicable()

    def _reconstruct(self, original: Geometry, target: GeometryVariant) -> Optional[Geometry]:
        coords = [self._factory.align(c) for c in original.coordinates()]
        logger.debug(
            f"[CAST ENGINE]: Rebuilding {original.geometry_type} as {target.value} from {len(coords)} points"
        )
        return self.RECONSTRUCTORS[target](self._factory, coords)
