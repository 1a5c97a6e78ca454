"""Static subtype table for geometry variants"""
from typing import Dict, FrozenSet, Optional

from feature_factory.core.enums import GeometryVariant


class VariantModel:
    """
    Subtype relationships between geometry variants

    Variants are a flat tagged set; the lattice lives in this table rather
    than in a class hierarchy.
    """

    _SUBTYPES: Dict[GeometryVariant, FrozenSet[GeometryVariant]] = {
        GeometryVariant.LINE_STRING: frozenset({
            GeometryVariant.LINE,
            GeometryVariant.LINEAR_RING,
        }),
    }

    _LINE_STRING_FAMILY: FrozenSet[GeometryVariant] = frozenset({
        GeometryVariant.LINE_STRING,
        GeometryVariant.LINE,
        GeometryVariant.LINEAR_RING,
    })

    @classmethod
    def subtypes_of(cls, variant: GeometryVariant) -> FrozenSet[GeometryVariant]:
        """Get the direct subtypes of a variant (empty for leaves)"""
        return cls._SUBTYPES.get(variant, frozenset())

    @classmethod
    def includes(cls, parent: GeometryVariant, variant: GeometryVariant) -> bool:
        """
        Check whether `variant` is `parent` or one of its subtypes

        Args:
            parent: Declared (wider) variant
            variant: Variant being tested

        Returns:
            True if a value of `variant` may stand in for `parent`
        """
        return variant == parent or variant in cls.subtypes_of(parent)

    @classmethod
    def is_line_string_family(cls, variant: GeometryVariant) -> bool:
        """Check whether a variant is LineString or one of its subtypes"""
        return variant in cls._LINE_STRING_FAMILY

    @classmethod
    def variant_for_type_name(cls, type_name: str) -> Optional[GeometryVariant]:
        """
        Map a kernel geometry type name to a variant

        Args:
            type_name: Name such as "Point" or "MultiPolygon"

        Returns:
            Matching variant, or None for unknown names
        """
        try:
            return GeometryVariant(type_name)
        except ValueError:
            return None
