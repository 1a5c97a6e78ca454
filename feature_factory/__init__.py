"""
Feature factory: configuration-bound construction and casting of
simple-features geometries on top of a pluggable geometry kernel.
"""
from typing import Any, Dict, Optional, Union

from feature_factory.core import (
    GeometryVariant,
    FactoryFlag,
    Capability,
    CastOutcome,
    VariantModel,
    FeatureFactoryException,
    ConfigurationError,
    UnsupportedCapabilityError,
    InvalidConfigurationError,
    KernelError,
    GeometryConstructionError,
    GeometryParseError,
)
from feature_factory.models import FactoryOptions, CastResult
from feature_factory.components import (
    IGeometryKernel,
    ShapelyKernel,
    Geometry,
    CastEngine,
    Factory,
)


def supported(kernel: Optional[IGeometryKernel] = None) -> bool:
    """Check whether factories can be created with the given (default: Shapely) kernel"""
    kernel = kernel if kernel is not None else ShapelyKernel()
    return kernel.is_available()


def factory(
    options: Union[FactoryOptions, Dict[str, Any], None] = None,
    kernel: Optional[IGeometryKernel] = None,
    **overrides: Any
) -> Optional[Factory]:
    """Create a factory; see Factory.create"""
    return Factory.create(options, kernel=kernel, **overrides)


__all__ = [
    "GeometryVariant",
    "FactoryFlag",
    "Capability",
    "CastOutcome",
    "VariantModel",
    "FeatureFactoryException",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "InvalidConfigurationError",
    "KernelError",
    "GeometryConstructionError",
    "GeometryParseError",
    "FactoryOptions",
    "CastResult",
    "IGeometryKernel",
    "ShapelyKernel",
    "Geometry",
    "CastEngine",
    "Factory",
    "supported",
    "factory",
]
