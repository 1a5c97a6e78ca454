from feature_factory.core.enums import (
    GeometryVariant,
    FactoryFlag,
    EXTRA_ORDINATE_FLAGS,
    Capability,
    CastOutcome,
)
from feature_factory.core.exceptions import (
    FeatureFactoryException,
    ConfigurationError,
    UnsupportedCapabilityError,
    InvalidConfigurationError,
    KernelError,
    GeometryConstructionError,
    GeometryParseError,
)
from feature_factory.core.kernel_constants import KernelConstants, KERNEL_CONSTANTS
from feature_factory.core.variant_model import VariantModel

__all__ = [
    "GeometryVariant",
    "FactoryFlag",
    "EXTRA_ORDINATE_FLAGS",
    "Capability",
    "CastOutcome",
    "FeatureFactoryException",
    "ConfigurationError",
    "UnsupportedCapabilityError",
    "InvalidConfigurationError",
    "KernelError",
    "GeometryConstructionError",
    "GeometryParseError",
    "KernelConstants",
    "KERNEL_CONSTANTS",
    "VariantModel",
]
