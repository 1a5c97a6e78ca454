from feature_factory.validation.validators.capability_validator import CapabilityValidator
from feature_factory.validation.validators.ordinate_validator import OrdinateValidator
from feature_factory.validation.validators.structure_validators import (
    PointCountValidator,
    ClosedRingValidator,
)

__all__ = [
    "CapabilityValidator",
    "OrdinateValidator",
    "PointCountValidator",
    "ClosedRingValidator",
]
