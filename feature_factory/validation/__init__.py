"""Validation module for factory flags and construction inputs"""
from feature_factory.validation.base import BaseValidator, ValidationResult, ValidationError
from feature_factory.validation.enums import ValidationErrorType
from feature_factory.validation.validators import (
    CapabilityValidator,
    OrdinateValidator,
    PointCountValidator,
    ClosedRingValidator,
)

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "CapabilityValidator",
    "OrdinateValidator",
    "PointCountValidator",
    "ClosedRingValidator",
]
