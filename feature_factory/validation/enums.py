"""Validation enums for type-safe validation"""
from enum import Enum


class ValidationErrorType(Enum):
    """Types of validation errors"""
    INVALID_TYPE = "invalid_type"
    INVALID_VALUE = "invalid_value"
    INVALID_LENGTH = "invalid_length"
    INVALID_DIMENSION = "invalid_dimension"
    CONFLICTING_CAPABILITIES = "conflicting_capabilities"
    OPEN_RING = "open_ring"
