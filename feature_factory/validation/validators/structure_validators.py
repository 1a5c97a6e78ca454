"""Validators for structural constraints of LineString subtypes"""
from typing import Any
from feature_factory.core import KERNEL_CONSTANTS
from feature_factory.validation.base import BaseValidator, ValidationResult
from feature_factory.validation.enums import ValidationErrorType


class PointCountValidator(BaseValidator):
    """Requires an exact number of vertices (a Line has exactly two)"""

    def __init__(self, expected: int = KERNEL_CONSTANTS.LINE_POINT_COUNT, parameter_name: str = "points"):
        super().__init__(parameter_name)
        self._expected = expected

    def validate(self, value: Any) -> ValidationResult:
        result = ValidationResult()
        if len(value) != self._expected:
            result.add_error(self._error(
                ValidationErrorType.INVALID_LENGTH,
                f"{self.parameter_name} must have exactly {self._expected} points, got {len(value)}"
            ))
        return result


class ClosedRingValidator(BaseValidator):
    """
    Requires a closed vertex sequence long enough to form a ring.

    Expects already-normalized vertices (equal length float tuples), so
    closure is an exact comparison of the first and last vertex.
    Simplicity is a topological property and is left to the kernel.
    """

    def __init__(self, min_positions: int = KERNEL_CONSTANTS.MIN_RING_POSITIONS, parameter_name: str = "ring"):
        super().__init__(parameter_name)
        self._min_positions = min_positions

    def validate(self, value: Any) -> ValidationResult:
        result = ValidationResult()

        if len(value) < self._min_positions:
            result.add_error(self._error(
                ValidationErrorType.INVALID_LENGTH,
                f"{self.parameter_name} must have at least {self._min_positions} positions, got {len(value)}"
            ))
            return result

        if tuple(value[0]) != tuple(value[-1]):
            result.add_error(self._error(
                ValidationErrorType.OPEN_RING,
                f"{self.parameter_name} is not closed: starts at {tuple(value[0])}, ends at {tuple(value[-1])}",
                index=len(value) - 1
            ))

        return result
