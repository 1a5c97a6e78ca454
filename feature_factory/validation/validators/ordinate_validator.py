"""Validator for per-vertex ordinate counts"""
from typing import Any
from feature_factory.core import KERNEL_CONSTANTS
from feature_factory.validation.base import BaseValidator, ValidationResult
from feature_factory.validation.enums import ValidationErrorType


class OrdinateValidator(BaseValidator):
    """
    Validates raw vertices against a factory's coordinate dimension

    A vertex may carry the two base ordinates plus up to as many extra
    ordinates as the factory supports. Every ordinate must be numeric.
    """

    def __init__(self, dimension: int, parameter_name: str = "points"):
        """
        Initialize ordinate validator.

        Args:
            dimension: Coordinate dimension of the factory (2 or 3)
            parameter_name: Name of the value being validated
        """
        super().__init__(parameter_name)
        self._dimension = dimension

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a sequence of vertices.

        Args:
            value: Sequence of ordinate sequences

        Returns:
            ValidationResult with one error per rejected vertex or ordinate
        """
        result = ValidationResult()
        name = self.parameter_name

        for i, vertex in enumerate(value):
            if not isinstance(vertex, (list, tuple)):
                result.add_error(self._error(
                    ValidationErrorType.INVALID_TYPE,
                    f"{name}[{i}] must be a point or coordinate tuple, got {type(vertex).__name__}",
                    index=i
                ))
                continue

            if not KERNEL_CONSTANTS.BASE_DIMENSION <= len(vertex) <= self._dimension:
                result.add_error(self._error(
                    ValidationErrorType.INVALID_DIMENSION,
                    f"{name}[{i}] has {len(vertex)} ordinates, "
                    f"factory accepts {KERNEL_CONSTANTS.BASE_DIMENSION} to {self._dimension}",
                    index=i
                ))
                continue

            for j, ordinate in enumerate(vertex):
                try:
                    float(ordinate)
                except (TypeError, ValueError):
                    result.add_error(self._error(
                        ValidationErrorType.INVALID_VALUE,
                        f"{name}[{i}][{j}] is not numeric: {ordinate!r}",
                        index=i
                    ))

        return result
