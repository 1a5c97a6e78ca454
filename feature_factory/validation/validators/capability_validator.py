"""Validator for factory flag combinations"""
from typing import Any
from feature_factory.core import FactoryFlag, EXTRA_ORDINATE_FLAGS
from feature_factory.validation.base import BaseValidator, ValidationResult
from feature_factory.validation.enums import ValidationErrorType


class CapabilityValidator(BaseValidator):
    """Rejects flag sets that ask for both Z and M ordinates"""

    def __init__(self, parameter_name: str = "flags"):
        super().__init__(parameter_name)

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a factory flag set.

        Args:
            value: FactoryFlag (or int) to validate

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()
        flags = FactoryFlag(value)

        if flags & EXTRA_ORDINATE_FLAGS == EXTRA_ORDINATE_FLAGS:
            result.add_error(self._error(
                ValidationErrorType.CONFLICTING_CAPABILITIES,
                "cannot support both Z and M simultaneously"
            ))

        return result
