"""Base classes for geometry input validation"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from feature_factory.validation.enums import ValidationErrorType


class ValidationError(Exception):
    """A single rejected input, optionally pinned to a vertex or ring position"""

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        parameter_name: Optional[str] = None,
        index: Optional[int] = None
    ):
        """
        Initialize validation error.

        Args:
            error_type: Type of validation error (enum)
            message: Human-readable error message
            parameter_name: Name of the argument that failed validation
            index: Position of the offending vertex, if any
        """
        self.error_type = error_type
        self.parameter_name = parameter_name
        self.index = index
        super().__init__(message)


class ValidationResult:
    """Errors collected by one validator run; valid when there are none"""

    def __init__(self):
        self._errors: List[ValidationError] = []

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> List[ValidationError]:
        return self._errors

    def add_error(self, error: ValidationError) -> None:
        self._errors.append(error)

    def summary(self) -> str:
        """Join error messages for log lines"""
        return "; ".join(str(e) for e in self._errors)

    def __bool__(self) -> bool:
        return self.is_valid


class BaseValidator(ABC):
    """
    Checks one argument of a construction call before it reaches the kernel

    Subclasses report every problem they find rather than stopping at the
    first, so a log line shows all rejected vertices at once.
    """

    def __init__(self, parameter_name: str):
        self._parameter_name = parameter_name

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    def _error(self, error_type: ValidationErrorType, message: str, index: Optional[int] = None) -> ValidationError:
        return ValidationError(error_type, message, self._parameter_name, index)

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a value.

        Args:
            value: Value to validate

        Returns:
            ValidationResult listing every error found
        """
        pass
