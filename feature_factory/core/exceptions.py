"""
Custom exceptions for the feature factory.

Only configuration mistakes propagate to callers. Kernel errors are raised
by kernel implementations and caught by the factory, which turns them into
absent results.
"""

from typing import Optional


class FeatureFactoryException(Exception):
    """Base exception class for all feature factory errors"""
    pass


class ConfigurationError(FeatureFactoryException):
    """Base exception for factory configuration errors"""
    pass


class UnsupportedCapabilityError(ConfigurationError):
    """
    Exception raised when a factory is asked for a capability combination
    the kernel cannot provide.

    The only such combination is Z and M support on the same factory.
    """

    def __init__(self, capabilities: tuple[str, ...], details: Optional[str] = None):
        """
        Initialize UnsupportedCapabilityError.

        Args:
            capabilities: Names of the conflicting capabilities
            details: Additional details about the conflict
        """
        self.capabilities = capabilities
        self.details = details

        message = (
            f"Factory cannot support both {' and '.join(capabilities)} simultaneously"
        )
        if details:
            message += f": {details}"

        super().__init__(message)


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a factory option cannot be interpreted"""

    def __init__(self, option_name: str, details: Optional[str] = None):
        """
        Initialize InvalidConfigurationError.

        Args:
            option_name: Name of the offending option
            details: Additional details about the failure
        """
        self.option_name = option_name
        self.details = details

        message = f"Invalid factory option '{option_name}'"
        if details:
            message += f": {details}"

        super().__init__(message)


class KernelError(FeatureFactoryException):
    """Base exception for errors reported by a geometry kernel"""
    pass


class GeometryConstructionError(KernelError):
    """Exception raised when the kernel cannot build a primitive geometry"""

    def __init__(self, variant: str, details: str):
        """
        Initialize GeometryConstructionError.

        Args:
            variant: Name of the variant being built
            details: Details about the construction failure
        """
        self.variant = variant
        self.details = details

        super().__init__(f"Failed to build {variant}: {details}")


class GeometryParseError(KernelError):
    """Exception raised when serialized geometry input cannot be parsed"""

    def __init__(self, format_name: str, details: str):
        """
        Initialize GeometryParseError.

        Args:
            format_name: Serialization format ("WKT" or "WKB")
            details: Details about the parse failure
        """
        self.format_name = format_name
        self.details = details

        super().__init__(f"Failed to parse {format_name}: {details}")
