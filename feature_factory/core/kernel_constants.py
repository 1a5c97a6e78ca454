"""
Kernel Constants

Centralized location for the numeric limits shared by the factory, the
validators and the kernel adapters.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class KernelConstants:
    """
    Immutable constants for factory configuration and construction (Immutable Object Pattern)
    """

    # Factory defaults
    DEFAULT_SRID: int = 0
    MIN_BUFFER_RESOLUTION: int = 1

    # Coordinate dimensions
    BASE_DIMENSION: int = 2
    MAX_EXTRA_ORDINATES: int = 1
    DEFAULT_EXTRA_ORDINATE: float = 0.0

    # Structural constraints
    LINE_POINT_COUNT: int = 2
    MIN_RING_POSITIONS: int = 4

    # Oldest GEOS release the shapely kernel accepts
    MIN_GEOS_VERSION: tuple = (3, 8, 0)

    @classmethod
    def clamp_buffer_resolution(cls, value: int) -> int:
        """
        Clamp a buffer resolution to the supported floor

        Args:
            value: Requested resolution

        Returns:
            The value, or MIN_BUFFER_RESOLUTION when it is lower
        """
        return max(cls.MIN_BUFFER_RESOLUTION, value)


# Singleton instance for easy access
KERNEL_CONSTANTS = KernelConstants()
