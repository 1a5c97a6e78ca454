from typing import Optional, TYPE_CHECKING

from feature_factory.core import CastOutcome

if TYPE_CHECKING:
    from feature_factory.components.geometry import Geometry


class CastResult:
    """
    Result of a cast request

    Distinguishes a cast that succeeded, one that was attempted and rejected
    (FAILED), and one this factory declined to attempt (NOT_APPLICABLE).
    Callers should fall back to a generic conversion only on NOT_APPLICABLE.
    """

    def __init__(self, outcome: CastOutcome, geometry: Optional['Geometry'] = None):
        """
        Initialize cast result.

        Args:
            outcome: Outcome of the cast
            geometry: Resulting geometry, present only on success
        """
        if (outcome == CastOutcome.SUCCESS) != (geometry is not None):
            raise ValueError(f"Cast outcome {outcome.value} is inconsistent with geometry={geometry!r}")
        self._outcome = outcome
        self._geometry = geometry

    @property
    def outcome(self) -> CastOutcome:
        """Get the cast outcome"""
        return self._outcome

    @property
    def geometry(self) -> Optional['Geometry']:
        """Get the resulting geometry (None unless successful)"""
        return self._geometry

    @property
    def is_success(self) -> bool:
        return self._outcome == CastOutcome.SUCCESS

    @property
    def is_failed(self) -> bool:
        return self._outcome == CastOutcome.FAILED

    @property
    def is_not_applicable(self) -> bool:
        return self._outcome == CastOutcome.NOT_APPLICABLE

    @classmethod
    def success(cls, geometry: 'Geometry') -> 'CastResult':
        return cls(CastOutcome.SUCCESS, geometry)

    @classmethod
    def failed(cls) -> 'CastResult':
        return cls(CastOutcome.FAILED)

    @classmethod
    def not_applicable(cls) -> 'CastResult':
        return cls(CastOutcome.NOT_APPLICABLE)

    @classmethod
    def from_geometry(cls, geometry: Optional['Geometry']) -> 'CastResult':
        """Wrap an attempted reconstruction: None means the attempt failed"""
        if geometry is None:
            return cls.failed()
        return cls.success(geometry)

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        return f"CastResult(outcome={self._outcome.value}, geometry={self._geometry!r})"
