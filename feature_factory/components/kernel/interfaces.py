"""Contract between the factory and the geometry kernel it delegates to"""
from abc import ABC, abstractmethod
from typing import Any, List, Tuple, TYPE_CHECKING

from feature_factory.core import GeometryVariant

if TYPE_CHECKING:
    from feature_factory.components.factory import Factory


class IGeometryKernel(ABC):
    """
    Abstract geometry kernel (Adapter Pattern)

    The kernel owns coordinate storage, parsing and all topological work.
    Handles it returns are opaque to the factory. Build and parse failures
    are reported by raising GeometryConstructionError / GeometryParseError;
    the factory turns those into absent results.

    Primitive data handed to build_primitive is already validated:
    - POINT: 1-D float array of length 2 or 3
    - LINE_STRING, LINE, LINEAR_RING: 2-D float array of shape (n, 2 or 3)
    - POLYGON: tuple of (shell array, list of hole arrays)
    - GEOMETRY_COLLECTION and MULTI_*: list of member handles
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the kernel can be used on this host"""
        pass

    @abstractmethod
    def owns(self, handle: Any) -> bool:
        """Check whether a handle was produced by this kernel family"""
        pass

    @abstractmethod
    def build_primitive(self, variant: GeometryVariant, data: Any, lenient: bool = False) -> Any:
        """
        Build a primitive geometry

        Args:
            variant: Variant being built
            data: Validated, normalized input (see class docstring)
            lenient: Skip polygon validity assertions

        Returns:
            Kernel handle

        Raises:
            GeometryConstructionError: If the kernel rejects the input
        """
        pass

    @abstractmethod
    def parse_wkt(self, text: str) -> Any:
        """Parse well-known text. Raises GeometryParseError on failure."""
        pass

    @abstractmethod
    def parse_wkb(self, data: bytes) -> Any:
        """Parse well-known binary. Raises GeometryParseError on failure."""
        pass

    @abstractmethod
    def rebind(self, handle: Any, factory: 'Factory') -> Any:
        """
        Prepare a handle for use under another factory

        Coordinates are not recomputed; at most the ordinate count is
        aligned to the factory's coordinate dimension.
        """
        pass

    @abstractmethod
    def coordinate_sequence(self, handle: Any) -> List[Tuple[float, ...]]:
        """Get the ordered vertices of a handle (all rings/members flattened)"""
        pass

    @abstractmethod
    def type_name(self, handle: Any) -> str:
        """Get the kernel's type name for a handle (e.g. "LineString")"""
        pass

    @abstractmethod
    def components(self, handle: Any) -> List[Any]:
        """Get rings of a polygon or members of a collection; empty for other kinds"""
        pass

    @abstractmethod
    def is_simple(self, handle: Any) -> bool:
        pass

    @abstractmethod
    def is_empty(self, handle: Any) -> bool:
        pass

    @abstractmethod
    def to_wkt(self, handle: Any) -> str:
        pass

    @abstractmethod
    def to_wkb(self, handle: Any) -> bytes:
        pass

    @abstractmethod
    def buffer(self, handle: Any, distance: float, resolution: int) -> Any:
        """
        Buffer a handle using `resolution` segments per quarter circle

        Raises:
            GeometryConstructionError: If the kernel cannot compute the buffer
        """
        pass
