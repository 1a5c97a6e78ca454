from enum import Enum, IntFlag


class GeometryVariant(str, Enum):
    """Feature kinds produced by a factory (Enumerator Pattern)"""
    POINT = "Point"
    LINE_STRING = "LineString"
    LINE = "Line"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"


class FactoryFlag(IntFlag):
    """Bit flags stored on a factory"""
    NONE = 0
    LENIENT_POLYGON = 0x1
    SUPPORTS_Z = 0x2
    SUPPORTS_M = 0x4


# Both extra ordinates together; a factory may carry at most one of them
EXTRA_ORDINATE_FLAGS = FactoryFlag.SUPPORTS_Z | FactoryFlag.SUPPORTS_M


class Capability(str, Enum):
    """Capability names understood by Factory.has_capability"""
    Z_COORDINATE = "z_coordinate"
    M_COORDINATE = "m_coordinate"


class CastOutcome(Enum):
    """Three-way outcome of a cast request"""
    SUCCESS = "success"
    NOT_APPLICABLE = "not_applicable"
    FAILED = "failed"
