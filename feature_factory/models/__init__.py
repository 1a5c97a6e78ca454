from feature_factory.models.factory_options import FactoryOptions, leading_integer
from feature_factory.models.cast_result import CastResult

__all__ = [
    "FactoryOptions",
    "CastResult",
    "leading_integer",
]
