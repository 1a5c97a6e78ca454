"""
Components of the feature factory.

Factory carries the configuration and the per-variant construction methods,
Geometry is the immutable value it produces, CastEngine re-types existing
geometries, and the kernel package adapts the underlying geometry engine.
"""

from feature_factory.components.kernel import IGeometryKernel, ShapelyKernel
from feature_factory.components.geometry import Geometry
from feature_factory.components.cast_engine import CastEngine
from feature_factory.components.factory import Factory

__all__ = [
    'IGeometryKernel',
    'ShapelyKernel',
    'Geometry',
    'CastEngine',
    'Factory',
]
