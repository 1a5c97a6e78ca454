"""
Geometry kernel adapters.

The factory never touches coordinates or topology directly; it talks to an
IGeometryKernel. ShapelyKernel is the production implementation.
"""

from feature_factory.components.kernel.interfaces import IGeometryKernel
from feature_factory.components.kernel.shapely_kernel import ShapelyKernel

__all__ = [
    'IGeometryKernel',
    'ShapelyKernel',
]
