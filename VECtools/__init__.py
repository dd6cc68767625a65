"""
VECtools

A small toolkit for fixed-dimension vector algebra built on scalar arithmetic and
functional combinators, with Numba kernels for the vector operations.
"""

from .funcs.scalar import ScalarOperations
from .funcs.combinators import Maybe, zip_with
from .funcs.vector import (
    VectorOperations,
    NamedVector,
    DimensionMismatchError
)

__version__ = "0.1.0"

__all__ = [
    'ScalarOperations',
    'Maybe',
    'zip_with',
    'VectorOperations',
    'NamedVector',
    'DimensionMismatchError'
]
