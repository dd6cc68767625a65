"""
VECtools Vector Module

Provides fixed-dimension vector algebra: addition, subtraction, scalar multiplication
and division, dot product, magnitude, normalization, angle and midpoint, with a
runtime dimension check on every binary operation, plus the NamedVector wrapper with
x, y, z, w accessors.
"""

# Import main classes
from .operations import VectorOperations
from .named_vector import NamedVector

# Import core functions for advanced users
from .core_functions import (
    DimensionMismatchError,
    check_dimensions,
    ensure_float64,
    vector_map,
    vector_add,
    vector_sub,
    vector_mul,
    vector_div,
    vector_dot,
    vector_magnitude,
    vector_magnitude_squared,
    vector_unit,
    vector_angle,
    vector_midpoint,
    vector_add_nb_core,
    vector_sub_nb_core,
    vector_mul_nb_core,
    vector_div_nb_core,
    vector_dot_nb_core,
    vector_magnitude_squared_nb_core,
    vector_midpoint_nb_core
)

# Version info
__version__ = "1.0.0"
__author__ = "VECtools developers"

# Define public API
__all__ = [
    'VectorOperations',
    'NamedVector',
    'DimensionMismatchError',
    'check_dimensions',
    'ensure_float64',
    # Core functions for advanced use
    'vector_map',
    'vector_add',
    'vector_sub',
    'vector_mul',
    'vector_div',
    'vector_dot',
    'vector_magnitude',
    'vector_magnitude_squared',
    'vector_unit',
    'vector_angle',
    'vector_midpoint',
    'vector_add_nb_core',
    'vector_sub_nb_core',
    'vector_mul_nb_core',
    'vector_div_nb_core',
    'vector_dot_nb_core',
    'vector_magnitude_squared_nb_core',
    'vector_midpoint_nb_core'
]
