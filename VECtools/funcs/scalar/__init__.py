"""
VECtools Scalar Module

Provides primitive scalar arithmetic (add, sub, mul, div, square, sum, avg) and
curried forms that fix one operand, used as the building blocks for the vector
algebra.
"""

# Import main classes
from .operations import ScalarOperations

# Import core functions for advanced users
from .core_functions import (
    add,
    sub,
    mul,
    div,
    square,
    sum,
    avg,
    add_to,
    mul_by,
    sub_from,
    sub_by,
    div_into,
    div_by
)

# Version info
__version__ = "1.0.0"
__author__ = "VECtools developers"

# Define public API
__all__ = [
    'ScalarOperations',
    # Core functions for advanced use
    'add',
    'sub',
    'mul',
    'div',
    'square',
    'sum',
    'avg',
    'add_to',
    'mul_by',
    'sub_from',
    'sub_by',
    'div_into',
    'div_by'
]
