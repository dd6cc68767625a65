"""
VECtools Combinators Module

Generic functional building blocks: N-ary elementwise zipping, small sequence
predicates and an optional-value container (Maybe).
"""

# Import main classes
from .maybe import Maybe

# Import core functions for advanced users
from .core_functions import (
    zip_with,
    length,
    is_empty,
    all_same
)

# Version info
__version__ = "1.0.0"
__author__ = "VECtools developers"

# Define public API
__all__ = [
    'Maybe',
    # Core functions for advanced use
    'zip_with',
    'length',
    'is_empty',
    'all_same'
]
