from numba import types

##############################################################################
# Global constants
##############################################################################

# Named axes, in index order
X, Y, Z, W = 0, 1, 2, 3
COMPONENT_LABELS = ("x", "y", "z", "w")

# Defaults
DEFAULT_USE_NUMBA = True
DEFAULT_DEBUG = False


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Elementwise vector (+) vector
sig_elementwise_f64 = types.float64[:](
    types.float64[:],
    types.float64[:]
    )

# Vector (*) scalar
sig_scalar_f64 = types.float64[:](
    types.float64[:],
    types.float64
    )

# Vector . vector -> scalar
sig_dot_f64 = types.float64(
    types.float64[:],
    types.float64[:]
    )

# |vector|^2 -> scalar
sig_mag_f64 = types.float64(
    types.float64[:]
    )
