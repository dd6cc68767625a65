import math
import numpy as np
from numba import njit
from .constants import *
from ..combinators import zip_with, all_same
from ..scalar import add, sub, mul, div, square, sum, mul_by, div_by


class DimensionMismatchError(ValueError):
    """
    Raised when the operands of a binary vector operation have different lengths.
    """

    def __init__(
        self,
        *dimensions: int) -> None:
        self.dimensions = tuple(dimensions)
        super().__init__(
            f"Vector dimensions do not match: {', '.join(str(d) for d in self.dimensions)}")


def check_dimensions(
    *vectors) -> int:
    """
    Check that all vectors share one dimension.

    Returns:
        N (int): the common dimension

    Raises:
        DimensionMismatchError: if the lengths differ
    """
    dims = [len(v) for v in vectors]
    if not all_same(dims):
        raise DimensionMismatchError(*dims)
    return dims[0]


def ensure_float64(
    vector,
    name: str = "vector",
    debug: bool = False) -> np.ndarray:
    """
    Coerce a sequence of numbers to a contiguous, writeable one-dimensional float64 array.
    """
    arr = np.asarray(vector)
    if arr.ndim == 0:
        raise TypeError(f"{name} must be a sequence of numbers, got {type(vector).__name__}")
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got {arr.ndim}D")
    if arr.dtype.kind not in "biuf":
        raise TypeError(f"{name} must hold real numbers, got dtype {arr.dtype}")
    if arr.dtype != np.float64:
        if debug:
            print(f"Converting {arr.dtype} {name} to float64")
        arr = arr.astype(np.float64)
    # the typed kernels only accept writeable C arrays
    return np.require(arr, dtype=np.float64, requirements=["C", "W"])


##########################################################################################
# Core numba JIT functions for vector operations
##########################################################################################

# error_model="numpy" keeps IEEE-754 division (inf / nan) instead of raising.
# fastmath stays off so the folds run in index order and nan / inf propagate.

@njit([sig_elementwise_f64], cache=True, error_model="numpy")
def vector_add_nb_core(
    vec1,
    vec2):
    """
    vec1 + vec2, elementwise
    """
    N = vec1.shape[0]
    out = np.empty(N, dtype=vec1.dtype)
    for i in range(N):
        out[i] = vec1[i] + vec2[i]
    return out


@njit([sig_elementwise_f64], cache=True, error_model="numpy")
def vector_sub_nb_core(
    vec1,
    vec2):
    """
    vec1 - vec2, elementwise
    """
    N = vec1.shape[0]
    out = np.empty(N, dtype=vec1.dtype)
    for i in range(N):
        out[i] = vec1[i] - vec2[i]
    return out


@njit([sig_scalar_f64], cache=True, error_model="numpy")
def vector_mul_nb_core(
    vec,
    scalar):
    """
    vec * scalar, componentwise
    """
    N = vec.shape[0]
    out = np.empty(N, dtype=vec.dtype)
    for i in range(N):
        out[i] = vec[i] * scalar
    return out


@njit([sig_scalar_f64], cache=True, error_model="numpy")
def vector_div_nb_core(
    vec,
    scalar):
    """
    vec / scalar, componentwise. A zero scalar gives inf / nan components.
    """
    N = vec.shape[0]
    out = np.empty(N, dtype=vec.dtype)
    for i in range(N):
        out[i] = vec[i] / scalar
    return out


@njit([sig_dot_f64], cache=True, error_model="numpy")
def vector_dot_nb_core(
    vec1,
    vec2):
    """
    Left fold of vec1[i] * vec2[i], seeded at 0, in index order
    """
    acc = 0.0
    for i in range(vec1.shape[0]):
        acc = acc + vec1[i] * vec2[i]
    return acc


@njit([sig_mag_f64], cache=True, error_model="numpy")
def vector_magnitude_squared_nb_core(
    vec):
    """
    Left fold of vec[i]**2, seeded at 0, in index order
    """
    acc = 0.0
    for i in range(vec.shape[0]):
        acc = acc + vec[i] * vec[i]
    return acc


@njit([sig_elementwise_f64], cache=True, error_model="numpy")
def vector_midpoint_nb_core(
    vec1,
    vec2):
    """
    (vec1 + vec2) / 2, elementwise
    """
    N = vec1.shape[0]
    out = np.empty(N, dtype=vec1.dtype)
    for i in range(N):
        out[i] = (vec1[i] + vec2[i]) / 2.0
    return out


##########################################################################################
# Core functional implementations (zip_with + scalar operations)
##########################################################################################


def _as_vector(
    components) -> np.ndarray:
    return np.array(components, dtype=np.float64)


def vector_map(
    fn,
    vector) -> np.ndarray:
    """
    Apply fn(component, index) to every component.
    """
    with np.errstate(all="ignore"):
        return _as_vector([fn(n, i) for i, n in enumerate(vector)])


def vector_add(
    augend,
    addend) -> np.ndarray:
    """
    Vector addition.

    Args:
        augend (sequence): the first vector
        addend (sequence): the second vector, same dimension

    Returns:
        sum (np.ndarray): augend + addend

    Raises:
        DimensionMismatchError: if the vectors differ in length
    """
    check_dimensions(augend, addend)
    with np.errstate(all="ignore"):
        return _as_vector(zip_with(add, augend, addend))


def vector_sub(
    minuend,
    subtrahend) -> np.ndarray:
    """
    Vector subtraction, minuend - subtrahend.

    Raises:
        DimensionMismatchError: if the vectors differ in length
    """
    check_dimensions(minuend, subtrahend)
    with np.errstate(all="ignore"):
        return _as_vector(zip_with(sub, minuend, subtrahend))


def vector_mul(
    vector,
    scalar: float) -> np.ndarray:
    """
    Product of a vector and a scalar.
    """
    scale = mul_by(scalar)
    return vector_map(lambda n, i: scale(n), vector)


def vector_div(
    vector,
    scalar: float) -> np.ndarray:
    """
    Quotient of a vector and a scalar. A zero scalar is not trapped:
    the components become +/-inf, or nan where the component is also 0.
    """
    scale = div_by(scalar)
    return vector_map(lambda n, i: scale(n), vector)


def vector_dot(
    ls,
    rs) -> float:
    """
    Dot product, summed left to right from 0.

    Raises:
        DimensionMismatchError: if the vectors differ in length
    """
    check_dimensions(ls, rs)
    with np.errstate(all="ignore"):
        return float(sum(zip_with(mul, ls, rs)))


def vector_magnitude_squared(
    vector) -> float:
    with np.errstate(all="ignore"):
        return float(sum(square(n) for n in vector))


def vector_magnitude(
    vector) -> float:
    return math.sqrt(vector_magnitude_squared(vector))


def vector_unit(
    vector) -> np.ndarray:
    """
    Unit vector in the direction of vector. A zero vector gives nan components (0 / 0).
    """
    return vector_div(vector, vector_magnitude(vector))


def vector_angle(
    l,
    r) -> float:
    """
    Angle in radians between two vectors, acos(l . r / (|l| |r|)).

    The cosine is not clamped, so rounding just outside [-1, 1] and zero-length
    operands both give nan.

    Raises:
        DimensionMismatchError: if the vectors differ in length
    """
    cos_angle = div(vector_dot(l, r),
                    mul(vector_magnitude(l), vector_magnitude(r)))
    return arccos(cos_angle)


def vector_midpoint(
    ls,
    rs) -> np.ndarray:
    """
    Midpoint of two vectors, (ls + rs) / 2 elementwise.

    Raises:
        DimensionMismatchError: if the vectors differ in length
    """
    check_dimensions(ls, rs)
    with np.errstate(all="ignore"):
        return _as_vector(zip_with(lambda l, r: (l + r) / 2, ls, rs))


def arccos(
    value: float) -> float:
    """
    acos with nan outside [-1, 1] instead of a math domain error
    """
    with np.errstate(invalid="ignore"):
        return float(np.arccos(value))
