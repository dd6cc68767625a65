"""
    VECtools Vector Operations Module

    This module provides fixed-dimension vector algebra: addition, subtraction, scalar
    multiplication and division, dot product, magnitude, normalization, angle and midpoint.
    Operations run either on Numba kernels or on the functional implementations built from
    zip_with and the scalar operations. Both backends fold in index order and give the
    same results.

"""

import math
import numpy as np
from .constants import *
from .core_functions import *


class VectorOperations():
    """
    Vector Operations using Numba kernels
    """

    def __init__(
        self,
        use_numba: bool = DEFAULT_USE_NUMBA,
        debug: bool = DEFAULT_DEBUG) -> None:
        """
        Initialize the VectorOperations class.

        Args:
            use_numba (bool, optional): use the Numba core functions. Defaults to True.
            debug (bool, optional): print configuration and dtype conversions. Defaults to False.
        """
        self.use_numba = use_numba
        self.debug = debug
        if self.debug:
            print(f"VectorOperations: use_numba={use_numba}, debug={debug}")


    def _prepare(
        self,
        *vectors) -> list:
        """
        Coerce every operand to a float64 vector and check the dimensions agree.
        """
        out = [ensure_float64(v, name=f"vector_{i}", debug=self.debug)
               for i, v in enumerate(vectors)]
        check_dimensions(*out)
        return out


    def vector_map(
        self,
        fn,
        vector) -> np.ndarray:
        """
        Apply fn(component, index) to every component
        """
        vec, = self._prepare(vector)
        return vector_map(fn, vec)


    def vector_add(
        self,
        vector_1,
        vector_2) -> np.ndarray:
        """
        Vector sum
        """
        vec1, vec2 = self._prepare(vector_1, vector_2)
        if self.use_numba:
            return vector_add_nb_core(vec1, vec2)
        return vector_add(vec1, vec2)


    def vector_sub(
        self,
        vector_1,
        vector_2) -> np.ndarray:
        """
        Vector difference, vector_1 - vector_2
        """
        vec1, vec2 = self._prepare(vector_1, vector_2)
        if self.use_numba:
            return vector_sub_nb_core(vec1, vec2)
        return vector_sub(vec1, vec2)


    def vector_mul(
        self,
        vector,
        scalar: float) -> np.ndarray:
        """
        Vector times scalar
        """
        vec, = self._prepare(vector)
        if self.use_numba:
            return vector_mul_nb_core(vec, float(scalar))
        return vector_mul(vec, scalar)


    def vector_div(
        self,
        vector,
        scalar: float) -> np.ndarray:
        """
        Vector over scalar. Division by zero is propagated as inf / nan.
        """
        vec, = self._prepare(vector)
        if self.use_numba:
            return vector_div_nb_core(vec, float(scalar))
        return vector_div(vec, scalar)


    def vector_dot(
        self,
        vector_1,
        vector_2) -> float:
        """
        Vector dot product
        """
        vec1, vec2 = self._prepare(vector_1, vector_2)
        if self.use_numba:
            return float(vector_dot_nb_core(vec1, vec2))
        return vector_dot(vec1, vec2)


    def vector_magnitude_squared(
        self,
        vector) -> float:
        """
        Squared vector magnitude
        """
        vec, = self._prepare(vector)
        if self.use_numba:
            return float(vector_magnitude_squared_nb_core(vec))
        return vector_magnitude_squared(vec)


    def vector_magnitude(
        self,
        vector) -> float:
        """
        Vector magnitude
        """
        return math.sqrt(self.vector_magnitude_squared(vector))


    def vector_unit(
        self,
        vector) -> np.ndarray:
        """
        Normalize to a unit vector. The zero vector gives nan components.
        """
        return self.vector_div(vector, self.vector_magnitude(vector))


    def vector_angle(
        self,
        vector_1,
        vector_2) -> float:
        """
        Compute angle (radians) between two vectors, unclamped
        """
        cos_angle = div(self.vector_dot(vector_1, vector_2),
                        mul(self.vector_magnitude(vector_1),
                            self.vector_magnitude(vector_2)))
        return arccos(cos_angle)


    def vector_midpoint(
        self,
        vector_1,
        vector_2) -> np.ndarray:
        """
        Midpoint of two vectors
        """
        vec1, vec2 = self._prepare(vector_1, vector_2)
        if self.use_numba:
            return vector_midpoint_nb_core(vec1, vec2)
        return vector_midpoint(vec1, vec2)
