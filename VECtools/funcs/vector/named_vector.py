"""
    VECtools NamedVector

    A fixed-dimension vector that owns a single float64 backing array. The first four
    axes are exposed by name (x, y, z, w); named and indexed access read and write the
    same array. Arithmetic returns new NamedVector instances carrying the same
    configuration; only item / axis assignment mutates in place.

"""

import numpy as np
from .constants import *
from .core_functions import ensure_float64
from .operations import VectorOperations


def _axis(index: int, label: str) -> property:
    """Property reading / writing component `index` of the backing array."""

    def fget(self):
        self._check_axis(index, label)
        return float(self._components[index])

    def fset(self, value):
        self._check_axis(index, label)
        self._components[index] = value

    return property(fget, fset, doc=f"Component {index} ({label}).")


class NamedVector:
    """
    An N-dimensional vector with named access to its first four components.

    Args:
        components (sequence): the components, copied into a new float64 array
        use_numba (bool, optional): run arithmetic on the Numba kernels. Defaults to True.
        debug (bool, optional): print configuration and dtype conversions. Defaults to False.

    Examples:
        >>> v = NamedVector([3, 4])
        >>> v.magnitude
        5.0
        >>> v.x = 6
        >>> v[0]
        6.0
    """

    __slots__ = ("_components", "_ops")

    # numpy scalars defer to __rmul__ instead of broadcasting over the sequence
    __array_ufunc__ = None

    x = _axis(X, COMPONENT_LABELS[X])
    y = _axis(Y, COMPONENT_LABELS[Y])
    z = _axis(Z, COMPONENT_LABELS[Z])
    w = _axis(W, COMPONENT_LABELS[W])

    def __init__(
        self,
        components,
        use_numba: bool = DEFAULT_USE_NUMBA,
        debug: bool = DEFAULT_DEBUG) -> None:
        self._components = np.array(
            ensure_float64(components, name="components", debug=debug))
        self._ops = VectorOperations(use_numba=use_numba, debug=debug)

    @classmethod
    def from_components(
        cls,
        components,
        **kwargs) -> "NamedVector":
        return cls(components, **kwargs)

    @staticmethod
    def get_components(vector) -> np.ndarray:
        """
        Unwrap a vector to its components: a NamedVector gives its backing array,
        anything else is coerced to a float64 array.

        Raises:
            TypeError: if vector does not hold real numbers
            ValueError: if vector is not one-dimensional
        """
        if isinstance(vector, NamedVector):
            return vector._components
        return ensure_float64(vector, name="other")

    def _check_axis(self, index: int, label: str) -> None:
        if index >= self.length:
            raise AttributeError(
                f"{self.length}-dimensional vector has no component '{label}'")

    def _wrap(self, components) -> "NamedVector":
        return NamedVector(components,
                           use_numba=self._ops.use_numba,
                           debug=self._ops.debug)

    # ********************** Components *****************************

    @property
    def components(self) -> np.ndarray:
        """
        A copy of the components. Mutate through item or axis assignment.
        """
        return self._components.copy()

    @property
    def length(self) -> int:
        return self._components.shape[0]

    @property
    def mapped_components(self) -> dict:
        """
        {label: value} for the named axes present in this vector.
        """
        return {label: float(value)
                for label, value in zip(COMPONENT_LABELS, self._components)}

    def get_item(self, index: int) -> float:
        return float(self._components[index])

    def set_item(self, index: int, value: float) -> float:
        self._components[index] = value
        return float(self._components[index])

    def map(self, fn) -> "NamedVector":
        """
        New vector of fn(component, index) for every component.
        """
        return self._wrap(self._ops.vector_map(fn, self._components))

    # ********************** Math Helpers *****************************

    def add(self, other) -> "NamedVector":
        return self._wrap(self._ops.vector_add(self._components, self.get_components(other)))

    def sub(self, other) -> "NamedVector":
        return self._wrap(self._ops.vector_sub(self._components, self.get_components(other)))

    def mul(self, scalar: float) -> "NamedVector":
        return self._wrap(self._ops.vector_mul(self._components, scalar))

    def div(self, scalar: float) -> "NamedVector":
        """
        Divide by a scalar; a zero scalar gives inf / nan components.
        """
        return self._wrap(self._ops.vector_div(self._components, scalar))

    def dot(self, other) -> float:
        return self._ops.vector_dot(self._components, self.get_components(other))

    @property
    def magnitude(self) -> float:
        return self._ops.vector_magnitude(self._components)

    @property
    def magnitude_squared(self) -> float:
        return self._ops.vector_magnitude_squared(self._components)

    @property
    def unit(self) -> "NamedVector":
        """
        Unit vector in the same direction. The zero vector gives nan components.
        """
        return self._wrap(self._ops.vector_unit(self._components))

    def angle(self, other) -> float:
        """
        Angle in radians between this vector and other.
        """
        return self._ops.vector_angle(self._components, self.get_components(other))

    def midpoint(self, other) -> "NamedVector":
        return self._wrap(self._ops.vector_midpoint(self._components, self.get_components(other)))

    # ********************** Python protocols *****************************

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> float:
        return self.get_item(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set_item(index, value)

    def __iter__(self):
        return (float(c) for c in self._components)

    def __add__(self, other) -> "NamedVector":
        return self.add(other)

    def __sub__(self, other) -> "NamedVector":
        return self.sub(other)

    def __mul__(self, scalar: float) -> "NamedVector":
        return self.mul(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "NamedVector":
        return self.div(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NamedVector):
            return NotImplemented
        return (self.length == other.length
                and bool(np.all(self._components == other._components)))

    __hash__ = None

    def __repr__(self) -> str:
        return f"NamedVector({self._components.tolist()})"
