"""
    Example script for vector algebra using VECtools

"""

import numpy as np
from VECtools.funcs.vector import NamedVector, VectorOperations
from VECtools.funcs.combinators import Maybe

if __name__ == "__main__":
    # A named 3D vector (x, y, z share storage with v[0], v[1], v[2])
    v = NamedVector([3.0, 4.0, 0.0])
    print(f"v = {v}, |v| = {v.magnitude}")

    # Arithmetic returns new vectors
    u = v.unit
    print(f"unit(v) = {u}, |unit(v)| = {u.magnitude}")
    print(f"v + (1, 1, 1) = {v + [1.0, 1.0, 1.0]}")
    print(f"midpoint(v, 0) = {v.midpoint([0.0, 0.0, 0.0])}")

    # Named and indexed writes hit the same storage
    v.z = 12.0
    print(f"after v.z = 12: v[2] = {v[2]}, |v| = {v.magnitude}")

    # Angle between the x and y axes
    print(f"angle(x, y) = {NamedVector([1.0, 0.0]).angle([0.0, 1.0])} rad")

    # Degenerate cases propagate IEEE-754 values
    print(f"unit(0) = {NamedVector([0.0, 0.0]).unit}")

    # Array interface, switching between Numba and functional backends
    a = np.random.normal(size=5)
    b = np.random.normal(size=5)
    for use_numba in (True, False):
        ops = VectorOperations(use_numba=use_numba)
        print(f"use_numba={use_numba}: a . b = {ops.vector_dot(a, b)}")

    # Optional values
    cos_angle = Maybe.just(v.dot([1.0, 0.0, 0.0])).map(lambda d: d / v.magnitude)
    print(cos_angle.match(just=lambda c: f"cos = {c}", none=lambda: "no angle"))
