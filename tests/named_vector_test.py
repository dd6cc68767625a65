import math
import warnings
import numpy as np
import pytest
from VECtools.funcs.vector import NamedVector, DimensionMismatchError


@pytest.fixture(params=[True, False], ids=["numba", "functional"])
def use_numba(request):
    return request.param


def test_round_trip(use_numba):
    v = NamedVector([3, 4], use_numba=use_numba)
    assert v.components.tolist() == [3, 4]
    assert v.magnitude == 5.0
    assert v.magnitude_squared == 25.0
    assert v.length == 2 and len(v) == 2


def test_named_and_indexed_views_agree():
    v = NamedVector([1, 2, 3])
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)
    v.x = 10
    assert v[0] == 10.0 and v.get_item(0) == 10.0
    v[1] = 20
    assert v.y == 20.0
    assert v.set_item(2, 30) == 30.0
    assert v.z == 30.0


def test_missing_axis():
    v = NamedVector([1, 2])
    with pytest.raises(AttributeError):
        v.z
    with pytest.raises(AttributeError):
        v.w = 1.0
    with pytest.raises(IndexError):
        v[2]


def test_high_dimension_only_indexed_beyond_w():
    v = NamedVector([1, 2, 3, 4, 5])
    assert v.w == 4.0
    assert v[4] == 5.0
    assert v.mapped_components == {"x": 1.0, "y": 2.0, "z": 3.0, "w": 4.0}


def test_owns_its_storage():
    source = np.array([1.0, 2.0])
    v = NamedVector(source)
    source[0] = 99.0
    assert v.x == 1.0, "construction copies the input"
    comps = v.components
    comps[0] = 99.0
    assert v.x == 1.0, "components returns a copy"


def test_arithmetic_returns_new_instances(use_numba):
    v = NamedVector([1, 2], use_numba=use_numba)
    other = NamedVector([3, 4], use_numba=use_numba)
    assert v.add(other).components.tolist() == [4, 6]
    assert v.add([3, 4]).components.tolist() == [4, 6]
    assert v.sub(other).components.tolist() == [-2, -2]
    assert v.mul(2).components.tolist() == [2, 4]
    assert v.div(2).components.tolist() == [0.5, 1.0]
    assert v.midpoint([3, 6]).components.tolist() == [2, 4]
    assert v.dot(other) == 11.0
    assert v.components.tolist() == [1, 2], "receiver is unchanged"


def test_unit_and_angle(use_numba):
    v = NamedVector([0, 5], use_numba=use_numba)
    assert np.allclose(v.unit.components, [0, 1])
    assert math.isclose(NamedVector([1, 0]).angle([0, 1]), math.pi / 2)
    assert math.isclose(NamedVector([1, 0]).angle(NamedVector([1, 0])), 0.0, abs_tol=1e-12)
    assert np.all(np.isnan(NamedVector([0, 0], use_numba=use_numba).unit.components))


def test_divide_by_zero(use_numba):
    out = NamedVector([1, 0], use_numba=use_numba).div(0).components
    assert out[0] == np.inf and np.isnan(out[1])


def test_map_passes_index(use_numba):
    v = NamedVector([10, 10, 10], use_numba=use_numba)
    assert v.map(lambda n, i: n + i).components.tolist() == [10, 11, 12]


def test_dimension_mismatch(use_numba):
    v = NamedVector([1, 2], use_numba=use_numba)
    with pytest.raises(DimensionMismatchError):
        v.add([1, 2, 3])
    with pytest.raises(DimensionMismatchError):
        v.angle(NamedVector([1, 2, 3]))
    assert v.components.tolist() == [1, 2]


def test_rejects_non_numeric():
    with pytest.raises(TypeError):
        NamedVector([1, 2]).add(["a", "b"])
    with pytest.raises(ValueError):
        NamedVector([[1, 2], [3, 4]])


def test_configuration_carries_to_results(capsys):
    v = NamedVector([1, 2], use_numba=False, debug=True)
    capsys.readouterr()
    v.mul(2)
    assert "VectorOperations: use_numba=False, debug=True" in capsys.readouterr().out


def test_constructors_and_unwrap():
    v = NamedVector.from_components([1, 2])
    assert v == NamedVector([1.0, 2.0])
    assert NamedVector.get_components(v).tolist() == [1, 2]
    assert NamedVector.get_components((3, 4)).tolist() == [3, 4]


def test_python_protocols():
    a = NamedVector([1, 2])
    b = NamedVector([3, 4])
    assert (a + b) == NamedVector([4, 6])
    assert (b - a) == NamedVector([2, 2])
    assert (a * 3) == NamedVector([3, 6])
    assert (3 * a) == NamedVector([3, 6])
    assert (b / 2) == NamedVector([1.5, 2])
    assert list(a) == [1.0, 2.0]
    assert repr(a) == "NamedVector([1.0, 2.0])"
    assert a != NamedVector([1, 2, 3])
    assert NamedVector([math.nan]) != NamedVector([math.nan])


def test_numpy_scalar_on_the_left():
    v = NamedVector([1, 2])
    out = np.float64(3.0) * v
    assert isinstance(out, NamedVector), "numpy scalars defer to NamedVector"
    assert out == NamedVector([3, 6])
    assert isinstance(np.int64(2) * v, NamedVector)


def test_read_only_other_operand(use_numba):
    other = np.array([3.0, 4.0])
    other.setflags(write=False)
    v = NamedVector([1, 2], use_numba=use_numba)
    assert v.add(other) == NamedVector([4, 6])
    assert v.dot(other) == 11.0
    assert NamedVector(other, use_numba=use_numba).magnitude == 5.0


def test_scalar_operand_is_type_error(use_numba):
    v = NamedVector([1, 2], use_numba=use_numba)
    with pytest.raises(TypeError):
        v.add(3.0)
    with pytest.raises(TypeError):
        v.dot(None)


def test_overflow_is_silent(use_numba):
    v = NamedVector([1e308, -1e308], use_numba=use_numba)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        out = (v * 10).components
        assert out[0] == np.inf and out[1] == -np.inf
        assert np.isnan(v.mul(10).add([np.inf, np.inf]).y)
