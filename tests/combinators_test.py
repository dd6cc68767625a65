import pytest
from VECtools.funcs.combinators import Maybe, zip_with, length, is_empty, all_same


def test_zip_with_pairs():
    assert zip_with(lambda a, b: a + b, [1, 2, 3], [10, 20, 30]) == [11, 22, 33]


def test_zip_with_argument_order():
    assert zip_with(lambda a, b: a - b, [10, 20], [1, 2]) == [9, 18]
    assert zip_with(lambda a, b: a - b, [1, 2], [10, 20]) == [-9, -18]


def test_zip_with_n_ary_truncates_to_shortest():
    out = zip_with(lambda a, b, c: a * b + c, [1, 2, 3], [4, 5, 6], [7, 8])
    assert out == [11, 18]


def test_zip_with_empty():
    assert zip_with(lambda a, b: a + b, [], [1, 2, 3]) == []
    assert zip_with(lambda a, b: a + b, [1, 2, 3], []) == []
    assert zip_with(lambda: 1) == []


def test_zip_with_does_not_mutate():
    xs, ys = [1, 2], [3, 4]
    zip_with(lambda a, b: a * b, xs, ys)
    assert xs == [1, 2] and ys == [3, 4]


def test_zip_with_long_sequences():
    n = 200_000
    out = zip_with(lambda a, b: a + b, range(n), range(n))
    assert len(out) == n
    assert out[-1] == 2 * (n - 1)


def test_sequence_helpers():
    assert length([1, 2, 3]) == 3
    assert is_empty([])
    assert not is_empty([0])
    assert not all_same([]), "an empty sequence is never all same"
    assert all_same([4])
    assert all_same([2, 2, 2])
    assert not all_same([2, 2, 3])


def test_maybe_just_map_match():
    result = Maybe.just(5).map(lambda x: x * 2).match(just=lambda x: x, none=lambda: -1)
    assert result == 10


def test_maybe_none_map_match():
    result = Maybe.none().map(lambda x: x * 2).match(just=lambda x: x, none=lambda: -1)
    assert result == -1


def test_maybe_just_of_absent_value_is_none():
    assert Maybe.just(None).is_none
    assert Maybe.from_(None) == Maybe.none()
    assert Maybe.from_(0).is_just, "falsy values are still present"


def test_maybe_map_skips_function_on_none():
    calls = []
    Maybe.none().map(lambda x: calls.append(x))
    assert calls == []


def test_maybe_map_to_none_collapses():
    assert Maybe.just(1).map(lambda x: None).is_none


def test_maybe_flat_map():
    half = lambda x: Maybe.just(x // 2) if x % 2 == 0 else Maybe.none()
    assert Maybe.just(8).flat_map(half) == Maybe.just(4)
    assert Maybe.just(3).flat_map(half) == Maybe.none()
    assert Maybe.none().flat_map(half) == Maybe.none()


def test_maybe_match_calls_exactly_one_handler():
    calls = []
    Maybe.just("a").match(just=lambda v: calls.append(("just", v)),
                          none=lambda: calls.append(("none",)))
    Maybe.none().match(just=lambda v: calls.append(("just", v)),
                       none=lambda: calls.append(("none",)))
    assert calls == [("just", "a"), ("none",)]


def test_maybe_is_immutable():
    m = Maybe.just(1)
    with pytest.raises(AttributeError):
        m._value = 2


def test_maybe_repr():
    assert repr(Maybe.just(3)) == "Just(3)"
    assert repr(Maybe.none()) == "Nothing"
