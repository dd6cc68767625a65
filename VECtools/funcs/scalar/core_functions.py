import numpy as np
from functools import reduce

##########################################################################################
# Core scalar arithmetic
##########################################################################################


def add(
    l: float,
    r: float) -> float:
    """
    l + r
    """
    return l + r


def sub(
    l: float,
    r: float) -> float:
    """
    l - r
    """
    return l - r


def mul(
    l: float,
    r: float) -> float:
    """
    l * r
    """
    return l * r


def div(
    l: float,
    r: float) -> float:
    """
    Compute l / r with IEEE-754 semantics.

    Division by zero is not trapped: nonzero / 0 gives +/-inf and 0 / 0 gives nan.

    Args:
        l (float): the dividend
        r (float): the divisor

    Returns:
        quotient (float): l / r
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(l, r))


def square(
    n: float) -> float:
    """
    n * n
    """
    return n * n


def sum(
    ns) -> float:
    """
    Left fold of add over a sequence, seeded at 0.
    """
    return reduce(add, ns, 0)


def avg(
    ns) -> float:
    """
    Arithmetic mean of a sequence. The mean of an empty sequence is nan (0 / 0).
    """
    ns = list(ns)
    return div(sum(ns), len(ns))


##########################################################################################
# Curried (partially applied) forms
##########################################################################################


def add_to(l: float):
    return lambda r: add(l, r)


def mul_by(l: float):
    return lambda r: mul(l, r)


def sub_from(minuend: float):
    """
    Fix the minuend: sub_from(10)(3) == 7
    """
    return lambda subtrahend: sub(minuend, subtrahend)


def sub_by(subtrahend: float):
    """
    Fix the subtrahend: sub_by(3)(10) == 7
    """
    return lambda minuend: sub(minuend, subtrahend)


def div_into(dividend: float):
    """
    Fix the dividend: div_into(10)(4) == 2.5
    """
    return lambda divisor: div(dividend, divisor)


def div_by(divisor: float):
    """
    Fix the divisor: div_by(4)(10) == 2.5
    """
    return lambda dividend: div(dividend, divisor)
