"""
    VECtools Scalar Operations Module

    Primitive scalar arithmetic and its curried forms, bundled into a class so it
    can be composed with the vector operations.

"""

from .core_functions import *


class ScalarOperations:
    """
    A class to perform arithmetic on scalars.
    No data objects. Only methods.

    """

    def __init__(
        self,
        debug: bool = False) -> None:
        """
        Initialize the ScalarOperations class.

        Args:
            debug (bool, optional): print the configuration on construction. Defaults to False.
        """
        self.debug = debug
        if self.debug:
            print(f"ScalarOperations: debug={debug}")

    def scalar_sum(
        self,
        values) -> float:
        """
        Sum of a sequence of scalars, folded left from 0.
        """
        return sum(values)

    def scalar_avg(
        self,
        values) -> float:
        """
        Mean of a sequence of scalars. nan for an empty sequence.
        """
        return avg(values)

    def scalar_square(
        self,
        value: float) -> float:
        return square(value)

    def scalar_divide(
        self,
        dividend: float,
        divisor: float) -> float:
        """
        IEEE-754 division; a zero divisor gives inf or nan.
        """
        return div(dividend, divisor)

    def curried(
        self,
        name: str,
        operand: float):
        """
        Partially apply one of the curried scalar operations.

        Args:
            name (str): one of "add_to", "mul_by", "sub_from", "sub_by", "div_into", "div_by"
            operand (float): the fixed operand

        Returns:
            fn (callable): a function of the remaining operand
        """
        try:
            curry = CURRIED[name]
        except KeyError:
            raise ValueError(f"Unknown curried operation: {name}. "
                             f"Options are {', '.join(CURRIED)}.")
        return curry(operand)


CURRIED = {
    "add_to"   : add_to,
    "mul_by"   : mul_by,
    "sub_from" : sub_from,
    "sub_by"   : sub_by,
    "div_into" : div_into,
    "div_by"   : div_by,
}
