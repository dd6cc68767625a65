##########################################################################################
# Core sequence combinators
##########################################################################################


def zip_with(
    fn,
    *sequences) -> list:
    """
    Combine sequences elementwise.

    The i-th output element is fn(sequences[0][i], ..., sequences[K-1][i]) for i up to the
    length of the shortest sequence, so any empty input gives an empty result.
    Inputs are not mutated.

    Args:
        fn (callable): a function of K arguments
        *sequences : the K sequences to combine, in argument order

    Returns:
        out (list): the combined elements
    """
    if not sequences:
        return []
    return [fn(*items) for items in zip(*sequences)]


def length(
    collection) -> int:
    return len(collection)


def is_empty(
    collection) -> bool:
    return length(collection) == 0


def all_same(
    xs) -> bool:
    """
    True if every element equals the first. An empty sequence is never "all same".
    """
    xs = list(xs)
    if is_empty(xs):
        return False
    first = xs[0]
    for x in xs[1:]:
        if x != first:
            return False
    return True
