"""
    VECtools Maybe

    An immutable optional-value container, either Just(value) or Nothing.

    Maybe.just(None) deliberately produces Nothing rather than Just(None): construction
    doubles as absence detection, and map relies on it, so a mapped function that
    returns None also collapses the container to Nothing.

"""

_NOTHING = object()


class Maybe:
    """
    Either a present value (Just) or an explicit absence (Nothing).
    """

    __slots__ = ("_value",)

    def __init__(
        self,
        value=_NOTHING) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Maybe is immutable")

    @staticmethod
    def just(value) -> "Maybe":
        if value is None:
            return Maybe.none()
        return Maybe(value)

    @staticmethod
    def none() -> "Maybe":
        return Maybe()

    @staticmethod
    def from_(value) -> "Maybe":
        return Maybe.just(value)

    @property
    def is_just(self) -> bool:
        return self._value is not _NOTHING

    @property
    def is_none(self) -> bool:
        return self._value is _NOTHING

    def map(
        self,
        f) -> "Maybe":
        """
        Just(v) -> Maybe.just(f(v)); Nothing -> Nothing without calling f.
        """
        if self.is_none:
            return Maybe.none()
        return Maybe.just(f(self._value))

    def flat_map(
        self,
        f) -> "Maybe":
        """
        Just(v) -> f(v), which must itself return a Maybe; Nothing -> Nothing.
        """
        if self.is_none:
            return Maybe.none()
        return f(self._value)

    def match(
        self,
        just,
        none):
        """
        Eliminate the container: call just(value) for Just or none() for Nothing, and
        return the handler's result. Exactly one handler is called.
        """
        if self.is_none:
            return none()
        return just(self._value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.is_none or other.is_none:
            return self.is_none and other.is_none
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Maybe, self._value))

    def __repr__(self) -> str:
        if self.is_none:
            return "Nothing"
        return f"Just({self._value!r})"
