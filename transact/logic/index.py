"""Position into a displayed list"""


class Index:
    """
    Display positions are 1-based for users and 0-based internally.
    Construct with from_one_based() or from_zero_based().
    """

    def __init__(self, zero_based: int):
        if zero_based < 0:
            raise IndexError(f"Index must not be negative: {zero_based}")
        self._zero_based = zero_based

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def zero_based(self) -> int:
        return self._zero_based

    @property
    def one_based(self) -> int:
        return self._zero_based + 1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Index):
            return NotImplemented
        return self._zero_based == other._zero_based

    def __hash__(self) -> int:
        return hash(self._zero_based)

    def __repr__(self) -> str:
        return f"Index(one_based={self.one_based})"
