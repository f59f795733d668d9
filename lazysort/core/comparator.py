import functools
import operator
from typing import Callable, List, Tuple

LessThan = Callable[[object, object], bool]


def _require_callable(fn, name: str) -> None:
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {type(fn).__name__}.")


class CountingComparator:
    """
    Strict less-than that counts how often it is invoked.

    Used to measure how much ordering work a sort performs. With record=True
    every compared pair (a, b) is kept in ``pairs`` as well.
    """

    def __init__(self, less_than: LessThan = operator.lt, record: bool = False):
        _require_callable(less_than, "less_than")
        self.less_than = less_than
        self.record = record
        self.calls: int = 0
        self.pairs: List[Tuple[object, object]] = []

    def __call__(self, a, b) -> bool:
        self.calls += 1
        if self.record:
            self.pairs.append((a, b))
        return self.less_than(a, b)

    def reset(self) -> None:
        self.calls = 0
        self.pairs = []

    def __repr__(self):
        return f"CountingComparator(calls={self.calls})"


def key_less_than(key: Callable, less_than: LessThan = operator.lt) -> LessThan:
    """Return a strict less-than comparing ``key(a)`` with ``key(b)``."""
    _require_callable(key, "key")
    _require_callable(less_than, "less_than")

    def compare(a, b):
        return less_than(key(a), key(b))
    return compare


def reversed_less_than(less_than: LessThan = operator.lt) -> LessThan:
    """Strict less-than for descending order."""
    _require_callable(less_than, "less_than")

    def compare(a, b):
        return less_than(b, a)
    return compare


def as_key(less_than: LessThan):
    """Adapt a strict less-than to a key for ``sorted`` / ``list.sort``."""
    _require_callable(less_than, "less_than")

    def cmp(a, b):
        if less_than(a, b):
            return -1
        if less_than(b, a):
            return 1
        return 0
    return functools.cmp_to_key(cmp)
