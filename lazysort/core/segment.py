# segment.py
from itertools import islice
from typing import Callable, List, Sequence

LessThan = Callable[[object, object], bool]


class Pivot:
    """A single element already in its final position, ready to be yielded."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Pivot({self.value!r})"


class EagerSegment:
    """Concrete unsorted sub-sequence waiting to be partitioned."""
    __slots__ = ("items",)

    def __init__(self, items: List):
        self.items = items

    def materialize(self) -> List:
        return self.items

    def __len__(self):
        return len(self.items)

    def __repr__(self):
        return f"EagerSegment({self.items!r})"


class FilteredSegment:
    """
    Deferred "not smaller than pivot" view over a parent sub-sequence.

    The view covers parent[start:] without copying it. Nothing is compared
    until materialize() is called, i.e. until the view reaches the front of
    the work queue. The result is cached so a view is filtered at most once.
    """
    __slots__ = ("parent", "start", "pivot", "less_than", "_items")

    def __init__(self, parent: Sequence, pivot, less_than: LessThan, start: int = 0):
        self.parent = parent
        self.start = start
        self.pivot = pivot
        self.less_than = less_than
        self._items = None

    @property
    def evaluated(self) -> bool:
        return self._items is not None

    def materialize(self) -> List:
        if self._items is None:
            pivot, less_than = self.pivot, self.less_than
            self._items = [x for x in islice(self.parent, self.start, None)
                           if not less_than(x, pivot)]
            # parent is no longer needed once filtered
            self.parent = ()
            self.start = 0
        return self._items

    def __repr__(self):
        state = self._items if self.evaluated else "<unevaluated>"
        return f"FilteredSegment(pivot={self.pivot!r}, items={state})"


def partition(items: Sequence, less_than: LessThan, lazy_larger: bool = False):
    """
    Split *items* around its first element.

    Returns (smaller, Pivot, larger). Ties with the pivot go to *larger*.
    With lazy_larger the larger side is a FilteredSegment over items[1:],
    sharing *items* instead of copying it; the smaller side is always built
    eagerly since it is unpacked on the very next pass.
    """
    pivot = items[0]
    if lazy_larger:
        smaller = [x for x in islice(items, 1, None) if less_than(x, pivot)]
        return EagerSegment(smaller), Pivot(pivot), FilteredSegment(items, pivot, less_than, start=1)

    smaller, larger = [], []
    for x in islice(items, 1, None):
        if less_than(x, pivot):
            smaller.append(x)
        else:
            larger.append(x)
    return EagerSegment(smaller), Pivot(pivot), EagerSegment(larger)
