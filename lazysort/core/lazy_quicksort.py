# lazy_quicksort.py
"""Lazy quicksort: sorted output produced one element at a time.

The sort keeps an explicit work queue of segments instead of recursing. Each
request for the next element partitions only the front of the queue, as many
times as needed to bring a resolved pivot to the front, and then yields it.
Segments holding larger elements are left untouched until the consumer gets
that far, so taking the first k of n elements costs far less than a full sort
when k is small.

Pivots are always the first element of the front segment. Already sorted or
reverse sorted input therefore costs n(n-1)/2 comparisons for a full sort.

The ordering must be a strict total order; anything else gives undefined
results and is not checked.
"""

import operator
from collections import deque
from itertools import islice
from typing import Callable, Iterable, Iterator, List, Optional

from lazysort.core.comparator import key_less_than, reversed_less_than
from lazysort.core.segment import EagerSegment, Pivot, partition

LessThan = Callable[[object, object], bool]

DEFAULT_LAZY_PARTITION = False

_EMPTY = object()


class LazySortedSequence:
    """
    Forward-only, single-consumer view over a running lazy sort.

    Supports iteration, ``next()``, ``has_next()`` and ``take(k)``. Once
    exhausted it stays exhausted: further requests keep signalling the end.
    """

    def __init__(self, items: List, less_than: LessThan, lazy_partition: bool):
        self.lazy_partition = lazy_partition
        self.partitions: int = 0
        self._less_than = less_than
        self._queue = deque([EagerSegment(items)])
        self._source = self._produce()
        self._lookahead = _EMPTY

    @property
    def pending_segments(self) -> int:
        """Number of segments (pivots included) still in the work queue."""
        return len(self._queue)

    def _produce(self) -> Iterator:
        queue, less_than = self._queue, self._less_than
        while queue:
            front = queue.popleft()
            if isinstance(front, Pivot):
                yield front.value
                continue
            items = front.materialize()
            if not items:
                continue
            smaller, pivot, larger = partition(items, less_than, self.lazy_partition)
            self.partitions += 1
            queue.appendleft(larger)
            queue.appendleft(pivot)
            queue.appendleft(smaller)

    def __iter__(self):
        return self

    def __next__(self):
        if self._lookahead is not _EMPTY:
            value, self._lookahead = self._lookahead, _EMPTY
            return value
        return next(self._source)

    next = __next__

    def has_next(self) -> bool:
        if self._lookahead is _EMPTY:
            try:
                self._lookahead = next(self._source)
            except StopIteration:
                return False
        return True

    def take(self, k: int) -> List:
        """Return the next *k* elements (fewer if the sequence runs out)."""
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}.")
        return list(islice(self, k))


class LazyQuicksort:
    """
    Configured lazy sorter.

    less_than      : strict total order, ``operator.lt`` by default
    key            : optional key function; elements are ordered by key(x)
    reverse        : produce elements largest first
    lazy_partition : keep the larger partition as an unevaluated filter over
                     its parent until it reaches the front of the queue
    """

    def __init__(self, less_than: LessThan = operator.lt, key: Optional[Callable] = None,
                 lazy_partition: bool = DEFAULT_LAZY_PARTITION, reverse: bool = False):
        if not callable(less_than):
            raise TypeError(f"less_than must be callable, got {type(less_than).__name__}.")
        if key is not None:
            less_than = key_less_than(key, less_than)
        if reverse:
            less_than = reversed_less_than(less_than)
        self.less_than = less_than
        self.lazy_partition = bool(lazy_partition)
        self.reverse = bool(reverse)

    def sort(self, items: Iterable) -> LazySortedSequence:
        # snapshot: the caller may mutate items while we are still consuming
        return LazySortedSequence(list(items), self.less_than, self.lazy_partition)


def lazy_sort(items: Iterable, less_than: LessThan = operator.lt, key: Optional[Callable] = None,
              lazy_partition: bool = DEFAULT_LAZY_PARTITION,
              reverse: bool = False) -> LazySortedSequence:
    """Return a lazily sorted, forward-only sequence over *items*."""
    return LazyQuicksort(less_than, key=key, lazy_partition=lazy_partition,
                         reverse=reverse).sort(items)


def smallest(items: Iterable, k: int, less_than: LessThan = operator.lt,
             key: Optional[Callable] = None,
             lazy_partition: bool = DEFAULT_LAZY_PARTITION) -> List:
    """The first *k* elements of *items* in sorted order."""
    return lazy_sort(items, less_than, key=key, lazy_partition=lazy_partition).take(k)


def largest(items: Iterable, k: int, less_than: LessThan = operator.lt,
            key: Optional[Callable] = None,
            lazy_partition: bool = DEFAULT_LAZY_PARTITION) -> List:
    """The last *k* elements of *items* in sorted order, largest first."""
    return lazy_sort(items, less_than, key=key, lazy_partition=lazy_partition,
                     reverse=True).take(k)
