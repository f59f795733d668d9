import operator
import warnings
from collections import Counter
from typing import Callable, Sequence

from lazysort.core.comparator import as_key

LessThan = Callable[[object, object], bool]


def is_non_decreasing(values: Sequence, less_than: LessThan = operator.lt) -> bool:
    for i in range(1, len(values)):
        if less_than(values[i], values[i - 1]):
            return False
    return True


def _is_sub_multiset(part: Sequence, whole: Sequence) -> bool:
    """Every element of *part* occurs in *whole* at least as often, by ``==``."""
    try:
        available = Counter(whole)
        for x, count in Counter(part).items():
            if available[x] < count:
                return False
        return True
    except TypeError:
        # unhashable elements: match them off one by one
        remaining = list(whole)
        for x in part:
            try:
                remaining.remove(x)
            except ValueError:
                return False
        return True


def is_permutation(a: Sequence, b: Sequence) -> bool:
    """Multiset equality of *a* and *b*, using ``==`` only."""
    return len(a) == len(b) and _is_sub_multiset(a, b)


def check_sorted_output(original: Sequence, output: Sequence,
                        less_than: LessThan = operator.lt) -> bool:
    """
    Check that *output* is a sorted permutation of *original*.

    Returns False and warns about the first violation found.
    """
    for i in range(1, len(output)):
        if less_than(output[i], output[i - 1]):
            warnings.warn(
                f"Output out of order at position {i}: {output[i - 1]!r} before {output[i]!r}.",
                RuntimeWarning)
            return False
    if not is_permutation(original, output):
        warnings.warn(
            f"Output is not a permutation of the input "
            f"({len(original)} input elements, {len(output)} output elements).",
            RuntimeWarning)
        return False
    return True


def check_sorted_prefix(original: Sequence, prefix: Sequence,
                        less_than: LessThan = operator.lt) -> bool:
    """
    Check that *prefix* holds the len(prefix) smallest elements of *original*, in order.

    Elements tied under less_than are interchangeable: position i only has to
    be equivalent to the i-th smallest element, not equal to it.
    """
    if not _is_sub_multiset(prefix, original):
        warnings.warn(
            f"Prefix holds elements not in the input ({len(prefix)} prefix elements).",
            RuntimeWarning)
        return False
    reference = sorted(original, key=as_key(less_than))[:len(prefix)]
    for i, (got, expected) in enumerate(zip(prefix, reference)):
        if less_than(got, expected) or less_than(expected, got):
            warnings.warn(
                f"Prefix differs from the sorted input at position {i}: "
                f"{got!r} where {expected!r} belongs.",
                RuntimeWarning)
            return False
    return True
