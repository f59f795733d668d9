from lazysort.core.lazy_quicksort import LazyQuicksort, LazySortedSequence, largest, lazy_sort, smallest

__all__ = ["LazyQuicksort", "LazySortedSequence", "largest", "lazy_sort", "smallest"]
