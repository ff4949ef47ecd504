# sort_utils.py
# The bubble, shuttle and quick sort engines.
#
# Every engine sorts the list it is given in place, using only a strict
# "less than" test between elements, and returns the statistics of the run.

import operator

from sortlab.Stats import SortStats, format_vector
from sortlab.errors import SortPreconditionError
from sortlab.logger import get_logger

logger = get_logger(__name__)


def bubble_sort(items, less_than=operator.lt, verbose=False):
    """
    Bubble sort. The largest element of the unsorted region sinks to its end on
    every pass, so the region shrinks by one each time.

    Best case O(n), worst case O(n^2). Stable.

    Args:
        items (list): the sequence to sort, modified in place.
        less_than (callable): strict ordering between two elements.
        verbose (bool): log every pass and the state of the list after it.

    :return:
        SortStats: comparisons and swaps per pass and in total.
    """
    stats = SortStats("Bubble Sort", verbose=verbose)

    # First index that is known to be in its final place
    end = len(items)

    while end > 1:
        for i in range(end - 1):
            stats.comparisons += 1
            if less_than(items[i + 1], items[i]):
                items[i], items[i + 1] = items[i + 1], items[i]
                stats.swaps += 1

        record = stats.end_pass(items)

        # A pass without swaps means the list is sorted
        if record.swaps == 0:
            break

        end -= 1

    stats.report()
    return stats


def shuttle_sort(items, less_than=operator.lt, verbose=False):
    """
    Shuttle sort. Pass p compares the element at index p-1 with its right
    neighbour and keeps shuttling the smaller one back up the list while it
    is out of order. Runs exactly n-1 passes.

    Best case O(n), worst case O(n^2). Stable.
    """
    stats = SortStats("Shuttle Sort", verbose=verbose)
    n = len(items)

    for start_index in range(n - 1):
        e1 = start_index
        while True:
            stats.comparisons += 1
            if not less_than(items[e1 + 1], items[e1]):
                break

            items[e1], items[e1 + 1] = items[e1 + 1], items[e1]
            stats.swaps += 1

            # Reached the top of the list, nothing left to shuttle on this pass
            if e1 == 0:
                break
            e1 -= 1

        stats.end_pass(items)

    stats.report()
    return stats


def _check_range(items, start_index, end_index):
    for name, value in (("start_index", start_index), ("end_index", end_index)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise SortPreconditionError(f"{name} must be an integer, got {value!r}")

    n = len(items)
    if not 0 <= start_index <= n:
        raise SortPreconditionError(f"start_index {start_index} is outside [0, {n}]")
    if not -1 <= end_index < n:
        raise SortPreconditionError(f"end_index {end_index} is outside [-1, {n - 1}]")


def quick_sort(items, start_index=0, end_index=None, less_than=operator.lt, verbose=False):
    """
    Quick sort of the inclusive range [start_index, end_index].

    The pivot is always the rightmost element of the range. Scanning from the
    left, every element greater than the pivot is rotated to the right of it
    and the pivot moves one slot left, so the pivot ends up between the two
    partitions. Ranges are kept on an explicit stack rather than recursing.

    Best case O(n log n), worst case O(n^2) (sorted input). Not stable.

    Args:
        items (list): the sequence to sort, modified in place.
        start_index (int): first index of the range.
        end_index (int): last index of the range, defaults to len(items) - 1.
        less_than (callable): strict ordering between two elements.
        verbose (bool): log the list after every rotation.

    :return:
        SortStats: one pass per partitioned range.
    """
    if end_index is None:
        end_index = len(items) - 1
    _check_range(items, start_index, end_index)

    stats = SortStats("Quick Sort", verbose=verbose)
    ranges = [(start_index, end_index)]

    while ranges:
        start, end = ranges.pop()

        # Empty or single element range
        if end - start < 1:
            continue

        pivot_it = end
        e1 = start
        e2 = pivot_it - 1

        while e1 != pivot_it:
            stats.comparisons += 1
            if less_than(items[pivot_it], items[e1]):
                # Move the larger element to the right of the pivot, the element
                # next to the pivot takes its slot and is evaluated next
                tmp = items[e1]
                items[e1] = items[e2]
                items[e2] = items[pivot_it]
                items[pivot_it] = tmp

                pivot_it = e2
                e2 = pivot_it - 1
                stats.swaps += 1

                if verbose:
                    logger.info(format_vector(items))
            else:
                e1 += 1

        stats.end_pass()

        # Popped in reverse: the right partition is sorted first
        ranges.append((start, e2))
        ranges.append((pivot_it + 1, end))

    stats.report()
    return stats


ALGORITHMS = {
    "bubble": bubble_sort,
    "shuttle": shuttle_sort,
    "quick": quick_sort,
}


def get_algorithm(name):
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise SortPreconditionError(
            f"Unknown algorithm '{name}', expected one of: {', '.join(ALGORITHMS)}") from None
