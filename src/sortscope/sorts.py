# src/sortscope/sorts.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Tuple

from .errors import InvalidRange

# Every sort below works in place and returns the number of element comparisons
# it performed. Each call starts its own counter at zero.


def bubble_sort(arr: List[int]) -> int:
    """Bubble Sort - O(n^2) time, O(n) on sorted input thanks to the early exit."""
    comparisons = 0
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            comparisons += 1
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break
    return comparisons


def insertion_sort(arr: List[int]) -> int:
    """Insertion Sort - O(n^2) time, one comparison per element on sorted input."""
    comparisons = 0
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0:
            comparisons += 1
            if arr[j] > key:
                arr[j + 1] = arr[j]
                j -= 1
            else:
                break
        arr[j + 1] = key
    return comparisons


def merge_ranges(arr: List[int], buffer: List[int], left: int, mid: int, right: int) -> int:
    """
    Merge the sorted runs arr[left..mid] and arr[mid+1..right] (inclusive bounds)
    through `buffer` and copy the result back. Returns comparisons made.
    """
    if not (0 <= left <= mid < right < len(arr)) or len(buffer) < len(arr):
        raise InvalidRange(f"cannot merge [{left}, {mid}] with [{mid + 1}, {right}] in n={len(arr)}")

    comparisons = 0
    i, j, k = left, mid + 1, left
    while i <= mid and j <= right:
        comparisons += 1
        # <= keeps equal keys in their original order
        if arr[i] <= arr[j]:
            buffer[k] = arr[i]
            i += 1
        else:
            buffer[k] = arr[j]
            j += 1
        k += 1

    while i <= mid:
        buffer[k] = arr[i]
        i += 1
        k += 1
    while j <= right:
        buffer[k] = arr[j]
        j += 1
        k += 1

    arr[left:right + 1] = buffer[left:right + 1]
    return comparisons


def _merge_sort_range(arr: List[int], buffer: List[int], left: int, right: int) -> int:
    if left >= right:
        return 0
    mid = left + (right - left) // 2
    comparisons = _merge_sort_range(arr, buffer, left, mid)
    comparisons += _merge_sort_range(arr, buffer, mid + 1, right)
    comparisons += merge_ranges(arr, buffer, left, mid, right)
    return comparisons


def merge_sort(arr: List[int]) -> int:
    """Merge Sort - stable, O(n log n), one scratch buffer shared by all merges."""
    if len(arr) < 2:
        return 0
    buffer = [0] * len(arr)
    return _merge_sort_range(arr, buffer, 0, len(arr) - 1)


def _median_of_three(arr: List[int], low: int, high: int) -> Tuple[int, int]:
    """Return (pivot index, comparisons) for the range [low, high]."""
    if high - low < 2:
        return high, 0

    mid = low + (high - low) // 2
    comparisons = 1
    if arr[low] < arr[mid]:
        comparisons += 1
        if arr[mid] < arr[high]:
            return mid, comparisons
        comparisons += 1
        return (high if arr[low] < arr[high] else low), comparisons

    comparisons += 1
    if arr[low] < arr[high]:
        return low, comparisons
    comparisons += 1
    return (high if arr[mid] < arr[high] else mid), comparisons


def partition(arr: List[int], low: int, high: int) -> Tuple[int, int]:
    """
    Lomuto partition of arr[low..high] around a median-of-three pivot.

    Returns (final pivot index, comparisons). The selection comparisons of the
    median-of-three step are included in the count.
    """
    if not (0 <= low <= high < len(arr)):
        raise InvalidRange(f"cannot partition [{low}, {high}] in n={len(arr)}")

    pivot_index, comparisons = _median_of_three(arr, low, high)
    arr[pivot_index], arr[high] = arr[high], arr[pivot_index]
    pivot = arr[high]

    boundary = low - 1
    for j in range(low, high):
        comparisons += 1
        if arr[j] <= pivot:
            boundary += 1
            arr[boundary], arr[j] = arr[j], arr[boundary]

    arr[boundary + 1], arr[high] = arr[high], arr[boundary + 1]
    return boundary + 1, comparisons


def quick_sort(arr: List[int]) -> int:
    """
    Quick Sort - average O(n log n), median-of-three pivot, Lomuto partition.

    The larger side of every partition is pushed onto an explicit stack while the
    loop carries on with the smaller side, so the stack never holds more than
    O(log n) ranges.
    """
    comparisons, _ = quick_sort_with_depth(arr)
    return comparisons


def quick_sort_with_depth(arr: List[int]) -> Tuple[int, int]:
    """Quick sort `arr` in place; returns (comparisons, peak explicit-stack depth)."""
    if len(arr) < 2:
        return 0, 0

    comparisons = 0
    peak = 0
    stack: List[Tuple[int, int]] = [(0, len(arr) - 1)]
    while stack:
        peak = max(peak, len(stack))
        low, high = stack.pop()
        while low < high:
            p, c = partition(arr, low, high)
            comparisons += c
            if p - low < high - p:
                stack.append((p + 1, high))
                high = p - 1
            else:
                stack.append((low, p - 1))
                low = p + 1
            peak = max(peak, len(stack))
    return comparisons, peak


@dataclass(frozen=True)
class SortAlgorithm:
    """A named sort strategy. `quadratic` marks the O(n^2) ones callers may skip."""
    name: str
    func: Callable[[List[int]], int]
    quadratic: bool = False

    def sort_in_place(self, arr: List[int]) -> int:
        return self.func(arr)

    def apply(self, seq: List[int]) -> Tuple[List[int], int]:
        """Sort a copy of `seq` and return (sorted copy, comparisons)."""
        data = list(seq)
        comparisons = self.func(data)
        return data, comparisons


BUBBLE = SortAlgorithm("Bubble Sort", bubble_sort, quadratic=True)
INSERTION = SortAlgorithm("Insertion Sort", insertion_sort, quadratic=True)
MERGE = SortAlgorithm("Merge Sort", merge_sort)
QUICK = SortAlgorithm("Quick Sort", quick_sort)

# canonical order, also the tie-break order of the aggregator
ALGORITHMS: Tuple[SortAlgorithm, ...] = (BUBBLE, INSERTION, MERGE, QUICK)
ALGORITHM_NAMES: Tuple[str, ...] = tuple(a.name for a in ALGORITHMS)


def get_algorithm(name: str) -> SortAlgorithm:
    """Look up an algorithm by label ("Quick Sort") or short name ("quick")."""
    key = name.strip().lower()
    for algo in ALGORITHMS:
        label = algo.name.lower()
        if key == label or key == label.split()[0]:
            return algo
    raise KeyError(f"unknown algorithm {name!r}; expected one of {', '.join(ALGORITHM_NAMES)}")
