from __future__ import annotations

from sort_trace.algorithms.base import SortAlgorithm
from sort_trace.domain.observer import SortObserver


class MergeSort(SortAlgorithm):
    """Top-down stable merge sort.

    Every write back into the shared array is reported as a ``set``; no
    comparisons or swaps are announced.
    """

    name = "Merge Sort"

    def run(self, array: list[int], observer: SortObserver) -> None:
        if len(array) <= 1:
            return
        self._sort_range(array, 0, len(array) - 1, observer)

    def _sort_range(self, array: list[int], left: int, right: int, observer: SortObserver) -> None:
        if left >= right:
            return
        mid = left + (right - left) // 2
        self._sort_range(array, left, mid, observer)
        self._sort_range(array, mid + 1, right, observer)
        self._merge(array, left, mid, right, observer)

    @staticmethod
    def _merge(array: list[int], left: int, mid: int, right: int, observer: SortObserver) -> None:
        left_run = array[left : mid + 1]
        right_run = array[mid + 1 : right + 1]
        i = j = 0
        k = left

        while i < len(left_run) and j < len(right_run):
            # Ties take the left run to stay stable.
            if left_run[i] <= right_run[j]:
                array[k] = left_run[i]
                i += 1
            else:
                array[k] = right_run[j]
                j += 1
            observer.set(k, array[k])
            k += 1

        for value in left_run[i:]:
            array[k] = value
            observer.set(k, value)
            k += 1

        for value in right_run[j:]:
            array[k] = value
            observer.set(k, value)
            k += 1
