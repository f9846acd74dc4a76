from __future__ import annotations

from sort_trace.algorithms.base import SortAlgorithm
from sort_trace.domain.observer import SortObserver


class InsertionSort(SortAlgorithm):
    """Shifts larger elements right and drops the key into the gap.

    Only writes are reported; the shift condition is never announced as a
    comparison.
    """

    name = "Insertion Sort"

    def run(self, array: list[int], observer: SortObserver) -> None:
        for i in range(1, len(array)):
            key = array[i]
            j = i - 1
            while j >= 0 and array[j] > key:
                array[j + 1] = array[j]
                observer.set(j + 1, array[j])
                j -= 1
            array[j + 1] = key
            observer.set(j + 1, key)
