from __future__ import annotations

from sort_trace.algorithms.base import SortAlgorithm
from sort_trace.domain.observer import SortObserver


class BubbleSort(SortAlgorithm):
    name = "Bubble Sort"

    def run(self, array: list[int], observer: SortObserver) -> None:
        n = len(array)
        for i in range(n - 1):
            swapped = False
            for j in range(n - 1 - i):
                observer.compare(j, j + 1)
                if array[j] > array[j + 1]:
                    array[j], array[j + 1] = array[j + 1], array[j]
                    observer.swap(j, j + 1)
                    swapped = True
            # Already ordered; later passes would only compare.
            if not swapped:
                break
