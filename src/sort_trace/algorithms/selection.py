from __future__ import annotations

from sort_trace.algorithms.base import SortAlgorithm
from sort_trace.domain.observer import SortObserver


class SelectionSort(SortAlgorithm):
    name = "Selection Sort"

    def run(self, array: list[int], observer: SortObserver) -> None:
        n = len(array)
        for i in range(n - 1):
            min_index = i
            for j in range(i + 1, n):
                observer.compare(j, min_index)
                if array[j] < array[min_index]:
                    min_index = j
            if min_index != i:
                array[i], array[min_index] = array[min_index], array[i]
                observer.swap(i, min_index)
