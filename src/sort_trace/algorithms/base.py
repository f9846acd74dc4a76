from __future__ import annotations

from abc import ABC, abstractmethod

from sort_trace.domain.observer import NULL_OBSERVER, SortObserver


class SortAlgorithm(ABC):
    """An in-place integer sort that reports its operations to an observer."""

    name: str

    @abstractmethod
    def run(self, array: list[int], observer: SortObserver) -> None:
        """Sort ``array`` ascending, notifying ``observer`` after each operation."""

    def sort(self, array: list[int], observer: SortObserver | None = None) -> None:
        self.run(array, observer if observer is not None else NULL_OBSERVER)
