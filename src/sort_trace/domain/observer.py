from __future__ import annotations


class SortObserver:
    """Receives notifications about operations a sort has performed.

    Every method is a no-op, so a bare ``SortObserver()`` runs an algorithm
    uninstrumented. ``swap`` and ``set`` arrive after the array was mutated;
    ``compare`` arrives at the comparison point and implies no mutation.
    """

    def compare(self, i: int, j: int) -> None:
        pass

    def swap(self, i: int, j: int) -> None:
        pass

    def set(self, index: int, value: int) -> None:
        pass


NULL_OBSERVER = SortObserver()
