from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

from sort_trace.algorithms import BubbleSort, InsertionSort, MergeSort, SelectionSort, SortAlgorithm

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHMS: dict[str, Callable[[], SortAlgorithm]] = {
    "bubble": BubbleSort,
    "selection": SelectionSort,
    "insertion": InsertionSort,
    "merge": MergeSort,
}


class AlgorithmRegistry:
    """Algorithms keyed by the short names clients send ("bubble", ...).

    Listing order is registration order.
    """

    def __init__(self) -> None:
        self._algorithms: dict[str, SortAlgorithm] = {}

    def register(self, key: str, algorithm: SortAlgorithm) -> None:
        if key in self._algorithms:
            logger.info("Replacing algorithm %r (%s -> %s)", key, self._algorithms[key].name, algorithm.name)
        self._algorithms[key] = algorithm

    def get(self, key: str) -> SortAlgorithm | None:
        return self._algorithms.get(key)

    def all(self) -> Mapping[str, SortAlgorithm]:
        return dict(self._algorithms)

    def __contains__(self, key: object) -> bool:
        return key in self._algorithms

    def __len__(self) -> int:
        return len(self._algorithms)


def build_default_registry(keys: Iterable[str] | None = None) -> AlgorithmRegistry:
    registry = AlgorithmRegistry()
    for key in DEFAULT_ALGORITHMS if keys is None else keys:
        factory = DEFAULT_ALGORITHMS.get(key)
        if factory is None:
            raise KeyError(f"No built-in algorithm named {key!r}")
        registry.register(key, factory())
    return registry
