from __future__ import annotations

from random import Random
from typing import Sequence

from sort_trace.algorithms import SortAlgorithm
from sort_trace.sim.generate import random_array
from sort_trace.sim.registry import AlgorithmRegistry


def is_sorted(values: Sequence[int]) -> bool:
    return all(values[k] <= values[k + 1] for k in range(len(values) - 1))


def check_algorithm(algorithm: SortAlgorithm, values: Sequence[int]) -> bool:
    work = list(values)
    algorithm.sort(work)
    return is_sorted(work) and sorted(values) == work


def run_selftest(
    registry: AlgorithmRegistry,
    rng: Random,
    *,
    trials: int = 100,
    size: int = 20,
    bound: int = 1000,
) -> dict[str, bool]:
    """Sort ``trials`` random arrays with every registered algorithm, uninstrumented.

    Returns pass/fail per registry key; an algorithm stops at its first failure.
    """
    results: dict[str, bool] = {}
    for key, algorithm in registry.all().items():
        passed = True
        for _ in range(trials):
            if not check_algorithm(algorithm, random_array(size, bound, rng)):
                passed = False
                break
        results[key] = passed
    return results
