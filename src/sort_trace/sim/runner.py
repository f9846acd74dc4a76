from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sort_trace.domain.errors import ArrayTooLargeError, UnknownAlgorithmError
from sort_trace.domain.events import SortEvent
from sort_trace.sim.collector import EventCollector
from sort_trace.sim.registry import AlgorithmRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortRun:
    algorithm_key: str
    algorithm_name: str
    initial: list[int]
    sorted: list[int]
    steps: tuple[SortEvent, ...]


def run_sort(
    registry: AlgorithmRegistry,
    key: str,
    values: Sequence[int],
    *,
    max_length: int | None = None,
) -> SortRun:
    """Sort a copy of ``values`` with the algorithm under ``key`` and capture every step.

    Validation happens before anything is sorted, so a rejected request
    produces no steps at all.
    """
    algorithm = registry.get(key)
    if algorithm is None:
        logger.warning("Rejected run: unknown algorithm %r", key)
        raise UnknownAlgorithmError(key)
    if max_length is not None and len(values) > max_length:
        logger.warning("Rejected run: %d values exceeds cap of %d", len(values), max_length)
        raise ArrayTooLargeError(f"Array too large: {len(values)} values (max {max_length})")

    initial = list(values)
    work = list(initial)
    collector = EventCollector()
    algorithm.sort(work, collector)
    collector.finalize()

    steps = collector.events()
    logger.debug("Ran %s on %d values: %d steps", key, len(initial), len(steps))
    return SortRun(
        algorithm_key=key,
        algorithm_name=algorithm.name,
        initial=initial,
        sorted=work,
        steps=steps,
    )
