from __future__ import annotations

from typing import Iterable

from sort_trace.domain.events import SetValue, SortEvent, Swap


def apply_event(array: list[int], event: SortEvent) -> None:
    """Apply one step to ``array`` in place. Non-mutating steps are ignored."""
    if isinstance(event, Swap):
        array[event.i], array[event.j] = array[event.j], array[event.i]
    elif isinstance(event, SetValue):
        array[event.index] = event.value


def replay(initial: Iterable[int], steps: Iterable[SortEvent]) -> list[int]:
    array = list(initial)
    for event in steps:
        apply_event(array, event)
    return array


def frames(initial: Iterable[int], steps: Iterable[SortEvent]) -> list[list[int]]:
    """Array state after each step, starting with the initial state."""
    array = list(initial)
    out = [list(array)]
    for event in steps:
        apply_event(array, event)
        out.append(list(array))
    return out
