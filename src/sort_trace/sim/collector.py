from __future__ import annotations

from sort_trace.domain import events
from sort_trace.domain.events import SortEvent
from sort_trace.domain.observer import SortObserver


class EventCollector(SortObserver):
    """Records every notification, in order, as a replayable step list.

    One collector serves exactly one sort call. ``finalize`` appends the single
    DONE marker; after that the history is closed.
    """

    def __init__(self) -> None:
        self._events: list[SortEvent] = []
        self._finalized = False

    def compare(self, i: int, j: int) -> None:
        self._append(events.compare(i, j))

    def swap(self, i: int, j: int) -> None:
        self._append(events.swap(i, j))

    def set(self, index: int, value: int) -> None:
        self._append(events.set_value(index, value))

    def finalize(self) -> None:
        self._append(events.done())
        self._finalized = True

    done = finalize

    @property
    def finalized(self) -> bool:
        return self._finalized

    def events(self) -> tuple[SortEvent, ...]:
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def _append(self, event: SortEvent) -> None:
        if self._finalized:
            raise RuntimeError("Event collector already finalized")
        self._events.append(event)
