from sort_trace.domain.errors import (
    ArrayParseError,
    ArrayTooLargeError,
    GeneratorError,
    UnknownAlgorithmError,
)
from sort_trace.domain.events import Compare, Done, EventType, SetValue, SortEvent, Swap
from sort_trace.domain.observer import NULL_OBSERVER, SortObserver

__all__ = [
    "ArrayParseError",
    "ArrayTooLargeError",
    "Compare",
    "Done",
    "EventType",
    "GeneratorError",
    "NULL_OBSERVER",
    "SetValue",
    "SortEvent",
    "SortObserver",
    "Swap",
    "UnknownAlgorithmError",
]
