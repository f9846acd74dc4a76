"""Observed sort operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias, Union


class EventType(str, Enum):
    COMPARE = "COMPARE"
    SWAP = "SWAP"
    SET = "SET"
    DONE = "DONE"


@dataclass(frozen=True, slots=True)
class Compare:
    type: ClassVar[EventType] = EventType.COMPARE

    i: int
    j: int


@dataclass(frozen=True, slots=True)
class Swap:
    type: ClassVar[EventType] = EventType.SWAP

    i: int
    j: int


@dataclass(frozen=True, slots=True)
class SetValue:
    type: ClassVar[EventType] = EventType.SET

    index: int
    value: int


@dataclass(frozen=True, slots=True)
class Done:
    type: ClassVar[EventType] = EventType.DONE


SortEvent: TypeAlias = Union[Compare, Swap, SetValue, Done]


def compare(i: int, j: int) -> Compare:
    return Compare(i=i, j=j)


def swap(i: int, j: int) -> Swap:
    return Swap(i=i, j=j)


def set_value(index: int, value: int) -> SetValue:
    return SetValue(index=index, value=value)


def done() -> Done:
    return Done()
