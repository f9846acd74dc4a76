from __future__ import annotations

import logging

import pytest

from sort_trace.algorithms import BubbleSort, InsertionSort, MergeSort, SelectionSort
from sort_trace.sim.registry import AlgorithmRegistry, build_default_registry


def test_default_registry_lists_all_in_order() -> None:
    registry = build_default_registry()
    listing = registry.all()
    assert list(listing) == ["bubble", "selection", "insertion", "merge"]
    assert isinstance(listing["bubble"], BubbleSort)
    assert isinstance(listing["selection"], SelectionSort)
    assert isinstance(listing["insertion"], InsertionSort)
    assert isinstance(listing["merge"], MergeSort)


def test_get_unknown_key_returns_none() -> None:
    registry = build_default_registry()
    assert registry.get("quick") is None
    assert registry.get("") is None
    assert "quick" not in registry


def test_register_then_get_returns_same_instance() -> None:
    registry = AlgorithmRegistry()
    algo = MergeSort()
    registry.register("merge", algo)
    assert registry.get("merge") is algo


def test_register_existing_key_replaces(caplog: pytest.LogCaptureFixture) -> None:
    registry = AlgorithmRegistry()
    first = BubbleSort()
    second = SelectionSort()
    registry.register("x", first)
    with caplog.at_level(logging.INFO, logger="sort_trace.sim.registry"):
        registry.register("x", second)
    assert registry.get("x") is second
    assert len(registry) == 1
    assert "Replacing algorithm 'x'" in caplog.text


def test_replacement_keeps_original_position() -> None:
    registry = build_default_registry()
    registry.register("bubble", MergeSort())
    assert list(registry.all()) == ["bubble", "selection", "insertion", "merge"]


def test_all_returns_a_copy() -> None:
    registry = build_default_registry(["bubble"])
    listing = registry.all()
    listing["merge"] = MergeSort()  # type: ignore[index]
    assert registry.get("merge") is None


def test_build_default_registry_subset_and_order() -> None:
    registry = build_default_registry(["merge", "bubble"])
    assert list(registry.all()) == ["merge", "bubble"]


def test_build_default_registry_rejects_unknown_key() -> None:
    with pytest.raises(KeyError, match="quick"):
        build_default_registry(["quick"])
