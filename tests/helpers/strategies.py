from __future__ import annotations

from hypothesis import strategies as st

from sort_trace.sim.registry import DEFAULT_ALGORITHMS


def int_array_strategy(
    min_val: int = -1000, max_val: int = 1000, max_size: int = 40
) -> st.SearchStrategy[list[int]]:
    return st.lists(st.integers(min_value=min_val, max_value=max_val), max_size=max_size)


def duplicate_heavy_array_strategy(max_size: int = 40) -> st.SearchStrategy[list[int]]:
    return st.lists(st.integers(min_value=0, max_value=3), max_size=max_size)


def algorithm_key_strategy() -> st.SearchStrategy[str]:
    return st.sampled_from(list(DEFAULT_ALGORITHMS))
