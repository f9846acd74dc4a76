from __future__ import annotations

from random import Random

from sort_trace.domain.errors import GeneratorError


def generate_unique(count: int, max_value: int, rng: Random) -> list[int]:
    """``count`` distinct values drawn from ``1..max_value``.

    Cost depends on ``count`` only; the range is never materialised.
    """
    if count <= 0 or max_value <= 0:
        raise GeneratorError("count and max must be > 0")
    if count > max_value:
        raise GeneratorError("count must be <= max (unique constraint)")
    return rng.sample(range(1, max_value + 1), count)


def random_array(size: int, bound: int, rng: Random) -> list[int]:
    """``size`` values in ``[0, bound)``; repeats allowed."""
    if size < 0:
        raise GeneratorError("size must be >= 0")
    if bound <= 0:
        raise GeneratorError("bound must be > 0")
    return [rng.randrange(bound) for _ in range(size)]
