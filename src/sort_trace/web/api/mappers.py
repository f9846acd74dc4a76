from __future__ import annotations

from sort_trace.domain.events import Compare, Done, SetValue, SortEvent, Swap
from sort_trace.sim.registry import AlgorithmRegistry
from sort_trace.sim.runner import SortRun
from sort_trace.web.api import schemas


def build_step(event: SortEvent) -> schemas.CompareStep | schemas.SwapStep | schemas.SetStep | schemas.DoneStep:
    if isinstance(event, Compare):
        return schemas.CompareStep(i=event.i, j=event.j)
    if isinstance(event, Swap):
        return schemas.SwapStep(i=event.i, j=event.j)
    if isinstance(event, SetValue):
        return schemas.SetStep(index=event.index, value=event.value)
    if isinstance(event, Done):
        return schemas.DoneStep()
    raise TypeError(f"Unsupported event: {event!r}")


def build_run_response(run: SortRun) -> schemas.RunResponse:
    return schemas.RunResponse(
        algorithm_key=run.algorithm_key,
        algorithm_name=run.algorithm_name,
        initial=list(run.initial),
        sorted=list(run.sorted),
        steps=[build_step(event) for event in run.steps],
    )


def build_algorithm_list(registry: AlgorithmRegistry) -> schemas.AlgorithmListResponse:
    return schemas.AlgorithmListResponse(
        algorithms=[
            schemas.AlgorithmInfo(key=key, name=algorithm.name)
            for key, algorithm in registry.all().items()
        ]
    )
