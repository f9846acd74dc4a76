from sort_trace.sim.collector import EventCollector
from sort_trace.sim.registry import AlgorithmRegistry, build_default_registry
from sort_trace.sim.runner import SortRun, run_sort

__all__ = ["AlgorithmRegistry", "EventCollector", "SortRun", "build_default_registry", "run_sort"]
