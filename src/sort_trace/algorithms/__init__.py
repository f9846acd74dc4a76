from sort_trace.algorithms.base import SortAlgorithm
from sort_trace.algorithms.bubble import BubbleSort
from sort_trace.algorithms.insertion import InsertionSort
from sort_trace.algorithms.merge import MergeSort
from sort_trace.algorithms.selection import SelectionSort

__all__ = ["BubbleSort", "InsertionSort", "MergeSort", "SelectionSort", "SortAlgorithm"]
