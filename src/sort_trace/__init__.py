"""Instrumented sorting algorithms that record every step for replay."""

__version__ = "0.1.0"
