from __future__ import annotations


class ArrayParseError(ValueError):
    """Array text does not describe a list of integers."""


class UnknownAlgorithmError(ValueError):
    """No algorithm is registered under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown algorithm: {key}")
        self.key = key


class ArrayTooLargeError(ValueError):
    """Array exceeds the configured size cap."""


class GeneratorError(ValueError):
    """Invalid parameters for random array generation."""
