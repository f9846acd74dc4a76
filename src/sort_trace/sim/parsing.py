from __future__ import annotations

import re

from sort_trace.domain.errors import ArrayParseError

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_array(text: str, *, allow_empty: bool = True) -> list[int]:
    """Parse ``[5,1,4]`` or ``5,1,4`` into a list of ints.

    ``[]`` is the only spelling of an empty array; blank text is rejected.
    """
    body = text.strip()
    if body.startswith("["):
        if not body.endswith("]"):
            raise ArrayParseError("Unbalanced brackets")
        body = body[1:-1].strip()
        if not body:
            if not allow_empty:
                raise ArrayParseError("Array must not be empty")
            return []
    elif body.endswith("]"):
        raise ArrayParseError("Unbalanced brackets")

    return [parse_int(token) for token in body.split(",")]


def parse_int(text: str) -> int:
    """Parse one optionally signed run of ASCII digits."""
    token = text.strip()
    if not _INT_TOKEN.fullmatch(token):
        raise ArrayParseError(f"Not an integer: {token!r}")
    return int(token)


def format_array(values: list[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"
