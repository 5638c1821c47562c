"""Plain-text storage of ranking tables, one integer per line."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

_INTEGER = re.compile(r"[+-]?\d+")


def read_table(path: str | os.PathLike, size: int) -> list[int]:
    """Read up to ``size`` integers from ``path``.

    Reading stops at the first entry that is not an integer.  A missing file
    reads as an empty table.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError:
        return []
    values: list[int] = []
    for token in text.split():
        if len(values) >= size:
            break
        match = _INTEGER.match(token)
        if match is None:
            break
        values.append(int(match.group()))
        if match.end() != len(token):
            break
    return values


def write_table(path: str | os.PathLike, values: Iterable[int]) -> None:
    """Write ``values`` to ``path``, one per line."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{int(value)}\n" for value in values)