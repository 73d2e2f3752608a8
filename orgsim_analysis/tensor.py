"""Nested-list tensor helpers shared by the trajectory and result analyzers.

Matrices returned by the analyzers are plain nested lists so that callers can
serialise them directly; these helpers allocate and flatten such structures.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def tensor(shape: Sequence[int], fill: Any = 0) -> Any:
    """Allocate a nested list of the given shape.

    Every leaf is ``fill``, or ``fill()`` when ``fill`` is callable so that
    mutable leaves are not shared.  Each row is a distinct list.  An empty
    shape returns the scalar leaf; non-positive dimensions give empty lists.
    """
    if not shape:
        return fill() if callable(fill) else fill
    size = max(int(shape[0]), 0)
    return [tensor(shape[1:], fill) for _ in range(size)]


def zeros(rows: int, cols: int | None = None) -> Any:
    """Zero vector (``cols is None``) or zero matrix of floats."""
    if cols is None:
        return tensor([rows], 0.0)
    return tensor([rows, cols], 0.0)


def _iter_level(value: Any) -> Iterable[Any]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return value
    return (value,)


def flatten_priority_tensor(priority_tensor: Any) -> list[float]:
    """Flatten a 3-level nested priority tensor into one list, order preserved.

    ``None`` at any level contributes nothing; scalars found above the leaf
    level are kept in place rather than rejected.
    """
    flat: list[float] = []
    for plane in _iter_level(priority_tensor):
        for row in _iter_level(plane):
            flat.extend(_iter_level(row))
    return flat
