"""Aggregation operations applied to the numeric values of one group."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import numpy as np


class Operation(str, Enum):
    """Closed set of per-group reductions."""

    AVG = "avg"
    SUM = "sum"
    MIN = "min"
    MAX = "max"

    @classmethod
    def parse(cls, name: str | Operation) -> Operation:
        """Return the operation for *name*, raising ``ValueError`` if unknown."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            known = ", ".join(op.value for op in cls)
            raise ValueError(f"unknown operation {name!r}; expected one of {known}") from None


Reducer = Callable[..., "float | None"]

OPERATIONS: dict[Operation, Reducer] = {}


def register_operation(op: Operation) -> Callable[[Reducer], Reducer]:
    """Register the decorated function as the reducer of *op*."""

    def decorator(fn: Reducer) -> Reducer:
        OPERATIONS[op] = fn
        return fn

    return decorator


@register_operation(Operation.AVG)
def avg(values: np.ndarray) -> float:
    """Arithmetic mean, 0 for an empty set."""
    if values.size == 0:
        return 0.0
    return float(np.mean(values))


@register_operation(Operation.SUM)
def total(values: np.ndarray) -> float:
    return float(np.sum(values))


@register_operation(Operation.MIN)
def minimum(values: np.ndarray, *, empty: float | None = 0.0) -> float | None:
    """
    Smallest value.

    Parameters
    ----------
    values : np.ndarray
        Finite numeric values of the group.
    empty : float | None, default 0.0
        Returned for an empty group. ``0.0`` keeps the legacy dashboard
        output; pass ``None`` for an explicit "no value".
    """
    if values.size == 0:
        return empty
    return float(np.min(values))


@register_operation(Operation.MAX)
def maximum(values: np.ndarray, *, empty: float | None = 0.0) -> float | None:
    """Largest value; see :func:`minimum` for ``empty``."""
    if values.size == 0:
        return empty
    return float(np.max(values))


_missing = set(Operation) - set(OPERATIONS)
if _missing:
    raise RuntimeError(f"operations without a reducer: {sorted(op.value for op in _missing)}")
