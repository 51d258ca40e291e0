"""Splitting record collections by category.

Groups keep the order in which keys first appear.  Numeric fields such as age
or salary can be turned into labelled bands first, after which the band label
works like any other categorical key.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any

import numpy as np

from .config import Band
from .records import Record, ensure_records, is_blank, to_number

MISSING_KEY = "undefined"


def group_key(record: Record, field: str) -> Hashable:
    """Return the grouping key of *record*.

    Blanks map to :data:`MISSING_KEY`; unhashable values such as lists are
    grouped by their ``str`` form.
    """
    value = record.get(field)
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return MISSING_KEY
    if not isinstance(value, Hashable):
        return str(value)
    return value


def group_by(records: Iterable[Record], key_field: str) -> dict[Hashable, list[Record]]:
    """Partition *records* by the value of *key_field*.

    Parameters
    ----------
    records:
        Records to partition.
    key_field:
        Categorical field to group on.

    Returns
    -------
    dict
        Key value to the records carrying it, both in order of first
        occurrence.  Records without the field are collected under
        :data:`MISSING_KEY`.
    """
    groups: dict[Hashable, list[Record]] = {}
    for record in ensure_records(records):
        groups.setdefault(group_key(record, key_field), []).append(record)
    return groups


def filter_by(records: Iterable[Record], field: str, value: Any = None) -> list[Record]:
    """Records whose *field* equals *value*; ``None`` keeps every record."""
    rows = ensure_records(records)
    if value is None:
        return rows
    return [row for row in rows if group_key(row, field) == value]


def count_by(records: Iterable[Record], field: str) -> dict[Hashable, int]:
    """Number of records per key, largest first; ties keep first-seen order."""
    counts = {key: len(rows) for key, rows in group_by(records, field).items()}
    return dict(sorted(counts.items(), key=lambda item: -item[1]))


def band_label(value: Any, bands: Sequence[Band]) -> str | None:
    """Label of the first band whose upper bound exceeds *value*."""
    number = to_number(value)
    if number is None or not bands:
        return None
    uppers = np.array([band.upper for band in bands], dtype=float)
    idx = int(np.searchsorted(uppers, number, side="right"))
    if idx >= len(bands):
        return None
    return bands[idx].label


def assign_bands(
    records: Iterable[Record],
    field: str,
    bands: Sequence[Band],
    target: str,
) -> list[dict[str, Any]]:
    """Return copies of *records* with ``target`` set to the band of ``field``.

    Records whose *field* is blank or not numeric get ``None`` in ``target``
    and therefore land in the :data:`MISSING_KEY` group when grouped.
    """
    out = []
    for record in ensure_records(records):
        value = record.get(field)
        row = dict(record)
        row[target] = None if is_blank(value) else band_label(value, bands)
        out.append(row)
    return out
