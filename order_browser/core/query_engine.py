from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

import pandas as pd

from .criteria import Criteria, DateMode
from .record import Record

logger = logging.getLogger(__name__)


def to_timestamp(value: Any) -> pd.Timestamp:
    """
    Parse a date-like value into a naive UTC Timestamp.

    Accepts ISO strings, datetime/date objects, pandas Timestamps and epoch
    milliseconds. Anything empty, unparseable or outside the nanosecond range
    (e.g. "0001-01-01", "9999-12-31") becomes NaT instead of raising.
    """
    if value is None or isinstance(value, bool) or (isinstance(value, str) and not value.strip()):
        return pd.NaT

    try:
        if isinstance(value, (int, float)):
            ts = pd.to_datetime(value, unit="ms", utc=True)
        else:
            ts = pd.to_datetime(value, utc=True)
    except (pd.errors.OutOfBoundsDatetime, TypeError, ValueError, OverflowError):
        return pd.NaT

    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return pd.NaT

    ts = ts.tz_convert(None)
    # The frame column is datetime64[ns]; anything it cannot hold counts as unparseable
    if ts < pd.Timestamp.min or ts > pd.Timestamp.max:
        return pd.NaT
    return ts


def build_frame(records: Sequence[Record]) -> pd.DataFrame:
    """
    Frame of the columns the engine inspects, one row per record, in source order.
    Row labels are positions into `records`.
    """
    return pd.DataFrame(
        {
            "type": pd.Series([r.type for r in records], dtype=object),
            "status": pd.Series([r.status for r in records], dtype=object),
            "ts": pd.Series([to_timestamp(r.date) for r in records], dtype="datetime64[ns]"),
        }
    )


def apply_criteria(records: Sequence[Record] | None, criteria: Criteria) -> Tuple[Record, ...]:
    """
    Apply the criteria to the full record collection and return the filtered view.

    Order of application is fixed:
    1. type (exact, case-sensitive)
    2. status (exact)
    3. date dimension:
        * none   - keep source order
        * newest - stable sort, latest first
        * oldest - stable sort, earliest first
        * range  - keep records with range_from <= date <= range_to, no reordering

    A range with a missing or unparseable bound behaves as none. Records whose date
    cannot be parsed sort last in both directions and never fall inside a range.

    The input is never mutated; a new tuple is always returned.
    """
    rows: Tuple[Record, ...] = tuple(records or ())
    if not rows:
        return ()

    frame = build_frame(rows)
    mask = pd.Series(True, index=frame.index)

    if criteria.type:
        mask &= frame["type"] == criteria.type

    if criteria.status:
        mask &= frame["status"] == criteria.status

    mode = criteria.effective_date_mode
    if mode is DateMode.RANGE:
        lower = to_timestamp(criteria.range_from)
        upper = to_timestamp(criteria.range_to)
        if pd.isna(lower) or pd.isna(upper):
            mode = DateMode.NONE
        else:
            mask &= frame["ts"].between(lower, upper, inclusive="both")

    view = frame[mask]

    if mode is DateMode.NEWEST:
        view = view.sort_values("ts", ascending=False, kind="stable", na_position="last")
    elif mode is DateMode.OLDEST:
        view = view.sort_values("ts", ascending=True, kind="stable", na_position="last")

    result = tuple(rows[i] for i in view.index)

    logger.debug(
        "criteria_applied",
        extra={
            "n_source": len(rows),
            "n_filtered": len(result),
            "type": criteria.type,
            "status": criteria.status,
            "date_mode": mode.value,
        },
    )
    return result
