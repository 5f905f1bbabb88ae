"""
aggregations.py — Group-by-sum over sales records.

Every function takes either a sequence of Records or a frame built by
records_frame(), so a caller computing many aggregates can build the frame
once. Results are plain dicts of str → float, safe to serialise.
"""

from itertools import islice
from typing import Dict

import pandas as pd

from superstore_dashboard.data_state import MEASURE_FIELDS, TEXT_FIELDS, UNKNOWN

DIMENSIONS = ("category", "sub_category", "segment", "ship_mode", "state", "region")
FRAME_COLUMNS = ("month", "year") + TEXT_FIELDS + MEASURE_FIELDS


def records_frame(records) -> pd.DataFrame:
    """One row per record with the month bucket, year, dimensions and measures."""
    if isinstance(records, pd.DataFrame):
        return records
    rows = [
        (r.month, r.year, r.ship_mode, r.segment, r.state, r.region,
         r.category, r.sub_category, r.sales, r.profit, r.quantity)
        for r in records
    ]
    df = pd.DataFrame(rows, columns=list(FRAME_COLUMNS))
    return df.astype({m: "float64" for m in MEASURE_FIELDS})


def _check_measure(measure):
    if measure not in MEASURE_FIELDS:
        raise ValueError(f"Unknown measure {measure!r}; expected one of {', '.join(MEASURE_FIELDS)}")


def _as_dict(series) -> Dict[str, float]:
    return {str(k): float(v) for k, v in series.items()}


def total(records, measure) -> float:
    _check_measure(measure)
    df = records_frame(records)
    if df.empty:
        return 0.0
    return float(df[measure].sum())


def monthly_series(records, measure) -> Dict[str, float]:
    """Measure summed per "YYYY-MM" bucket, oldest month first."""
    _check_measure(measure)
    df = records_frame(records)
    if df.empty:
        return {}
    # "YYYY-MM" keys sort chronologically as plain strings
    return _as_dict(df.groupby("month", sort=False)[measure].sum().sort_index())


def group_breakdown(records, key_field, measure) -> Dict[str, float]:
    """Measure summed per value of key_field, largest first.

    Blank values are grouped under "Unknown". Equal sums keep the order in
    which their groups were first seen.
    """
    _check_measure(measure)
    if key_field not in DIMENSIONS:
        raise ValueError(f"Unknown dimension {key_field!r}; expected one of {', '.join(DIMENSIONS)}")
    df = records_frame(records)
    if df.empty:
        return {}
    keys = df[key_field].fillna("").astype(str).str.strip().replace("", UNKNOWN)
    sums = df[measure].groupby(keys, sort=False).sum()
    return _as_dict(sums.sort_values(ascending=False, kind="stable"))


def top_n(breakdown, n) -> Dict[str, float]:
    """First n entries of an already-sorted breakdown, order untouched."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if len(breakdown) <= n:
        return dict(breakdown)
    return dict(islice(breakdown.items(), n))
