"""
summary.py — Packages per-measure aggregates into the payload front ends consume.

The payload is nested dicts/lists of str, int, float and None only; the
Dash page, the JSON API and the static exporter all read the same shape.
"""

from superstore_dashboard import aggregations as agg
from superstore_dashboard.config import DEFAULT_TOP_N_STATES
from superstore_dashboard.data_state import MEASURE_FIELDS, filter_by_year

# Payload key → grouping field
BREAKDOWNS = {
    "by_category": "category",
    "by_sub_category": "sub_category",
    "by_segment": "segment",
    "by_ship_mode": "ship_mode",
    "by_state": "state",
}


def measure_bundle(frame, measure, top_n_states=DEFAULT_TOP_N_STATES):
    bundle = {
        "total": agg.total(frame, measure),
        "monthly": agg.monthly_series(frame, measure),
    }
    for key, field in BREAKDOWNS.items():
        bundle[key] = agg.group_breakdown(frame, field, measure)
    bundle["by_state"] = agg.top_n(bundle["by_state"], top_n_states)
    return bundle


def build_summary(records, top_n_states=DEFAULT_TOP_N_STATES):
    """{measure: {total, monthly, by_category, ..., by_state}} for every measure."""
    frame = agg.records_frame(records)
    return {m: measure_bundle(frame, m, top_n_states) for m in MEASURE_FIELDS}


def build_dashboard_payload(dataset, year=None, top_n_states=DEFAULT_TOP_N_STATES):
    """Summary of one year (or all years) plus what a year selector needs."""
    records = filter_by_year(dataset.records, year)
    return {
        "years": list(dataset.years),
        "selected_year": year,
        "record_count": len(records),
        "metrics": build_summary(records, top_n_states),
    }
