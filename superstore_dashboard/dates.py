"""Order-date parsing: configured formats first, then a permissive fallback."""
import warnings
from datetime import date, datetime
from typing import Optional, Sequence

import pandas as pd


def _loose_parse(text) -> Optional[date]:
    try:
        with warnings.catch_warnings():
            # pandas warns when it has to guess the format; guessing is the point here
            warnings.simplefilter("ignore", UserWarning)
            ts = pd.to_datetime(text)
    except (ValueError, TypeError, OverflowError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts.date()


def parse_date(raw, formats: Sequence[str]) -> Optional[date]:
    """Return the date in ``raw``, or None when nothing can read it.

    Formats are tried in the given order and the first match wins, so an
    ambiguous value like "03/04/2022" depends on whether a month-first or
    day-first format is listed first. Only values no format matches pay
    for the pandas fallback.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None

    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return _loose_parse(text)
