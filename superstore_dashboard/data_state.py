"""
data_state.py — Record loading, year filtering and the process-wide dataset cache.
This is the single source of truth for dashboard data.
Pages, callbacks, the API and the exporter all go through get_dataset().
"""

import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from superstore_dashboard.dates import parse_date

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

# Header name (lower-cased, trimmed) → Record field. Checked in this order.
REQUIRED_COLUMNS = {
    "order date": "order_date",
    "ship mode": "ship_mode",
    "segment": "segment",
    "state": "state",
    "region": "region",
    "category": "category",
    "sub-category": "sub_category",
    "sales": "sales",
    "quantity": "quantity",
    "profit": "profit",
}
TEXT_FIELDS = ("ship_mode", "segment", "state", "region", "category", "sub_category")
MEASURE_FIELDS = ("sales", "profit", "quantity")


# ══════════════════════════════════════════════════════════════════════════════
#  ERRORS
# ══════════════════════════════════════════════════════════════════════════════

class DataLoadError(ValueError):
    """A structural problem with the data source; nothing can be rendered."""


class MissingSourceError(DataLoadError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Data source not found: {path}")


class EmptyHeaderError(DataLoadError):
    def __init__(self):
        super().__init__("Data source has no header row")


class MissingColumnError(DataLoadError):
    def __init__(self, column):
        self.column = column
        super().__init__(f"Missing column: {column}")


class NoDataError(DataLoadError):
    def __init__(self):
        super().__init__("No data: no rows with a parseable order date")


class MalformedSourceError(DataLoadError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Data source could not be parsed: {path} ({reason})")


# ══════════════════════════════════════════════════════════════════════════════
#  RECORDS
# ══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Record:
    order_date: date
    ship_mode: str
    segment: str
    state: str
    region: str
    category: str
    sub_category: str
    sales: float
    profit: float
    quantity: float

    @property
    def year(self) -> int:
        return self.order_date.year

    @property
    def month(self) -> str:
        return self.order_date.strftime("%Y-%m")


@dataclass(frozen=True)
class LoadResult:
    records: Tuple[Record, ...]
    skipped: int = 0


@dataclass(frozen=True)
class Dataset:
    source: str
    records: Tuple[Record, ...]
    skipped: int
    years: Tuple[int, ...]


# ══════════════════════════════════════════════════════════════════════════════
#  UTILITY FUNCTIONS
# ══════════════════════════════════════════════════════════════════════════════

def parse_number(val) -> float:
    """Permissive numeric coercion: anything unreadable becomes 0.0."""
    if val is None or (not isinstance(val, str) and pd.isna(val)):
        return 0.0
    val = str(val).strip().replace("$", "").replace(",", "")
    try:
        num = float(val)
    except ValueError:
        return 0.0
    return num if np.isfinite(num) else 0.0


def money(val):
    """Format a number as $X,XXX.XX (convenience for templates)."""
    if val < 0:
        return f"-${abs(val):,.2f}"
    return f"${val:,.2f}"


def _cell(row, idx):
    if idx >= len(row):
        return ""
    val = row[idx]
    if val is None or (not isinstance(val, str) and pd.isna(val)):
        return ""
    return str(val)


def _header_index(header: Sequence[str]) -> Dict[str, int]:
    index = {}
    for pos, name in enumerate(header):
        key = str(name).strip().lower()
        # first occurrence wins for duplicated headers
        index.setdefault(key, pos)
    return index


# ══════════════════════════════════════════════════════════════════════════════
#  LOADING
# ══════════════════════════════════════════════════════════════════════════════

def load_records(header: Sequence[str], rows, date_formats: Sequence[str]) -> LoadResult:
    """Turn a header + data rows into Records.

    Raises EmptyHeaderError, MissingColumnError or NoDataError. Rows whose
    order date cannot be parsed are skipped and counted, never raised.
    """
    if not header or not any(str(h).strip() for h in header):
        raise EmptyHeaderError()

    index = _header_index(header)
    for column in REQUIRED_COLUMNS:
        if column not in index:
            raise MissingColumnError(column)
    cols = {fld: index[name] for name, fld in REQUIRED_COLUMNS.items()}

    records: List[Record] = []
    skipped = 0
    for line_no, row in enumerate(rows, start=2):
        raw_date = _cell(row, cols["order_date"])
        order_date = parse_date(raw_date, date_formats)
        if order_date is None:
            skipped += 1
            logger.debug("Skipping row %d: unparseable order date %r", line_no, raw_date)
            continue
        values = {fld: _cell(row, cols[fld]).strip() for fld in TEXT_FIELDS}
        values.update({fld: parse_number(_cell(row, cols[fld])) for fld in MEASURE_FIELDS})
        records.append(Record(order_date=order_date, **values))

    if not records:
        raise NoDataError()
    return LoadResult(records=tuple(records), skipped=skipped)


def read_source(path) -> Tuple[List[str], List[list]]:
    """Read a delimited file into (header, rows), every field as text."""
    if not path or not os.path.isfile(path):
        raise MissingSourceError(path)

    def _read(encoding):
        # rows with extra fields are dropped, never shifted under the wrong header
        return pd.read_csv(path, dtype=str, keep_default_na=False, encoding=encoding,
                           skipinitialspace=True, index_col=False, on_bad_lines="skip")

    try:
        try:
            df = _read("utf-8")
        except UnicodeDecodeError:
            # Superstore exports are usually Windows-1252 / Latin-1
            df = _read("latin-1")
    except pd.errors.EmptyDataError:
        raise EmptyHeaderError() from None
    except pd.errors.ParserError as exc:
        raise MalformedSourceError(path, str(exc).strip()) from None

    return [str(c) for c in df.columns], df.values.tolist()


def available_years(records: Sequence[Record]) -> List[int]:
    return sorted({r.year for r in records})


def filter_by_year(records: Sequence[Record], year: Optional[int]) -> List[Record]:
    """All records when year is None, otherwise only that year's records."""
    if year is None:
        return list(records)
    return [r for r in records if r.year == year]


def parse_year_selection(value) -> Optional[int]:
    """Normalise a year parameter: None/""/"all" → None, "2022" → 2022."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid year: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text == "" or text.lower() == "all":
        return None
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid year: {value!r}") from None


def load_dataset(config) -> Dataset:
    header, rows = read_source(config.data_path)
    result = load_records(header, rows, config.date_formats)
    logger.info("Loaded %d records from %s (%d rows skipped)",
                len(result.records), config.data_path, result.skipped)
    return Dataset(
        source=config.data_path,
        records=result.records,
        skipped=result.skipped,
        years=tuple(available_years(result.records)),
    )


# ══════════════════════════════════════════════════════════════════════════════
#  PROCESS-WIDE CACHE
# ══════════════════════════════════════════════════════════════════════════════

_DATASETS: Dict[tuple, Dataset] = {}


def _cache_key(config):
    # the same file read with a different date try-order is a different dataset
    return os.path.abspath(config.data_path), tuple(config.date_formats)


def get_dataset(config) -> Dataset:
    """Cached load of config.data_path per date try-order. Failed loads are not cached."""
    key = _cache_key(config)
    if key not in _DATASETS:
        _DATASETS[key] = load_dataset(config)
    return _DATASETS[key]


def reload_dataset(config) -> Dataset:
    _DATASETS.pop(_cache_key(config), None)
    return get_dataset(config)


def clear_cache():
    _DATASETS.clear()
