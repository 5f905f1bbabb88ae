"""
config.py — Static dashboard configuration, read once at startup.

Values come from the environment (optionally seeded from a project-level
.env file) and are frozen into a DashboardConfig that is passed explicitly
to the loader, the assembler and the app factory.
"""

import os
from dataclasses import dataclass, field, replace

from dotenv import load_dotenv

# ── Paths ────────────────────────────────────────────────────────────────────
# BASE_DIR points to the project root (parent of superstore_dashboard/)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DATA_PATH = os.path.join(BASE_DIR, "data", "superstore.csv")

DEFAULT_TOP_N_STATES = 15
DEFAULT_PORT = 8050

# Month-first formats come before day-first ones, so "3/4/2022" reads as
# March 4th. Reorder DATE_FORMATS to change that.
DEFAULT_DATE_FORMATS = (
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d/%m/%Y",
    "%m-%d-%Y",
    "%d-%m-%Y",
    "%Y/%m/%d",
    "%m/%d/%y",
)


@dataclass(frozen=True)
class DashboardConfig:
    data_path: str = DEFAULT_DATA_PATH
    top_n_states: int = DEFAULT_TOP_N_STATES
    date_formats: tuple = field(default=DEFAULT_DATE_FORMATS)
    port: int = DEFAULT_PORT

    def with_overrides(self, **changes):
        """Copy with the given non-None fields replaced (used by the CLI)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _int_setting(name, default, minimum=0):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _date_formats_setting():
    raw = os.environ.get("DATE_FORMATS", "")
    formats = tuple(f.strip() for f in raw.split("|") if f.strip())
    return formats or DEFAULT_DATE_FORMATS


def load_config(env_file=None) -> DashboardConfig:
    """Build the configuration from the environment and the project .env."""
    load_dotenv(env_file or os.path.join(BASE_DIR, ".env"))

    data_path = os.environ.get("SUPERSTORE_CSV", "").strip() or DEFAULT_DATA_PATH
    return DashboardConfig(
        data_path=data_path,
        top_n_states=_int_setting("TOP_N_STATES", DEFAULT_TOP_N_STATES),
        date_formats=_date_formats_setting(),
        port=_int_setting("PORT", DEFAULT_PORT, minimum=1),
    )
