"""
Static export of the dashboard payload as JSON.
Run:  python -m superstore_dashboard.export --year 2022 --out summary.json
"""

import argparse
import json
import sys

from superstore_dashboard import data_state as ds
from superstore_dashboard.config import load_config
from superstore_dashboard.summary import build_dashboard_payload


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Aggregate the sales CSV and write the dashboard payload as JSON."
    )
    parser.add_argument(
        "--year",
        default="all",
        help="Year to summarise, or 'all' (default).",
    )
    parser.add_argument(
        "--data",
        default=None,
        help="Path to the source CSV (overrides SUPERSTORE_CSV).",
    )
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help="Number of states kept in the state breakdown (overrides TOP_N_STATES).",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Output file. Writes to stdout when omitted.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.top_n is not None and args.top_n < 0:
        print("--top-n must be >= 0", file=sys.stderr)
        return 2
    try:
        year = ds.parse_year_selection(args.year)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    config = load_config().with_overrides(data_path=args.data, top_n_states=args.top_n)
    try:
        dataset = ds.load_dataset(config)
    except ds.DataLoadError as exc:
        print(f"Export failed: {exc}", file=sys.stderr)
        return 1

    text = json.dumps(build_dashboard_payload(dataset, year, config.top_n_states), indent=2)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {args.out} ({dataset.skipped} rows skipped)")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
