"""Builders shared by the test modules."""
import csv
import os
from datetime import date

from superstore_dashboard.data_state import Record

HEADER = [
    "Row ID", "Order Date", "Ship Mode", "Segment", "State", "Region",
    "Category", "Sub-Category", "Sales", "Quantity", "Profit",
]


def make_record(order_date=date(2022, 1, 5), sales=0.0, profit=0.0, quantity=1.0,
                category="Tech", sub_category="Phones", segment="Consumer",
                ship_mode="Standard Class", state="Texas", region="Central"):
    return Record(
        order_date=order_date,
        ship_mode=ship_mode,
        segment=segment,
        state=state,
        region=region,
        category=category,
        sub_category=sub_category,
        sales=sales,
        profit=profit,
        quantity=quantity,
    )


def csv_row(order_date, sales="100", quantity="1", profit="10", category="Tech",
            sub_category="Phones", segment="Consumer", ship_mode="Standard Class",
            state="Texas", region="Central", row_id="1"):
    """A data row aligned with HEADER."""
    return [row_id, order_date, ship_mode, segment, state, region,
            category, sub_category, sales, quantity, profit]


def write_csv(directory, rows, header=HEADER, name="sales.csv", encoding="utf-8"):
    path = os.path.join(directory, name)
    with open(path, "w", newline="", encoding=encoding) as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)
    return path
