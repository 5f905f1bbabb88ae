import json
import os
import tempfile
import unittest
from unittest import mock

import dash_bootstrap_components as dbc
import pandas as pd

from superstore_dashboard import data_state as ds
from superstore_dashboard.app import create_app
from superstore_dashboard.callbacks.dashboard_cb import render_dashboard
from superstore_dashboard.callbacks.navigation_cb import render_page
from superstore_dashboard.config import DashboardConfig
from superstore_dashboard.components.kpi import kpi_pill
from superstore_dashboard.pages.overview import CHART_IDS
from superstore_dashboard.theme import MEASURE_COLORS, MEASURE_ICONS, RED

from factories import csv_row, write_csv


def _rows():
    return [
        csv_row("2022-01-05", sales="100", profit="20", category="Technology", state="Texas"),
        csv_row("2022-02-10", sales="50", profit="-5", category="Furniture", state="Ohio"),
        csv_row("2023-01-20", sales="200", profit="40", category="Technology", state="Utah"),
        csv_row("garbage", sales="999", category="Furniture", state="Maine"),
        csv_row("2023-03-02", sales="75", profit="15", category="Office Supplies", state="Texas"),
    ]


class AppTestCase(unittest.TestCase):
    def setUp(self) -> None:
        ds.clear_cache()
        self._tmp = tempfile.TemporaryDirectory()
        self.config = DashboardConfig(data_path=write_csv(self._tmp.name, _rows()), top_n_states=2)
        self.missing = DashboardConfig(data_path=os.path.join(self._tmp.name, "absent.csv"))

    def tearDown(self) -> None:
        ds.clear_cache()
        self._tmp.cleanup()


class ApiTests(AppTestCase):
    def _get(self, config, url):
        client = create_app(config).server.test_client()
        resp = client.get(url)
        return resp.status_code, json.loads(resp.get_data(as_text=True))

    def test_summary_all_years(self) -> None:
        status, body = self._get(self.config, "/api/summary")
        self.assertEqual(status, 200)
        self.assertEqual(body["years"], [2022, 2023])
        self.assertIsNone(body["selected_year"])
        self.assertEqual(body["record_count"], 4)
        sales = body["metrics"]["sales"]
        self.assertEqual(sales["total"], 425.0)
        self.assertEqual(list(sales["by_category"]), ["Technology", "Office Supplies", "Furniture"])
        self.assertEqual(list(sales["by_state"].items()), [("Utah", 200.0), ("Texas", 175.0)])

    def test_summary_single_year(self) -> None:
        status, body = self._get(self.config, "/api/summary?year=2022")
        self.assertEqual(status, 200)
        self.assertEqual(body["selected_year"], 2022)
        self.assertEqual(body["metrics"]["profit"]["monthly"], {"2022-01": 20.0, "2022-02": -5.0})

    def test_malformed_year(self) -> None:
        status, body = self._get(self.config, "/api/summary?year=abc")
        self.assertEqual(status, 400)
        self.assertIn("abc", body["error"])

    def test_missing_source(self) -> None:
        status, body = self._get(self.missing, "/api/summary")
        self.assertEqual(status, 500)
        self.assertIn("Data source not found", body["error"])

    def test_row_with_extra_fields_is_dropped(self) -> None:
        rows = _rows()
        rows.insert(1, csv_row("2022-01-07", sales="500", state="Ohio") + ["stray"])
        config = DashboardConfig(data_path=write_csv(self._tmp.name, rows, name="ragged.csv"))
        status, body = self._get(config, "/api/summary")
        self.assertEqual(status, 200)
        self.assertEqual(body["metrics"]["sales"]["total"], 425.0)

    def test_unparseable_source_is_a_json_error(self) -> None:
        with mock.patch.object(ds.pd, "read_csv", side_effect=pd.errors.ParserError("Error tokenizing data")):
            status, body = self._get(self.config, "/api/summary")
        self.assertEqual(status, 500)
        self.assertIn("could not be parsed", body["error"])

    def test_reload(self) -> None:
        status, body = self._get(self.config, "/api/reload")
        self.assertEqual(status, 200)
        self.assertEqual(body, {"records": 4, "skipped": 1, "years": [2022, 2023]})


class PageTests(AppTestCase):
    def test_render_dashboard_outputs(self) -> None:
        outputs = render_dashboard(self.config, "2023", "sales")
        self.assertEqual(len(outputs), 1 + len(CHART_IDS))
        monthly, category, _, segment, _, state = outputs[1:]
        self.assertEqual(list(monthly.data[0].x), ["2023-01", "2023-03"])
        self.assertEqual(list(monthly.data[0].y), [200.0, 75.0])
        self.assertEqual(list(category.data[0].x), ["Technology", "Office Supplies"])
        self.assertEqual(list(segment.data[0].labels), ["Consumer"])
        # horizontal bar: states on the y axis, capped at top_n_states
        self.assertEqual(list(state.data[0].y), ["Utah", "Texas"])

    def test_profit_losses_are_colored(self) -> None:
        outputs = render_dashboard(self.config, "all", "profit")
        category = outputs[2]
        colors = dict(zip(category.data[0].x, category.data[0].marker.color))
        self.assertNotEqual(colors["Furniture"], colors["Technology"])

    def test_unknown_measure_falls_back_to_sales(self) -> None:
        outputs = render_dashboard(self.config, "all", "bogus")
        self.assertEqual(outputs[1].layout.title.text, "Monthly Sales")

    def test_render_dashboard_raises_on_missing_source(self) -> None:
        with self.assertRaises(ds.MissingSourceError):
            render_dashboard(self.missing, "all", "sales")

    def test_overview_shows_alert_instead_of_charts(self) -> None:
        page = render_page("/", self.missing)
        self.assertIsInstance(page, dbc.Alert)

    def test_data_source_page_renders(self) -> None:
        page = render_page("/data", self.config)
        self.assertNotIsInstance(page, dbc.Alert)

    def test_unknown_path(self) -> None:
        page = render_page("/nowhere", self.config)
        self.assertIn("404", page.children[0].children)


class KpiTests(AppTestCase):
    def test_strip_marks_the_charted_measure(self) -> None:
        strip = render_dashboard(self.config, "all", "profit")[0]
        classes = [pill.className for pill in strip.children]
        self.assertEqual(classes, ["kpi-pill", "kpi-pill kpi-pill-active", "kpi-pill"])

    def test_badges_carry_the_measure_glyph(self) -> None:
        strip = render_dashboard(self.config, "all", "sales")[0]
        badges = [pill.children.children[0].children for pill in strip.children]
        self.assertEqual(badges, [MEASURE_ICONS[m] for m in ds.MEASURE_FIELDS])

    def test_color_override(self) -> None:
        pill = kpi_pill("profit", "-$5.00", color=RED)
        badge = pill.children.children[0]
        self.assertEqual(badge.style["border"], f"2px solid {RED}")
        self.assertEqual(pill.style["borderLeft"], f"4px solid {RED}")
        default = kpi_pill("quantity", "3")
        self.assertEqual(default.style["borderLeft"], f"4px solid {MEASURE_COLORS['quantity']}")
        self.assertNotIn("boxShadow", default.style)


if __name__ == "__main__":
    unittest.main()
