"""Overview callbacks — redraw KPIs and charts when the year or measure changes."""
from dash import Input, Output
import plotly.graph_objects as go

from superstore_dashboard import data_state as ds
from superstore_dashboard.components.cards import error_panel, make_chart
from superstore_dashboard.pages.overview import CHART_IDS, build_figures, kpi_strip
from superstore_dashboard.summary import build_dashboard_payload


def render_dashboard(config, year_value, measure):
    """(kpi strip, *figures) for the selected year and measure.

    DataLoadError propagates; the caller decides how to show it.
    """
    if measure not in ds.MEASURE_FIELDS:
        measure = "sales"
    dataset = ds.get_dataset(config)
    year = ds.parse_year_selection(year_value)
    payload = build_dashboard_payload(dataset, year, config.top_n_states)
    figures = build_figures(payload["metrics"][measure], measure, config.top_n_states)
    return (kpi_strip(payload, measure),) + figures


def _blank_figures():
    return tuple(make_chart(go.Figure()) for _ in CHART_IDS)


def register_callbacks(app, config):
    @app.callback(
        Output("kpi-strip", "children"),
        *[Output(chart_id, "figure") for chart_id in CHART_IDS],
        Input("year-filter", "value"),
        Input("measure-filter", "value"),
    )
    def update_dashboard(year_value, measure):
        try:
            return render_dashboard(config, year_value, measure)
        except (ds.DataLoadError, ValueError) as exc:
            return (error_panel(str(exc)),) + _blank_figures()
