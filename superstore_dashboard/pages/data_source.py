"""Data Source page — where the numbers come from and what was dropped on load."""
from dash import html
import dash_bootstrap_components as dbc

from superstore_dashboard.theme import *
from superstore_dashboard.components.cards import section, info_row, error_panel
from superstore_dashboard import data_state as ds


def _format_list(formats):
    return html.Ol([
        html.Li(html.Code(fmt), style={"color": WHITE, "fontSize": "12px"})
        for fmt in formats
    ], style={"margin": "0", "paddingLeft": "20px"})


def layout(config):
    """Build the Data Source page."""
    try:
        dataset = ds.get_dataset(config)
    except ds.DataLoadError as exc:
        return error_panel(str(exc))

    years = ", ".join(str(y) for y in dataset.years)
    skipped_color = ORANGE if dataset.skipped else GREEN

    return html.Div([
        section("Source", [
            info_row("File", dataset.source),
            info_row("Records loaded", f"{len(dataset.records):,}", color=GREEN),
            info_row("Rows skipped (unparseable order date)", f"{dataset.skipped:,}", color=skipped_color),
            info_row("Years", years),
            info_row("Top-N states", str(config.top_n_states)),
        ], color=CYAN),

        section("Date formats (tried in order)", [
            _format_list(config.date_formats),
            html.P("Anything no format matches is handed to a permissive parser before the row is dropped.",
                   style={"color": GRAY, "fontSize": "12px", "margin": "8px 0 0 0"}),
            dbc.Alert(
                "Ambiguous dates such as 03/04/2022 take the first format that matches. "
                "With month-first formats listed first that is March 4th, not April 3rd. "
                "Reorder DATE_FORMATS if the source file is day-first.",
                color="warning", style={"marginTop": "12px", "fontSize": "12px"},
            ),
        ], color=ORANGE),
    ])
