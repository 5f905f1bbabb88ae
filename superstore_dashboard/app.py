"""
Superstore Sales Dashboard
Run:  python -m superstore_dashboard.app
Open: http://127.0.0.1:8050
"""

import json
import logging
import sys

import dash
from dash import html, dcc
import dash_bootstrap_components as dbc
from flask import Response, request

from superstore_dashboard import data_state as ds
from superstore_dashboard.config import load_config
from superstore_dashboard.summary import build_dashboard_payload

# ── Sidebar navigation ──────────────────────────────────────────────────────
NAV_ITEMS = [
    {"label": "Overview",    "icon": "\U0001f4ca", "value": "/"},
    "---",
    {"label": "Data Source", "icon": "\U0001f4c4", "value": "/data"},
]


def _build_sidebar():
    nav_links = []
    for item in NAV_ITEMS:
        if item == "---":
            nav_links.append(html.Hr(className="sidebar-divider"))
        else:
            nav_links.append(
                dbc.NavLink(
                    [html.Span(item["icon"], className="nav-icon"), item["label"]],
                    href=item["value"],
                    active="exact",
                )
            )

    return html.Div([
        # Brand
        html.Div([
            html.H4("SUPERSTORE"),
            html.Small("Sales Dashboard"),
        ], className="sidebar-brand"),

        # Nav
        dbc.Nav(nav_links, vertical=True, pills=True),
    ], className="sidebar")


def _subtitle(config):
    try:
        dataset = ds.get_dataset(config)
    except ds.DataLoadError:
        return "Data unavailable"
    years = f"{dataset.years[0]} — {dataset.years[-1]}" if dataset.years else "no years"
    return f"{years}  |  {len(dataset.records):,} line items  |  Top {config.top_n_states} states"


def _json_response(payload, status=200):
    # json.dumps keeps the breakdown ordering; Flask's jsonify may sort keys
    return Response(json.dumps(payload), status=status, mimetype="application/json")


# ── API routes ───────────────────────────────────────────────────────────────
def _register_api(server, config):
    @server.route("/api/summary")
    def api_summary():
        try:
            year = ds.parse_year_selection(request.args.get("year"))
        except ValueError as exc:
            return _json_response({"error": str(exc)}, 400)
        try:
            dataset = ds.get_dataset(config)
        except ds.DataLoadError as exc:
            return _json_response({"error": str(exc)}, 500)
        return _json_response(build_dashboard_payload(dataset, year, config.top_n_states))

    @server.route("/api/reload", methods=["GET", "POST"])
    def api_reload():
        try:
            dataset = ds.reload_dataset(config)
        except ds.DataLoadError as exc:
            return _json_response({"error": str(exc)}, 500)
        return _json_response({
            "records": len(dataset.records),
            "skipped": dataset.skipped,
            "years": list(dataset.years),
        })


# ── App factory ──────────────────────────────────────────────────────────────
def create_app(config):
    app = dash.Dash(
        __name__,
        suppress_callback_exceptions=True,
        external_stylesheets=[
            dbc.themes.DARKLY,
            "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap",
        ],
        title="Superstore Sales Dashboard",
    )

    def serve_layout():
        return html.Div([
            dcc.Location(id="url", refresh=False),

            # Sidebar
            _build_sidebar(),

            # Main content area
            html.Div([
                # Header
                html.Div([
                    html.H3("SUPERSTORE SALES"),
                    html.Div(_subtitle(config), className="header-subtitle", id="app-header-content"),
                ], className="app-header"),

                # Page content (rendered by routing callback)
                html.Div(id="page-content"),
            ], className="main-content"),
        ])

    app.layout = serve_layout

    # Import callback modules AFTER app is created so they can reference `app`
    from superstore_dashboard.callbacks import navigation_cb, dashboard_cb
    navigation_cb.register_callbacks(app, config)
    dashboard_cb.register_callbacks(app, config)

    _register_api(app.server, config)
    return app


config = load_config()
app = create_app(config)
server = app.server  # For deployment (Gunicorn)


# ── Run ──────────────────────────────────────────────────────────────────────
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        dataset = ds.get_dataset(config)
    except ds.DataLoadError as exc:
        sys.exit(f"Cannot start dashboard: {exc}")

    print(f"\n  Superstore Sales Dashboard")
    print(f"  http://127.0.0.1:{config.port}")
    print(f"  {len(dataset.records)} records from {dataset.source}"
          f" ({dataset.skipped} skipped)\n")
    app.run(debug=False, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
