"""Overview page — year/measure filters, KPI strip and the six breakdown charts."""
from dash import html, dcc
import dash_bootstrap_components as dbc
import plotly.graph_objects as go

from superstore_dashboard.theme import *
from superstore_dashboard.components.kpi import kpi_pill
from superstore_dashboard.components.cards import section, make_chart, error_panel
from superstore_dashboard import data_state as ds

CHART_IDS = (
    "chart-monthly",
    "chart-category",
    "chart-sub-category",
    "chart-segment",
    "chart-ship-mode",
    "chart-state",
)


def _bar_colors(values, measure):
    """Losses show red on profit charts; everything else uses the measure color."""
    base = MEASURE_COLORS[measure]
    if measure != "profit":
        return base
    return [RED if v < 0 else base for v in values]


# ── Figures ──────────────────────────────────────────────────────────────────

def monthly_figure(series, measure):
    label = MEASURE_LABELS[measure]
    fig = go.Figure(go.Scatter(
        x=list(series.keys()), y=list(series.values()),
        mode="lines+markers", name=label,
        line=dict(color=MEASURE_COLORS[measure], width=2),
    ))
    make_chart(fig, 340)
    fig.update_layout(title=f"Monthly {label}", showlegend=False, xaxis_type="category")
    return fig


def bar_figure(breakdown, measure, title, horizontal=False, height=360):
    keys, values = list(breakdown.keys()), list(breakdown.values())
    if horizontal:
        bar = go.Bar(x=values, y=keys, orientation="h", marker_color=_bar_colors(values, measure))
    else:
        bar = go.Bar(x=keys, y=values, marker_color=_bar_colors(values, measure))
    fig = go.Figure(bar)
    make_chart(fig, height)
    fig.update_layout(title=title, showlegend=False)
    if horizontal:
        # largest first, top to bottom
        fig.update_yaxes(autorange="reversed")
    return fig


def pie_figure(breakdown, measure, title):
    fig = go.Figure(go.Pie(
        labels=list(breakdown.keys()),
        # pie slices can't be negative; a loss-making segment shows as zero
        values=[max(v, 0) for v in breakdown.values()],
        marker=dict(colors=SEGMENT_COLORS),
        hole=0.4, textinfo="label+percent",
    ))
    make_chart(fig, 360)
    fig.update_layout(title=title)
    return fig


def build_figures(bundle, measure, top_n_states):
    """Figures in CHART_IDS order for one measure bundle."""
    label = MEASURE_LABELS[measure]
    return (
        monthly_figure(bundle["monthly"], measure),
        bar_figure(bundle["by_category"], measure, f"{label} by Category"),
        bar_figure(bundle["by_sub_category"], measure, f"{label} by Sub-Category",
                   horizontal=True, height=480),
        pie_figure(bundle["by_segment"], measure, f"{label} by Segment"),
        bar_figure(bundle["by_ship_mode"], measure, f"{label} by Ship Mode"),
        bar_figure(bundle["by_state"], measure, f"Top {top_n_states} States by {label}",
                   horizontal=True, height=480),
    )


def kpi_strip(payload, measure):
    metrics = payload["metrics"]
    sales = metrics["sales"]["total"]
    profit = metrics["profit"]["total"]
    margin = (profit / sales * 100) if sales else 0
    scope = "All years" if payload["selected_year"] is None else str(payload["selected_year"])
    return html.Div([
        kpi_pill("sales", ds.money(sales), f"{scope} • {payload['record_count']:,} line items",
                 active=measure == "sales"),
        kpi_pill("profit", ds.money(profit), f"{margin:.1f}% margin",
                 active=measure == "profit", color=RED if profit < 0 else None),
        kpi_pill("quantity", f"{metrics['quantity']['total']:,.0f}", "units sold",
                 active=measure == "quantity"),
    ], style={"display": "flex", "gap": "12px", "flexWrap": "wrap", "marginBottom": "16px"})


# ── Layout ───────────────────────────────────────────────────────────────────

def _controls(years):
    year_options = [{"label": "All Years", "value": "all"}]
    year_options += [{"label": str(y), "value": str(y)} for y in years]
    return dbc.Row([
        dbc.Col([
            html.Label("Year", style={"color": GRAY, "fontSize": "12px"}),
            dcc.Dropdown(id="year-filter", options=year_options, value="all",
                         clearable=False, style={"color": "#000000"}),
        ], md=3),
        dbc.Col([
            html.Label("Measure", style={"color": GRAY, "fontSize": "12px"}),
            dbc.RadioItems(
                id="measure-filter",
                options=[{"label": MEASURE_LABELS[m], "value": m} for m in ds.MEASURE_FIELDS],
                value="sales", inline=True,
            ),
        ], md=6),
    ], className="mb-3")


def _graph(chart_id):
    return dcc.Graph(id=chart_id, config={"displayModeBar": False})


def layout(config):
    """Build the Overview page."""
    try:
        dataset = ds.get_dataset(config)
    except ds.DataLoadError as exc:
        return error_panel(str(exc))

    return html.Div([
        _controls(dataset.years),
        html.Div(id="kpi-strip"),

        section("Trend", _graph("chart-monthly"), color=CYAN),
        dbc.Row([
            dbc.Col(section("Category", _graph("chart-category"), color=BLUE), md=6),
            dbc.Col(section("Segment", _graph("chart-segment"), color=PURPLE), md=6),
        ]),
        dbc.Row([
            dbc.Col(section("Sub-Category", _graph("chart-sub-category"), color=TEAL), md=6),
            dbc.Col(section("States", _graph("chart-state"), color=ORANGE), md=6),
        ]),
        section("Ship Mode", _graph("chart-ship-mode"), color=PINK),
    ])
