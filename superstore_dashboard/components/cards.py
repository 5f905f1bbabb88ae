"""Reusable card/section builders."""
from dash import html
import dash_bootstrap_components as dbc
from superstore_dashboard.theme import *


def section(title, children, color=ORANGE):
    """Titled section card with colored top border."""
    return dbc.Card([
        dbc.CardHeader(title, style={"color": color, "fontWeight": "bold", "fontSize": "16px",
                                      "borderBottom": f"2px solid {color}",
                                      "backgroundColor": "transparent", "padding": "12px 16px"}),
        dbc.CardBody(children, style={"padding": "16px"}),
    ], className="mb-3")


def info_row(label, value, color=WHITE):
    """Label / value line used on the Data Source page."""
    return html.Div([
        html.Span(label, style={"color": GRAY, "fontSize": "13px"}),
        html.Span(value, style={"color": color, "fontFamily": "monospace", "fontSize": "13px"}),
    ], style={"display": "flex", "justifyContent": "space-between",
              "padding": "4px 0", "borderBottom": "1px solid #ffffff10"})


def error_panel(message):
    """Full-width alert shown instead of the dashboard when data can't be loaded."""
    return dbc.Alert([
        html.H5("Dashboard unavailable", className="alert-heading"),
        html.P(message, style={"margin": "0", "fontFamily": "monospace"}),
    ], color="danger", style={"margin": "24px 0"})


def make_chart(fig, height=360, legend_h=True):
    """Apply consistent styling to a Plotly figure."""
    layout = {**CHART_LAYOUT, "height": height}
    if legend_h:
        layout["legend"] = dict(orientation="h", y=1.12, x=0.5, xanchor="center")
    fig.update_layout(**layout)
    return fig
