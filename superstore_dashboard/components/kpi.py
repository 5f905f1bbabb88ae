"""Measure KPI pills for the overview strip."""
from dash import html
import dash_bootstrap_components as dbc
from superstore_dashboard.theme import *


def measure_badge(measure, color):
    """Round badge carrying the measure's glyph, tinted with ``color``."""
    return html.Div(MEASURE_ICONS[measure], className="kpi-badge", style={
        "width": "36px", "height": "36px", "borderRadius": "50%", "flexShrink": "0",
        "display": "inline-flex", "alignItems": "center", "justifyContent": "center",
        "background": f"{color}22", "border": f"2px solid {color}",
        "color": color, "fontSize": "15px", "fontWeight": "bold",
    })


def kpi_pill(measure, value, subtitle="", active=False, color=None):
    """Total for one measure. The pill for the charted measure is outlined.

    ``color`` overrides the measure color, e.g. red for a loss.
    """
    color = color or MEASURE_COLORS[measure]
    text = [
        html.Div(MEASURE_LABELS[measure], style={"color": GRAY, "fontSize": "11px", "fontWeight": "600",
                                                  "letterSpacing": "1.2px", "textTransform": "uppercase"}),
        html.Div(value, style={"color": WHITE, "fontSize": "26px", "fontWeight": "bold",
                                "fontFamily": "monospace", "marginTop": "3px"}),
    ]
    if subtitle:
        text.append(html.Div(subtitle, style={"color": DARKGRAY, "fontSize": "11px", "marginTop": "2px"}))

    style = {"borderLeft": f"4px solid {color}", "flex": "1", "minWidth": "150px"}
    if active:
        style["boxShadow"] = f"0 0 0 1px {color}88"
    return dbc.Card(
        dbc.CardBody([measure_badge(measure, color), html.Div(text, style={"marginLeft": "12px"})],
                     style={"display": "flex", "alignItems": "center", "padding": "14px 18px"}),
        style=style,
        className="kpi-pill kpi-pill-active" if active else "kpi-pill",
    )
