"""
Theme constants — colors, chart layout, Bootstrap overrides.
Import from here instead of hardcoding colors anywhere.
"""

# ── Color Palette ────────────────────────────────────────────────────────────
GREEN = "#2ecc71"
RED = "#e74c3c"
BLUE = "#3498db"
ORANGE = "#f39c12"
PURPLE = "#9b59b6"
TEAL = "#1abc9c"
PINK = "#e91e8f"
WHITE = "#ffffff"
GRAY = "#aaaaaa"
DARKGRAY = "#666666"
CYAN = "#00d4ff"

# ── Measure Colors / Labels ──────────────────────────────────────────────────
MEASURE_COLORS = {
    "sales": CYAN,
    "profit": GREEN,
    "quantity": ORANGE,
}

MEASURE_LABELS = {
    "sales": "Sales",
    "profit": "Profit",
    "quantity": "Quantity",
}

MEASURE_ICONS = {
    "sales": "$",
    "profit": "P",
    "quantity": "#",
}

SEGMENT_COLORS = [BLUE, ORANGE, PURPLE, TEAL, PINK, GRAY]

# ── Plotly Chart Layout ──────────────────────────────────────────────────────
CHART_LAYOUT = dict(
    template="plotly_dark",
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font={"color": WHITE},
    margin=dict(t=50, b=30, l=60, r=20),
)

