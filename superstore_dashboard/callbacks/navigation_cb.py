"""Page routing callback — renders the correct page based on URL."""
from dash import html, Input, Output


def register_callbacks(app, config):
    @app.callback(
        Output("page-content", "children"),
        Input("url", "pathname"),
    )
    def route_page(pathname):
        return render_page(pathname, config)


def render_page(pathname, config):
    if pathname == "/" or pathname is None:
        from superstore_dashboard.pages.overview import layout
        return layout(config)
    elif pathname == "/data":
        from superstore_dashboard.pages.data_source import layout
        return layout(config)
    else:
        return html.Div([
            html.H3("404 — Page Not Found", style={"color": "#e74c3c"}),
            html.P(f"No page at '{pathname}'"),
        ], style={"padding": "40px"})
