"""
src/callbacks/navigation.py — navbar collapse on small screens.
"""
from dash import Input, Output, State


def register(app) -> None:
    """Register navbar callbacks."""

    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open if n_clicks else is_open
