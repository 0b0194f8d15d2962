from __future__ import annotations

from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, exceptions

from admin_panel.pages.ui_components import TOAST_DEMOS
from admin_panel.services.notifications import Notifier
from admin_panel.ui.callbacks.callbacks_utils import notification_payload
from admin_panel.ui.ids import IDs
from admin_panel.validation.form_validation import parse_iso_date

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig

_DEMO_BY_LEVEL = {level: (title, message) for level, title, message in TOAST_DEMOS}


def register_ui_components_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.UI_DATE_LABEL, "children"),
        Input(IDs.Control.UI_DATE_PICKER, "date"),
    )
    def show_picked_date(value):
        picked = parse_iso_date(value)
        return picked.strftime("%B %d, %Y") if picked else "No date selected."

    @app.callback(
        Output(IDs.Control.UI_SLIDER_LABEL, "children"),
        Input(IDs.Control.UI_SLIDER, "value"),
    )
    def show_slider_value(value):
        return f"Value: {value}"

    @app.callback(
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.TOAST_DEMO, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def demo_toast(_clicks):
        trigger = dash.ctx.triggered_id
        if not isinstance(trigger, dict) or not any(t.get("value") for t in dash.ctx.triggered):
            raise exceptions.PreventUpdate

        title, message = _DEMO_BY_LEVEL[trigger["index"]]
        notifier = Notifier()
        notifier.publish(trigger["index"], message, title=title)
        return notification_payload(notifier)
