from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from admin_panel.pages.forms import ALL_FIELDS, EMPTY_VALUES, INPUT_FIELDS, submission_summary
from admin_panel.services.notifications import Notifier
from admin_panel.ui.callbacks.callbacks_utils import notification_payload
from admin_panel.ui.ids import IDs, feedback_id
from admin_panel.validation.errors import ValidationError
from admin_panel.validation.form_validation import validate_profile_form

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig

logger = logging.getLogger(__name__)

VALUE_PROPS = {
    "dob": "date",
    "terms": "value",
}

FORM_CONTROLS = {
    **ALL_FIELDS,
    "newsletter": IDs.Control.FORM_NEWSLETTER,
}


def _value_prop(name: str) -> str:
    return VALUE_PROPS.get(name, "value")


def register_forms_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    input_names = list(INPUT_FIELDS)
    all_names = list(ALL_FIELDS)
    control_names = list(FORM_CONTROLS)

    @app.callback(
        *[Output(INPUT_FIELDS[n], "invalid", allow_duplicate=True) for n in input_names],
        *[Output(feedback_id(ALL_FIELDS[n]), "children", allow_duplicate=True) for n in all_names],
        Output(IDs.Control.FORM_RESULT, "children", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.FORM_SUBMIT, "n_clicks"),
        *[State(FORM_CONTROLS[n], _value_prop(n)) for n in control_names],
        prevent_initial_call=True,
    )
    def submit_profile(n_clicks, *values):
        if not n_clicks:
            raise exceptions.PreventUpdate

        form_values = dict(zip(control_names, values))
        notifier = Notifier()
        try:
            cleaned = validate_profile_form(form_values)
        except ValidationError as e:
            errors = e.field_errors
            logger.info("Profile form rejected", extra={"fields": sorted(errors)})
            return (
                *[n in errors for n in input_names],
                *[errors.get(n, "") for n in all_names],
                dash.no_update,
                dash.no_update,
            )

        notifier.success("Form submitted successfully!")
        return (
            *[False] * len(input_names),
            *[""] * len(all_names),
            submission_summary(cleaned),
            notification_payload(notifier),
        )

    @app.callback(
        *[Output(FORM_CONTROLS[n], _value_prop(n)) for n in control_names],
        *[Output(INPUT_FIELDS[n], "invalid", allow_duplicate=True) for n in input_names],
        *[Output(feedback_id(ALL_FIELDS[n]), "children", allow_duplicate=True) for n in all_names],
        Output(IDs.Control.FORM_RESULT, "children", allow_duplicate=True),
        Input(IDs.Control.FORM_RESET, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_profile(n_clicks):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return (
            *[EMPTY_VALUES[n] for n in control_names],
            *[False] * len(input_names),
            *[""] * len(all_names),
            None,
        )
