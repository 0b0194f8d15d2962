from __future__ import annotations

from datetime import date
from typing import Any, Dict

import dash_bootstrap_components as dbc
from dash import dcc, html

from admin_panel.core.base_page import BasePage
from admin_panel.ui.helpers import form_field
from admin_panel.ui.ids import IDs, feedback_id
from admin_panel.validation.form_validation import COUNTRIES, GENDERS

# Controls with an `invalid` prop; their FormFeedback shows automatically
INPUT_FIELDS = {
    "first_name": IDs.Control.FORM_FIRST_NAME,
    "last_name": IDs.Control.FORM_LAST_NAME,
    "email": IDs.Control.FORM_EMAIL,
    "phone": IDs.Control.FORM_PHONE,
    "country": IDs.Control.FORM_COUNTRY,
    "address": IDs.Control.FORM_ADDRESS,
}

# Date picker, radio group and checkbox: message only
MESSAGE_FIELDS = {
    "dob": IDs.Control.FORM_DOB,
    "gender": IDs.Control.FORM_GENDER,
    "terms": IDs.Control.FORM_TERMS,
}

ALL_FIELDS = {**INPUT_FIELDS, **MESSAGE_FIELDS}

# Reset values, in the order the reset callback writes them
EMPTY_VALUES = {
    "first_name": "",
    "last_name": "",
    "email": "",
    "phone": "",
    "country": "",
    "address": "",
    "dob": None,
    "gender": None,
    "terms": False,
    "newsletter": False,
}


def _message_slot(field_id: str) -> html.Div:
    return html.Div(id=feedback_id(field_id), className="text-danger small mt-1")


def submission_summary(values: Dict[str, Any]) -> dbc.Alert:
    dob = values["dob"]
    rows = [
        ("Name", f"{values['first_name']} {values['last_name']}"),
        ("Email", values["email"]),
        ("Phone", values["phone"] or "-"),
        ("Date of birth", dob.isoformat() if isinstance(dob, date) else dob),
        ("Gender", values["gender"].capitalize()),
        ("Country", COUNTRIES.get(values["country"], values["country"])),
        ("Address", values["address"] or "-"),
        ("Newsletter", "Yes" if values["newsletter"] else "No"),
    ]
    return dbc.Alert(
        [
            html.H6("Thank you for your submission!", className="alert-heading"),
            html.Dl(
                [item for label, value in rows for item in (html.Dt(label, className="col-4"),
                                                            html.Dd(value, className="col-8 mb-1"))],
                className="row mb-0 small",
            ),
        ],
        color="success",
    )


class FormsPage(BasePage):
    """
    Profile form with server-side validation. Every field is checked on
    submit and errors are shown next to the offending control.
    """

    id = "forms"
    label = "Forms"
    path = "/forms"
    icon = "bi-ui-checks"
    description = "Validation-ready form components and examples"

    def layout(self, session):
        text = dbc.Row(
            [
                form_field("First name", dbc.Input(id=IDs.Control.FORM_FIRST_NAME, placeholder="John"),
                           IDs.Control.FORM_FIRST_NAME, width=6),
                form_field("Last name", dbc.Input(id=IDs.Control.FORM_LAST_NAME, placeholder="Doe"),
                           IDs.Control.FORM_LAST_NAME, width=6),
                form_field("Email", dbc.Input(id=IDs.Control.FORM_EMAIL, type="email", placeholder="john.doe@example.com"),
                           IDs.Control.FORM_EMAIL, width=6),
                form_field("Phone (optional)", dbc.Input(id=IDs.Control.FORM_PHONE, type="tel", placeholder="+1 555 000 0000"),
                           IDs.Control.FORM_PHONE, width=6),
            ]
        )

        dob_and_country = dbc.Row(
            [
                dbc.Col(
                    html.Div(
                        [
                            dbc.Label("Date of birth", html_for=IDs.Control.FORM_DOB, className="d-block"),
                            dcc.DatePickerSingle(
                                id=IDs.Control.FORM_DOB,
                                max_date_allowed=date.today().isoformat(),
                                display_format="YYYY-MM-DD",
                                placeholder="Pick a date",
                            ),
                            _message_slot(IDs.Control.FORM_DOB),
                        ],
                        className="mb-3",
                    ),
                    md=6,
                ),
                form_field(
                    "Country",
                    dbc.Select(
                        id=IDs.Control.FORM_COUNTRY,
                        options=[{"label": "Select a country", "value": ""}]
                        + [{"label": name, "value": code} for code, name in COUNTRIES.items()],
                        value="",
                    ),
                    IDs.Control.FORM_COUNTRY,
                    width=6,
                ),
            ]
        )

        gender = html.Div(
            [
                dbc.Label("Gender"),
                dbc.RadioItems(
                    id=IDs.Control.FORM_GENDER,
                    options=[{"label": g.capitalize(), "value": g} for g in GENDERS],
                    inline=True,
                ),
                _message_slot(IDs.Control.FORM_GENDER),
            ],
            className="mb-3",
        )

        address = form_field(
            "Address (optional)",
            dbc.Textarea(id=IDs.Control.FORM_ADDRESS, placeholder="Street, city, postcode", rows=3),
            IDs.Control.FORM_ADDRESS,
        )

        agreements = html.Div(
            [
                dbc.Checkbox(id=IDs.Control.FORM_TERMS, label="I agree to the terms and conditions", value=False),
                _message_slot(IDs.Control.FORM_TERMS),
                dbc.Switch(id=IDs.Control.FORM_NEWSLETTER, label="Subscribe to the newsletter", value=False,
                           className="mt-2"),
            ],
            className="mb-3",
        )

        form_card = dbc.Card(
            [
                dbc.CardHeader(
                    [
                        html.H5("Form Validation", className="mb-0"),
                        html.Small("Complete example with validation and field requirements", className="text-muted"),
                    ]
                ),
                dbc.CardBody([text, dob_and_country, gender, address, agreements]),
                dbc.CardFooter(
                    [
                        dbc.Button("Reset", id=IDs.Control.FORM_RESET, color="secondary", outline=True, className="me-2"),
                        dbc.Button("Submit", id=IDs.Control.FORM_SUBMIT, color="primary"),
                    ],
                    className="d-flex justify-content-end",
                ),
            ]
        )

        return html.Div(
            [
                self.page_header(),
                dbc.Row(
                    [
                        dbc.Col(form_card, lg=7, className="mb-3"),
                        dbc.Col(html.Div(id=IDs.Control.FORM_RESULT), lg=5),
                    ]
                ),
            ]
        )
