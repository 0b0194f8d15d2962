from __future__ import annotations

from datetime import date

import dash_bootstrap_components as dbc
from dash import dcc, html

from admin_panel.core.base_page import BasePage
from admin_panel.services.notifications import ERROR, INFO, SUCCESS, WARNING
from admin_panel.ui.ids import IDs, toast_demo_id

TOAST_DEMOS = (
    (SUCCESS, "Success toast", "Your changes have been saved."),
    (INFO, "Info toast", "A new version is available."),
    (ERROR, "Error toast", "Something went wrong."),
    (WARNING, "Warning toast", "Your session is about to expire."),
)

BUTTON_COLOURS = ("primary", "secondary", "success", "info", "warning", "danger", "dark")


def _section(title: str, description: str, body) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                [html.H5(title, className="mb-0"), html.Small(description, className="text-muted")]
            ),
            dbc.CardBody(body),
        ],
        className="mt-3",
    )


def _date_tab() -> dbc.Card:
    return _section(
        "Date Picker",
        "Calendar component for date selection.",
        [
            dbc.Label("Choose a date", html_for=IDs.Control.UI_DATE_PICKER, className="d-block"),
            dcc.DatePickerSingle(id=IDs.Control.UI_DATE_PICKER, placeholder="Pick a date", display_format="YYYY-MM-DD"),
            html.Div(id=IDs.Control.UI_DATE_LABEL, className="text-muted small mt-2"),
            html.H6("Range Selection", className="mt-4"),
            dcc.DatePickerRange(start_date_placeholder_text="Start date", end_date_placeholder_text="End date"),
            html.H6("Preset", className="mt-4"),
            dcc.DatePickerSingle(date=date.today().isoformat(), display_format="YYYY-MM-DD"),
        ],
    )


def _selection_tab() -> dbc.Card:
    return _section(
        "Selection Controls",
        "Checkboxes, radio groups, switches, selects and sliders.",
        [
            dbc.Row(
                [
                    dbc.Col(
                        [
                            html.H6("Checkboxes"),
                            dbc.Checklist(
                                options=[{"label": l, "value": l.lower()} for l in ("Email", "SMS", "Push")],
                                value=["email"],
                            ),
                            html.H6("Radio group", className="mt-3"),
                            dbc.RadioItems(
                                options=[{"label": l, "value": l.lower()} for l in ("Default", "Comfortable", "Compact")],
                                value="default",
                            ),
                        ],
                        md=6,
                    ),
                    dbc.Col(
                        [
                            html.H6("Switches"),
                            dbc.Switch(label="Airplane mode", value=False),
                            dbc.Switch(label="Dark mode", value=True),
                            html.H6("Select", className="mt-3"),
                            dbc.Select(
                                options=[{"label": f, "value": f.lower()} for f in ("Apple", "Banana", "Orange")],
                                placeholder="Select a fruit",
                            ),
                        ],
                        md=6,
                    ),
                ]
            ),
            html.H6("Slider", className="mt-4"),
            dcc.Slider(id=IDs.Control.UI_SLIDER, min=0, max=100, step=1, value=50,
                       marks={0: "0", 50: "50", 100: "100"}),
            html.Div(id=IDs.Control.UI_SLIDER_LABEL, className="text-muted small"),
        ],
    )


def _buttons_tab() -> dbc.Card:
    return _section(
        "Buttons & Badges",
        "Button variants, badges, progress bars and accordions.",
        [
            html.H6("Variants"),
            html.Div([dbc.Button(c.capitalize(), color=c) for c in BUTTON_COLOURS], className="d-flex flex-wrap gap-2"),
            html.H6("Outline", className="mt-3"),
            html.Div(
                [dbc.Button(c.capitalize(), color=c, outline=True) for c in BUTTON_COLOURS],
                className="d-flex flex-wrap gap-2",
            ),
            html.H6("Sizes", className="mt-3"),
            html.Div(
                [
                    dbc.Button("Small", size="sm"),
                    dbc.Button("Default"),
                    dbc.Button("Large", size="lg"),
                    dbc.Button([html.I(className="bi bi-envelope me-2"), "With icon"], color="secondary"),
                    dbc.Button("Disabled", disabled=True),
                ],
                className="d-flex flex-wrap align-items-center gap-2",
            ),
            html.H6("Badges", className="mt-3"),
            html.Div([dbc.Badge(c.capitalize(), color=c) for c in BUTTON_COLOURS], className="d-flex flex-wrap gap-2"),
            html.Div(
                [dbc.Badge(c.capitalize(), color=c, pill=True) for c in BUTTON_COLOURS],
                className="d-flex flex-wrap gap-2 mt-2",
            ),
            html.H6("Progress", className="mt-3"),
            dbc.Progress(value=25, className="mb-2"),
            dbc.Progress(value=60, color="success", striped=True, className="mb-2"),
            dbc.Progress(value=85, color="warning", striped=True, animated=True, label="85%"),
            html.H6("Accordion", className="mt-3"),
            dbc.Accordion(
                [
                    dbc.AccordionItem("Yes. It follows the WAI-ARIA design pattern.", title="Is it accessible?"),
                    dbc.AccordionItem("Yes. It uses the Bootstrap theme of the app.", title="Is it styled?"),
                ],
                start_collapsed=True,
            ),
        ],
    )


def _notifications_tab() -> dbc.Card:
    return _section(
        "Notifications",
        "Toast notifications and inline alerts.",
        [
            html.H6("Toasts"),
            html.Div(
                [
                    dbc.Button(title, id=toast_demo_id(level), color=level, outline=True)
                    for level, title, _ in TOAST_DEMOS
                ],
                className="d-flex flex-wrap gap-2",
            ),
            html.H6("Alerts", className="mt-4"),
            dbc.Alert("Heads up! You can add components to your app using the sidebar.", color="info"),
            dbc.Alert("Your session has expired. Please log in again.", color="danger", dismissable=True),
        ],
    )


class UIComponentsPage(BasePage):
    id = "ui-components"
    label = "UI Components"
    path = "/ui-components"
    icon = "bi-grid-3x3-gap"
    description = "A collection of reusable interface components"

    def layout(self, session):
        return html.Div(
            [
                self.page_header(),
                dbc.Tabs(
                    [
                        dbc.Tab(_date_tab(), label="Date Picker", tab_id="date-picker"),
                        dbc.Tab(_selection_tab(), label="Selection Controls", tab_id="selections"),
                        dbc.Tab(_buttons_tab(), label="Buttons & Badges", tab_id="buttons"),
                        dbc.Tab(_notifications_tab(), label="Notifications", tab_id="notifications"),
                    ],
                    active_tab="date-picker",
                ),
            ]
        )
