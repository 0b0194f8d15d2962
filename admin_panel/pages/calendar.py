from __future__ import annotations

from datetime import date
from typing import Dict, List

import dash_bootstrap_components as dbc
from dash import dcc, html

from admin_panel.core.base_page import BasePage
from admin_panel.core.events import (
    CATEGORY_COLOURS,
    EVENT_CATEGORIES,
    VIEW_MODES,
    Event,
    month_grid,
)
from admin_panel.ui.ids import IDs, calendar_day_id, event_delete_id

WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


# ----------------------------------------------------------------------
# Render helpers (used by callbacks_calendar)
# ----------------------------------------------------------------------
def event_badge(event: Event) -> dbc.Badge:
    return dbc.Badge(event.category, color=CATEGORY_COLOURS.get(event.category, "secondary"), className="me-2")


def event_card(event: Event, *, deletable: bool = True) -> dbc.Card:
    details = [html.Div([html.I(className="bi bi-clock me-1"), event.time_label()], className="small text-muted")]
    if event.location:
        details.append(html.Div([html.I(className="bi bi-geo-alt me-1"), event.location], className="small text-muted"))
    if event.attendees:
        details.append(html.Div([html.I(className="bi bi-people me-1"), f"{event.attendees} attendees"],
                                className="small text-muted"))
    if event.description:
        details.append(html.P(event.description, className="small mb-0 mt-1"))

    header = [event_badge(event), html.Span(event.title, className="fw-semibold")]
    if deletable:
        header.append(
            dbc.Button(
                html.I(className="bi bi-trash"),
                id=event_delete_id(event.id),
                color="link",
                size="sm",
                className="ms-auto text-danger p-0",
                title="Delete event",
            )
        )

    return dbc.Card(
        dbc.CardBody([html.Div(header, className="d-flex align-items-center mb-1"), *details], className="p-2"),
        className="mb-2",
    )


def month_view(anchor: date, selected: date, counts: Dict[date, int]) -> html.Div:
    today = date.today()
    header = html.Div([html.Div(d, className="admin-cal-head") for d in WEEKDAY_HEADERS], className="admin-cal-row")

    weeks = []
    for week in month_grid(anchor.year, anchor.month):
        cells = []
        for day in week:
            classes = ["admin-cal-cell"]
            if day.month != anchor.month:
                classes.append("admin-cal-outside")
            if day == today:
                classes.append("admin-cal-today")
            if day == selected:
                classes.append("admin-cal-selected")
            n = counts.get(day, 0)
            cells.append(
                html.Div(
                    [
                        html.Span(str(day.day)),
                        html.Span("•" * min(n, 3), className="admin-cal-dots") if n else None,
                    ],
                    id=calendar_day_id(day.isoformat()),
                    n_clicks=0,
                    className=" ".join(classes),
                )
            )
        weeks.append(html.Div(cells, className="admin-cal-row"))

    return html.Div([header, *weeks], className="admin-cal")


def list_view(events: List[Event]) -> html.Div:
    """Day and week modes: the events of the range, grouped by date."""
    if not events:
        return html.Div("No events in this period.", className="text-muted text-center py-5")

    groups = []
    current = None
    for event in events:
        if event.date != current:
            current = event.date
            groups.append(html.H6(current.strftime("%A, %B %d"), className="mt-3 fw-semibold"))
        groups.append(event_card(event))
    return html.Div(groups)


def upcoming_list(events: List[Event]) -> List:
    if not events:
        return [html.Div("No upcoming events.", className="text-muted small")]
    return [
        html.Div(
            [
                event_badge(e),
                html.Span(e.title, className="small fw-semibold me-2"),
                html.Span(e.date.strftime("%b %d"), className="small text-muted ms-auto"),
            ],
            className="d-flex align-items-center mb-2",
        )
        for e in events
    ]


def build_event_modal() -> dbc.Modal:
    def field(label, control):
        return html.Div([dbc.Label(label, html_for=control.id), control], className="mb-3")

    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Add New Event")),
            dbc.ModalBody(
                [
                    dbc.Alert(id=IDs.Control.EVENT_FORM_ERROR, color="danger", is_open=False, className="py-2"),
                    field("Title", dbc.Input(id=IDs.Control.EVENT_FORM_TITLE, placeholder="Event title")),
                    dbc.Row(
                        [
                            dbc.Col(
                                html.Div(
                                    [
                                        dbc.Label("Date", html_for=IDs.Control.EVENT_FORM_DATE),
                                        dcc.DatePickerSingle(id=IDs.Control.EVENT_FORM_DATE, display_format="YYYY-MM-DD"),
                                    ],
                                    className="mb-3",
                                ),
                                md=6,
                            ),
                            dbc.Col(
                                field(
                                    "Category",
                                    dbc.Select(
                                        id=IDs.Control.EVENT_FORM_CATEGORY,
                                        options=[{"label": c.capitalize(), "value": c} for c in EVENT_CATEGORIES],
                                        value="work",
                                    ),
                                ),
                                md=6,
                            ),
                        ]
                    ),
                    dbc.Row(
                        [
                            dbc.Col(field("Start time", dbc.Input(id=IDs.Control.EVENT_FORM_START, type="time")), md=6),
                            dbc.Col(field("End time", dbc.Input(id=IDs.Control.EVENT_FORM_END, type="time")), md=6),
                        ]
                    ),
                    field("Location", dbc.Input(id=IDs.Control.EVENT_FORM_LOCATION, placeholder="Location")),
                    field(
                        "Attendees",
                        dbc.Input(id=IDs.Control.EVENT_FORM_ATTENDEES, type="number", min=0, step=1),
                    ),
                    field(
                        "Description",
                        dbc.Textarea(id=IDs.Control.EVENT_FORM_DESCRIPTION, placeholder="Description", rows=3),
                    ),
                ]
            ),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.EVENT_FORM_CANCEL, color="secondary", outline=True),
                    dbc.Button("Add Event", id=IDs.Control.EVENT_FORM_SAVE, color="primary"),
                ]
            ),
        ],
        id=IDs.Control.EVENT_MODAL,
        is_open=False,
    )


class CalendarPage(BasePage):
    id = "calendar"
    label = "Calendar"
    path = "/calendar"
    icon = "bi-calendar3"
    description = "Manage your schedule and events"

    def layout(self, session):
        today = date.today()

        actions = [
            dbc.RadioItems(
                id=IDs.Control.CALENDAR_VIEW_MODE,
                options=[{"label": m.capitalize(), "value": m} for m in VIEW_MODES],
                value="month",
                inline=True,
                className="btn-group btn-group-sm",
                inputClassName="btn-check",
                labelClassName="btn btn-outline-primary",
                labelCheckedClassName="active",
            ),
            dbc.Button(
                [html.I(className="bi bi-plus-lg me-2"), "Add Event"],
                id=IDs.Control.CALENDAR_ADD_BTN,
                color="primary",
                size="sm",
            ),
        ]

        navigation = html.Div(
            [
                dbc.ButtonGroup(
                    [
                        dbc.Button(html.I(className="bi bi-chevron-left"), id=IDs.Control.CALENDAR_PREV,
                                   color="secondary", outline=True, size="sm"),
                        dbc.Button("Today", id=IDs.Control.CALENDAR_TODAY, color="secondary", outline=True, size="sm"),
                        dbc.Button(html.I(className="bi bi-chevron-right"), id=IDs.Control.CALENDAR_NEXT,
                                   color="secondary", outline=True, size="sm"),
                    ],
                    className="me-3",
                ),
                html.H5(id=IDs.Control.CALENDAR_RANGE_LABEL, className="mb-0 me-auto"),
                dcc.DatePickerSingle(
                    id=IDs.Control.CALENDAR_DATE,
                    date=today.isoformat(),
                    display_format="YYYY-MM-DD",
                    clearable=False,
                ),
            ],
            className="d-flex align-items-center mb-3",
        )

        return html.Div(
            [
                self.page_header(actions=actions),
                dbc.Row(
                    [
                        dbc.Col(
                            dbc.Card(dbc.CardBody([navigation, html.Div(id=IDs.Control.CALENDAR_GRID)])),
                            lg=8,
                            className="mb-3",
                        ),
                        dbc.Col(
                            [
                                dbc.Card(
                                    [
                                        dbc.CardHeader(id=IDs.Control.CALENDAR_DAY_TITLE, className="fw-semibold"),
                                        dbc.CardBody(id=IDs.Control.CALENDAR_DAY_EVENTS),
                                    ],
                                    className="mb-3",
                                ),
                                dbc.Card(
                                    [
                                        dbc.CardHeader("Upcoming events", className="fw-semibold"),
                                        dbc.CardBody(id=IDs.Control.CALENDAR_UPCOMING),
                                    ]
                                ),
                            ],
                            lg=4,
                        ),
                    ]
                ),
                build_event_modal(),
            ]
        )
