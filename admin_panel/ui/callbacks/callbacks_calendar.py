from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions, html

from admin_panel.core.events import (
    EventStore,
    generate_sample_events,
    range_label,
    shift_anchor,
)
from admin_panel.core.exceptions import NotFoundError
from admin_panel.pages.calendar import event_card, list_view, month_view, upcoming_list
from admin_panel.services.notifications import Notifier
from admin_panel.ui.callbacks.callbacks_utils import notification_payload
from admin_panel.ui.ids import IDs
from admin_panel.validation.errors import ValidationError
from admin_panel.validation.form_validation import parse_iso_date

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig

logger = logging.getLogger(__name__)

UPCOMING_LIMIT = 5


def _events(data) -> EventStore:
    try:
        return EventStore.from_list(data if isinstance(data, list) else None)
    except (KeyError, TypeError, ValueError):
        logger.exception("Invalid events payload")
        return EventStore()


def _clicked() -> bool:
    """
    Pattern-matched buttons are re-created on every render with n_clicks
    None/0; only a real click carries a positive count.
    """
    return any(t.get("value") for t in dash.ctx.triggered)


def register_calendar_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # 1. Session data: sample events on first visit
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.EVENTS, "data"),
        Input(IDs.Control.URL, "pathname"),
        State(IDs.Store.EVENTS, "data"),
    )
    def ensure_events_loaded(_pathname, events_data):
        if isinstance(events_data, list):
            raise exceptions.PreventUpdate
        store = EventStore(generate_sample_events(date.today()))
        logger.info("Loaded sample events", extra={"n_events": len(store)})
        return store.to_list()

    # ---------------------------------------------------------
    # 2. Navigation
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CALENDAR_DATE, "date", allow_duplicate=True),
        Input(IDs.Control.CALENDAR_PREV, "n_clicks"),
        Input(IDs.Control.CALENDAR_NEXT, "n_clicks"),
        Input(IDs.Control.CALENDAR_TODAY, "n_clicks"),
        Input({"type": IDs.Pattern.CALENDAR_DAY, "index": ALL}, "n_clicks"),
        State(IDs.Control.CALENDAR_DATE, "date"),
        State(IDs.Control.CALENDAR_VIEW_MODE, "value"),
        prevent_initial_call=True,
    )
    def navigate(_prev, _next, _today, _days, current, view_mode):
        if not _clicked():
            raise exceptions.PreventUpdate

        trigger = dash.ctx.triggered_id
        anchor = parse_iso_date(current) or date.today()

        if trigger == IDs.Control.CALENDAR_TODAY:
            return date.today().isoformat()
        if trigger == IDs.Control.CALENDAR_PREV:
            return shift_anchor(view_mode or "month", anchor, -1).isoformat()
        if trigger == IDs.Control.CALENDAR_NEXT:
            return shift_anchor(view_mode or "month", anchor, 1).isoformat()
        if isinstance(trigger, dict) and trigger.get("type") == IDs.Pattern.CALENDAR_DAY:
            return trigger["index"]
        raise exceptions.PreventUpdate

    # ---------------------------------------------------------
    # 3. Render grid, selected day and upcoming list
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.CALENDAR_RANGE_LABEL, "children"),
        Output(IDs.Control.CALENDAR_GRID, "children"),
        Output(IDs.Control.CALENDAR_DAY_TITLE, "children"),
        Output(IDs.Control.CALENDAR_DAY_EVENTS, "children"),
        Output(IDs.Control.CALENDAR_UPCOMING, "children"),
        Input(IDs.Control.CALENDAR_DATE, "date"),
        Input(IDs.Control.CALENDAR_VIEW_MODE, "value"),
        Input(IDs.Store.EVENTS, "data"),
    )
    def render_calendar(current, view_mode, events_data):
        view_mode = view_mode or "month"
        anchor = parse_iso_date(current) or date.today()
        store = _events(events_data)

        if view_mode == "month":
            grid = month_view(anchor, anchor, store.counts_by_date())
        else:
            grid = list_view(store.in_range(view_mode, anchor))

        # list views already carry the delete buttons for the anchor day
        deletable = view_mode == "month"
        day_events = store.for_date(anchor)
        day_body = (
            [event_card(e, deletable=deletable) for e in day_events]
            if day_events
            else html.Div("No events scheduled for this day.", className="text-muted small")
        )

        return (
            range_label(view_mode, anchor),
            grid,
            f"Events for {anchor.strftime('%B %d, %Y')}",
            day_body,
            upcoming_list(store.upcoming(date.today(), UPCOMING_LIMIT)),
        )

    # ---------------------------------------------------------
    # 4. Add / delete events
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.EVENT_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Control.EVENT_FORM_TITLE, "value"),
        Output(IDs.Control.EVENT_FORM_DATE, "date"),
        Output(IDs.Control.EVENT_FORM_START, "value"),
        Output(IDs.Control.EVENT_FORM_END, "value"),
        Output(IDs.Control.EVENT_FORM_LOCATION, "value"),
        Output(IDs.Control.EVENT_FORM_DESCRIPTION, "value"),
        Output(IDs.Control.EVENT_FORM_ATTENDEES, "value"),
        Output(IDs.Control.EVENT_FORM_CATEGORY, "value"),
        Output(IDs.Control.EVENT_FORM_ERROR, "is_open", allow_duplicate=True),
        Input(IDs.Control.CALENDAR_ADD_BTN, "n_clicks"),
        Input(IDs.Control.EVENT_FORM_CANCEL, "n_clicks"),
        State(IDs.Control.CALENDAR_DATE, "date"),
        prevent_initial_call=True,
    )
    def toggle_event_modal(add_clicks, cancel_clicks, current):
        if dash.ctx.triggered_id == IDs.Control.EVENT_FORM_CANCEL:
            if not cancel_clicks:
                raise exceptions.PreventUpdate
            return (False,) + (dash.no_update,) * 8 + (False,)

        if not add_clicks:
            raise exceptions.PreventUpdate
        anchor = parse_iso_date(current) or date.today()
        return True, "", anchor.isoformat(), "", "", "", "", None, "work", False

    @app.callback(
        Output(IDs.Store.EVENTS, "data", allow_duplicate=True),
        Output(IDs.Control.EVENT_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Control.EVENT_FORM_ERROR, "children"),
        Output(IDs.Control.EVENT_FORM_ERROR, "is_open", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.EVENT_FORM_SAVE, "n_clicks"),
        State(IDs.Control.EVENT_FORM_TITLE, "value"),
        State(IDs.Control.EVENT_FORM_DATE, "date"),
        State(IDs.Control.EVENT_FORM_START, "value"),
        State(IDs.Control.EVENT_FORM_END, "value"),
        State(IDs.Control.EVENT_FORM_LOCATION, "value"),
        State(IDs.Control.EVENT_FORM_DESCRIPTION, "value"),
        State(IDs.Control.EVENT_FORM_ATTENDEES, "value"),
        State(IDs.Control.EVENT_FORM_CATEGORY, "value"),
        State(IDs.Store.EVENTS, "data"),
        prevent_initial_call=True,
    )
    def save_event(n_clicks, title, event_date, start, end, location, description, attendees, category,
                   events_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        store = _events(events_data)
        notifier = Notifier()
        candidate = {
            "title": title,
            "date": event_date,
            "start_time": start,
            "end_time": end,
            "location": location,
            "description": description,
            "attendees": attendees,
            "category": category,
        }
        try:
            store.add(candidate)
        except ValidationError as e:
            messages = list(e.field_errors.values())
            notifier.error(messages[0])
            return dash.no_update, True, " ".join(messages), True, notification_payload(notifier)

        notifier.success("Event added successfully")
        return store.to_list(), False, "", False, notification_payload(notifier)

    @app.callback(
        Output(IDs.Store.EVENTS, "data", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input({"type": IDs.Pattern.EVENT_DELETE, "index": ALL}, "n_clicks"),
        State(IDs.Store.EVENTS, "data"),
        prevent_initial_call=True,
    )
    def delete_event(_clicks, events_data):
        if not _clicked():
            raise exceptions.PreventUpdate

        trigger = dash.ctx.triggered_id
        if not isinstance(trigger, dict):
            raise exceptions.PreventUpdate

        store = _events(events_data)
        notifier = Notifier()
        try:
            store.delete(trigger["index"])
        except NotFoundError as e:
            notifier.error(str(e))
            return dash.no_update, notification_payload(notifier)

        notifier.success("Event deleted successfully")
        return store.to_list(), notification_payload(notifier)
