from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from admin_panel.core.exceptions import AuthenticationError
from admin_panel.services.notifications import Notification, Notifier
from admin_panel.ui.callbacks.callbacks_utils import notification_payload
from admin_panel.ui.helpers import toast_props
from admin_panel.ui.ids import IDs
from admin_panel.ui.layout.build_layout import build_app_frame, build_error, build_not_found
from admin_panel.ui.layout.build_login import build_login
from admin_panel.validation.errors import ValidationError

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_auth_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # 1. Shell: login screen or sidebar + header + routed page
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SHELL, "children"),
        Input(IDs.Control.URL, "pathname"),
        Input(IDs.Store.AUTH, "data"),
    )
    def render_shell(pathname, auth_data):
        session = ctx.auth_session(auth_data)
        page_cls = ctx.registry.resolve(pathname)

        if not session.is_authenticated and (page_cls is None or page_cls.requires_auth):
            return build_login(ctx)

        if page_cls is None:
            logger.info("No page for path", extra={"path": pathname})
            return build_app_frame(ctx, session, None, build_not_found(pathname))

        page = ctx.registry.create(page_cls.id, ctx)
        try:
            body = page.layout(session)
        except Exception:
            logger.exception("Failed to build page", extra={"page_id": page_cls.id})
            body = build_error(page_cls.label)
        return build_app_frame(ctx, session, page_cls, body)

    # ---------------------------------------------------------
    # 2. Login / logout
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.AUTH, "data"),
        Output(IDs.Control.LOGIN_ERROR, "children"),
        Output(IDs.Control.LOGIN_ERROR, "is_open"),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.LOGIN_BTN, "n_clicks"),
        Input(IDs.Control.LOGIN_PASSWORD, "n_submit"),
        State(IDs.Control.LOGIN_EMAIL, "value"),
        State(IDs.Control.LOGIN_PASSWORD, "value"),
        State(IDs.Store.AUTH, "data"),
        prevent_initial_call=True,
    )
    def login(n_clicks, n_submit, email, password, auth_data):
        if not n_clicks and not n_submit:
            raise exceptions.PreventUpdate

        notifier = Notifier()
        service = ctx.auth_service(auth_data, notifier)
        try:
            service.login(email or "", password or "")
        except ValidationError as e:
            message = " ".join(e.field_errors.values())
            return dash.no_update, message, True, dash.no_update
        except AuthenticationError as e:
            return dash.no_update, str(e), True, notification_payload(notifier)

        return service.storage.snapshot(), "", False, notification_payload(notifier)

    @app.callback(
        Output(IDs.Store.AUTH, "data", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.LOGOUT_BTN, "n_clicks"),
        State(IDs.Store.AUTH, "data"),
        prevent_initial_call=True,
    )
    def logout(n_clicks, auth_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        notifier = Notifier()
        service = ctx.auth_service(auth_data, notifier)
        service.logout()
        return service.storage.snapshot(), notification_payload(notifier)

    # ---------------------------------------------------------
    # 3. Toast
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TOAST, "is_open"),
        Output(IDs.Control.TOAST, "header"),
        Output(IDs.Control.TOAST, "children"),
        Output(IDs.Control.TOAST, "icon"),
        Input(IDs.Store.NOTIFICATION, "data"),
        prevent_initial_call=True,
    )
    def show_toast(notification_data):
        return toast_props(Notification.from_dict(notification_data))
