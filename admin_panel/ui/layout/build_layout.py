from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Type

import dash_bootstrap_components as dbc
from dash import dcc, html

from admin_panel.core.base_page import BasePage
from admin_panel.ui.ids import IDs
from admin_panel.ui.layout.build_header import build_header
from admin_panel.ui.layout.build_sidebar import build_sidebar

if TYPE_CHECKING:
    from admin_panel.services.auth_service import AuthSession
    from admin_panel.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    """
    Root layout: URL, session stores, the toast and an empty shell that
    callbacks_auth.render_shell fills in.
    """
    return html.Div(
        className="admin-root",
        children=[
            dcc.Location(id=IDs.Control.URL, refresh=False),

            # Auth survives reloads; everything else is per page load
            dcc.Store(id=IDs.Store.AUTH, storage_type="local"),
            dcc.Store(id=IDs.Store.PRODUCTS, storage_type="memory"),
            dcc.Store(id=IDs.Store.QUERY_STATE, storage_type="memory"),
            dcc.Store(id=IDs.Store.EDITING_ID, storage_type="memory"),
            dcc.Store(id=IDs.Store.PENDING_DELETE, storage_type="memory"),
            dcc.Store(id=IDs.Store.EVENTS, storage_type="memory"),
            dcc.Store(id=IDs.Store.NOTIFICATION, storage_type="memory"),
            dcc.Store(id=IDs.Store.REFRESH_TICKET, storage_type="memory"),

            dbc.Toast(
                id=IDs.Control.TOAST,
                header="",
                is_open=False,
                dismissable=True,
                duration=4000,
                icon="info",
                className="admin-toast",
                style={"position": "fixed", "top": 16, "right": 16, "minWidth": 300, "zIndex": 2000},
            ),

            html.Div(id=IDs.Control.SHELL),
        ],
    )


def build_app_frame(
    ctx: AppConfig,
    session: AuthSession,
    page_cls: Optional[Type[BasePage]],
    body: Any,
) -> html.Div:
    """Sidebar + header + page body for a logged-in session."""
    title = page_cls.label if page_cls is not None else "Not Found"
    return html.Div(
        [
            build_sidebar(ctx.registry, ctx.global_config),
            html.Div(
                [
                    build_header(title, session),
                    dbc.Container(body, fluid=True, className="admin-content py-4"),
                ],
                className="admin-main",
            ),
        ],
        className="admin-frame",
    )


def build_not_found(pathname: Optional[str]) -> html.Div:
    return html.Div(
        [
            html.H3("404", className="fw-bold"),
            html.P(f"No page at {pathname or '/'}.", className="text-muted"),
            dcc.Link("Back to the dashboard", href="/dashboard"),
        ],
        className="text-center py-5",
    )


def build_error(page_label: str) -> dbc.Alert:
    return dbc.Alert(
        [
            html.H5(f"{page_label} could not be displayed", className="alert-heading"),
            html.P("An unexpected error occurred. Please reload the page.", className="mb-0"),
        ],
        color="danger",
    )
