from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import html

from admin_panel.ui.ids import IDs

if TYPE_CHECKING:
    from admin_panel.services.auth_service import AuthSession


def build_header(title: str, session: AuthSession) -> dbc.Navbar:
    user = session.user
    if user is None:
        user_block = None
    else:
        avatar = (
            html.Img(src=user.avatar, alt=user.name, className="admin-avatar me-2")
            if user.avatar
            else html.Span(user.initials, className="admin-avatar admin-avatar-initials me-2")
        )
        user_block = html.Div(
            [
                avatar,
                html.Div(
                    [
                        html.Div(user.name, className="fw-semibold small"),
                        html.Div(user.role, className="text-muted small"),
                    ],
                    className="me-3",
                ),
                dbc.Button(
                    [html.I(className="bi bi-box-arrow-right me-1"), "Log out"],
                    id=IDs.Control.LOGOUT_BTN,
                    color="secondary",
                    outline=True,
                    size="sm",
                ),
            ],
            className="ms-auto d-flex align-items-center",
        )

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.H5(title, className="mb-0 fw-semibold"),
                user_block,
            ],
        ),
        color="white",
        className="admin-header border-bottom shadow-sm",
    )
