from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import html

from admin_panel.ui.ids import IDs

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig


def build_login(ctx: AppConfig) -> html.Div:
    cfg = ctx.global_config
    creds = cfg.credentials

    return html.Div(
        dbc.Card(
            dbc.CardBody(
                [
                    html.H3(cfg.ui_title, className="fw-bold text-center mb-1"),
                    html.P("Sign in to your account", className="text-muted text-center mb-4"),
                    dbc.Alert(id=IDs.Control.LOGIN_ERROR, color="danger", is_open=False, className="py-2"),
                    html.Div(
                        [
                            dbc.Label("Email", html_for=IDs.Control.LOGIN_EMAIL),
                            dbc.Input(
                                id=IDs.Control.LOGIN_EMAIL,
                                type="email",
                                placeholder="name@example.com",
                                autocomplete="username",
                            ),
                        ],
                        className="mb-3",
                    ),
                    html.Div(
                        [
                            dbc.Label("Password", html_for=IDs.Control.LOGIN_PASSWORD),
                            dbc.Input(
                                id=IDs.Control.LOGIN_PASSWORD,
                                type="password",
                                placeholder="Password",
                                autocomplete="current-password",
                            ),
                        ],
                        className="mb-3",
                    ),
                    dbc.Button("Sign in", id=IDs.Control.LOGIN_BTN, color="primary", className="w-100"),
                    html.Small(
                        f"Demo: {creds.email} / {creds.password}",
                        className="d-block text-muted text-center mt-3",
                    ),
                ]
            ),
            className="admin-login-card shadow-sm",
        ),
        className="admin-login d-flex align-items-center justify-content-center",
    )
