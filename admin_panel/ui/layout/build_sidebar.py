from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from admin_panel.config.model import GlobalConfig
from admin_panel.core.page_registry import PageRegistry


def build_sidebar(registry: PageRegistry, global_config: GlobalConfig) -> html.Div:
    # NavLink(active="exact") highlights the current page from the URL
    links = [
        dbc.NavLink(
            [html.I(className=f"bi {cls.icon} me-2"), cls.label],
            href=cls.path,
            active="exact",
            className="admin-nav-link",
        )
        for cls in registry.all_classes()
    ]

    return html.Div(
        [
            html.Div(
                [
                    html.H4(global_config.ui_title, className="mb-0 fw-bold"),
                    html.Small(global_config.subtitle, className="text-muted"),
                ],
                className="admin-brand px-3 py-4",
            ),
            dbc.Nav(links, vertical=True, pills=True, className="px-2"),
        ],
        className="admin-sidebar",
    )
