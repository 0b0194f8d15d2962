from __future__ import annotations

from typing import Iterable, List

import dash_bootstrap_components as dbc
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
from dash import dcc, html
from plotly.graph_objs import Figure

from admin_panel.core.base_page import BasePage
from admin_panel.core.product import Product
from admin_panel.services.dashboard_metrics import (
    DEFAULT_TIME_RANGE,
    REVENUE_BY_MONTH,
    SALES_BY_WEEKDAY,
    STAT_CARDS,
    TIME_RANGES,
    USERS_BY_DEVICE,
    StatCard,
    format_currency,
    inventory_summary,
    low_stock,
    series_frame,
    status_counts,
)
from admin_panel.ui.helpers import FONT_FAMILY
from admin_panel.ui.ids import IDs

CHART_HEIGHT = 300
PRIMARY = "#2c3e50"
ACCENT = "#18bc9c"


def _style(fig: Figure, *, height: int = CHART_HEIGHT) -> Figure:
    fig.update_layout(
        height=height,
        margin=dict(l=10, r=10, t=10, b=10),
        font=dict(family=FONT_FAMILY, size=12),
        plot_bgcolor="white",
        paper_bgcolor="white",
        showlegend=False,
    )
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(gridcolor="#eef0f3")
    return fig


def empty_figure(message: str = "No data") -> Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, x=0.5, y=0.5, xref="paper", yref="paper", showarrow=False)
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    return _style(fig)


def revenue_figure() -> Figure:
    df = series_frame(REVENUE_BY_MONTH, "month", "revenue")
    fig = px.area(df, x="month", y="revenue", color_discrete_sequence=[ACCENT])
    fig.update_yaxes(tickprefix="$")
    return _style(fig)


def sales_figure() -> Figure:
    df = series_frame(SALES_BY_WEEKDAY, "day", "sales")
    fig = px.bar(df, x="day", y="sales", color_discrete_sequence=[PRIMARY])
    fig.update_yaxes(tickprefix="$")
    return _style(fig)


def devices_figure() -> Figure:
    df = series_frame(USERS_BY_DEVICE, "device", "share")
    fig = px.pie(df, names="device", values="share", hole=0.55)
    fig.update_traces(textinfo="label+percent")
    return _style(fig)


def inventory_figure(summary: pd.DataFrame) -> Figure:
    """Units in stock per category, from `inventory_summary`."""
    if summary.empty or not summary["products"].any():
        return empty_figure("No products")
    fig = px.bar(
        summary,
        x="category",
        y="units",
        hover_data={"products": True, "stock_value": ":$,.2f"},
        color_discrete_sequence=[ACCENT],
    )
    return _style(fig)


def inventory_text(records: Iterable[Product]) -> str:
    records = list(records)
    summary = inventory_summary(records)
    n_products = int(summary["products"].sum())
    if not n_products:
        return "No products in the inventory."
    units = int(summary["units"].sum())
    value = format_currency(float(summary["stock_value"].sum()))
    statuses = status_counts(records)
    return (
        f"{n_products} products, {units:,} units in stock, worth {value}. "
        f"{statuses['active']} active, {statuses['inactive']} inactive."
    )


def low_stock_items(records: Iterable[Product]) -> List:
    items = low_stock(records)
    if not items:
        return [html.Li("Nothing is running low.", className="list-group-item text-muted")]
    return [
        html.Li(
            [
                html.Span(r.name),
                dbc.Badge(f"{r.stock} left", color="warning" if r.stock else "danger", pill=True),
            ],
            className="list-group-item d-flex justify-content-between align-items-center",
        )
        for r in items
    ]


def stat_card(card: StatCard) -> dbc.Card:
    trend_colour = "text-success" if card.trend == "up" else "text-danger"
    trend_icon = "bi-arrow-up-right" if card.trend == "up" else "bi-arrow-down-right"
    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(
                    [
                        html.Span(card.title, className="text-muted small"),
                        html.I(className=f"bi {card.icon} fs-5 text-primary"),
                    ],
                    className="d-flex justify-content-between",
                ),
                html.H4(card.value, className="fw-bold my-2"),
                html.Span(
                    [html.I(className=f"bi {trend_icon} me-1"), card.change, " from last month"],
                    className=f"small {trend_colour}",
                ),
            ]
        ),
        className="h-100 shadow-sm",
    )


def _chart_card(title: str, body) -> dbc.Card:
    return dbc.Card(
        [dbc.CardHeader(title, className="fw-semibold"), dbc.CardBody(body)],
        className="h-100 shadow-sm",
    )


class DashboardPage(BasePage):
    """
    Overview page: KPI cards, mock revenue/sales/device charts and an
    inventory breakdown computed from the session's products.
    """

    id = "dashboard"
    label = "Dashboard"
    path = "/dashboard"
    icon = "bi-speedometer2"
    description = "Overview of your store"

    def layout(self, session):
        name = session.user.name.split()[0] if session.user else "there"

        actions = [
            dbc.Select(
                id=IDs.Control.DASHBOARD_TIME_RANGE,
                options=[{"label": t, "value": t} for t in TIME_RANGES],
                value=DEFAULT_TIME_RANGE,
                size="sm",
                style={"width": "160px"},
            ),
            dbc.Button(
                [html.I(className="bi bi-download me-2"), "Download report"],
                id=IDs.Control.DASHBOARD_DOWNLOAD_BTN,
                color="primary",
                size="sm",
            ),
            dcc.Download(id=IDs.Control.DASHBOARD_DOWNLOAD),
        ]

        graph_config = {"displayModeBar": False}

        return html.Div(
            [
                self.page_header(subtitle=f"Welcome back, {name}!", actions=actions),
                html.Div(id=IDs.Control.DASHBOARD_TIME_LABEL, className="text-muted small mb-3"),
                dbc.Row(
                    [dbc.Col(stat_card(c), md=6, xl=3, className="mb-3") for c in STAT_CARDS],
                ),
                dbc.Row(
                    [
                        dbc.Col(
                            _chart_card("Revenue", dcc.Graph(figure=revenue_figure(), config=graph_config)),
                            lg=8,
                            className="mb-3",
                        ),
                        dbc.Col(
                            _chart_card("Users by device", dcc.Graph(figure=devices_figure(), config=graph_config)),
                            lg=4,
                            className="mb-3",
                        ),
                    ]
                ),
                dbc.Row(
                    [
                        dbc.Col(
                            _chart_card("Weekly sales", dcc.Graph(figure=sales_figure(), config=graph_config)),
                            lg=6,
                            className="mb-3",
                        ),
                        dbc.Col(
                            _chart_card(
                                "Inventory by category",
                                [
                                    html.Div(id=IDs.Control.DASHBOARD_INVENTORY_TEXT, className="small text-muted mb-2"),
                                    dcc.Graph(
                                        id=IDs.Control.DASHBOARD_INVENTORY_GRAPH,
                                        figure=empty_figure("Loading..."),
                                        config=graph_config,
                                    ),
                                ],
                            ),
                            lg=6,
                            className="mb-3",
                        ),
                    ]
                ),
                _chart_card(
                    "Low stock",
                    html.Ul(id=IDs.Control.DASHBOARD_LOW_STOCK, className="list-group list-group-flush"),
                ),
            ]
        )
