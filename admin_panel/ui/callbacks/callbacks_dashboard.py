from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions

from admin_panel.pages.dashboard import inventory_figure, inventory_text, low_stock_items
from admin_panel.services.dashboard_metrics import DEFAULT_TIME_RANGE, inventory_summary
from admin_panel.ui.callbacks.callbacks_utils import store_from_data
from admin_panel.ui.ids import IDs

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_dashboard_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DASHBOARD_TIME_LABEL, "children"),
        Input(IDs.Control.DASHBOARD_TIME_RANGE, "value"),
    )
    def update_time_label(time_range):
        return f"Showing figures for: {time_range or DEFAULT_TIME_RANGE}"

    @app.callback(
        Output(IDs.Control.DASHBOARD_INVENTORY_GRAPH, "figure"),
        Output(IDs.Control.DASHBOARD_INVENTORY_TEXT, "children"),
        Output(IDs.Control.DASHBOARD_LOW_STOCK, "children"),
        Input(IDs.Store.PRODUCTS, "data"),
        # the graph only exists while the dashboard is shown
        Input(IDs.Control.DASHBOARD_INVENTORY_GRAPH, "id"),
    )
    def update_inventory(products_data, _graph_id):
        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate
        records = store.records
        return inventory_figure(inventory_summary(records)), inventory_text(records), low_stock_items(records)

    @app.callback(
        Output(IDs.Control.DASHBOARD_DOWNLOAD, "data"),
        Input(IDs.Control.DASHBOARD_DOWNLOAD_BTN, "n_clicks"),
        State(IDs.Store.PRODUCTS, "data"),
        prevent_initial_call=True,
    )
    def download_report(n_clicks, products_data):
        if not n_clicks:
            raise exceptions.PreventUpdate
        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate

        summary = inventory_summary(store.records)
        filename = f"inventory-report-{date.today().isoformat()}.csv"
        logger.info("Downloading inventory report", extra={"report_filename": filename})
        return dcc.send_data_frame(summary.to_csv, filename, index=False)
