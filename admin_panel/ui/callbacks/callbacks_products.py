from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, dcc, exceptions, html

from admin_panel.core.exceptions import NotFoundError
from admin_panel.core.record_store import RefreshTicket
from admin_panel.pages.products import PRODUCT_FORM_FIELDS
from admin_panel.services import table_sync
from admin_panel.services.notifications import Notifier
from admin_panel.services.table_sync import TableInputs, apply_table_inputs
from admin_panel.ui.callbacks.callbacks_utils import (
    notification_payload,
    state_from_data,
    store_from_data,
    triggered_props,
)
from admin_panel.ui.helpers import (
    DELETE_COLUMN,
    EDIT_COLUMN,
    field_feedback,
    product_rows,
    selected_rows_for,
    sort_by_for,
)
from admin_panel.ui.ids import IDs, feedback_id

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig

logger = logging.getLogger(__name__)

FORM_FIELD_NAMES = list(PRODUCT_FORM_FIELDS)
EMPTY_FORM = ("", "", None, None, "active")

TABLE = IDs.Control.PRODUCTS_TABLE

# "component-id.prop" -> table control name understood by apply_table_inputs
CONTROL_PROPS = {
    f"{IDs.Control.PRODUCTS_SEARCH}.value": table_sync.SEARCH,
    f"{IDs.Control.PRODUCTS_PAGE_SIZE}.value": table_sync.PAGE_SIZE,
    f"{TABLE}.sort_by": table_sync.SORT,
    f"{TABLE}.page_current": table_sync.PAGE,
    f"{TABLE}.selected_row_ids": table_sync.ROW_SELECTION,
    f"{IDs.Control.PRODUCTS_SELECT_ALL}.value": table_sync.SELECT_PAGE,
}


def register_products_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    cfg = ctx.global_config
    form_invalid_outputs = [
        Output(cid, "invalid", allow_duplicate=True) for cid in PRODUCT_FORM_FIELDS.values()
    ]
    form_feedback_outputs = [
        Output(feedback_id(cid), "children", allow_duplicate=True) for cid in PRODUCT_FORM_FIELDS.values()
    ]

    # ---------------------------------------------------------
    # 1. Session data: sample products on first visit
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.PRODUCTS, "data"),
        Input(IDs.Control.URL, "pathname"),
        State(IDs.Store.PRODUCTS, "data"),
    )
    def ensure_products_loaded(_pathname, products_data):
        if store_from_data(products_data) is not None:
            raise exceptions.PreventUpdate
        return ctx.product_service().load().to_dict()

    # ---------------------------------------------------------
    # 2. Query state -> table (single owner of the query state)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.QUERY_STATE, "data"),
        Output(TABLE, "data"),
        Output(TABLE, "page_current"),
        Output(TABLE, "page_count"),
        Output(TABLE, "page_size"),
        Output(TABLE, "sort_by"),
        Output(TABLE, "selected_rows"),
        Output(IDs.Control.PRODUCTS_SELECT_ALL, "value"),
        Output(IDs.Control.PRODUCTS_SEARCH, "value"),
        Output(IDs.Control.PRODUCTS_PAGE_SIZE, "value"),
        Output(IDs.Control.PRODUCTS_SUMMARY, "children"),
        Output(IDs.Control.PRODUCTS_BULK_DELETE_BTN, "children"),
        Output(IDs.Control.PRODUCTS_BULK_DELETE_BTN, "disabled"),
        Output(IDs.Control.PRODUCTS_CLEAR_SEARCH, "style"),
        Input(IDs.Control.PRODUCTS_SEARCH, "value"),
        Input(IDs.Control.PRODUCTS_PAGE_SIZE, "value"),
        Input(TABLE, "sort_by"),
        Input(TABLE, "page_current"),
        Input(TABLE, "selected_row_ids"),
        Input(IDs.Control.PRODUCTS_SELECT_ALL, "value"),
        Input(IDs.Store.PRODUCTS, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
    )
    def sync_table(search, page_size, sort_by, page_current, selected_row_ids, select_all,
                   products_data, state_data):
        """
        Apply whichever control fired to the query state, then re-derive the
        visible page. On the first render the stored state wins and is pushed
        back into the controls, so the query survives in-app navigation.
        """
        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate

        state = state_from_data(state_data, cfg.default_page_size)
        fired = triggered_props()
        initial = not fired

        inputs = TableInputs(
            fired=frozenset(name for prop, name in CONTROL_PROPS.items() if prop in fired),
            search=search,
            page_size=page_size,
            sort_by=sort_by,
            page_current=page_current,
            selected_row_ids=selected_row_ids,
            select_page=bool(select_all),
        )
        view = apply_table_inputs(store, state, inputs)
        if view is None:
            raise exceptions.PreventUpdate

        rows = product_rows(view.paginated)
        n_selected = len(state.selected_ids)
        all_ticked = bool(view.page_ids) and set(view.page_ids) <= set(state.selected_ids)

        summary = view.showing_text()
        if state.search_term:
            summary = f'{summary} matching "{state.search_term}"'

        return (
            state.to_dict(),
            rows,
            state.current_page - 1,
            max(1, view.total_pages),
            state.items_per_page,
            sort_by_for(state),
            selected_rows_for(rows, state.selected_ids),
            all_ticked,
            state.search_term if initial else dash.no_update,
            str(state.items_per_page) if initial else dash.no_update,
            summary,
            f"Delete Selected ({n_selected})" if n_selected else "Delete Selected",
            n_selected == 0,
            {"display": "inline-block"} if state.search_term else {"display": "none"},
        )

    @app.callback(
        Output(IDs.Control.PRODUCTS_SEARCH, "value", allow_duplicate=True),
        Input(IDs.Control.PRODUCTS_CLEAR_SEARCH, "n_clicks"),
        prevent_initial_call=True,
    )
    def clear_search(n_clicks):
        if not n_clicks:
            raise exceptions.PreventUpdate
        return ""

    # ---------------------------------------------------------
    # 3. Dialogs: add / edit / delete confirmation
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PRODUCT_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Control.PRODUCT_MODAL_TITLE, "children"),
        Output(IDs.Control.PRODUCT_FORM_NAME, "value"),
        Output(IDs.Control.PRODUCT_FORM_CATEGORY, "value"),
        Output(IDs.Control.PRODUCT_FORM_PRICE, "value"),
        Output(IDs.Control.PRODUCT_FORM_STOCK, "value"),
        Output(IDs.Control.PRODUCT_FORM_STATUS, "value"),
        Output(IDs.Store.EDITING_ID, "data"),
        *form_invalid_outputs,
        *form_feedback_outputs,
        Output(IDs.Control.DELETE_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Control.DELETE_MODAL_BODY, "children"),
        Output(IDs.Store.PENDING_DELETE, "data", allow_duplicate=True),
        Output(TABLE, "active_cell"),
        Input(TABLE, "active_cell"),
        Input(IDs.Control.PRODUCTS_ADD_BTN, "n_clicks"),
        Input(IDs.Control.PRODUCT_FORM_CANCEL, "n_clicks"),
        State(IDs.Store.PRODUCTS, "data"),
        prevent_initial_call=True,
    )
    def open_dialogs(active_cell, add_clicks, cancel_clicks, products_data):
        n_fields = len(FORM_FIELD_NAMES)
        clean_form = [False] * n_fields + [""] * n_fields
        untouched = (dash.no_update,) * 8 + (dash.no_update,) * (2 * n_fields)
        no_delete = (dash.no_update,) * 3

        trigger = dash.ctx.triggered_id

        if trigger == IDs.Control.PRODUCTS_ADD_BTN:
            if not add_clicks:
                raise exceptions.PreventUpdate
            return (True, "Add New Product", *EMPTY_FORM, None, *clean_form, *no_delete, dash.no_update)

        if trigger == IDs.Control.PRODUCT_FORM_CANCEL:
            if not cancel_clicks:
                raise exceptions.PreventUpdate
            return (False, *(dash.no_update,) * 7, *clean_form, *no_delete, dash.no_update)

        if trigger != TABLE or not active_cell:
            raise exceptions.PreventUpdate

        column = active_cell.get("column_id")
        record_id = active_cell.get("row_id")
        if column not in (EDIT_COLUMN, DELETE_COLUMN) or not record_id:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        try:
            record = store.get(record_id) if store is not None else None
        except NotFoundError:
            record = None
        if record is None:
            logger.warning("Row action on missing product", extra={"product_id": record_id})
            return (*untouched, *no_delete, None)

        if column == EDIT_COLUMN:
            return (
                True,
                "Edit Product",
                record.name,
                record.category,
                record.price,
                record.stock,
                record.status,
                record.id,
                *clean_form,
                *no_delete,
                None,
            )

        body = [
            "Are you sure you want to delete ",
            html.Strong(record.name),
            "? This action cannot be undone.",
        ]
        return (*untouched, True, body, record.id, None)

    @app.callback(
        Output(IDs.Store.PRODUCTS, "data", allow_duplicate=True),
        Output(IDs.Control.PRODUCT_MODAL, "is_open", allow_duplicate=True),
        *form_invalid_outputs,
        *form_feedback_outputs,
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.PRODUCT_FORM_SAVE, "n_clicks"),
        State(IDs.Control.PRODUCT_FORM_NAME, "value"),
        State(IDs.Control.PRODUCT_FORM_CATEGORY, "value"),
        State(IDs.Control.PRODUCT_FORM_PRICE, "value"),
        State(IDs.Control.PRODUCT_FORM_STOCK, "value"),
        State(IDs.Control.PRODUCT_FORM_STATUS, "value"),
        State(IDs.Store.EDITING_ID, "data"),
        State(IDs.Store.PRODUCTS, "data"),
        prevent_initial_call=True,
    )
    def save_product(n_clicks, name, category, price, stock, status, editing_id, products_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate

        notifier = Notifier()
        service = ctx.product_service(notifier)
        values = {"name": name, "category": category, "price": price, "stock": stock, "status": status}

        try:
            outcome = service.submit(store, values, editing_id=editing_id)
        except NotFoundError as e:
            notifier.error(str(e))
            invalid, messages = field_feedback(FORM_FIELD_NAMES, {})
            return (dash.no_update, False, *invalid, *messages, notification_payload(notifier))

        invalid, messages = field_feedback(FORM_FIELD_NAMES, outcome.errors)
        if not outcome.ok:
            return (dash.no_update, True, *invalid, *messages, dash.no_update)

        return (store.to_dict(), False, *invalid, *messages, notification_payload(notifier))

    @app.callback(
        Output(IDs.Store.PRODUCTS, "data", allow_duplicate=True),
        Output(IDs.Store.QUERY_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.DELETE_MODAL, "is_open", allow_duplicate=True),
        Output(IDs.Store.PENDING_DELETE, "data", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.DELETE_CONFIRM, "n_clicks"),
        Input(IDs.Control.DELETE_CANCEL, "n_clicks"),
        State(IDs.Store.PENDING_DELETE, "data"),
        State(IDs.Store.PRODUCTS, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
        prevent_initial_call=True,
    )
    def confirm_delete(confirm_clicks, cancel_clicks, pending_id, products_data, state_data):
        trigger = dash.ctx.triggered_id
        if trigger == IDs.Control.DELETE_CANCEL:
            if not cancel_clicks:
                raise exceptions.PreventUpdate
            return dash.no_update, dash.no_update, False, None, dash.no_update

        if not confirm_clicks or not pending_id:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate
        state = state_from_data(state_data, cfg.default_page_size)

        notifier = Notifier()
        try:
            ctx.product_service(notifier).delete(store, state, pending_id)
        except NotFoundError as e:
            notifier.error(str(e))
            return dash.no_update, dash.no_update, False, None, notification_payload(notifier)

        return store.to_dict(), state.to_dict(), False, None, notification_payload(notifier)

    # ---------------------------------------------------------
    # 4. Bulk delete, refresh, export
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.PRODUCTS, "data", allow_duplicate=True),
        Output(IDs.Store.QUERY_STATE, "data", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Input(IDs.Control.PRODUCTS_BULK_DELETE_BTN, "n_clicks"),
        State(IDs.Store.PRODUCTS, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
        prevent_initial_call=True,
    )
    def bulk_delete(n_clicks, products_data, state_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        state = state_from_data(state_data, cfg.default_page_size)
        if store is None or not state.selected_ids:
            raise exceptions.PreventUpdate

        notifier = Notifier()
        ctx.product_service(notifier).bulk_delete(store, state)
        return store.to_dict(), state.to_dict(), notification_payload(notifier)

    # Refresh runs as two round trips: the ticket issued by begin_refresh
    # travels through a store to complete_refresh, which lands the new
    # sample only if nothing touched the products in between.
    @app.callback(
        Output(IDs.Store.REFRESH_TICKET, "data"),
        Output(IDs.Store.PRODUCTS, "data", allow_duplicate=True),
        Output(IDs.Store.QUERY_STATE, "data", allow_duplicate=True),
        Output(IDs.Control.PRODUCTS_SEARCH, "value", allow_duplicate=True),
        Output(IDs.Control.PRODUCTS_REFRESH_BTN, "disabled", allow_duplicate=True),
        Input(IDs.Control.PRODUCTS_REFRESH_BTN, "n_clicks"),
        State(IDs.Store.PRODUCTS, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
        prevent_initial_call=True,
    )
    def begin_refresh(n_clicks, products_data, state_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate
        state = state_from_data(state_data, cfg.default_page_size)

        ticket = ctx.product_service().begin_refresh(store, state)
        logger.info("Refresh requested", extra={"generation": ticket.generation, "version": ticket.version})
        # The store payload carries the bumped generation, which supersedes older tickets
        return ticket.to_dict(), store.to_dict(), state.to_dict(), "", True

    @app.callback(
        Output(IDs.Store.PRODUCTS, "data", allow_duplicate=True),
        Output(IDs.Store.QUERY_STATE, "data", allow_duplicate=True),
        Output(IDs.Store.NOTIFICATION, "data", allow_duplicate=True),
        Output(IDs.Control.PRODUCTS_REFRESH_BTN, "disabled", allow_duplicate=True),
        Input(IDs.Store.REFRESH_TICKET, "data"),
        State(IDs.Store.PRODUCTS, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
        prevent_initial_call=True,
    )
    def complete_refresh(ticket_data, products_data, state_data):
        ticket = RefreshTicket.from_dict(ticket_data)
        if ticket is None:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        if store is None:
            return dash.no_update, dash.no_update, dash.no_update, False
        state = state_from_data(state_data, cfg.default_page_size)

        notifier = Notifier()
        landed = ctx.product_service(notifier).complete_refresh(store, state, ticket)
        if not landed:
            return dash.no_update, dash.no_update, notification_payload(notifier), False
        return store.to_dict(), state.to_dict(), notification_payload(notifier), False

    @app.callback(
        Output(IDs.Control.PRODUCTS_DOWNLOAD, "data"),
        Input(IDs.Control.PRODUCTS_EXPORT_BTN, "n_clicks"),
        State(IDs.Store.PRODUCTS, "data"),
        State(IDs.Store.QUERY_STATE, "data"),
        prevent_initial_call=True,
    )
    def export_products(n_clicks, products_data, state_data):
        if not n_clicks:
            raise exceptions.PreventUpdate

        store = store_from_data(products_data)
        if store is None:
            raise exceptions.PreventUpdate
        state = state_from_data(state_data, cfg.default_page_size)

        csv_text = ctx.product_service().export_csv(store, state)
        logger.info("Exported products CSV", extra={"n_products": len(store)})
        return dcc.send_string(csv_text, "products.csv")
