from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

import dash_bootstrap_components as dbc
from dash import dash_table, html
from dash.dash_table import FormatTemplate

from admin_panel.core.product import Product
from admin_panel.core.query_state import QueryState
from admin_panel.services.notifications import Notification
from admin_panel.ui.ids import feedback_id

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

EDIT_COLUMN = "edit"
DELETE_COLUMN = "delete"
ACTION_COLUMNS = (EDIT_COLUMN, DELETE_COLUMN)

TOAST_HEADERS = {
    "success": "Success",
    "info": "Notice",
    "warning": "Warning",
    "danger": "Error",
}


def product_columns() -> List[Dict[str, Any]]:
    money = FormatTemplate.money(2)
    return [
        {"name": "ID", "id": "id"},
        {"name": "Name", "id": "name"},
        {"name": "Category", "id": "category"},
        {"name": "Price", "id": "price", "type": "numeric", "format": money},
        {"name": "Stock", "id": "stock", "type": "numeric"},
        {"name": "Status", "id": "status"},
        {"name": "", "id": EDIT_COLUMN},
        {"name": "", "id": DELETE_COLUMN},
    ]


def product_rows(records: Iterable[Product]) -> List[Dict[str, Any]]:
    rows = []
    for r in records:
        row = r.to_dict()
        row[EDIT_COLUMN] = "Edit"
        row[DELETE_COLUMN] = "Delete"
        rows.append(row)
    return rows


def sort_by_for(state: QueryState) -> List[Dict[str, str]]:
    if not state.sort_field:
        return []
    return [{"column_id": state.sort_field, "direction": state.sort_direction}]


def selected_rows_for(rows: Sequence[Dict[str, Any]], selected_ids: Iterable[str]) -> List[int]:
    """DataTable selection is by row index; map ids onto the rendered page."""
    wanted = set(selected_ids)
    return [i for i, row in enumerate(rows) if row.get("id") in wanted]


def products_table(table_id: str, page_size: int) -> dash_table.DataTable:
    """
    Server-driven DataTable: paging, sorting and filtering are all done by
    the query view, the table only renders the current page.
    """
    return dash_table.DataTable(
        id=table_id,
        columns=product_columns(),
        data=[],
        row_selectable="multi",
        selected_rows=[],
        page_action="custom",
        page_current=0,
        page_size=page_size,
        page_count=1,
        sort_action="custom",
        sort_mode="single",
        sort_by=[],
        filter_action="none",
        style_table={"overflowX": "auto"},
        style_as_list_view=True,
        style_cell={
            "fontFamily": FONT_FAMILY,
            "fontSize": "13px",
            "padding": "8px 10px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "60px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": FONT_FAMILY,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={"borderBottom": "1px solid #e5e7eb"},
        style_data_conditional=[
            {"if": {"filter_query": '{status} = "active"', "column_id": "status"}, "color": "#15803d", "fontWeight": "600"},
            {"if": {"filter_query": '{status} = "inactive"', "column_id": "status"}, "color": "#b91c1c", "fontWeight": "600"},
            {"if": {"column_id": EDIT_COLUMN}, "color": "#2563eb", "cursor": "pointer", "width": "60px"},
            {"if": {"column_id": DELETE_COLUMN}, "color": "#dc2626", "cursor": "pointer", "width": "60px"},
        ],
    )


def form_field(label: str, control: Any, field_id: str, *, width: Optional[int] = None) -> Any:
    """Label + control + FormFeedback slot, optionally wrapped in a column."""
    group = html.Div(
        [
            dbc.Label(label, html_for=field_id),
            control,
            dbc.FormFeedback(id=feedback_id(field_id), type="invalid"),
        ],
        className="mb-3",
    )
    return dbc.Col(group, md=width) if width else group


def field_feedback(field_names: Sequence[str], errors: Dict[str, str]) -> tuple[list, list]:
    """(invalid flags, messages) in `field_names` order, for positional callback outputs."""
    invalid = [name in errors for name in field_names]
    messages = [errors.get(name, "") for name in field_names]
    return invalid, messages


def toast_props(note: Optional[Notification]) -> tuple[bool, str, str, str]:
    """(is_open, header, body, icon) for the app toast."""
    if note is None:
        return False, "", "", "info"
    header = note.title or TOAST_HEADERS.get(note.level, "Notice")
    return True, header, note.message, note.level
