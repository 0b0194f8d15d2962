from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional

from admin_panel.core.product import PRODUCT_FIELDS
from admin_panel.core.query_state import QueryState
from admin_panel.core.query_view import DerivedView, derive_view, reconcile
from admin_panel.core.record_store import RecordStore

logger = logging.getLogger(__name__)

# Names of the table controls that can fire
SEARCH = "search"
PAGE_SIZE = "page_size"
SORT = "sort"
PAGE = "page"
ROW_SELECTION = "row_selection"
SELECT_PAGE = "select_page"


@dataclass
class TableInputs:
    """
    Current values of the products table controls.

    - fired: names of the controls that triggered this update (empty on first render)
    - sort_by: DataTable sort_by list; empty after the table cycled a column off
    - page_current: 0-based page index as the DataTable reports it
    - selected_row_ids: ids ticked in the table
    - select_page: value of the "select all on this page" checkbox
    """
    fired: FrozenSet[str] = frozenset()
    search: Optional[str] = None
    page_size: Any = None
    sort_by: Optional[List[Dict[str, Any]]] = None
    page_current: Optional[int] = None
    selected_row_ids: Optional[List[str]] = None
    select_page: bool = False


def sort_column(sort_by: Optional[List[Dict[str, Any]]], current: Optional[str]) -> Optional[str]:
    # The table cycles asc -> desc -> none; an empty sort_by is a click on the current column
    if sort_by:
        return sort_by[0].get("column_id")
    return current


def apply_table_inputs(store: RecordStore, state: QueryState, inputs: TableInputs) -> Optional[DerivedView]:
    """
    Apply the controls that fired to `state` and return the view to render.

    The state is reconciled with the store on every pass, so rows removed
    elsewhere drop out of the selection and the page stays in range.

    Returns None when only the row selection fired and it echoes back what
    the state already holds.
    """
    fired = inputs.fired

    if SEARCH in fired:
        state.set_search_term(inputs.search or "")

    if PAGE_SIZE in fired and inputs.page_size:
        try:
            state.set_items_per_page(int(inputs.page_size))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid page size: %r", inputs.page_size)

    if SORT in fired:
        column = sort_column(inputs.sort_by, state.sort_field)
        if column in PRODUCT_FIELDS:
            state.set_sort(column)

    if PAGE in fired and inputs.page_current is not None:
        state.set_page(int(inputs.page_current) + 1, derive_view(store, state).total_pages)

    view = reconcile(store, state)

    if SELECT_PAGE in fired:
        state.select_all(bool(inputs.select_page), view.page_ids)
    elif ROW_SELECTION in fired:
        ticked = set(inputs.selected_row_ids or [])
        if fired == {ROW_SELECTION} and ticked == set(state.selected_ids):
            return None
        for record_id in view.page_ids:
            state.toggle_select(record_id, record_id in ticked)

    return view
