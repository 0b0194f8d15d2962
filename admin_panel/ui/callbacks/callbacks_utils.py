from __future__ import annotations

import logging
from typing import Any, Optional, Set

import dash

from admin_panel.core.query_state import QueryState
from admin_panel.core.record_store import RecordStore
from admin_panel.services.notifications import Notifier

logger = logging.getLogger(__name__)


def triggered_props() -> Set[str]:
    """
    "component-id.prop" strings that fired the running callback.
    Empty on an initial call.
    """
    return {t["prop_id"] for t in dash.ctx.triggered if t.get("prop_id") not in (None, ".")}


def store_from_data(data: Any) -> Optional[RecordStore]:
    if not isinstance(data, dict):
        return None
    try:
        return RecordStore.from_dict(data)
    except (KeyError, TypeError, ValueError):
        logger.exception("Invalid products store payload")
        return None


def state_from_data(data: Any, default_page_size: int) -> QueryState:
    if not isinstance(data, dict) or not data:
        return QueryState(items_per_page=default_page_size)
    try:
        return QueryState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid query-state payload: %r", data)
        return QueryState(items_per_page=default_page_size)


def notification_payload(notifier: Notifier):
    """
    Drain the notifier into the toast store. Only the newest notification is
    shown; no_update when nothing was published.
    """
    notes = notifier.drain()
    return notes[-1].to_dict() if notes else dash.no_update
