"""
Core domain layer: product records, the record store, query state and
the derived (filtered/sorted/paginated) view, calendar events and the
page registry
"""

from .product import Product
from .record_store import RecordStore, RefreshTicket
from .query_state import QueryState
from .query_view import DerivedView, derive_view

__all__ = ["Product", "RecordStore", "RefreshTicket", "QueryState", "DerivedView", "derive_view"]
