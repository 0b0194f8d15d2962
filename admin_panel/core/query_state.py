from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .product import PRODUCT_FIELDS

SORT_ASC = "asc"
SORT_DESC = "desc"

DEFAULT_ITEMS_PER_PAGE = 10


@dataclass
class QueryState:
    """
    Transient per-session parameters controlling what slice of the store is visible.

    Fields:

    - search_term: case-insensitive substring matched against name, category and id
    - sort_field: product field to order by, or None for store order
    - sort_direction: "asc" or "desc"
    - current_page: 1-based page index
    - items_per_page: page size
    - selected_ids: ids ticked on the current page

    Selection is page-scoped: anything that changes which rows are on screen
    (page, search, page size, sort) clears it.
    """

    search_term: str = ""
    sort_field: Optional[str] = None
    sort_direction: str = SORT_ASC
    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    selected_ids: List[str] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Mutators (the presentation layer's only way to change the query)
    # ------------------------------------------------------------------
    def set_search_term(self, term: Optional[str]) -> None:
        term = term or ""
        if term == self.search_term:
            return
        self.search_term = term
        self.current_page = 1
        self.selected_ids = []

    def set_sort(self, sort_field: str) -> None:
        """Same field flips the direction; a new field starts ascending."""
        if sort_field not in PRODUCT_FIELDS:
            raise ValueError(f"Cannot sort by unknown field '{sort_field}'")
        if self.sort_field == sort_field:
            self.sort_direction = SORT_DESC if self.sort_direction == SORT_ASC else SORT_ASC
        else:
            self.sort_field = sort_field
            self.sort_direction = SORT_ASC
        self.selected_ids = []

    def set_page(self, page: int, total_pages: int) -> None:
        """Move to `page`, clamped into [1, total_pages]."""
        page = max(1, min(int(page), max(1, total_pages)))
        if page == self.current_page:
            return
        self.current_page = page
        self.selected_ids = []

    def set_items_per_page(self, items_per_page: int) -> None:
        items_per_page = int(items_per_page)
        if items_per_page <= 0:
            raise ValueError("items_per_page must be positive")
        if items_per_page == self.items_per_page:
            return
        self.items_per_page = items_per_page
        self.current_page = 1
        self.selected_ids = []

    def toggle_select(self, record_id: str, checked: bool) -> None:
        if checked and record_id not in self.selected_ids:
            self.selected_ids.append(record_id)
        elif not checked and record_id in self.selected_ids:
            self.selected_ids.remove(record_id)

    def select_all(self, checked: bool, page_ids: Iterable[str]) -> None:
        """Select every id on the current page, or clear the selection."""
        self.selected_ids = list(page_ids) if checked else []

    def prune_selection(self, visible_ids: Iterable[str]) -> None:
        """Drop selected ids that are no longer in the filtered result."""
        keep = set(visible_ids)
        self.selected_ids = [i for i in self.selected_ids if i in keep]

    def reset(self) -> None:
        """Back to defaults, keeping the page size (used by refresh)."""
        self.search_term = ""
        self.sort_field = None
        self.sort_direction = SORT_ASC
        self.current_page = 1
        self.selected_ids = []

    # ------------------------------------------------------------------
    # (De)serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_term": self.search_term,
            "sort_field": self.sort_field,
            "sort_direction": self.sort_direction,
            "current_page": self.current_page,
            "items_per_page": self.items_per_page,
            "selected_ids": list(self.selected_ids),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> QueryState:
        if not data:
            return cls()
        sort_direction = data.get("sort_direction", SORT_ASC)
        if sort_direction not in (SORT_ASC, SORT_DESC):
            sort_direction = SORT_ASC
        sort_field = data.get("sort_field")
        if sort_field not in PRODUCT_FIELDS:
            sort_field = None
        return cls(
            search_term=str(data.get("search_term") or ""),
            sort_field=sort_field,
            sort_direction=sort_direction,
            current_page=max(1, int(data.get("current_page", 1))),
            items_per_page=max(1, int(data.get("items_per_page", DEFAULT_ITEMS_PER_PAGE))),
            selected_ids=list(data.get("selected_ids", [])),
        )
