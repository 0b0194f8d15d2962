from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .product import Product
from .query_state import SORT_DESC, QueryState

SEARCH_FIELDS: tuple[str, ...] = ("name", "category", "id")


@dataclass(frozen=True)
class DerivedView:
    """
    Filtered, sorted and paginated result for one (store, query state) pair.

    - filtered: records matching the search term, store order
    - sorted: filtered, ordered by the sort field (stable)
    - paginated: the slice shown on the current page
    - total_pages: ceil(len(filtered) / items_per_page)
    - start_index / end_index: 0-based bounds of the page inside `sorted`
    """
    filtered: List[Product]
    sorted: List[Product]
    paginated: List[Product]
    total_pages: int
    current_page: int
    start_index: int
    end_index: int

    @property
    def total(self) -> int:
        return len(self.filtered)

    @property
    def page_ids(self) -> List[str]:
        return [r.id for r in self.paginated]

    @property
    def filtered_ids(self) -> List[str]:
        return [r.id for r in self.filtered]

    def showing_text(self, noun: str = "products") -> str:
        if not self.total:
            return f"No {noun} found"
        return f"Showing {self.start_index + 1} to {self.end_index} of {self.total} {noun}"


def matches(record: Product, search_term: str) -> bool:
    if not search_term:
        return True
    needle = search_term.lower()
    for name in SEARCH_FIELDS:
        value = getattr(record, name)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_records(records: Iterable[Product], search_term: str) -> List[Product]:
    return [r for r in records if matches(r, search_term)]


def sort_records(records: Sequence[Product], sort_field: Optional[str], sort_direction: str) -> List[Product]:
    """
    Order by the native value of `sort_field`. Python's sort is stable in
    both directions, so ties keep their relative order.
    """
    if not sort_field:
        return list(records)
    return sorted(
        records,
        key=lambda r: getattr(r, sort_field),
        reverse=sort_direction == SORT_DESC,
    )


def total_pages_for(n_items: int, items_per_page: int) -> int:
    return math.ceil(n_items / items_per_page)


def derive_view(records: Iterable[Product], state: QueryState) -> DerivedView:
    """
    Pure function of (store snapshot, query state). Nothing is cached, so
    calling it after every mutation or query change is the recompute step.
    """
    filtered = filter_records(records, state.search_term)
    ordered = sort_records(filtered, state.sort_field, state.sort_direction)

    per_page = state.items_per_page
    total_pages = total_pages_for(len(filtered), per_page)
    start = (state.current_page - 1) * per_page
    paginated = ordered[start:start + per_page]

    return DerivedView(
        filtered=filtered,
        sorted=ordered,
        paginated=paginated,
        total_pages=total_pages,
        current_page=state.current_page,
        start_index=start,
        end_index=min(start + per_page, len(filtered)),
    )


def reconcile(records: Iterable[Product], state: QueryState) -> DerivedView:
    """
    Bring `state` back in line with `records` after the data changed
    underneath it: selected ids that are no longer visible are dropped and
    a page past the end moves back to the last page.

    Returns the view for the adjusted state.
    """
    records = list(records)
    view = derive_view(records, state)
    state.prune_selection(view.filtered_ids)
    last_page = max(1, view.total_pages)
    if state.current_page > last_page:
        state.current_page = last_page
        view = derive_view(records, state)
    return view
