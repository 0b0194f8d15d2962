from __future__ import annotations

import pytest

from admin_panel.core.product import Product
from admin_panel.core.query_state import QueryState
from admin_panel.core.query_view import derive_view, filter_records, sort_records, total_pages_for
from admin_panel.core.record_store import RecordStore


def _records():
    return [
        Product(id="PRD-1000", name="Smart Watch", category="Electronics", price=99.0, stock=3),
        Product(id="PRD-1001", name="Yoga Mat", category="Sports", price=25.0, stock=40),
        Product(id="PRD-1002", name="Blender", category="Home & Kitchen", price=25.0, stock=12),
        Product(id="PRD-1003", name="Board Game", category="Toys", price=30.5, stock=0, status="inactive"),
        Product(id="PRD-1004", name="Perfume", category="Beauty", price=45.0, stock=8),
    ]


def test_empty_search_matches_everything():
    assert len(filter_records(_records(), "")) == 5


def test_search_is_case_insensitive_over_name_category_and_id():
    records = _records()

    assert [r.id for r in filter_records(records, "WATCH")] == ["PRD-1000"]
    assert [r.id for r in filter_records(records, "sports")] == ["PRD-1001"]
    assert [r.id for r in filter_records(records, "prd-1004")] == ["PRD-1004"]
    assert filter_records(records, "zzz") == []


def test_sort_by_price_is_stable_for_ties_in_both_directions():
    records = _records()

    asc = sort_records(records, "price", "asc")
    assert [r.id for r in asc][:2] == ["PRD-1001", "PRD-1002"]

    desc = sort_records(records, "price", "desc")
    # ties keep store order when reversed too
    assert [r.id for r in desc][-2:] == ["PRD-1001", "PRD-1002"]
    assert desc[0].price == 99.0


def test_sort_strings_lexicographically():
    names = [r.name for r in sort_records(_records(), "name", "asc")]
    assert names == sorted(names)


def test_no_sort_field_keeps_store_order():
    assert [r.id for r in sort_records(_records(), None, "asc")] == [r.id for r in _records()]


@pytest.mark.parametrize("n, per_page, expected", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (45, 10, 5)])
def test_total_pages(n, per_page, expected):
    assert total_pages_for(n, per_page) == expected


def test_derive_view_paginates_and_reports_bounds():
    store = RecordStore(_records())
    state = QueryState(items_per_page=2, current_page=2)

    view = derive_view(store, state)

    assert view.total == 5
    assert view.total_pages == 3
    assert view.page_ids == ["PRD-1002", "PRD-1003"]
    assert (view.start_index, view.end_index) == (2, 4)
    assert view.showing_text() == "Showing 3 to 4 of 5 products"


def test_derive_view_last_page_is_partial():
    view = derive_view(_records(), QueryState(items_per_page=2, current_page=3))
    assert view.page_ids == ["PRD-1004"]
    assert view.showing_text() == "Showing 5 to 5 of 5 products"


def test_showing_text_when_nothing_matches():
    view = derive_view(_records(), QueryState(search_term="nothing-like-this"))
    assert view.total == 0
    assert view.total_pages == 0
    assert view.showing_text() == "No products found"


def test_search_resets_page_scenario():
    records = [
        Product(id=f"PRD-{1000 + i}", name=f"Item {i}", category="Books", price=10.0, stock=1)
        for i in range(30)
    ]
    records[4] = Product(id="PRD-1004", name="xylophone", category="Toys", price=10.0, stock=1)
    records[17] = Product(id="PRD-1017", name="Box", category="Toys", price=10.0, stock=1)

    state = QueryState(items_per_page=10)
    state.set_page(3, derive_view(records, state).total_pages)
    assert state.current_page == 3

    state.set_search_term("x")
    view = derive_view(records, state)

    assert state.current_page == 1
    assert view.total == 2
    assert view.total_pages == 1
