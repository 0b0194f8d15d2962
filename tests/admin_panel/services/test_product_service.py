from __future__ import annotations

import io
import random

import pandas as pd
import pytest

from admin_panel.core.exceptions import NotFoundError
from admin_panel.core.product import Product
from admin_panel.core.query_state import QueryState
from admin_panel.core.record_store import RecordStore
from admin_panel.services.notifications import SUCCESS, WARNING, Notifier
from admin_panel.services.product_service import ProductService


def _abc_store() -> RecordStore:
    return RecordStore(
        [
            Product(id="1", name="Alpha", category="Books", price=10.0, stock=1),
            Product(id="2", name="Bravo", category="Toys", price=20.0, stock=2),
            Product(id="3", name="Charlie", category="Sports", price=30.0, stock=3),
        ]
    )


@pytest.fixture
def service():
    return ProductService(Notifier(), sample_size=12, rng=random.Random(7))


def test_load_builds_sample_store(service):
    store = service.load()
    assert len(store) == 12
    assert store.ids()[0] == "PRD-1000"


def test_submit_inserts_new_product_at_front(service):
    store = RecordStore()

    outcome = service.submit(
        store, {"name": "Widget", "category": "Toys", "price": "9.99", "stock": "5", "status": "active"}
    )

    assert outcome.ok and outcome.created
    assert outcome.record.id == "PRD-1000"
    assert store.records == [outcome.record]
    note = service.notifier.drain()[-1]
    assert note.message == "Product Widget has been added."
    assert note.level == SUCCESS


def test_submit_rejects_invalid_values_without_touching_store(service):
    store = _abc_store()
    version = store.version

    outcome = service.submit(store, {"name": "W", "category": "Toys", "price": 1, "stock": 1, "status": "active"})

    assert not outcome.ok
    assert outcome.errors == {"name": "Name must be at least 2 characters."}
    assert store.version == version
    assert service.notifier.drain() == []


def test_submit_updates_existing_product_keeping_id(service):
    store = _abc_store()

    outcome = service.submit(
        store,
        {"id": "ignored", "name": "Bravo II", "category": "Toys", "price": 25, "stock": 4, "status": "inactive"},
        editing_id="2",
    )

    assert outcome.ok and not outcome.created
    assert store.get("2").name == "Bravo II"
    assert store.ids() == ["1", "2", "3"]
    assert service.notifier.drain()[-1].message == "Product Bravo II has been updated."


def test_update_of_deleted_product_raises(service):
    store = _abc_store()
    store.delete_by_id("2")

    with pytest.raises(NotFoundError):
        service.submit(
            store,
            {"name": "Bravo", "category": "Toys", "price": 1, "stock": 1, "status": "active"},
            editing_id="2",
        )


def test_delete_then_reselect_keeps_remaining_selection(service):
    store = _abc_store()
    state = QueryState(items_per_page=3)
    state.select_all(True, ["1", "2", "3"])

    removed = service.delete(store, state, "2")

    assert removed.name == "Bravo"
    assert set(state.selected_ids) == {"1", "3"}
    assert [r.name for r in store] == ["Alpha", "Charlie"]
    assert service.notifier.drain()[-1].message == "Product Bravo has been deleted."


def test_delete_missing_product_raises(service):
    with pytest.raises(NotFoundError):
        service.delete(_abc_store(), QueryState(), "9")


def test_bulk_delete_clears_selection_and_clamps_page(service):
    store = _abc_store()
    state = QueryState(items_per_page=2, current_page=2)
    state.selected_ids = ["3"]
    state.toggle_select("2", True)

    n = service.bulk_delete(store, state)

    assert n == 2
    assert store.ids() == ["1"]
    assert state.selected_ids == []
    assert state.current_page == 1
    assert service.notifier.drain()[-1].message == "2 products have been deleted."


def test_bulk_delete_with_nothing_selected_is_a_no_op(service):
    store = _abc_store()
    assert service.bulk_delete(store, QueryState()) == 0
    assert len(store) == 3
    assert service.notifier.drain() == []


def test_tracking_reconciles_state_on_direct_store_mutations(service):
    store = _abc_store()
    state = QueryState(items_per_page=1, current_page=3)
    state.select_all(True, ["3"])

    with service.tracking(store, state):
        store.delete_by_id("3")

    assert state.selected_ids == []
    assert state.current_page == 2

    # the listener is gone once the block exits
    store.delete_by_ids(["1", "2"])
    assert state.current_page == 2


def test_tracking_removes_listener_when_the_mutation_fails(service):
    store = _abc_store()
    state = QueryState(items_per_page=1, current_page=3)

    with pytest.raises(ValueError):
        with service.tracking(store, state):
            store.insert(Product(id="1", name="Dup", category="Books", price=1.0, stock=1))

    store.delete_by_id("3")
    assert state.current_page == 3


def test_refresh_replaces_records_and_resets_query(service):
    store = _abc_store()
    state = QueryState(search_term="alp", current_page=2, selected_ids=["1"])

    ticket = service.begin_refresh(store, state)
    assert service.complete_refresh(store, state, ticket)

    assert len(store) == 12
    assert state.search_term == ""
    assert state.selected_ids == []
    assert service.notifier.drain()[-1].message == "Data refreshed successfully!"


def test_refresh_is_discarded_when_store_changes_meanwhile(service):
    store = _abc_store()
    state = QueryState()

    ticket = service.begin_refresh(store, state)
    store.delete_by_id("1")

    assert not service.complete_refresh(store, state, ticket)
    assert store.ids() == ["2", "3"]
    assert service.notifier.drain()[-1].level == WARNING


def test_older_refresh_cannot_land_after_newer_one(service):
    store = _abc_store()
    state = QueryState()

    first = service.begin_refresh(store, state)
    second = service.begin_refresh(store, state)

    assert service.complete_refresh(store, state, second)
    assert not service.complete_refresh(store, state, first)


def test_export_csv_uses_filtered_sorted_view(service):
    store = _abc_store()
    state = QueryState(search_term="a", sort_field="price", sort_direction="desc")

    frame = pd.read_csv(io.StringIO(service.export_csv(store, state)), dtype={"id": str})

    assert list(frame.columns) == ["id", "name", "category", "price", "stock", "status"]
    assert frame["id"].tolist() == ["3", "2", "1"]


def test_export_csv_of_empty_store_has_header_only(service):
    csv_text = service.export_csv(RecordStore(), QueryState())
    assert csv_text.strip() == "id,name,category,price,stock,status"
