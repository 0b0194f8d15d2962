from __future__ import annotations

import pytest

from admin_panel.core.exceptions import NotFoundError, StaleOverwriteError
from admin_panel.core.product import Product, generate_products
from admin_panel.core.record_store import RecordStore, RefreshTicket


def _product(name: str = "Widget", pid: str | None = None, **kw) -> Product:
    return Product(
        id=pid,
        name=name,
        category=kw.get("category", "Toys"),
        price=kw.get("price", 9.99),
        stock=kw.get("stock", 5),
        status=kw.get("status", "active"),
    )


def test_insert_into_empty_store_assigns_prd_1000():
    store = RecordStore()
    stored = store.insert(_product())

    assert stored.id == "PRD-1000"
    assert store.ids() == ["PRD-1000"]
    assert store.version == 1


def test_insert_prepends_newest_first():
    store = RecordStore([_product("A", "PRD-1000"), _product("B", "PRD-1001")])
    stored = store.insert(_product("C"))

    assert stored.id == "PRD-1002"
    assert [r.name for r in store] == ["C", "A", "B"]


def test_insert_bumps_id_past_collision_after_delete():
    store = RecordStore([_product("A", "PRD-1000"), _product("B", "PRD-1001")])
    store.delete_by_id("PRD-1000")

    # len(store) == 1 would give PRD-1001, which is still taken
    stored = store.insert(_product("C"))

    assert stored.id == "PRD-1002"
    assert len(set(store.ids())) == len(store)


def test_insert_rejects_duplicate_explicit_id():
    store = RecordStore([_product("A", "PRD-1000")])
    with pytest.raises(ValueError):
        store.insert(_product("B", "PRD-1000"))
    assert len(store) == 1


def test_update_keeps_original_id():
    store = RecordStore([_product("A", "PRD-1000")])
    updated = store.update_by_id("PRD-1000", _product("Renamed", "PRD-9999", price=20.0))

    assert updated.id == "PRD-1000"
    assert store.get("PRD-1000").name == "Renamed"
    assert store.get("PRD-1000").price == 20.0


def test_update_missing_id_raises_not_found():
    store = RecordStore([_product("A", "PRD-1000")])
    with pytest.raises(NotFoundError) as exc:
        store.update_by_id("PRD-5000", _product("X"))

    assert exc.value.record_id == "PRD-5000"
    assert store.version == 0


def test_delete_is_idempotent():
    store = RecordStore([_product("A", "PRD-1000"), _product("B", "PRD-1001")])

    assert store.delete_by_id("PRD-1000") == 1
    version = store.version
    assert store.delete_by_id("PRD-1000") == 0
    # nothing removed -> no version bump
    assert store.version == version


def test_delete_by_ids_ignores_missing():
    store = RecordStore(generate_products(5))
    removed = store.delete_by_ids(["PRD-1001", "PRD-1003", "nope"])

    assert removed == 2
    assert store.ids() == ["PRD-1000", "PRD-1002", "PRD-1004"]


def test_get_missing_raises():
    with pytest.raises(NotFoundError):
        RecordStore().get("PRD-1000")


def test_listeners_are_notified_and_removable():
    store = RecordStore()
    seen = []
    remove = store.add_listener(lambda s, op: seen.append((op, s.version)))

    store.insert(_product())
    remove()
    store.insert(_product("Other"))

    assert seen == [("insert", 1)]


def test_replace_all_with_fresh_ticket_swaps_records():
    store = RecordStore(generate_products(3))
    ticket = store.begin_refresh()

    store.replace_all(generate_products(7), ticket=ticket)

    assert len(store) == 7


def test_replace_all_rejects_ticket_after_mutation():
    store = RecordStore(generate_products(3))
    ticket = store.begin_refresh()
    store.insert(_product("Added during refresh"))

    with pytest.raises(StaleOverwriteError):
        store.replace_all(generate_products(10), ticket=ticket)

    # the newer data survives
    assert len(store) == 4
    assert store.records[0].name == "Added during refresh"


def test_replace_all_rejects_superseded_refresh():
    store = RecordStore(generate_products(3))
    first = store.begin_refresh()
    second = store.begin_refresh()

    with pytest.raises(StaleOverwriteError):
        store.replace_all(generate_products(10), ticket=first)

    store.replace_all(generate_products(2), ticket=second)
    assert len(store) == 2


def test_to_from_dict_preserves_order_and_counters():
    store = RecordStore(generate_products(4))
    store.delete_by_id("PRD-1002")
    store.begin_refresh()

    rebuilt = RecordStore.from_dict(store.to_dict())

    assert rebuilt.ids() == store.ids()
    assert rebuilt.version == store.version
    assert rebuilt.refresh_generation == store.refresh_generation


def test_from_dict_none_is_empty_store():
    assert len(RecordStore.from_dict(None)) == 0


def test_refresh_ticket_survives_a_store_payload():
    store = RecordStore(generate_products(3))
    ticket = store.begin_refresh()

    assert RefreshTicket.from_dict(ticket.to_dict()) == ticket
    assert RefreshTicket.from_dict(None) is None
    assert RefreshTicket.from_dict({"version": "x", "generation": 1}) is None
