from __future__ import annotations

import pytest

from admin_panel.core.query_state import SORT_ASC, SORT_DESC, QueryState


def test_set_sort_new_field_starts_ascending_and_same_field_toggles():
    state = QueryState()

    state.set_sort("price")
    assert (state.sort_field, state.sort_direction) == ("price", SORT_ASC)

    state.set_sort("price")
    assert state.sort_direction == SORT_DESC

    state.set_sort("price")
    assert state.sort_direction == SORT_ASC

    state.set_sort("name")
    assert (state.sort_field, state.sort_direction) == ("name", SORT_ASC)


def test_set_sort_unknown_field_raises():
    with pytest.raises(ValueError):
        QueryState().set_sort("edit")


def test_set_page_clamps_into_range():
    state = QueryState()

    state.set_page(10, total_pages=4)
    assert state.current_page == 4

    state.set_page(0, total_pages=4)
    assert state.current_page == 1

    # empty result: page 1
    state.set_page(3, total_pages=0)
    assert state.current_page == 1


def test_page_size_change_resets_page():
    state = QueryState(current_page=3)
    state.set_items_per_page(20)
    assert state.items_per_page == 20
    assert state.current_page == 1


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        QueryState().set_items_per_page(0)


def test_unchanged_search_term_keeps_page():
    state = QueryState(search_term="x", current_page=2)
    state.set_search_term("x")
    assert state.current_page == 2


@pytest.mark.parametrize(
    "change",
    [
        lambda s: s.set_page(2, total_pages=5),
        lambda s: s.set_search_term("watch"),
        lambda s: s.set_items_per_page(50),
        lambda s: s.set_sort("name"),
    ],
    ids=["page", "search", "page-size", "sort"],
)
def test_selection_is_page_scoped(change):
    state = QueryState()
    state.select_all(True, ["PRD-1000", "PRD-1001"])

    change(state)

    assert state.selected_ids == []


def test_toggle_and_select_all():
    state = QueryState()

    state.toggle_select("PRD-1000", True)
    state.toggle_select("PRD-1000", True)
    state.toggle_select("PRD-1001", True)
    assert state.selected_ids == ["PRD-1000", "PRD-1001"]

    state.toggle_select("PRD-1000", False)
    assert state.selected_ids == ["PRD-1001"]

    state.select_all(True, ["PRD-1002", "PRD-1003"])
    assert state.selected_ids == ["PRD-1002", "PRD-1003"]

    state.select_all(False, ["PRD-1002", "PRD-1003"])
    assert state.selected_ids == []


def test_prune_selection_drops_missing_ids():
    state = QueryState(selected_ids=["PRD-1000", "PRD-1001", "PRD-1002"])
    state.prune_selection(["PRD-1000", "PRD-1002", "PRD-1005"])
    assert state.selected_ids == ["PRD-1000", "PRD-1002"]


def test_reset_keeps_page_size():
    state = QueryState(search_term="x", sort_field="price", sort_direction=SORT_DESC,
                       current_page=4, items_per_page=20, selected_ids=["PRD-1000"])
    state.reset()
    assert state == QueryState(items_per_page=20)


def test_from_dict_sanitises_bad_values():
    state = QueryState.from_dict(
        {"sort_field": "edit", "sort_direction": "sideways", "current_page": -3, "items_per_page": 0}
    )
    assert state.sort_field is None
    assert state.sort_direction == SORT_ASC
    assert state.current_page == 1
    assert state.items_per_page == 1


def test_to_from_dict_roundtrip():
    state = QueryState(search_term="mat", sort_field="stock", sort_direction=SORT_DESC,
                       current_page=2, items_per_page=5, selected_ids=["PRD-1001"])
    assert QueryState.from_dict(state.to_dict()) == state
