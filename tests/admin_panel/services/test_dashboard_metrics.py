from __future__ import annotations

import pytest

from admin_panel.core.product import CATEGORIES, Product
from admin_panel.services.dashboard_metrics import (
    REVENUE_BY_MONTH,
    format_currency,
    inventory_summary,
    low_stock,
    series_frame,
    status_counts,
)

RECORDS = [
    Product(id="PRD-1000", name="Blender", category="Home & Kitchen", price=50.0, stock=2),
    Product(id="PRD-1001", name="Toaster", category="Home & Kitchen", price=20.0, stock=10, status="inactive"),
    Product(id="PRD-1002", name="Yoga Mat", category="Sports", price=15.5, stock=4),
    Product(id="PRD-1003", name="Cookbook", category="Books", price=12.0, stock=30),
]


def test_inventory_summary_aggregates_by_category():
    summary = inventory_summary(RECORDS).set_index("category")

    assert list(summary.index) == list(CATEGORIES)
    kitchen = summary.loc["Home & Kitchen"]
    assert kitchen["products"] == 2
    assert kitchen["units"] == 12
    assert kitchen["stock_value"] == pytest.approx(300.0)
    assert kitchen["active"] == 1
    assert summary.loc["Toys", "products"] == 0


def test_inventory_summary_of_empty_store_lists_every_category():
    summary = inventory_summary([])
    assert summary["category"].tolist() == list(CATEGORIES)
    assert summary["products"].sum() == 0


def test_status_counts():
    assert status_counts(RECORDS) == {"active": 3, "inactive": 1}
    assert status_counts([]) == {"active": 0, "inactive": 0}


def test_low_stock_only_active_and_sorted():
    items = low_stock(RECORDS, threshold=10)
    assert [p.name for p in items] == ["Blender", "Yoga Mat"]
    assert low_stock(RECORDS, threshold=10, limit=1)[0].name == "Blender"


@pytest.mark.parametrize("value, text", [(85200, "$85,200"), (0, "$0"), (-1500.4, "-$1,500")])
def test_format_currency(value, text):
    assert format_currency(value) == text


def test_series_frame_keeps_order():
    df = series_frame(REVENUE_BY_MONTH, "month", "revenue")
    assert df["month"].tolist()[:3] == ["Jan", "Feb", "Mar"]
    assert df["revenue"].iloc[-1] == 18000
