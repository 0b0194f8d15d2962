from __future__ import annotations

import random
from datetime import date

import pytest
from dash.development.base_component import Component

from admin_panel.config.model import GlobalConfig
from admin_panel.core.events import generate_sample_events
from admin_panel.core.product import Product
from admin_panel.pages import build_page_registry
from admin_panel.pages.calendar import list_view, month_view
from admin_panel.pages.dashboard import inventory_figure, inventory_text, revenue_figure
from admin_panel.pages.forms import submission_summary
from admin_panel.services.auth_service import DEMO_USER, AuthSession
from admin_panel.services.dashboard_metrics import inventory_summary
from admin_panel.ui.config import AppConfig
from admin_panel.ui.ids import calendar_day_id


@pytest.fixture
def ctx(tmp_path):
    return AppConfig(
        config_root=tmp_path,
        global_config=GlobalConfig(),
        registry=build_page_registry(),
        rng=random.Random(3),
    )


def _ids(component):
    """Every string id in a component tree."""
    found = set()

    def walk(node):
        if isinstance(node, Component):
            node_id = getattr(node, "id", None)
            if isinstance(node_id, str):
                found.add(node_id)
            walk(getattr(node, "children", None))
        elif isinstance(node, (list, tuple)):
            for child in node:
                walk(child)

    walk(component)
    return found


def test_registry_has_every_page_in_sidebar_order(ctx):
    ids = [cls.id for cls in ctx.registry.all_classes()]
    assert ids == ["dashboard", "products", "calendar", "forms", "ui-components"]
    assert ctx.registry.resolve("/").id == "dashboard"
    assert ctx.registry.resolve("/data-table").id == "products"


@pytest.mark.parametrize("page_id", ["dashboard", "products", "calendar", "forms", "ui-components"])
def test_every_page_builds_for_a_logged_in_user(ctx, page_id):
    page = ctx.registry.create(page_id, ctx)
    layout = page.layout(AuthSession(user=DEMO_USER))
    assert isinstance(layout, Component)


def test_products_page_contains_table_controls(ctx):
    layout = ctx.registry.create("products", ctx).layout(AuthSession(user=DEMO_USER))
    ids = _ids(layout)
    assert {"products-table", "products-search"} <= ids


def test_inventory_figure_and_text():
    records = [
        Product(id="PRD-1000", name="Blender", category="Home & Kitchen", price=50.0, stock=2),
        Product(id="PRD-1001", name="Cookbook", category="Books", price=12.5, stock=4),
    ]
    fig = inventory_figure(inventory_summary(records))
    assert fig.data[0].type == "bar"
    assert inventory_text(records) == "2 products, 6 units in stock, worth $150. 2 active, 0 inactive."
    assert inventory_text([]) == "No products in the inventory."


def test_empty_inventory_shows_placeholder():
    fig = inventory_figure(inventory_summary([]))
    assert len(fig.data) == 0
    assert fig.layout.annotations[0].text == "No products"


def test_revenue_figure_has_twelve_months():
    assert len(revenue_figure().data[0].x) == 12


def test_month_view_has_clickable_day_cells():
    view = month_view(date(2024, 5, 15), date(2024, 5, 15), {date(2024, 5, 15): 2})
    rows = view.children[1:]
    cells = [cell for row in rows for cell in row.children]
    assert len(cells) % 7 == 0
    first = cells[0]
    assert first.id == calendar_day_id("2024-04-28")
    assert "admin-cal-outside" in first.className
    selected = next(c for c in cells if c.id == calendar_day_id("2024-05-15"))
    assert "admin-cal-selected" in selected.className


def test_list_view_groups_by_date():
    events = generate_sample_events(date(2024, 5, 15))[:3]
    view = list_view(events)
    headings = [c.children for c in view.children if c.__class__.__name__ == "H6"]
    assert headings == ["Wednesday, May 15", "Friday, May 17"]
    assert list_view([]).children == "No events in this period."


def test_submission_summary_renders_values():
    alert = submission_summary(
        {
            "first_name": "Jane", "last_name": "Doe", "email": "jane@example.com", "phone": None,
            "dob": date(1990, 4, 1), "gender": "female", "country": "uk", "address": None,
            "terms": True, "newsletter": True,
        }
    )
    assert alert.color == "success"
