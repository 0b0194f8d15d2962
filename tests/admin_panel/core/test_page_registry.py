from __future__ import annotations

import pytest
from dash import html

from admin_panel.core.base_page import BasePage
from admin_panel.core.page_registry import PageRegistry


class _HomePage(BasePage):
    id = "home"
    label = "Home"
    path = "/home"

    def layout(self, session):
        return html.Div("home")


class _OtherPage(BasePage):
    id = "other"
    label = "Other"
    path = "/other"

    def layout(self, session):
        return html.Div("other")


def test_register_and_resolve_with_alias():
    registry = PageRegistry()
    registry.register(_HomePage, "/")
    registry.register(_OtherPage)

    assert registry.resolve("/") is _HomePage
    assert registry.resolve("/home/") is _HomePage
    assert registry.resolve(None) is _HomePage
    assert registry.resolve("/other") is _OtherPage
    assert registry.resolve("/missing") is None
    assert registry.all_classes() == [_HomePage, _OtherPage]


def test_register_rejects_non_pages():
    with pytest.raises(TypeError):
        PageRegistry().register(object)


def test_register_rejects_duplicate_id_and_path():
    registry = PageRegistry()
    registry.register(_HomePage)

    with pytest.raises(ValueError):
        registry.register(_HomePage)

    clash = type("Clash", (_OtherPage,), {"id": "clash", "path": "/home"})
    with pytest.raises(ValueError):
        registry.register(clash)


def test_create_instantiates_with_context():
    registry = PageRegistry()
    registry.register(_HomePage)
    ctx = object()

    page = registry.create("home", ctx)

    assert isinstance(page, _HomePage)
    assert page.ctx is ctx
    with pytest.raises(KeyError):
        registry.create("nope", ctx)
