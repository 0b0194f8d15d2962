from admin_panel.core.page_registry import PageRegistry

from .calendar import CalendarPage
from .dashboard import DashboardPage
from .forms import FormsPage
from .products import ProductsPage
from .ui_components import UIComponentsPage

__all__ = [
    "CalendarPage",
    "DashboardPage",
    "FormsPage",
    "ProductsPage",
    "UIComponentsPage",
    "build_page_registry",
]


def build_page_registry() -> PageRegistry:
    """Pages in sidebar order. The dashboard also answers on "/"."""
    registry = PageRegistry()
    registry.register(DashboardPage, "/")
    registry.register(ProductsPage)
    registry.register(CalendarPage)
    registry.register(FormsPage)
    registry.register(UIComponentsPage)
    return registry
