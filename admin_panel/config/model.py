from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from admin_panel.core.query_state import DEFAULT_ITEMS_PER_PAGE
from admin_panel.services.auth_service import DEMO_CREDENTIALS, Credentials
from admin_panel.services.product_service import DEFAULT_SAMPLE_SIZE

DEFAULT_PAGE_SIZE_OPTIONS: List[int] = [5, 10, 20, 50]


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: branding shown in the sidebar and browser tab
    - sample_size: number of mock products generated on load / refresh
    - page_size_options: choices offered in the rows-per-page selector
    - default_page_size: initial rows per page (must be one of the options)
    - credentials: the single accepted login for the demo
    """
    ui_title: str = "Admin Panel"
    subtitle: str = "Dashboard"
    sample_size: int = DEFAULT_SAMPLE_SIZE
    page_size_options: List[int] = field(default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS))
    default_page_size: int = DEFAULT_ITEMS_PER_PAGE
    credentials: Credentials = DEMO_CREDENTIALS
