from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List, Optional, Type

from .base_page import BasePage

if TYPE_CHECKING:
    from admin_panel.ui.config import AppConfig


class PageRegistry:
    """
    Registry for page classes so the shell can build its navigation dynamically

    Purpose:
    - Decouples the Dash layer from hardcoded pages by exposing {@link create(page_id, ctx)} and {@link resolve(path)}
    - The sidebar is built from the registered pages rather than a hardcoded list

    Design Notes:
    - Stores the subclasses of {@link BasePage}, not instances, so each page is instantiated on demand
    - Enforces invariants:
        * only {@link BasePage} subclasses can be registered
        * each page 'id' and 'path' is unique across the registry
    """

    def __init__(self):
        self._pages: Dict[str, Type[BasePage]] = {}
        self._by_path: Dict[str, str] = {}

    def register(self, page_cls: Type[BasePage], *aliases: str) -> None:
        """
        Register a {@link BasePage} with the registry

        :param page_cls: the subclass of {@link BasePage}
        :param aliases: extra paths that should resolve to this page (e.g. "/")

        Raises:
            TypeError: if page_cls is not a subclass of {@link BasePage}
            ValueError: if a page with the same 'id' or path already exists
        """
        if not isinstance(page_cls, type) or not issubclass(page_cls, BasePage):
            raise TypeError(f"Page '{getattr(page_cls, 'id', page_cls)}' must be a subclass of BasePage")

        if page_cls.id in self._pages:
            raise ValueError(f"Page '{page_cls.id}' already registered")

        for path in (page_cls.path, *aliases):
            if path in self._by_path:
                raise ValueError(f"Path '{path}' already registered by '{self._by_path[path]}'")

        self._pages[page_cls.id] = page_cls
        for path in (page_cls.path, *aliases):
            self._by_path[path] = page_cls.id

    def create(self, page_id: str, ctx: AppConfig) -> BasePage:
        """
        Instantiate a page for the given page_id

        Raises:
            KeyError: if no page with the given id exists in the registry
        """
        try:
            cls = self._pages[page_id]
        except KeyError:
            raise KeyError(f"Page '{page_id}' not found")
        return cls(ctx)

    def resolve(self, path: Optional[str]) -> Optional[Type[BasePage]]:
        """Page class for a URL path (trailing slashes ignored), or None."""
        if path is None:
            path = "/"
        if len(path) > 1:
            path = path.rstrip("/")
        page_id = self._by_path.get(path)
        return self._pages.get(page_id) if page_id else None

    def all_classes(self) -> List[Type[BasePage]]:
        """
        Used at UI layer to build the sidebar. Keeps navigation fully driven by the registry.
        """
        return list(self._pages.values())
