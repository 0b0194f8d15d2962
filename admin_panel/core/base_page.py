from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from dash import html

if TYPE_CHECKING:
    from admin_panel.services.auth_service import AuthSession
    from admin_panel.ui.config import AppConfig


class BasePage(ABC):
    """
    Abstract base class for all pages in the admin shell.

    Defines the contract that every page must follow
    - expose an 'id' - used internally
    - expose a 'label' - shown in the sidebar and header
    - expose a 'path' - the URL the page answers to
    - expose an 'icon' - bootstrap-icons class for the sidebar
    - implement 'layout' - build the page body for the current session
    """

    id: str = None
    label: str = None
    path: str = None
    icon: str = "bi-square"
    description: str = ""
    requires_auth: bool = True

    def __init__(self, ctx: AppConfig):
        self.ctx = ctx

    @abstractmethod
    def layout(self, session: AuthSession) -> Any:
        """
        Build the page body
        :param session: the current {@link AuthSession}
        :return: a Dash component tree
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Common helpers for all pages
    # ------------------------------------------------------------------
    def page_header(self, subtitle: str | None = None, actions: Any = None) -> html.Div:
        """
        Standardised title + subtitle row, with optional right-aligned actions.
        """
        return html.Div(
            [
                html.Div(
                    [
                        html.H3(self.label, className="fw-bold mb-0"),
                        html.Div(subtitle or self.description, className="text-muted"),
                    ]
                ),
                html.Div(actions, className="d-flex align-items-center gap-2") if actions is not None else None,
            ],
            className="d-flex justify-content-between align-items-center mb-4",
        )
