from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from admin_panel.config.model import GlobalConfig
from admin_panel.core.page_registry import PageRegistry
from admin_panel.services.auth_service import AuthService, AuthSession
from admin_panel.services.notifications import Notifier
from admin_panel.services.product_service import ProductService
from admin_panel.services.storage import InMemoryStorage


@dataclass
class AppConfig:
    """
    Holds shared, session-independent state for the Dash app: config root,
    parsed global config and the page registry. This is passed into layout +
    callback registration functions instead of using module-level globals.

    Per-session data (products, query state, events, the logged-in user)
    lives in the browser's dcc.Store payloads; the factories below build the
    services that operate on it for one callback.
    """
    config_root: Path
    global_config: GlobalConfig
    registry: Optional[PageRegistry] = None
    rng: Optional[random.Random] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if not self.registry.all_classes():
            raise RuntimeError("AppConfig.registry has no pages registered.")

    def product_service(self, notifier: Optional[Notifier] = None) -> ProductService:
        return ProductService(
            notifier,
            sample_size=self.global_config.sample_size,
            rng=self.rng,
        )

    def auth_service(self, auth_data: Optional[Dict[str, Any]], notifier: Optional[Notifier] = None) -> AuthService:
        return AuthService(
            InMemoryStorage(auth_data),
            credentials=self.global_config.credentials,
            notifier=notifier,
        )

    def auth_session(self, auth_data: Optional[Dict[str, Any]]) -> AuthSession:
        return self.auth_service(auth_data).restore()
