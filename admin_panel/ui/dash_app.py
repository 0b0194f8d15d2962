from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from admin_panel.config.loader import load_global_config
from admin_panel.pages import build_page_registry
from admin_panel.ui.callbacks.callbacks_auth import register_auth_callbacks
from admin_panel.ui.callbacks.callbacks_calendar import register_calendar_callbacks
from admin_panel.ui.callbacks.callbacks_dashboard import register_dashboard_callbacks
from admin_panel.ui.callbacks.callbacks_forms import register_forms_callbacks
from admin_panel.ui.callbacks.callbacks_products import register_products_callbacks
from admin_panel.ui.callbacks.callbacks_ui_components import register_ui_components_callbacks
from admin_panel.ui.layout.build_layout import build_layout

from .config import AppConfig

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config"), *, seed: Optional[int] = None) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        registry=build_page_registry(),
        rng=random.Random(seed) if seed is not None else None,
    )
    ctx.validate()

    # Resolve the assets folder so styles.css is found regardless of the working directory
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY, dbc.icons.BOOTSTRAP],
        assets_folder=str(assets_path),
        # pages are swapped into the shell, so most callback targets are not in the initial layout
        suppress_callback_exceptions=True,
    )

    app.title = global_config.ui_title
    app.layout = build_layout(ctx)

    # Register callbacks
    register_auth_callbacks(app, ctx)
    register_products_callbacks(app, ctx)
    register_dashboard_callbacks(app, ctx)
    register_calendar_callbacks(app, ctx)
    register_forms_callbacks(app, ctx)
    register_ui_components_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(config_root), "n_pages": len(ctx.registry.all_classes())},
    )
    return app
