from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from admin_panel.config.model import GlobalConfig
from admin_panel.core.exceptions import ConfigError
from admin_panel.services.auth_service import Credentials

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from `root/global.json`.

    Expected structure (every key optional):

        {
            "ui_title": "Admin Panel",
            "subtitle": "Dashboard",
            "sample_size": 45,
            "page_size_options": [5, 10, 20, 50],
            "default_page_size": 10,
            "credentials": {"email": "...", "password": "..."}
        }

    A missing file yields the defaults, so the app runs without any config.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if the file is not valid JSON or a value is out of range.
    """
    root = Path(root)
    global_path = root / "global.json"

    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    if not global_path.is_file():
        logger.warning("No global.json found, using defaults", extra={"config_root": str(root)})
        return GlobalConfig()

    try:
        with global_path.open(encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return config_from_dict(raw)


def config_from_dict(raw: Dict[str, Any]) -> GlobalConfig:
    defaults = GlobalConfig()

    sample_size = raw.get("sample_size", defaults.sample_size)
    if not isinstance(sample_size, int) or sample_size < 0:
        raise ConfigError("sample_size must be a non-negative integer")

    options = raw.get("page_size_options", defaults.page_size_options)
    if not isinstance(options, list) or not options or not all(isinstance(o, int) and o > 0 for o in options):
        raise ConfigError("page_size_options must be a non-empty list of positive integers")

    default_page_size = raw.get("default_page_size", defaults.default_page_size)
    if default_page_size not in options:
        raise ConfigError(f"default_page_size {default_page_size!r} is not one of {options}")

    credentials = defaults.credentials
    raw_credentials = raw.get("credentials")
    if raw_credentials is not None:
        if not isinstance(raw_credentials, dict) or not raw_credentials.get("email") or not raw_credentials.get("password"):
            raise ConfigError("credentials must have a non-empty email and password")
        credentials = Credentials(email=str(raw_credentials["email"]), password=str(raw_credentials["password"]))

    return GlobalConfig(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        sample_size=sample_size,
        page_size_options=list(options),
        default_page_size=default_page_size,
        credentials=credentials,
    )
