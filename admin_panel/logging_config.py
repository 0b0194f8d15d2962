from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Third-party loggers that are too chatty at the app's level
QUIET_LOGGERS: Dict[str, int] = {
    "werkzeug": logging.WARNING,
    "dash": logging.WARNING,
}


def _build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # extra={...} fields passed by the services end up as top-level JSON keys
    return jsonlogger.JsonFormatter(
        JSON_FIELDS,
        rename_fields={"levelname": "level", "name": "logger"},
    )


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Format (first match wins):
        1) force_format ("json" or "plain")
        2) env var ADMIN_PANEL_LOG_FORMAT
        3) "json"

    Level: the `level` argument, else env var ADMIN_PANEL_LOG_LEVEL
    (e.g. "DEBUG"), else INFO.
    """
    format_mode = (force_format or os.getenv("ADMIN_PANEL_LOG_FORMAT", "json")).lower()
    if level is None:
        level = logging.getLevelName(os.getenv("ADMIN_PANEL_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(format_mode))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(level, quiet_level))
