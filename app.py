import logging
import os
import socket

from admin_panel.logging_config import configure_logging
from admin_panel.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("admin_panel.app")

app = create_dash_app(
    os.getenv("ADMIN_PANEL_CONFIG_ROOT", "config"),
    seed=int(os.environ["ADMIN_PANEL_SEED"]) if os.getenv("ADMIN_PANEL_SEED") else None,
)
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port in [start_port, start_port + attempts) nothing is listening on."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning("Port %s is taken, starting on %s", preferred_port, port)

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
