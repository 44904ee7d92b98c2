"""Entry point for the SizzleSync POS Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from sizzle_pos import config
from sizzle_pos.pos_app import PosApp
from sizzle_pos.session import PosSession

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_path: str | Path = config.DEBUG_LOG_PATH, level: str = config.LOG_LEVEL) -> logging.Handler:
    """Send package logs to a file; the terminal belongs to the TUI."""
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    package_logger = logging.getLogger("sizzle_pos")
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    return handler


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    session = PosSession()
    logging.getLogger(__name__).info("session_start menu_items=%s", session.catalog.count())
    PosApp(session).run()


if __name__ == "__main__":
    main()
