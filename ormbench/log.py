from __future__ import annotations

import logging
import sys

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, sql_echo: bool = False) -> None:
    """Configure the root logger with a single plain stderr handler.

    With ``sql_echo`` every statement emitted by SQLAlchemy is logged too.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(handler)
    root.setLevel(level)

    if sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
