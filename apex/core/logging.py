"""Logging configuration for apex processes.

Handlers and format are installed once on the root logger (stdout). The
``apex`` logger follows ``debug``; SQL statement logging follows
``database_echo`` so it can be switched on without debug noise elsewhere.
"""

import logging
import sys

from apex.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
APP_LOGGER = "apex"
SQL_LOGGER = "sqlalchemy.engine"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stdout logging and per-logger levels from settings.

    Levels:
        apex: DEBUG when settings.debug, otherwise INFO.
        sqlalchemy.engine: INFO when settings.database_echo, otherwise WARNING.
    """
    s = settings or get_settings()
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if s.debug else logging.INFO)
    logging.getLogger(SQL_LOGGER).setLevel(
        logging.INFO if s.database_echo else logging.WARNING
    )
