# dealdesk/core/logging_config.py
import logging
import sys

import structlog

from dealdesk.core.settings import settings


def setup_logging() -> None:
    """
    Eén JSON-regel per event op stdout (request- en fee-events), niveau uit LOG_LEVEL.
    structlog rendert; de stdlib-logger schrijft weg, zodat uvicorn/gunicorn-logs
    in dezelfde stroom belanden.
    """
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Gedeelde logger voor routers en middleware; de calculator zelf logt niet
logger = structlog.get_logger("dealdesk")
