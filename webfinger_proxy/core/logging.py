import sys
import structlog
import logging
from webfinger_proxy.core.config import get_settings


def setup_logging():
    settings = get_settings()
    min_level = getattr(logging, settings.LOG_LEVEL)

    # 1. Choose the renderer based on environment
    if settings.DEBUG:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    # 2. Configure the processor pipeline
    processors = [
        structlog.contextvars.merge_contextvars,      # request_id bound by middleware
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer
    ]

    # 3. Apply the configuration; LOG_LEVEL filters below the threshold
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Route standard logging (uvicorn's own logs) to stdout at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=min_level,
    )
