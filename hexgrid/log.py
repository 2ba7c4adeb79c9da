"""structlog wiring for applications embedding the grid library."""

from __future__ import annotations

import logging

import structlog

from .config import LoggingConfig


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Route structlog through the stdlib logger at the configured level."""

    if config is None:
        config = LoggingConfig()

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    logging.basicConfig(format="%(message)s", level=config.numeric_level)
    logging.getLogger().setLevel(config.numeric_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
