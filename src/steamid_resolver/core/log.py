"""Debug tracing.

The library only emits `logging` debug records; handlers are installed by the
entry point (CLI) or by the application embedding the resolver.
"""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

from steamid_resolver.core.config import ResolverSettings

LOGGER_NAME = "steamid_resolver"
DEBUG_ENV_VALUE = "steamid-resolver"


def debug_enabled(settings: ResolverSettings | None = None) -> bool:
    """Debug output is opt-in: `settings.debug` or `DEBUG=steamid-resolver`."""

    if settings is not None and settings.debug:
        return True
    return os.environ.get("DEBUG", "").strip() == DEBUG_ENV_VALUE


def configure_logging(settings: ResolverSettings | None = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not debug_enabled(settings):
        return logger

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("[steamid-resolver] %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
