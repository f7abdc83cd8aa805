"""
Shared ``ordergallery`` logger, importable from any module without pulling in
the full configuration.
"""

import logging
from typing import Optional

from ordergallery.configs.custom_logging import format_pydantic, setup_logging
from ordergallery.configs.settings_models import Settings

__all__ = ["logger", "initialize_loggers", "format_pydantic"]

# httpx logs every request at INFO; werkzeug every served request
NOISY_LOGGERS = ("httpx", "httpcore", "werkzeug")

settings = Settings()

logger = setup_logging(level=settings.logging.verbosity_level)


def initialize_loggers(verbose_level: Optional[str] = None) -> logging.Logger:
    """
    Re-initialize the shared logger at ``verbose_level`` (settings level when None).

    Client-library loggers are kept at WARNING unless DEBUG is requested.
    """
    if verbose_level is None:
        verbose_level = settings.logging.verbosity_level

    library_level = logging.DEBUG if verbose_level.upper() == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    global logger
    logger = setup_logging(level=verbose_level)
    return logger
