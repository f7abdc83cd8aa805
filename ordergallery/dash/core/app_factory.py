"""
Dash application factory for the order gallery.
"""

import os
from pathlib import Path

import dash

from ordergallery.configs.config import settings
from ordergallery.configs.logging_init import logger
from ordergallery.version import get_version

ASSETS_FOLDER = Path(__file__).resolve().parent.parent / "assets"
APP_TITLE = "Order Gallery"


def is_dev_mode() -> bool:
    """``DEV_MODE=true`` in the environment, or debug enabled in the Dash settings."""
    return os.environ.get("DEV_MODE", "false").lower() == "true" or settings.dash.debug


def create_dash_app():
    """
    Build the Dash application with the gallery's assets and logging.

    Callbacks are registered lazily by pattern-matching ids, so callback
    exceptions for components not yet in the layout are suppressed.

    Returns:
        tuple: (dash.Dash application, dev mode flag)
    """
    dev_mode = is_dev_mode()

    app = dash.Dash(
        __name__,
        title=APP_TITLE,
        update_title=None,
        assets_folder=str(ASSETS_FOLDER),
        requests_pathname_prefix="/",
        suppress_callback_exceptions=True,
    )

    # Flask logs through the ordergallery handler
    app.server.logger.handlers = logger.handlers
    app.server.logger.setLevel(logger.level)

    logger.info(f"{APP_TITLE} {get_version()} ready (dev mode: {dev_mode})")
    return app, dev_mode
