"""
Callback registration for the order gallery Dash application.
"""

from ordergallery.configs.logging_init import logger
from ordergallery.dash.modules.gallery.callbacks import register_callbacks_gallery
from ordergallery.dash.modules.image_uploader.callbacks import register_callbacks_image_uploader


def register_all_callbacks(app):
    """
    Register every callback of the application.

    Args:
        app (dash.Dash): The Dash application instance
    """
    register_callbacks_image_uploader(app)
    register_callbacks_gallery(app)
    logger.info("Registered uploader and gallery callbacks")
