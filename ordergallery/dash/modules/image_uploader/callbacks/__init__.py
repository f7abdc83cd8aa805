from ordergallery.dash.modules.image_uploader.callbacks.core import register_core_callbacks


def register_callbacks_image_uploader(app):
    """Register all image uploader callbacks."""
    register_core_callbacks(app)


__all__ = ["register_callbacks_image_uploader"]
