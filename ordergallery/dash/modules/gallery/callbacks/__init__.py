from ordergallery.dash.modules.gallery.callbacks.core import register_core_callbacks


def register_callbacks_gallery(app):
    """Register all gallery callbacks."""
    register_core_callbacks(app)


__all__ = ["register_callbacks_gallery"]
