"""
Order gallery entry point.

Run directly for the development server, or serve ``server`` with a WSGI server.
"""

from ordergallery.configs.config import settings
from ordergallery.configs.logging_init import logger
from ordergallery.dash.core.app_factory import create_dash_app
from ordergallery.dash.core.callbacks import register_all_callbacks
from ordergallery.dash.layouts.app_layout import create_app_layout

app, dev_mode = create_dash_app()
app.layout = create_app_layout
register_all_callbacks(app)

server = app.server


if __name__ == "__main__":
    logger.info(f"Serving order gallery on {settings.dash.host}:{settings.dash.port}")
    app.run(host=settings.dash.host, port=settings.dash.port, debug=dev_mode)
