import dash_mantine_components as dmc
from dash import dcc, html
from dash_iconify import DashIconify

from ordergallery.configs.config import settings
from ordergallery.dash.messages import is_rtl, translate
from ordergallery.dash.modules.gallery.design_ui import build_gallery
from ordergallery.dash.modules.image_uploader.design_ui import build_image_uploader

# Image slots offered per order
UPLOAD_SLOTS = 3


def create_upload_section(language: str | None = None) -> dmc.Card:
    return dmc.Card(
        [
            dmc.Group(
                [
                    DashIconify(icon="mdi:cloud-upload-outline", width=24),
                    dmc.Text(translate("uploadImage", language), fw=600),
                ],
                gap="sm",
                mb="md",
            ),
            dmc.SimpleGrid(
                [build_image_uploader(index, language=language) for index in range(UPLOAD_SLOTS)],
                cols={"base": 1, "sm": UPLOAD_SLOTS},
                spacing="md",
            ),
        ],
        withBorder=True,
        radius="md",
        p="lg",
    )


def create_app_layout():
    """Build the page: notifications, locale, uploader slots and the gallery."""
    language = settings.locale.default_language

    return dmc.MantineProvider(
        html.Div(
            [
                dmc.NotificationContainer(id="notification-container"),
                dcc.Location(id="url", refresh=True),
                dcc.Store(id="locale-store", data={"language": language}),
                dmc.Container(
                    dmc.Stack(
                        [create_upload_section(language), build_gallery(language)],
                        gap="xl",
                    ),
                    size="xl",
                    py="xl",
                ),
            ],
            dir="rtl" if is_rtl(language) else "ltr",
        )
    )
