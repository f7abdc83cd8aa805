"""
Gallery - UI construction.

Grid, pagination controls, delete confirmation modal and the lightbox. Key
presses are only listened to inside the lightbox, so the listener exists only
while the viewer is open.
"""

import dash_mantine_components as dmc
from dash import dcc, html
from dash_extensions import EventListener
from dash_iconify import DashIconify

from ordergallery.dash.messages import is_rtl, translate

# Key events forwarded from the lightbox
KEYDOWN_EVENT = {"event": "keydown", "props": ["key"]}

ARROW_BUTTON_STYLE = {
    "position": "absolute",
    "top": "50%",
    "transform": "translateY(-50%)",
    "zIndex": 50,
}


def build_delete_confirmation(language: str | None = None) -> dmc.Modal:
    return dmc.Modal(
        id="gallery-delete-modal",
        title=translate("deleteImageTitle", language),
        opened=False,
        centered=True,
        withCloseButton=False,
        closeOnEscape=False,
        closeOnClickOutside=False,
        zIndex=1100,
        children=[
            dmc.Text(translate("deleteImageConfirmation", language), size="sm"),
            dmc.Group(
                [
                    dmc.Button(
                        translate("cancel", language),
                        id="gallery-delete-cancel",
                        variant="default",
                        n_clicks=0,
                    ),
                    dmc.Button(
                        translate("delete", language),
                        id="gallery-delete-confirm",
                        color="red",
                        n_clicks=0,
                    ),
                ],
                justify="flex-end",
                mt="lg",
            ),
        ],
    )


def build_lightbox(language: str | None = None) -> dmc.Modal:
    rtl = is_rtl(language)
    content = html.Div(
        [
            dmc.ActionIcon(
                DashIconify(icon="mdi:close", width=24),
                id="gallery-lightbox-close",
                variant="subtle",
                color="gray",
                size="lg",
                n_clicks=0,
                style={"position": "absolute", "top": "16px", "right": "16px", "zIndex": 50},
            ),
            html.Div(
                html.Img(
                    id="gallery-lightbox-img",
                    style={
                        "maxWidth": "100%",
                        "maxHeight": "70vh",
                        "objectFit": "contain",
                        "display": "block",
                        "margin": "0 auto",
                    },
                ),
                style={"padding": "64px 16px 16px"},
            ),
            dmc.ActionIcon(
                DashIconify(icon="mdi:chevron-left", width=32),
                id="gallery-lightbox-prev",
                variant="subtle",
                color="gray",
                size="xl",
                n_clicks=0,
                style={**ARROW_BUTTON_STYLE, "right" if rtl else "left": "16px"},
            ),
            dmc.ActionIcon(
                DashIconify(icon="mdi:chevron-right", width=32),
                id="gallery-lightbox-next",
                variant="subtle",
                color="gray",
                size="xl",
                n_clicks=0,
                style={**ARROW_BUTTON_STYLE, "left" if rtl else "right": "16px"},
            ),
            dmc.Group(
                [
                    dmc.Stack(
                        [
                            dmc.Text(id="gallery-lightbox-title", fw=600, size="lg"),
                            dmc.Text(id="gallery-lightbox-customer", size="sm", c="dimmed"),
                            dmc.Text(id="gallery-lightbox-date", size="xs", c="dimmed"),
                        ],
                        gap=2,
                    ),
                    dmc.Group(
                        [
                            dmc.Button(
                                translate("viewOrder", language),
                                id="gallery-lightbox-view-order",
                                variant="outline",
                                size="sm",
                                leftSection=DashIconify(icon="mdi:open-in-new", width=16),
                                n_clicks=0,
                            ),
                            dmc.Button(
                                translate("delete", language),
                                id="gallery-lightbox-delete",
                                color="red",
                                size="sm",
                                leftSection=DashIconify(icon="mdi:trash-can-outline", width=16),
                                n_clicks=0,
                            ),
                        ],
                        gap="xs",
                    ),
                ],
                justify="space-between",
                p="md",
            ),
            dmc.Text(id="gallery-lightbox-counter", ta="center", size="sm", c="dimmed", pb="md"),
        ],
        dir="rtl" if rtl else "ltr",
        style={"position": "relative"},
    )

    return dmc.Modal(
        id="gallery-lightbox",
        opened=False,
        fullScreen=True,
        withCloseButton=False,
        closeOnEscape=False,
        closeOnClickOutside=False,
        padding=0,
        children=EventListener(
            content,
            id="gallery-lightbox-keys",
            events=[KEYDOWN_EVENT],
            logging=False,
        ),
    )


def build_gallery(language: str | None = None) -> html.Div:
    """Build the gallery page section with all its stores."""
    header = dmc.Group(
        [
            dmc.Group(
                [
                    DashIconify(icon="mdi:image-multiple", width=32),
                    dmc.Title(translate("gallery", language), order=2),
                ],
                gap="sm",
            ),
            dmc.Text(id="gallery-count", size="sm", c="dimmed"),
        ],
        justify="space-between",
    )

    grid = dcc.Loading(
        dmc.SimpleGrid(
            id="gallery-grid",
            cols={"base": 1, "sm": 2, "md": 3, "lg": 4},
            spacing="md",
            children=[],
        ),
        type="dot",
    )

    pagination = dmc.Group(
        [
            dmc.Button(
                translate("previous", language),
                id="gallery-prev-page",
                variant="outline",
                size="sm",
                leftSection=DashIconify(icon="mdi:chevron-left", width=16),
                disabled=True,
                n_clicks=0,
            ),
            dmc.Text(id="gallery-page-label", size="sm", c="dimmed"),
            dmc.Button(
                translate("next", language),
                id="gallery-next-page",
                variant="outline",
                size="sm",
                rightSection=DashIconify(icon="mdi:chevron-right", width=16),
                disabled=True,
                n_clicks=0,
            ),
        ],
        id="gallery-pagination",
        justify="center",
        gap="sm",
        mt="lg",
        style={"display": "none"},
    )

    return html.Div(
        [
            header,
            grid,
            pagination,
            build_delete_confirmation(language),
            build_lightbox(language),
            dcc.Store(id="gallery-page-store", data=1),
            dcc.Store(id="gallery-refresh-store", data=0),
            dcc.Store(id="gallery-data-store", data=None),
            dcc.Store(id="gallery-lightbox-index-store", data=None),
            dcc.Store(id="gallery-delete-target-store", data=None),
        ],
        className="gallery",
        style={"display": "flex", "flexDirection": "column", "gap": "1rem"},
    )
