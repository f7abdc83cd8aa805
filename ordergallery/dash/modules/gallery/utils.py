"""
Gallery Utility Functions.

Builders for thumbnail cards, empty and error states, and the lightbox footer.
"""

from typing import Any

import dash_mantine_components as dmc
from dash import html
from dash_iconify import DashIconify

from ordergallery.dash.messages import format_date, translate
from ordergallery.dash.modules.image_uploader.utils import ERROR_PLACEHOLDER_SRC
from ordergallery.models.images import ImageRecord


def gallery_id(kind: str, **extra) -> dict:
    return {"type": f"gallery-{kind}", **extra}


def order_highlight_href(order_id: str) -> str:
    return f"/orders?highlight={order_id}"


def centered_message(title: str, hint: str | None = None, icon: str = "mdi:package-variant") -> list:
    """Create a centered message element for empty states."""
    children: list[Any] = [
        DashIconify(icon=icon, width=64, height=64, color="gray"),
        dmc.Text(title, size="lg", c="dimmed"),
    ]
    if hint:
        children.append(dmc.Text(hint, size="sm", c="dimmed"))
    return [
        dmc.Card(
            dmc.Stack(children, align="center", gap="xs", py="xl"),
            withBorder=True,
            radius="md",
            style={"gridColumn": "1 / -1"},
        )
    ]


def error_alert(message: str) -> list:
    return [
        dmc.Alert(
            message,
            color="red",
            icon=DashIconify(icon="mdi:alert-circle"),
            style={"gridColumn": "1 / -1"},
        )
    ]


def build_thumbnail(image: ImageRecord, img_idx: int, language: str | None = None) -> dmc.Card:
    """Build a single thumbnail card; the image opens the lightbox, the icon asks to delete."""
    details: list[Any] = [
        dmc.Text(image.order_label() or translate("unknownOrder", language), size="sm", fw=500)
    ]
    customer_name = image.customer_name()
    if customer_name:
        details.append(dmc.Text(customer_name, size="xs", c="dimmed"))
    details.append(dmc.Text(format_date(image.created_at, language), size="xs", c="dimmed"))

    return dmc.Card(
        [
            dmc.CardSection(
                html.Div(
                    dmc.Image(
                        src=image.url,
                        alt=image.display_alt(),
                        fallbackSrc=ERROR_PLACEHOLDER_SRC,
                        h=200,
                        fit="cover",
                        style={"cursor": "pointer"},
                    ),
                    id=gallery_id("thumb", img_index=img_idx),
                    n_clicks=0,
                ),
            ),
            dmc.Group(
                [
                    dmc.Stack(details, gap=2),
                    dmc.ActionIcon(
                        DashIconify(icon="mdi:trash-can-outline", width=16),
                        id=gallery_id("thumb-delete", image_id=image.id),
                        color="red",
                        variant="light",
                        n_clicks=0,
                    ),
                ],
                justify="space-between",
                align="flex-start",
                mt="sm",
            ),
        ],
        withBorder=True,
        shadow="sm",
        radius="md",
        p="sm",
        className="gallery-thumbnail-card",
    )


def build_thumbnails(images: list[ImageRecord], language: str | None = None) -> list:
    if not images:
        return centered_message(
            translate("noImagesFound", language), translate("uploadImagesInOrders", language)
        )
    return [build_thumbnail(image, idx, language) for idx, image in enumerate(images)]


def lightbox_details(image: ImageRecord, language: str | None = None) -> dict[str, Any]:
    """Text shown in the lightbox footer for one image."""
    return {
        "title": image.order_label() or translate("unknownOrder", language),
        "customer": image.customer_name() or "",
        "date": format_date(image.created_at, language),
    }
