"""
Image Uploader - UI construction.

``build_image_uploader`` returns one self-contained upload widget. Widgets are
indexed so a page can hold several of them (one per order image slot).
"""

import dash_mantine_components as dmc
from dash import dcc, html
from dash_iconify import DashIconify

from ordergallery.configs.config import settings
from ordergallery.dash.messages import translate
from ordergallery.dash.modules.image_uploader.utils import ERROR_PLACEHOLDER_SRC

HIDDEN = {"display": "none"}
VISIBLE = {"display": "block"}


def uploader_id(kind: str, index) -> dict:
    return {"type": f"image-uploader-{kind}", "index": index}


def build_image_uploader(
    index: int | str,
    current_image_url: str | None = None,
    language: str | None = None,
) -> html.Div:
    """
    Build an image upload widget.

    Args:
        index: Widget index, used in every pattern-matching id
        current_image_url: Image already attached to the slot, shown as preview
        language: UI language for labels
    """
    has_preview = bool(current_image_url)

    dropzone = dcc.Upload(
        id=uploader_id("input", index),
        accept=settings.upload.accept,
        multiple=False,
        children=dmc.Paper(
            dmc.Stack(
                [
                    DashIconify(icon="mdi:cloud-upload", width=32, height=32, color="gray"),
                    dmc.Text(
                        translate("uploadImage", language),
                        id=uploader_id("label", index),
                        size="sm",
                        c="gray",
                        ta="center",
                        style=VISIBLE,
                    ),
                    dmc.Text(
                        f"{translate('uploading', language)}...",
                        id=uploader_id("busy-label", index),
                        size="sm",
                        c="gray",
                        ta="center",
                        style=HIDDEN,
                    ),
                ],
                align="center",
                gap="xs",
            ),
            withBorder=True,
            radius="md",
            p="md",
            style={
                "borderStyle": "dashed",
                "borderWidth": "2px",
                "cursor": "pointer",
                "height": "128px",
                "display": "flex",
                "alignItems": "center",
                "justifyContent": "center",
            },
        ),
        style={"width": "100%"},
    )

    preview = html.Div(
        [
            dmc.Image(
                id=uploader_id("preview", index),
                src=current_image_url,
                fallbackSrc=ERROR_PLACEHOLDER_SRC,
                alt=f"Preview {int(index) + 1}" if str(index).isdigit() else "Preview",
                h=128,
                fit="cover",
                radius="sm",
            ),
            html.Div(
                dmc.Tooltip(
                    dmc.ActionIcon(
                        DashIconify(icon="mdi:close", width=16),
                        id=uploader_id("remove", index),
                        variant="white",
                        size="sm",
                        n_clicks=0,
                    ),
                    label=translate("removeImage", language),
                ),
                style={"position": "absolute", "top": "4px", "right": "4px"},
            ),
        ],
        id=uploader_id("preview-container", index),
        style={"position": "relative", **(VISIBLE if has_preview else HIDDEN)},
    )

    return html.Div(
        [
            html.Div(
                dropzone,
                id=uploader_id("dropzone", index),
                style=HIDDEN if has_preview else VISIBLE,
            ),
            preview,
            dcc.Store(id=uploader_id("value", index), data=current_image_url),
            dcc.Store(id=uploader_id("notification", index), data=None),
        ],
        className="image-uploader",
    )
