"""
Image Uploader - Core Callbacks

- handle_upload_or_remove: run the upload pipeline on a picked file, or clear the slot
- forward_uploader_notifications: push widget notifications to the shared container
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import dash
from dash import ALL, MATCH, Input, Output, State, ctx, no_update

from ordergallery.configs.logging_init import logger
from ordergallery.dash.components.notifications import render_notification
from ordergallery.dash.modules.image_uploader.design_ui import HIDDEN, VISIBLE, uploader_id
from ordergallery.dash.modules.image_uploader.pipeline import (
    ImageUploadPipeline,
    UploadOutcome,
    UploadState,
)
from ordergallery.models.files import SelectedFile
from ordergallery.models.notifications import Notification


def process_upload(
    contents: str,
    filename: str | None,
    current_image_url: str | None = None,
    language: str | None = None,
    on_uploaded: Callable[[str], None] | None = None,
) -> UploadOutcome:
    """Run one picked file through the upload pipeline."""
    selected_file = SelectedFile.from_upload_contents(contents, filename)
    logger.info(
        f"Upload requested: {selected_file.filename or '<unnamed>'} "
        f"({selected_file.content_type or 'unknown type'}, {selected_file.size} bytes)"
    )
    pipeline = ImageUploadPipeline(
        on_uploaded=on_uploaded,
        current_image_url=current_image_url,
        language=language,
    )
    return pipeline.run(selected_file)


def process_removal(
    current_image_url: str | None = None,
    on_removed: Callable[[], None] | None = None,
) -> UploadOutcome:
    pipeline = ImageUploadPipeline(on_removed=on_removed, current_image_url=current_image_url)
    return pipeline.remove()


def outcome_to_outputs(outcome: UploadOutcome) -> tuple[Any, ...]:
    """
    Map a pipeline outcome to the widget's outputs:
    (value, preview src, preview style, dropzone style, notification, contents, filename).

    The file input is cleared on every terminal state.
    """
    cleared = (None, None) if outcome.clear_input else (no_update, no_update)
    notification = outcome.notification.model_dump() if outcome.notification else no_update

    if outcome.state == UploadState.SUCCESS:
        return (outcome.image_url, outcome.preview, VISIBLE, HIDDEN, notification, *cleared)
    if outcome.state == UploadState.REMOVED:
        return (None, None, HIDDEN, VISIBLE, notification, *cleared)
    # Failure keeps whatever the slot showed before
    return (no_update, no_update, no_update, no_update, notification, *cleared)


def upload_or_remove_outputs(
    triggered_id: Any,
    contents: str | None,
    remove_clicks: int | None,
    filename: str | None,
    current_image_url: str | None = None,
    language: str | None = None,
) -> tuple[Any, ...]:
    """Upload a freshly picked file, or clear the slot when remove is clicked."""
    if isinstance(triggered_id, dict) and triggered_id.get("type") == "image-uploader-remove":
        if not remove_clicks:
            raise dash.exceptions.PreventUpdate
        return outcome_to_outputs(process_removal(current_image_url))

    # Contents reset to None by the upload callback itself
    if not contents:
        raise dash.exceptions.PreventUpdate

    return outcome_to_outputs(process_upload(contents, filename, current_image_url, language))


def forwarded_notifications(
    triggered_id: Any,
    notification_list: list[dict[str, Any] | None],
    notification_ids: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """The notification of whichever uploader just finished, ready for the container."""
    if not triggered_id:
        raise dash.exceptions.PreventUpdate

    for data, store_id in zip(notification_list, notification_ids):
        if store_id == triggered_id and data:
            return [render_notification(Notification.model_validate(data))]

    raise dash.exceptions.PreventUpdate


def register_core_callbacks(app):
    """Register core callbacks for the image uploader."""

    @app.callback(
        Output(uploader_id("value", MATCH), "data"),
        Output(uploader_id("preview", MATCH), "src"),
        Output(uploader_id("preview-container", MATCH), "style"),
        Output(uploader_id("dropzone", MATCH), "style"),
        Output(uploader_id("notification", MATCH), "data"),
        Output(uploader_id("input", MATCH), "contents"),
        Output(uploader_id("input", MATCH), "filename"),
        Input(uploader_id("input", MATCH), "contents"),
        Input(uploader_id("remove", MATCH), "n_clicks"),
        State(uploader_id("input", MATCH), "filename"),
        State(uploader_id("value", MATCH), "data"),
        State("locale-store", "data"),
        # Both labels are rendered in the widget's language; only visibility flips
        running=[
            (Output(uploader_id("input", MATCH), "disabled"), True, False),
            (Output(uploader_id("remove", MATCH), "disabled"), True, False),
            (Output(uploader_id("label", MATCH), "style"), HIDDEN, VISIBLE),
            (Output(uploader_id("busy-label", MATCH), "style"), VISIBLE, HIDDEN),
        ],
        prevent_initial_call=True,
    )
    def handle_upload_or_remove(
        contents: str | None,
        remove_clicks: int | None,
        filename: str | None,
        current_image_url: str | None,
        locale_data: dict[str, Any] | None,
    ) -> tuple[Any, ...]:
        return upload_or_remove_outputs(
            ctx.triggered_id,
            contents,
            remove_clicks,
            filename,
            current_image_url,
            (locale_data or {}).get("language"),
        )

    @app.callback(
        Output("notification-container", "sendNotifications", allow_duplicate=True),
        Input(uploader_id("notification", ALL), "data"),
        State(uploader_id("notification", ALL), "id"),
        prevent_initial_call=True,
    )
    def forward_uploader_notifications(
        notification_list: list[dict[str, Any] | None],
        notification_ids: list[dict[str, Any]],
    ) -> list[dict[str, Any]]:
        return forwarded_notifications(ctx.triggered_id, notification_list, notification_ids)
