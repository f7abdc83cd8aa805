"""
Gallery - Core Callbacks

- load_gallery_page: fetch the current page and render grid and pagination
- change_page: previous/next page buttons
- control_lightbox: open, navigate (buttons and keyboard), close, view order
- render_lightbox: show the selected image
- request_delete / resolve_delete: confirmation flow around the DELETE call

Each callback body lives in a plain function taking the triggering id, so the
routing can be exercised without a running Dash app.
"""

from __future__ import annotations

from typing import Any

import dash
from dash import ALL, Input, Output, State, ctx, no_update

from ordergallery.configs.config import settings
from ordergallery.configs.logging_init import logger
from ordergallery.dash.components.notifications import describe, render_notification
from ordergallery.dash.errors import FetchFailure
from ordergallery.dash.messages import is_rtl, translate
from ordergallery.dash.modules.gallery.queries import confirm_delete, fetch_page
from ordergallery.dash.modules.gallery.state import (
    NEXT,
    PREVIOUS,
    can_step,
    handle_lightbox_key,
    pagination_view,
    resolve_lightbox_index,
    step_lightbox,
    step_page,
)
from ordergallery.dash.modules.gallery.utils import (
    build_thumbnails,
    error_alert,
    lightbox_details,
    order_highlight_href,
)
from ordergallery.models.images import PageResult

HIDDEN = {"display": "none"}

REFRESH_STORE = "gallery-refresh-store"
THUMB_TYPE = "gallery-thumb"
THUMB_DELETE_TYPE = "gallery-thumb-delete"


def _language(locale_data: dict[str, Any] | None) -> str | None:
    return (locale_data or {}).get("language")


def _page_result(data: dict[str, Any] | None) -> PageResult:
    return PageResult.model_validate(data) if data else PageResult()


def _button_style(visible: bool, base: dict[str, Any] | None) -> dict[str, Any]:
    style = dict(base or {})
    style["display"] = "flex" if visible else "none"
    return style


def _is_pattern(triggered_id: Any, id_type: str) -> bool:
    return isinstance(triggered_id, dict) and triggered_id.get("type") == id_type


def load_page_outputs(page: int, limit: int, language: str | None = None) -> tuple[Any, ...]:
    """
    Fetch a page and build (data, grid, count, pagination style, prev disabled,
    next disabled, page label). A fetch failure becomes an alert in the grid.
    """
    try:
        page_result = fetch_page(page, limit)
    except FetchFailure as e:
        logger.error(f"Gallery page {page} could not be loaded: {e.detail}")
        return (None, error_alert(describe(e.message_key, language)), "", HIDDEN, True, True, "")

    controls = pagination_view(page_result.pagination, language)
    return (
        page_result.model_dump(mode="json", by_alias=True),
        build_thumbnails(page_result.images, language),
        f"{len(page_result.images)} {translate('images', language)}",
        {"display": "flex"} if controls["visible"] else HIDDEN,
        controls["previous_disabled"],
        controls["next_disabled"],
        controls["label"],
    )


def lightbox_index_after_load(triggered_id: Any, index: int | None, count: int) -> Any:
    """
    Keep the lightbox index consistent with a freshly loaded page.

    A refetch after a delete clamps the index to the new page (None when it is
    empty); any other load is a different page, so the viewer is closed.
    """
    if index is None:
        return no_update
    if triggered_id == REFRESH_STORE:
        return resolve_lightbox_index(index, count)
    return None


def gallery_page_outputs(
    triggered_id: Any,
    page: int | None,
    limit: int,
    index: int | None,
    language: str | None = None,
) -> tuple[Any, ...]:
    """``load_page_outputs`` followed by the adjusted lightbox index."""
    outputs = load_page_outputs(page or 1, limit, language)
    page_data = outputs[0]
    count = len(page_data["images"]) if page_data else 0
    return (*outputs, lightbox_index_after_load(triggered_id, index, count))


def page_after_click(
    triggered_id: Any, prev_clicks: int | None, next_clicks: int | None, page: int | None
) -> int:
    """Step the page by one; the server's flags already disabled invalid directions."""
    if triggered_id == "gallery-prev-page" and prev_clicks:
        return step_page(page or 1, PREVIOUS)
    if triggered_id == "gallery-next-page" and next_clicks:
        return step_page(page or 1, NEXT)
    raise dash.exceptions.PreventUpdate


def lightbox_control_outputs(
    triggered_id: Any,
    triggered_value: Any,
    index: int | None,
    page_data: dict[str, Any] | None,
    key: str | None = None,
    rtl: bool = False,
) -> tuple[Any, Any]:
    """
    Route a lightbox click or key press to (new index, navigation href).

    Raises:
        PreventUpdate: nothing to change, including thumbnails re-rendered with n_clicks=0
    """
    if not triggered_value:
        raise dash.exceptions.PreventUpdate

    images = _page_result(page_data).images
    count = len(images)

    if _is_pattern(triggered_id, THUMB_TYPE):
        new_index = resolve_lightbox_index(triggered_id.get("img_index"), count)
        if new_index is None:
            raise dash.exceptions.PreventUpdate
        return new_index, no_update

    if index is None:
        raise dash.exceptions.PreventUpdate

    if triggered_id == "gallery-lightbox-prev":
        return step_lightbox(index, PREVIOUS, count), no_update
    if triggered_id == "gallery-lightbox-next":
        return step_lightbox(index, NEXT, count), no_update
    if triggered_id == "gallery-lightbox-close":
        return None, no_update
    if triggered_id == "gallery-lightbox-view-order":
        current = resolve_lightbox_index(index, count)
        if current is None:
            raise dash.exceptions.PreventUpdate
        return None, order_highlight_href(images[current].order_id)
    if triggered_id == "gallery-lightbox-keys":
        new_index = handle_lightbox_key(index, key, count, rtl)
        if new_index == index:
            raise dash.exceptions.PreventUpdate
        return new_index, no_update

    raise dash.exceptions.PreventUpdate


def lightbox_render_outputs(
    index: int | None,
    page_data: dict[str, Any] | None,
    prev_style: dict[str, Any] | None = None,
    next_style: dict[str, Any] | None = None,
    language: str | None = None,
) -> tuple[Any, ...]:
    """
    (opened, src, alt, title, customer, date, counter, prev style, next style)
    for the selected image, hiding the arrow buttons at either end.
    """
    images = _page_result(page_data).images
    count = len(images)
    current = resolve_lightbox_index(index, count)

    if current is None:
        return (False,) + (no_update,) * 8

    image = images[current]
    details = lightbox_details(image, language)
    return (
        True,
        image.url,
        image.display_alt(),
        details["title"],
        details["customer"],
        details["date"],
        f"{current + 1} / {count}",
        _button_style(can_step(current, PREVIOUS, count), prev_style),
        _button_style(can_step(current, NEXT, count), next_style),
    )


def delete_target_for(
    triggered_id: Any,
    triggered_value: Any,
    index: int | None,
    page_data: dict[str, Any] | None,
) -> str:
    """Image id to confirm deletion of, from a thumbnail icon or the lightbox button."""
    if not triggered_value:
        raise dash.exceptions.PreventUpdate

    if _is_pattern(triggered_id, THUMB_DELETE_TYPE):
        return str(triggered_id["image_id"])

    if triggered_id == "gallery-lightbox-delete":
        images = _page_result(page_data).images
        current = resolve_lightbox_index(index, len(images))
        if current is not None:
            return images[current].id

    raise dash.exceptions.PreventUpdate


def delete_dialog_action(
    triggered_id: Any, confirm_clicks: int | None, cancel_clicks: int | None
) -> str:
    if triggered_id == "gallery-delete-confirm" and confirm_clicks:
        return "confirm"
    if triggered_id == "gallery-delete-cancel" and cancel_clicks:
        return "cancel"
    raise dash.exceptions.PreventUpdate


def delete_dialog_outputs(
    action: str,
    target_id: str | None,
    refresh_counter: int | None,
    language: str | None = None,
) -> tuple[Any, Any, Any]:
    """
    Resolve the delete confirmation dialog into
    (delete target, refresh counter, notifications).

    Only "confirm" reaches the backend; the target is cleared whatever happens.
    """
    if not target_id:
        raise dash.exceptions.PreventUpdate

    if action == "confirm":
        succeeded, notification = confirm_delete(target_id, language)
        refresh = (refresh_counter or 0) + 1 if succeeded else no_update
        return None, refresh, [render_notification(notification)]

    return None, no_update, no_update


def _triggered_value() -> Any:
    return ctx.triggered[0].get("value") if ctx.triggered else None


def register_core_callbacks(app):
    """Register core callbacks for the gallery."""

    @app.callback(
        Output("gallery-data-store", "data"),
        Output("gallery-grid", "children"),
        Output("gallery-count", "children"),
        Output("gallery-pagination", "style"),
        Output("gallery-prev-page", "disabled"),
        Output("gallery-next-page", "disabled"),
        Output("gallery-page-label", "children"),
        Output("gallery-lightbox-index-store", "data", allow_duplicate=True),
        Input("gallery-page-store", "data"),
        Input(REFRESH_STORE, "data"),
        State("gallery-lightbox-index-store", "data"),
        State("locale-store", "data"),
        prevent_initial_call="initial_duplicate",
    )
    def load_gallery_page(
        page: int | None,
        refresh_counter: int | None,
        index: int | None,
        locale_data: dict[str, Any] | None,
    ) -> tuple[Any, ...]:
        """Load the current page; the refresh counter forces a refetch after deletes."""
        return gallery_page_outputs(
            ctx.triggered_id, page, settings.gallery.page_limit, index, _language(locale_data)
        )

    @app.callback(
        Output("gallery-page-store", "data"),
        Input("gallery-prev-page", "n_clicks"),
        Input("gallery-next-page", "n_clicks"),
        State("gallery-page-store", "data"),
        prevent_initial_call=True,
    )
    def change_page(prev_clicks: int | None, next_clicks: int | None, page: int | None) -> int:
        return page_after_click(ctx.triggered_id, prev_clicks, next_clicks, page)

    @app.callback(
        Output("gallery-lightbox-index-store", "data"),
        Output("url", "href"),
        Input({"type": THUMB_TYPE, "img_index": ALL}, "n_clicks"),
        Input("gallery-lightbox-prev", "n_clicks"),
        Input("gallery-lightbox-next", "n_clicks"),
        Input("gallery-lightbox-close", "n_clicks"),
        Input("gallery-lightbox-view-order", "n_clicks"),
        Input("gallery-lightbox-keys", "n_events"),
        State("gallery-lightbox-keys", "event"),
        State("gallery-lightbox-index-store", "data"),
        State("gallery-data-store", "data"),
        State("locale-store", "data"),
        prevent_initial_call=True,
    )
    def control_lightbox(
        thumb_clicks: list[int | None],
        prev_clicks: int | None,
        next_clicks: int | None,
        close_clicks: int | None,
        view_order_clicks: int | None,
        n_events: int | None,
        event: dict[str, Any] | None,
        index: int | None,
        page_data: dict[str, Any] | None,
        locale_data: dict[str, Any] | None,
    ) -> tuple[Any, Any]:
        """Update the lightbox index from clicks and key presses."""
        return lightbox_control_outputs(
            ctx.triggered_id,
            _triggered_value(),
            index,
            page_data,
            key=(event or {}).get("key"),
            rtl=is_rtl(_language(locale_data)),
        )

    @app.callback(
        Output("gallery-lightbox", "opened"),
        Output("gallery-lightbox-img", "src"),
        Output("gallery-lightbox-img", "alt"),
        Output("gallery-lightbox-title", "children"),
        Output("gallery-lightbox-customer", "children"),
        Output("gallery-lightbox-date", "children"),
        Output("gallery-lightbox-counter", "children"),
        Output("gallery-lightbox-prev", "style"),
        Output("gallery-lightbox-next", "style"),
        Input("gallery-lightbox-index-store", "data"),
        Input("gallery-data-store", "data"),
        State("gallery-lightbox-prev", "style"),
        State("gallery-lightbox-next", "style"),
        State("locale-store", "data"),
        prevent_initial_call=True,
    )
    def render_lightbox(
        index: int | None,
        page_data: dict[str, Any] | None,
        prev_style: dict[str, Any] | None,
        next_style: dict[str, Any] | None,
        locale_data: dict[str, Any] | None,
    ) -> tuple[Any, ...]:
        return lightbox_render_outputs(
            index, page_data, prev_style, next_style, _language(locale_data)
        )

    @app.callback(
        Output("gallery-delete-target-store", "data"),
        Input({"type": THUMB_DELETE_TYPE, "image_id": ALL}, "n_clicks"),
        Input("gallery-lightbox-delete", "n_clicks"),
        State("gallery-lightbox-index-store", "data"),
        State("gallery-data-store", "data"),
        prevent_initial_call=True,
    )
    def request_delete(
        thumb_delete_clicks: list[int | None],
        lightbox_delete_clicks: int | None,
        index: int | None,
        page_data: dict[str, Any] | None,
    ) -> str:
        """Remember which image the user wants to delete; this opens the confirmation."""
        return delete_target_for(ctx.triggered_id, _triggered_value(), index, page_data)

    @app.callback(
        Output("gallery-delete-modal", "opened"),
        Input("gallery-delete-target-store", "data"),
        prevent_initial_call=True,
    )
    def toggle_delete_modal(target_id: str | None) -> bool:
        return bool(target_id)

    @app.callback(
        Output("gallery-delete-target-store", "data", allow_duplicate=True),
        Output(REFRESH_STORE, "data"),
        Output("notification-container", "sendNotifications", allow_duplicate=True),
        Input("gallery-delete-confirm", "n_clicks"),
        Input("gallery-delete-cancel", "n_clicks"),
        State("gallery-delete-target-store", "data"),
        State(REFRESH_STORE, "data"),
        State("locale-store", "data"),
        prevent_initial_call=True,
    )
    def resolve_delete(
        confirm_clicks: int | None,
        cancel_clicks: int | None,
        target_id: str | None,
        refresh_counter: int | None,
        locale_data: dict[str, Any] | None,
    ) -> tuple[Any, Any, Any]:
        """Run the confirmed delete, or drop the target when the dialog is dismissed."""
        action = delete_dialog_action(ctx.triggered_id, confirm_clicks, cancel_clicks)
        return delete_dialog_outputs(action, target_id, refresh_counter, _language(locale_data))
