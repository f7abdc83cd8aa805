"""Tests for the gallery callback bodies, routed by the id that triggered them."""

from unittest.mock import MagicMock, patch

import pytest
from dash import no_update
from dash.exceptions import PreventUpdate

from ordergallery.dash.modules.gallery.callbacks.core import (
    delete_dialog_action,
    delete_target_for,
    gallery_page_outputs,
    lightbox_control_outputs,
    lightbox_index_after_load,
    lightbox_render_outputs,
    page_after_click,
)


def _response(status_code, json_data=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    return response


# ------------------------------------------------------
# Pagination buttons
# ------------------------------------------------------


class TestPageAfterClick:
    def test_previous_moves_two_to_one(self):
        assert page_after_click("gallery-prev-page", 1, 0, 2) == 1

    def test_next(self):
        assert page_after_click("gallery-next-page", 0, 1, 2) == 3

    def test_missing_page_defaults_to_first(self):
        assert page_after_click("gallery-next-page", 0, 1, None) == 2

    def test_unclicked_button(self):
        with pytest.raises(PreventUpdate):
            page_after_click("gallery-prev-page", 0, 0, 2)


# ------------------------------------------------------
# Lightbox index after a page load
# ------------------------------------------------------


class TestLightboxIndexAfterLoad:
    def test_closed_viewer_untouched(self):
        assert lightbox_index_after_load("gallery-page-store", None, 20) is no_update

    def test_page_change_closes_viewer(self):
        assert lightbox_index_after_load("gallery-page-store", 3, 20) is None

    def test_refresh_clamps_index(self):
        assert lightbox_index_after_load("gallery-refresh-store", 4, 3) == 2

    def test_refresh_of_empty_page_closes_viewer(self):
        assert lightbox_index_after_load("gallery-refresh-store", 0, 0) is None


class TestStaleIndexDoesNotReopenViewer:
    """Delete the last image from inside the viewer, then change page."""

    def setup_method(self):
        self.httpx_get_patcher = patch("ordergallery.dash.api_calls.httpx.get")
        self.mock_httpx_get = self.httpx_get_patcher.start()
        self.api_base_url_patcher = patch(
            "ordergallery.dash.api_calls.API_BASE_URL", "http://test-api"
        )
        self.api_base_url_patcher.start()

    def teardown_method(self):
        self.httpx_get_patcher.stop()
        self.api_base_url_patcher.stop()

    def test_viewer_stays_closed(self, page_payload):
        self.mock_httpx_get.side_effect = [
            _response(200, page_payload(page=2, count=0, total_pages=2, total=20)),
            _response(200, page_payload(page=1, count=20, total_pages=1)),
        ]

        # Refetch after the delete: the page is now empty
        outputs = gallery_page_outputs("gallery-refresh-store", 2, 20, 0)
        index = outputs[-1]
        assert index is None
        assert lightbox_render_outputs(index, outputs[0])[0] is False

        # "Previous" loads a full page; the viewer must not open by itself
        outputs = gallery_page_outputs("gallery-page-store", 1, 20, index)
        index = outputs[-1] if outputs[-1] is not no_update else index
        assert lightbox_render_outputs(index, outputs[0])[0] is False

    def test_refresh_keeps_viewer_on_remaining_image(self, page_payload):
        self.mock_httpx_get.return_value = _response(200, page_payload(count=2))

        outputs = gallery_page_outputs("gallery-refresh-store", 1, 20, 2)

        assert outputs[-1] == 1
        assert lightbox_render_outputs(outputs[-1], outputs[0])[0] is True

    def test_fetch_failure_closes_viewer(self):
        self.mock_httpx_get.return_value = _response(500)

        outputs = gallery_page_outputs("gallery-refresh-store", 1, 20, 1)

        assert outputs[0] is None
        assert outputs[-1] is None


# ------------------------------------------------------
# Lightbox controls
# ------------------------------------------------------


class TestLightboxControlOutputs:
    @pytest.fixture(autouse=True)
    def _page(self, page_payload):
        self.page_data = page_payload(count=3)

    def test_thumbnail_opens_at_its_index(self):
        triggered = {"type": "gallery-thumb", "img_index": 1}
        assert lightbox_control_outputs(triggered, 1, None, self.page_data) == (1, no_update)

    def test_rerendered_thumbnails_ignored(self):
        triggered = {"type": "gallery-thumb", "img_index": 0}
        with pytest.raises(PreventUpdate):
            lightbox_control_outputs(triggered, 0, None, self.page_data)

    def test_next_and_previous_buttons(self):
        assert lightbox_control_outputs("gallery-lightbox-next", 1, 1, self.page_data) == (
            2,
            no_update,
        )
        assert lightbox_control_outputs("gallery-lightbox-prev", 1, 1, self.page_data) == (
            0,
            no_update,
        )

    def test_buttons_clamp_at_ends(self):
        for _ in range(5):
            index, _ = lightbox_control_outputs("gallery-lightbox-next", 1, 2, self.page_data)
            assert index == 2

    def test_close(self):
        assert lightbox_control_outputs("gallery-lightbox-close", 1, 1, self.page_data) == (
            None,
            no_update,
        )

    def test_view_order_navigates(self):
        index, href = lightbox_control_outputs(
            "gallery-lightbox-view-order", 1, 2, self.page_data
        )
        assert index is None
        assert href == "/orders?highlight=order-img-1-2"

    @pytest.mark.parametrize(
        "key, rtl, expected",
        [
            ("ArrowRight", False, 2),
            ("ArrowLeft", False, 0),
            ("ArrowLeft", True, 2),
            ("Escape", False, None),
        ],
    )
    def test_keys(self, key, rtl, expected):
        index, href = lightbox_control_outputs(
            "gallery-lightbox-keys", 1, 1, self.page_data, key=key, rtl=rtl
        )
        assert index == expected
        assert href is no_update

    def test_unhandled_key(self):
        with pytest.raises(PreventUpdate):
            lightbox_control_outputs("gallery-lightbox-keys", 1, 1, self.page_data, key="a")

    def test_keys_ignored_while_closed(self):
        with pytest.raises(PreventUpdate):
            lightbox_control_outputs(
                "gallery-lightbox-keys", 1, None, self.page_data, key="ArrowRight"
            )


class TestLightboxRenderOutputs:
    def test_renders_selected_image(self, page_payload):
        outputs = lightbox_render_outputs(0, page_payload(count=3))

        opened, src, alt, title, customer, date, counter, prev_style, next_style = outputs
        assert opened is True
        assert src == "https://cdn.example.com/img-1-0.png"
        assert alt == "Order ORD-1001"
        assert title == "ORD-1001"
        assert customer == "Ada Lovelace"
        assert date == "03/15/2024"
        assert counter == "1 / 3"
        assert prev_style["display"] == "none"
        assert next_style["display"] == "flex"

    def test_stale_index_is_clamped(self, page_payload):
        outputs = lightbox_render_outputs(7, page_payload(count=3))
        assert outputs[6] == "3 / 3"

    def test_nothing_selected(self, page_payload):
        assert lightbox_render_outputs(None, page_payload())[0] is False


# ------------------------------------------------------
# Delete triggers
# ------------------------------------------------------


class TestDeleteTargetFor:
    def test_thumbnail_delete_icon(self):
        triggered = {"type": "gallery-thumb-delete", "image_id": "img-42"}
        assert delete_target_for(triggered, 1, None, None) == "img-42"

    def test_delete_from_viewer_uses_displayed_image(self, page_payload):
        target = delete_target_for("gallery-lightbox-delete", 1, 2, page_payload(count=3))
        assert target == "img-1-2"

    def test_rerendered_icons_ignored(self):
        triggered = {"type": "gallery-thumb-delete", "image_id": "img-42"}
        with pytest.raises(PreventUpdate):
            delete_target_for(triggered, 0, None, None)

    def test_viewer_delete_without_image(self, page_payload):
        with pytest.raises(PreventUpdate):
            delete_target_for("gallery-lightbox-delete", 1, None, page_payload())


class TestDeleteDialogAction:
    def test_confirm(self):
        assert delete_dialog_action("gallery-delete-confirm", 1, 0) == "confirm"

    def test_cancel(self):
        assert delete_dialog_action("gallery-delete-cancel", 0, 1) == "cancel"

    def test_no_click(self):
        with pytest.raises(PreventUpdate):
            delete_dialog_action("gallery-delete-confirm", 0, 0)
