"""Tests for the image uploader callback logic, with the backend mocked at the HTTP layer."""

import base64
from unittest.mock import MagicMock, patch

import pytest
from dash import no_update
from dash.exceptions import PreventUpdate

from ordergallery.dash.modules.image_uploader.callbacks.core import (
    forwarded_notifications,
    outcome_to_outputs,
    process_removal,
    process_upload,
    upload_or_remove_outputs,
)
from ordergallery.dash.modules.image_uploader.design_ui import (
    HIDDEN,
    VISIBLE,
    build_image_uploader,
    uploader_id,
)
from ordergallery.dash.modules.image_uploader.pipeline import UploadOutcome, UploadState


def _response(status_code, json_data):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    return response


class TestProcessUpload:
    def setup_method(self):
        self.httpx_post_patcher = patch("ordergallery.dash.api_calls.httpx.post")
        self.mock_httpx_post = self.httpx_post_patcher.start()

    def teardown_method(self):
        self.httpx_post_patcher.stop()

    def test_successful_upload(self, png_contents):
        """Test the caller gets the server URL once and the input is cleared."""
        self.mock_httpx_post.return_value = _response(200, {"imageUrl": "https://x/y.png"})
        on_uploaded = MagicMock()

        outcome = process_upload(png_contents, "photo.png", on_uploaded=on_uploaded)
        value, preview, preview_style, dropzone_style, notification, contents, filename = (
            outcome_to_outputs(outcome)
        )

        on_uploaded.assert_called_once_with("https://x/y.png")
        self.mock_httpx_post.assert_called_once()
        assert value == "https://x/y.png"
        assert preview == png_contents
        assert preview_style == VISIBLE
        assert dropzone_style == HIDDEN
        assert notification["severity"] == "success"
        assert contents is None
        assert filename is None

    def test_invalid_type_makes_no_request(self):
        """Test a non-image file is rejected before the network."""
        contents = "data:application/pdf;base64," + base64.b64encode(b"%PDF-1.7").decode()

        outputs = outcome_to_outputs(process_upload(contents, "invoice.pdf"))

        self.mock_httpx_post.assert_not_called()
        assert outputs[0] is no_update
        assert outputs[4]["description"] == "Please select an image file"
        assert outputs[5:] == (None, None)

    def test_oversized_file_makes_no_request(self):
        """Test a file one byte over the limit is rejected before the network."""
        with patch(
            "ordergallery.dash.modules.image_uploader.callbacks.core.SelectedFile.from_upload_contents"
        ) as mock_from_contents:
            mock_from_contents.return_value = MagicMock(
                filename="huge.png", content_type="image/png", size=10485761
            )
            outcome = process_upload("data:image/png;base64,AAAA", "huge.png")

        self.mock_httpx_post.assert_not_called()
        assert outcome.message_key == "imageTooLarge"

    def test_server_rejects_file_type(self, png_contents):
        """Test a 400 about the file type is shown as the client's file type message."""
        self.mock_httpx_post.return_value = _response(
            400, {"message": "Invalid file type, only PNG allowed"}
        )
        on_uploaded = MagicMock()

        outputs = outcome_to_outputs(
            process_upload(png_contents, "photo.png", on_uploaded=on_uploaded)
        )

        on_uploaded.assert_not_called()
        assert outputs[4]["severity"] == "error"
        assert outputs[4]["description"] == "Please select an image file"
        assert outputs[5:] == (None, None)

    def test_undeclared_heic_type(self):
        """Test HEIC files reported as octet-stream are still accepted."""
        self.mock_httpx_post.return_value = _response(200, {"imageUrl": "https://x/photo.heic"})
        contents = "data:application/octet-stream;base64," + base64.b64encode(b"heic").decode()

        outcome = process_upload(contents, "IMG_0001.HEIC")

        assert outcome.state == UploadState.SUCCESS
        _, kwargs = self.mock_httpx_post.call_args
        assert kwargs["json"]["contentType"] == "image/heic"


class TestRemoval:
    def test_remove_outputs(self):
        on_removed = MagicMock()

        outputs = outcome_to_outputs(process_removal("https://x/y.png", on_removed=on_removed))

        on_removed.assert_called_once_with()
        assert outputs == (None, None, HIDDEN, VISIBLE, no_update, None, None)

    def test_failure_keeps_slot(self):
        outputs = outcome_to_outputs(UploadOutcome(state=UploadState.FAILED))
        assert outputs[:4] == (no_update,) * 4


class TestUploaderLayout:
    def test_ids_are_indexed(self):
        assert uploader_id("input", 2) == {"type": "image-uploader-input", "index": 2}

    def test_empty_slot_shows_dropzone(self):
        widget = build_image_uploader(0)
        dropzone, preview, value_store, notification_store = widget.children

        assert dropzone.style == VISIBLE
        assert preview.style["display"] == "none"
        assert value_store.data is None
        assert dropzone.children.accept == "image/*,.heic,.heif"
        assert dropzone.children.multiple is False

    def test_existing_image_shows_preview(self):
        widget = build_image_uploader(1, current_image_url="https://x/y.png")
        dropzone, preview, value_store, _ = widget.children

        assert dropzone.style == HIDDEN
        assert preview.style["display"] == "block"
        assert value_store.data == "https://x/y.png"

    def test_busy_label_hidden_until_upload_runs(self):
        widget = build_image_uploader(0)
        stack = widget.children[0].children.children.children
        _, label, busy_label = stack.children

        assert label.id == uploader_id("label", 0)
        assert label.style == VISIBLE
        assert busy_label.id == uploader_id("busy-label", 0)
        assert busy_label.style == HIDDEN
        assert busy_label.children == "Uploading..."

    def test_busy_label_uses_widget_language(self):
        with patch(
            "ordergallery.dash.modules.image_uploader.design_ui.translate",
            side_effect=lambda key, language=None, **kwargs: f"{language}:{key}",
        ):
            widget = build_image_uploader(0, language="ar")

        _, label, busy_label = widget.children[0].children.children.children.children
        assert label.children == "ar:uploadImage"
        assert busy_label.children == "ar:uploading..."


class TestUploadOrRemoveOutputs:
    def setup_method(self):
        self.httpx_post_patcher = patch("ordergallery.dash.api_calls.httpx.post")
        self.mock_httpx_post = self.httpx_post_patcher.start()

    def teardown_method(self):
        self.httpx_post_patcher.stop()

    def test_picked_file_is_uploaded(self, png_contents):
        self.mock_httpx_post.return_value = _response(200, {"imageUrl": "https://x/new.png"})

        outputs = upload_or_remove_outputs(
            uploader_id("input", 0), png_contents, 0, "photo.png"
        )

        self.mock_httpx_post.assert_called_once()
        assert outputs[0] == "https://x/new.png"
        assert outputs[4]["severity"] == "success"

    def test_remove_click_clears_slot(self):
        outputs = upload_or_remove_outputs(
            uploader_id("remove", 0), None, 1, None, current_image_url="https://x/y.png"
        )

        self.mock_httpx_post.assert_not_called()
        assert outputs == (None, None, HIDDEN, VISIBLE, no_update, None, None)

    def test_rendered_remove_button_ignored(self):
        with pytest.raises(PreventUpdate):
            upload_or_remove_outputs(uploader_id("remove", 0), None, 0, None)

    def test_cleared_input_ignored(self):
        """Test the reset of the file input does not start another upload."""
        with pytest.raises(PreventUpdate):
            upload_or_remove_outputs(uploader_id("input", 0), None, 1, None)

        self.mock_httpx_post.assert_not_called()


class TestForwardedNotifications:
    def test_matching_store_is_forwarded(self):
        ids = [uploader_id("notification", 0), uploader_id("notification", 1)]
        stores = [
            {"title": "Old", "description": "Earlier upload", "severity": "success"},
            {"title": "Error", "description": "Upload failed", "severity": "error"},
        ]

        (notification,) = forwarded_notifications(ids[1], stores, ids)

        assert notification["title"] == "Error"
        assert notification["message"] == "Upload failed"
        assert notification["color"] == "red"

    def test_initial_render(self):
        with pytest.raises(PreventUpdate):
            forwarded_notifications(None, [None], [uploader_id("notification", 0)])

    def test_empty_store(self):
        ids = [uploader_id("notification", 0)]
        with pytest.raises(PreventUpdate):
            forwarded_notifications(ids[0], [None], ids)
