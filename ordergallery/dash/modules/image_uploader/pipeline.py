"""
Image upload pipeline.

    idle -> validating -> encoding -> uploading -> {success | failed} -> idle

Validation failures never reach the network. Every terminal transition asks the
widget to clear its file input so the same file can be picked again.
"""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel

from ordergallery.configs.logging_init import logger
from ordergallery.dash.api_calls import api_call_upload_image
from ordergallery.dash.components.notifications import error_notification, success_notification
from ordergallery.dash.errors import NetworkFailure, OrderGalleryError, UploadInProgress
from ordergallery.dash.modules.image_uploader.utils import (
    classify_server_message,
    encode_data_uri,
    validate_selected_file,
)
from ordergallery.models.files import SelectedFile
from ordergallery.models.images import UploadRequest, UploadResult
from ordergallery.models.notifications import Notification


class UploadState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    ENCODING = "encoding"
    UPLOADING = "uploading"
    SUCCESS = "success"
    FAILED = "failed"
    REMOVED = "removed"


class UploadOutcome(BaseModel):
    """What the widget should show once a run (or a removal) is over."""

    state: UploadState
    preview: str | None = None
    image_url: str | None = None
    message_key: str | None = None
    notification: Notification | None = None
    clear_input: bool = True


class ImageUploadPipeline:
    """
    One upload widget's state.

    ``on_uploaded`` receives the server URL after a successful upload and
    ``on_removed`` is called when the user clears the image.
    """

    def __init__(
        self,
        on_uploaded: Callable[[str], None] | None = None,
        on_removed: Callable[[], None] | None = None,
        current_image_url: str | None = None,
        language: str | None = None,
        uploader: Callable[[UploadRequest], UploadResult] = api_call_upload_image,
    ):
        self.on_uploaded = on_uploaded
        self.on_removed = on_removed
        self.preview = current_image_url
        self.language = language
        self.uploader = uploader
        self.state = UploadState.IDLE
        self.history: list[UploadState] = [UploadState.IDLE]

    @property
    def busy(self) -> bool:
        return self.state in (UploadState.VALIDATING, UploadState.ENCODING, UploadState.UPLOADING)

    def _transition(self, state: UploadState) -> None:
        logger.debug(f"Upload pipeline: {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    def _fail(self, error: OrderGalleryError) -> UploadOutcome:
        self._transition(UploadState.FAILED)
        logger.warning(f"Upload failed ({error.__class__.__name__}): {error.detail}")
        return UploadOutcome(
            state=UploadState.FAILED,
            preview=self.preview,
            message_key=error.message_key,
            notification=error_notification(error.message_key, self.language),
        )

    def run(self, selected_file: SelectedFile) -> UploadOutcome:
        """Validate, encode and upload one file.

        Raises:
            UploadInProgress: another run has not finished yet
        """
        if self.state != UploadState.IDLE:
            raise UploadInProgress(f"Pipeline is {self.state.value}")

        try:
            self._transition(UploadState.VALIDATING)
            validate_selected_file(selected_file)

            self._transition(UploadState.ENCODING)
            data_uri = encode_data_uri(selected_file)

            self._transition(UploadState.UPLOADING)
            upload_request = UploadRequest(
                image_data=data_uri, content_type=selected_file.content_type
            )
            try:
                result = self.uploader(upload_request)
            except NetworkFailure as e:
                e.message_key = classify_server_message(e.detail)
                raise

            self._transition(UploadState.SUCCESS)
            # Local data URI gives instant feedback without fetching the server copy
            self.preview = data_uri
            if self.on_uploaded is not None:
                self.on_uploaded(result.image_url)
            return UploadOutcome(
                state=UploadState.SUCCESS,
                preview=data_uri,
                image_url=result.image_url,
                message_key="imageUploadedSuccessfully",
                notification=success_notification("imageUploadedSuccessfully", self.language),
            )
        except OrderGalleryError as e:
            return self._fail(e)
        finally:
            self._transition(UploadState.IDLE)

    def remove(self) -> UploadOutcome:
        """Clear the preview locally; the backend record is left untouched."""
        if self.busy:
            raise UploadInProgress(f"Pipeline is {self.state.value}")

        self.preview = None
        if self.on_removed is not None:
            self.on_removed()
        self._transition(UploadState.REMOVED)
        self._transition(UploadState.IDLE)
        return UploadOutcome(state=UploadState.REMOVED)
