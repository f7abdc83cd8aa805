"""
Error taxonomy for the upload widget and the gallery.

Every error maps to a message key in ``ordergallery.dash.messages``; callbacks
catch ``OrderGalleryError`` and show that message instead of crashing the page.
"""


class OrderGalleryError(Exception):
    message_key = "imageUploadFailed"

    def __init__(self, detail: str = "", message_key: str | None = None):
        super().__init__(detail or self.__class__.__name__)
        self.detail = detail
        if message_key is not None:
            self.message_key = message_key


class InvalidFileType(OrderGalleryError):
    message_key = "selectImageFile"


class FileTooLarge(OrderGalleryError):
    message_key = "imageTooLarge"


class EncodingFailure(OrderGalleryError):
    message_key = "imageUploadFailed"


class NetworkFailure(OrderGalleryError):
    """Transport error or non-2xx response from the upload endpoint."""

    message_key = "imageUploadFailed"

    def __init__(
        self, detail: str = "", message_key: str | None = None, status_code: int | None = None
    ):
        super().__init__(detail, message_key)
        self.status_code = status_code


class DeleteFailure(OrderGalleryError):
    message_key = "imageDeleteFailed"


class FetchFailure(OrderGalleryError):
    message_key = "fetchImagesFailed"


class UploadInProgress(OrderGalleryError):
    message_key = "uploading"
