"""
Image Uploader Utility Functions.

Client-side validation, data URI encoding and reclassification of server error
messages into the client's own error vocabulary.
"""

import base64
from collections.abc import Iterable

from ordergallery.configs.config import settings
from ordergallery.dash.errors import EncodingFailure, FileTooLarge, InvalidFileType
from ordergallery.models.files import SelectedFile

# Substrings of server messages that mean "wrong file type"
FILE_TYPE_MARKERS = ("Invalid file type", "only", "allowed")

# Inline SVG shown when an image URL cannot be loaded
ERROR_PLACEHOLDER_SRC = (
    "data:image/svg+xml,%3Csvg xmlns='http://www.w3.org/2000/svg' width='100' height='100'%3E"
    "%3Crect fill='%23ddd' width='100' height='100'/%3E%3Ctext x='50%25' y='50%25' "
    "dominant-baseline='middle' text-anchor='middle' fill='%23999'%3EError%3C/text%3E%3C/svg%3E"
)


def is_allowed_content_type(content_type: str, allowed: Iterable[str] | None = None) -> bool:
    """Any ``image/*`` type, or an exact (case-insensitive) allow-list match."""
    if allowed is None:
        allowed = settings.upload.allowed_content_types
    if content_type.startswith("image/"):
        return True
    return content_type.lower() in {item.lower() for item in allowed}


def validate_selected_file(
    selected_file: SelectedFile,
    max_bytes: int | None = None,
    allowed: Iterable[str] | None = None,
) -> None:
    """
    Reject files that are not images or that exceed the size limit.

    Raises:
        InvalidFileType: the declared MIME type is not accepted
        FileTooLarge: the file is larger than ``max_bytes``
    """
    if max_bytes is None:
        max_bytes = settings.upload.max_upload_bytes

    if not is_allowed_content_type(selected_file.content_type, allowed):
        raise InvalidFileType(
            f"{selected_file.filename or 'file'} has type '{selected_file.content_type}'"
        )

    if selected_file.size > max_bytes:
        raise FileTooLarge(
            f"{selected_file.filename or 'file'} is {selected_file.size} bytes (limit {max_bytes})"
        )


def encode_data_uri(selected_file: SelectedFile) -> str:
    """
    Read a file and encode it as ``data:<type>;base64,<payload>``.

    Raises:
        EncodingFailure: the file could not be read or decoded
    """
    try:
        data = selected_file.read()
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"Could not read {selected_file.filename or 'file'}: {e}") from e

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{selected_file.content_type};base64,{encoded}"


def classify_server_message(message: str | None, size_token: str | None = None) -> str:
    """
    Map a server (or transport) error message to a client message key.

    File-type markers win over size markers; anything unmatched is a generic
    upload failure.
    """
    if size_token is None:
        size_token = settings.upload.size_limit_token
    if not message:
        return "imageUploadFailed"
    if any(marker in message for marker in FILE_TYPE_MARKERS):
        return "selectImageFile"
    if "size" in message or size_token in message:
        return "imageTooLarge"
    return "imageUploadFailed"
