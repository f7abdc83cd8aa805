import base64
import mimetypes
from collections.abc import Callable

from pydantic import BaseModel, Field, field_validator

# Not in every platform's mimetypes table
mimetypes.add_type("image/heic", ".heic")
mimetypes.add_type("image/heif", ".heif")

# MIME types browsers report when they do not know the file's type
UNDECLARED_CONTENT_TYPES = frozenset(["", "application/octet-stream"])


def guess_content_type(filename: str | None) -> str:
    """Guess a MIME type from a file extension, empty string when unknown."""
    if not filename:
        return ""
    mime_type, _ = mimetypes.guess_type(filename)
    return mime_type or ""


def split_data_uri(contents: str) -> tuple[str, str]:
    """
    Split ``data:<type>;base64,<payload>`` into its MIME type and base64 payload.

    Contents without a data URI header are treated as a bare payload.
    """
    if not contents.startswith("data:") or "," not in contents:
        return "", contents
    header, payload = contents.split(",", 1)
    content_type = header[len("data:") :].split(";", 1)[0]
    return content_type, payload


def base64_decoded_size(payload: str) -> int:
    """Size in bytes of the data a base64 payload decodes to."""
    payload = payload.strip()
    if not payload:
        return 0
    return len(payload) * 3 // 4 - payload[-2:].count("=")


class SelectedFile(BaseModel):
    """A file picked by the user, not yet read."""

    filename: str = ""
    content_type: str = ""
    size: int
    reader: Callable[[], bytes] = Field(exclude=True, repr=False)

    @field_validator("size")
    def validate_size(cls, v):
        if v < 0:
            raise ValueError("File size cannot be negative")
        return v

    def read(self) -> bytes:
        return self.reader()

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "", content_type: str = "") -> "SelectedFile":
        if content_type in UNDECLARED_CONTENT_TYPES:
            content_type = guess_content_type(filename)
        return cls(
            filename=filename,
            content_type=content_type,
            size=len(data),
            reader=lambda: data,
        )

    @classmethod
    def from_upload_contents(cls, contents: str, filename: str | None = None) -> "SelectedFile":
        """
        Build a file handle from a ``dcc.Upload`` payload.

        The payload is only decoded when the file is read, so a corrupt payload
        surfaces at read time.
        """
        content_type, payload = split_data_uri(contents)
        if content_type in UNDECLARED_CONTENT_TYPES:
            content_type = guess_content_type(filename)

        return cls(
            filename=filename or "",
            content_type=content_type,
            size=base64_decoded_size(payload),
            reader=lambda: base64.b64decode(payload, validate=True),
        )
