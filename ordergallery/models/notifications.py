from typing import Literal

from pydantic import BaseModel

Severity = Literal["success", "error"]


class Notification(BaseModel):
    """Transient message shown to the user when an upload or delete finishes."""

    title: str
    description: str
    severity: Severity = "success"
