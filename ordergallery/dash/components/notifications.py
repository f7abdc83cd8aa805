"""
Notifications shown on every terminal state of an upload or a delete.
"""

import uuid
from typing import Any

from dash_iconify import DashIconify

from ordergallery.configs.config import settings
from ordergallery.dash.messages import translate
from ordergallery.models.notifications import Notification

NOTIFICATION_STYLES = {
    "success": {"color": "green", "icon": "mdi:check-circle", "autoClose": 5000},
    "error": {"color": "red", "icon": "mdi:alert-circle", "autoClose": 10000},
}


def describe(message_key: str, language: str | None = None) -> str:
    """Translate a message key, filling in the configured upload limit."""
    return translate(message_key, language, limit=settings.upload.size_limit_token)


def success_notification(message_key: str, language: str | None = None) -> Notification:
    return Notification(
        title=translate("success", language),
        description=describe(message_key, language),
        severity="success",
    )


def error_notification(message_key: str, language: str | None = None) -> Notification:
    return Notification(
        title=translate("error", language),
        description=describe(message_key, language),
        severity="error",
    )


def render_notification(notification: Notification) -> dict[str, Any]:
    """Convert a notification to the dict ``NotificationContainer.sendNotifications`` expects."""
    style = NOTIFICATION_STYLES[notification.severity]
    return {
        "id": f"ordergallery-{notification.severity}-{uuid.uuid4().hex[:8]}",
        "title": notification.title,
        "message": notification.description,
        "color": style["color"],
        "icon": DashIconify(icon=style["icon"], width=20),
        "action": "show",
        "autoClose": style["autoClose"],
    }
