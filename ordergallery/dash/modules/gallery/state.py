"""
Gallery navigation state.

Pagination trusts the server's ``hasNext``/``hasPrevious`` flags and never
clamps the page number locally. The lightbox index is clamped to the images of
the currently loaded page; it never wraps and never crosses pages.
"""

from typing import Literal

from ordergallery.dash.messages import translate
from ordergallery.models.images import Pagination

Direction = Literal["previous", "next"]

PREVIOUS: Direction = "previous"
NEXT: Direction = "next"

CLOSE = "close"


def step_page(current_page: int, direction: Direction) -> int:
    """Move the client-held page number by exactly one."""
    return current_page - 1 if direction == PREVIOUS else current_page + 1


def pagination_view(pagination: Pagination, language: str | None = None) -> dict:
    """Visibility, enabled state and label of the pagination controls."""
    return {
        "visible": pagination.total > 0 and pagination.total_pages > 1,
        "previous_disabled": not pagination.has_previous,
        "next_disabled": not pagination.has_next,
        "label": (
            f"{translate('page', language)} {pagination.page} {translate('of', language)} "
            f"{pagination.total_pages} ({pagination.total} {translate('total', language)})"
        ),
    }


def resolve_lightbox_index(index: int | None, count: int) -> int | None:
    """Bring a stored index back inside the current page, or None if nothing is shown."""
    if index is None or count <= 0:
        return None
    return max(0, min(index, count - 1))


def step_lightbox(index: int | None, direction: Direction, count: int) -> int | None:
    """Move the lightbox by one image, stopping at either end of the page."""
    index = resolve_lightbox_index(index, count)
    if index is None:
        return None
    if direction == PREVIOUS:
        return max(index - 1, 0)
    return min(index + 1, count - 1)


def can_step(index: int | None, direction: Direction, count: int) -> bool:
    index = resolve_lightbox_index(index, count)
    if index is None:
        return False
    return index > 0 if direction == PREVIOUS else index < count - 1


def key_to_action(key: str | None, rtl: bool = False) -> str | None:
    """
    Translate a keyboard key into a lightbox action.

    Arrow keys follow visual reading direction, so they are mirrored in
    right-to-left locales.
    """
    if key == "Escape":
        return CLOSE
    if key == "ArrowLeft":
        return NEXT if rtl else PREVIOUS
    if key == "ArrowRight":
        return PREVIOUS if rtl else NEXT
    return None


def handle_lightbox_key(index: int | None, key: str | None, count: int, rtl: bool = False):
    """New lightbox index after a key press; None means the viewer is closed."""
    if index is None:
        return None
    action = key_to_action(key, rtl)
    if action == CLOSE:
        return None
    if action is None:
        return index
    return step_lightbox(index, action, count)
