"""
Gallery data access through the query cache.
"""

from ordergallery.configs.logging_init import logger
from ordergallery.dash.api_calls import api_call_delete_order_image, api_call_fetch_order_images
from ordergallery.dash.components.notifications import error_notification, success_notification
from ordergallery.dash.errors import DeleteFailure
from ordergallery.dash.query_cache import QueryCache, get_query_cache
from ordergallery.models.images import PageResult
from ordergallery.models.notifications import Notification

ORDER_IMAGES_QUERY = "order-images"


def order_images_key(page: int, limit: int) -> tuple[str, int, int]:
    return (ORDER_IMAGES_QUERY, page, limit)


def fetch_page(page: int, limit: int, cache: QueryCache | None = None) -> PageResult:
    """
    Load one gallery page, from the cache when possible.

    Raises:
        FetchFailure: the backend could not deliver the page
    """
    if cache is None:
        cache = get_query_cache()
    return cache.get_or_fetch(
        order_images_key(page, limit),
        lambda: api_call_fetch_order_images(page=page, limit=limit),
    )


def confirm_delete(
    image_id: str, language: str | None = None, cache: QueryCache | None = None
) -> tuple[bool, Notification]:
    """
    Delete a confirmed image.

    On success every cached gallery page is invalidated so the next read
    refetches. Returns whether the delete succeeded and the notification to show.
    """
    if cache is None:
        cache = get_query_cache()
    try:
        api_call_delete_order_image(image_id)
    except DeleteFailure as e:
        logger.warning(f"Delete of image {image_id} failed: {e.detail}")
        return False, error_notification(e.message_key, language)

    cache.invalidate((ORDER_IMAGES_QUERY,))
    return True, success_notification("imageDeletedSuccess", language)
