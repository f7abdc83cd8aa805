import urllib.parse

import httpx
from pydantic import ValidationError, validate_call

from ordergallery.configs.config import API_BASE_URL, settings
from ordergallery.configs.logging_init import format_pydantic, logger
from ordergallery.dash.errors import DeleteFailure, FetchFailure, NetworkFailure
from ordergallery.models.images import PageResult, UploadRequest, UploadResult

DEFAULT_UPLOAD_ERROR = "Failed to upload image"


def _auth_headers() -> dict[str, str]:
    token = settings.api.access_token
    return {"Authorization": f"Bearer {token}"} if token else {}


def _is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def _error_message(response: httpx.Response, default: str) -> str:
    """Extract the ``message`` field of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return default


@validate_call(validate_return=True)
def api_call_upload_image(upload_request: UploadRequest) -> UploadResult:
    """
    Upload a base64-encoded image to the backend.

    Args:
        upload_request: Data URI and declared content type of the image

    Returns:
        UploadResult carrying the server-assigned image URL

    Raises:
        NetworkFailure: on transport errors, non-2xx responses, or a success
            response without an image URL. ``detail`` holds the server message.
    """
    logger.info(f"Uploading image: {format_pydantic(upload_request)}")

    try:
        response = httpx.post(
            f"{API_BASE_URL}/api/upload-image",
            json=upload_request.to_payload(),
            headers=_auth_headers(),
            timeout=settings.api.request_timeout,
        )
    except httpx.HTTPError as e:
        logger.error(f"Upload transport error: {e}")
        raise NetworkFailure(str(e) or DEFAULT_UPLOAD_ERROR) from e

    if not _is_success(response):
        message = _error_message(response, DEFAULT_UPLOAD_ERROR)
        logger.error(f"Upload rejected with status {response.status_code}: {message}")
        raise NetworkFailure(message, status_code=response.status_code)

    try:
        result = UploadResult.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.error(f"Malformed upload response: {e}")
        raise NetworkFailure(DEFAULT_UPLOAD_ERROR, status_code=response.status_code) from e

    logger.info(f"Image uploaded: {result.image_url}")
    return result


@validate_call(validate_return=True)
def api_call_fetch_order_images(page: int, limit: int) -> PageResult:
    """
    Fetch one page of order images.

    Raises:
        FetchFailure: on transport errors, non-2xx responses or malformed bodies.
            There is no retry.
    """
    logger.debug(f"Fetching order images page={page} limit={limit}")

    try:
        response = httpx.get(
            f"{API_BASE_URL}/api/order-images",
            params={"page": page, "limit": limit},
            headers=_auth_headers(),
            timeout=settings.api.request_timeout,
        )
    except httpx.HTTPError as e:
        logger.error(f"Order images fetch error: {e}")
        raise FetchFailure(str(e)) from e

    if not _is_success(response):
        logger.error(f"Order images fetch failed with status {response.status_code}")
        raise FetchFailure(f"Failed to fetch images (HTTP {response.status_code})")

    try:
        page_result = PageResult.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.error(f"Malformed order images response: {e}")
        raise FetchFailure("Malformed order images response") from e

    logger.debug(
        f"Fetched {len(page_result.images)} images "
        f"(page {page_result.pagination.page}/{page_result.pagination.total_pages})"
    )
    return page_result


@validate_call(validate_return=True)
def api_call_delete_order_image(image_id: str) -> None:
    """
    Delete an order image. The response body is ignored beyond its status.

    Raises:
        DeleteFailure: on transport errors or non-2xx responses.
    """
    encoded_id = urllib.parse.quote(image_id, safe="")
    logger.info(f"Deleting order image {image_id}")

    try:
        response = httpx.delete(
            f"{API_BASE_URL}/api/order-images/{encoded_id}",
            headers=_auth_headers(),
            timeout=settings.api.request_timeout,
        )
    except httpx.HTTPError as e:
        logger.error(f"Order image delete error: {e}")
        raise DeleteFailure(str(e)) from e

    if not _is_success(response):
        logger.error(f"Order image delete failed with status {response.status_code}")
        raise DeleteFailure(f"Failed to delete image (HTTP {response.status_code})")

    logger.info(f"Order image {image_id} deleted")
