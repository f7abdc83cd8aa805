import base64

import pytest

import ordergallery.dash.query_cache as query_cache_module

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


@pytest.fixture(autouse=True)
def reset_query_cache():
    """Every test starts with an empty global query cache."""
    query_cache_module._cache = None
    yield
    query_cache_module._cache = None


@pytest.fixture
def png_contents():
    """A ``dcc.Upload`` payload for a small PNG."""
    return "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode("ascii")


@pytest.fixture
def image_payload():
    def _make(image_id="img-1", order_number="ORD-1001", **overrides):
        payload = {
            "id": image_id,
            "url": f"https://cdn.example.com/{image_id}.png",
            "altText": None,
            "orderId": f"order-{image_id}",
            "order": {"orderNumber": order_number},
            "customer": {"firstName": "Ada", "lastName": "Lovelace"},
            "createdAt": "2024-03-15T10:30:00Z",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def page_payload(image_payload):
    def _make(page=1, total_pages=1, total=None, count=3, has_next=False, has_previous=False):
        images = [image_payload(f"img-{page}-{idx}") for idx in range(count)]
        return {
            "images": images,
            "pagination": {
                "page": page,
                "totalPages": total_pages,
                "hasNext": has_next,
                "hasPrevious": has_previous,
                "total": count if total is None else total,
            },
        }

    return _make
