"""
User-facing message catalog and locale helpers.

Only English text ships with the application. Other languages fall back to it
key by key, while still driving layout direction and date formats.
"""

from datetime import datetime

DEFAULT_LANGUAGE = "en"

RTL_LANGUAGES = frozenset(["ar", "he", "fa", "ur"])

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "error": "Error",
        "success": "Success",
        "selectImageFile": "Please select an image file",
        "imageTooLarge": "Image is too large. Maximum size is {limit}",
        "imageUploadFailed": "Failed to upload image",
        "imageUploadedSuccessfully": "Image uploaded successfully",
        "uploading": "Uploading",
        "uploadImage": "Upload image",
        "removeImage": "Remove image",
        "gallery": "Gallery",
        "images": "images",
        "noImagesFound": "No images found",
        "uploadImagesInOrders": "Upload images from the order form to see them here",
        "unknownOrder": "Unknown order",
        "previous": "Previous",
        "next": "Next",
        "page": "Page",
        "of": "of",
        "total": "total",
        "fetchImagesFailed": "Failed to fetch images",
        "deleteImageTitle": "Delete image",
        "deleteImageConfirmation": "Are you sure you want to delete this image? This action cannot be undone.",
        "cancel": "Cancel",
        "delete": "Delete",
        "imageDeletedSuccess": "Image deleted successfully",
        "imageDeleteFailed": "Failed to delete image",
        "viewOrder": "View order",
    },
}

# strftime patterns per language, matching the browser's short date style
DATE_FORMATS = {
    "en": "%m/%d/%Y",
    "ar": "%d/%m/%Y",
    "he": "%d.%m.%Y",
    "fa": "%Y/%m/%d",
    "ur": "%d/%m/%Y",
}


def base_language(language: str | None) -> str:
    """``ar-SA`` -> ``ar``; empty -> default language."""
    if not language:
        return DEFAULT_LANGUAGE
    return language.replace("_", "-").split("-")[0].lower()


def is_rtl(language: str | None) -> bool:
    return base_language(language) in RTL_LANGUAGES


def translate(key: str, language: str | None = None, **kwargs) -> str:
    """Look up a message, falling back to English, then to the key itself."""
    catalog = MESSAGES.get(base_language(language), {})
    text = catalog.get(key) or MESSAGES[DEFAULT_LANGUAGE].get(key, key)
    return text.format(**kwargs) if kwargs else text


def format_date(value: datetime, language: str | None = None) -> str:
    pattern = DATE_FORMATS.get(base_language(language), DATE_FORMATS[DEFAULT_LANGUAGE])
    return value.strftime(pattern)
