from typing import Optional

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceConfig(BaseSettings):
    """Where a service listens, optionally reached through a public URL instead."""

    host: str
    port: int
    protocol: str = Field(default="http")
    public_url: Optional[str] = Field(default=None)

    @property
    def url(self) -> str:
        if self.public_url:
            return self.public_url.rstrip("/")
        return f"{self.protocol}://{self.host}:{self.port}"


class APIConfig(ServiceConfig):
    """Order-management backend serving the image endpoints."""

    host: str = Field(default="order-backend")
    port: int = Field(default=5000)
    request_timeout: float = Field(
        default=30.0, description="Timeout in seconds for backend HTTP calls"
    )
    access_token: Optional[str] = Field(
        default=None, description="Bearer token forwarded to the backend"
    )

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_API_")


class DashConfig(ServiceConfig):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5080)
    debug: bool = Field(default=False)

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_DASH_")


class UploadConfig(BaseSettings):
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024, description="Largest accepted image, in bytes"
    )
    allowed_content_types: list[str] = Field(
        default_factory=lambda: [
            "image/jpeg",
            "image/jpg",
            "image/png",
            "image/gif",
            "image/webp",
            "image/heic",
            "image/heif",
        ]
    )
    accept: str = Field(default="image/*,.heic,.heif", description="File picker filter")

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_UPLOAD_")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def size_limit_token(self) -> str:
        """Size token the backend uses in its error messages, e.g. ``10MB``."""
        return f"{self.max_upload_bytes // (1024 * 1024)}MB"


class GalleryConfig(BaseSettings):
    page_limit: int = Field(default=20, description="Images per gallery page")
    query_cache_ttl: int = Field(
        default=60, description="Seconds a fetched page stays in the query cache"
    )

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_GALLERY_")


class LocaleConfig(BaseSettings):
    default_language: str = Field(default="en")

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_LOCALE_")


class LoggingConfig(BaseSettings):
    verbosity_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_LOGGING_")


class Settings(BaseSettings):
    api: APIConfig = Field(default_factory=APIConfig)
    dash: DashConfig = Field(default_factory=DashConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    gallery: GalleryConfig = Field(default_factory=GalleryConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_prefix="ORDERGALLERY_")
