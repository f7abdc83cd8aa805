from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CamelModel(BaseModel):
    """Base model reading and writing the backend's camelCase field names."""

    model_config = ConfigDict(populate_by_name=True)


class UploadRequest(CamelModel):
    image_data: str = Field(alias="imageData")
    content_type: str = Field(alias="contentType")

    @field_validator("image_data")
    def validate_image_data(cls, v):
        if not v.startswith("data:"):
            raise ValueError("Image data must be a data URI")
        return v

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class UploadResult(CamelModel):
    image_url: str = Field(alias="imageUrl")

    @field_validator("image_url")
    def validate_image_url(cls, v):
        if not v:
            raise ValueError("Image URL cannot be empty")
        return v


class OrderRef(CamelModel):
    order_number: str | None = Field(default=None, alias="orderNumber")


class CustomerRef(CamelModel):
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ImageRecord(CamelModel):
    id: str
    url: str
    alt_text: str | None = Field(default=None, alias="altText")
    order_id: str = Field(alias="orderId")
    order: OrderRef | None = None
    customer: CustomerRef | None = None
    created_at: datetime = Field(alias="createdAt")

    @field_validator("id", "order_id", mode="before")
    def coerce_identifier(cls, v):
        # The backend may send numeric ids
        if isinstance(v, int):
            return str(v)
        return v

    def order_label(self) -> str | None:
        return self.order.order_number if self.order and self.order.order_number else None

    def customer_name(self) -> str | None:
        if not self.customer:
            return None
        return self.customer.full_name or None

    def display_alt(self) -> str:
        if self.alt_text:
            return self.alt_text
        return f"Order {self.order_label() or ''}"


class Pagination(CamelModel):
    page: int = 1
    total_pages: int = Field(default=1, alias="totalPages")
    has_next: bool = Field(default=False, alias="hasNext")
    has_previous: bool = Field(default=False, alias="hasPrevious")
    total: int = 0


class PageResult(CamelModel):
    images: list[ImageRecord] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("images")
    def validate_unique_ids(cls, v):
        ids = [image.id for image in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Image ids must be unique within a page")
        return v
