"""Ad request/response schemas and the listing query descriptor."""

from datetime import datetime
from typing import Literal

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, field_validator

SortBy = Literal["", "created_at", "price"]
SortOrder = Literal["", "asc", "desc"]

_url_adapter = TypeAdapter(AnyUrl)


class AdCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-zA-Z0-9\s]+$")
    description: str = Field(..., min_length=1, max_length=1000)
    image_url: str = Field(..., max_length=2048)
    price: float = Field(..., gt=0)

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: str) -> str:
        """Must parse as a URL; stored exactly as sent."""
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("invalid URL") from None
        return value


class AdResponse(BaseModel):
    id: int
    title: str
    description: str
    image_url: str
    price: float
    author_id: int

    model_config = {"from_attributes": True}


class AdWithAuthor(BaseModel):
    """Listing row as read from the store: the ad joined with its author's login."""

    id: int
    title: str
    description: str
    image_url: str
    price: float
    author_id: int
    author_login: str
    created_at: datetime | None = None


class AdListItem(BaseModel):
    id: int
    title: str
    description: str
    image_url: str
    price: float
    author_login: str
    is_owner: bool


class AdListQuery(BaseModel):
    """
    Validated listing query. Empty sort fields mean "no explicit order".
    A price bound of 0 means that side is unbounded.
    """

    page: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    sort_by: SortBy = ""
    sort_order: SortOrder = ""
    min_price: float = Field(0.0, ge=0)
    max_price: float = Field(0.0, ge=0)
