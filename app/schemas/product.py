# app/schemas/product.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


class ProductWrite(SQLModel):
    """
    Shared fields for product add/update payloads.

    - Field names are camelCase on the wire (`discountPercentage`).
    - Unknown fields are accepted and echoed back untouched.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    discount_percentage: float | None = Field(default=None, ge=0, le=100)
    rating: float | None = None
    stock: int | None = Field(default=None, ge=0)
    brand: str | None = None
    category: str | None = None
    thumbnail: str | None = None
    images: list[str] | None = None


class ProductCreate(ProductWrite):
    """
    Payload for simulating a new product.
    Only the supplied fields are returned, plus a fresh id.
    """

    pass


class ProductUpdate(ProductWrite):
    """
    Partial update payload for products (PUT and PATCH alike).
    Supplied fields are laid over the stored product.
    """

    pass
