# app/schemas/cart.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


class CartProductIn(SQLModel):
    """
    One line of a cart payload: a product id and how many of it.
    """

    id: int
    quantity: int = Field(default=1, ge=1)


class CartCreate(SQLModel):
    """
    Payload for simulating a new cart.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int
    products: list[CartProductIn] = []


class CartUpdate(SQLModel):
    """
    Payload for updating a cart.

    - `products` omitted => existing lines are kept.
    - `merge=True` => supplied lines are added to the existing ones
      instead of replacing them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: int | None = None
    products: list[CartProductIn] | None = None
    merge: bool = False
