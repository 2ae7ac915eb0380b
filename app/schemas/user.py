# app/schemas/user.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class UserWrite(SQLModel):
    """
    Shared fields for user add/update payloads.

    Nested objects (address, bank, company, hair) are opaque and
    passed through as-is. Unknown fields are accepted.
    """

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    first_name: str | None = None
    last_name: str | None = None
    maiden_name: str | None = None
    age: int | None = None
    gender: str | None = None
    email: str | None = None
    phone: str | None = None
    username: str | None = None
    password: str | None = None
    birth_date: str | None = None
    image: str | None = None
    address: dict | None = None
    bank: dict | None = None
    company: dict | None = None


class UserCreate(UserWrite):
    """Payload for simulating a new user."""

    pass


class UserUpdate(UserWrite):
    """Partial update payload for users."""

    pass
