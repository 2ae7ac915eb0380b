# app/schemas/post.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class PostWrite(SQLModel):
    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str | None = None
    body: str | None = None
    user_id: int | None = None
    tags: list[str] | None = None
    reactions: int | None = None


class PostCreate(PostWrite):
    pass


class PostUpdate(PostWrite):
    pass
