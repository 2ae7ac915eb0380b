# app/schemas/todo.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class TodoWrite(SQLModel):
    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    todo: str | None = None
    completed: bool | None = None
    user_id: int | None = None


class TodoCreate(TodoWrite):
    pass


class TodoUpdate(TodoWrite):
    pass
