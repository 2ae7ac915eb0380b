# app/services/todo_service.py
from app.repositories.todo_repo import TodoRepository
from app.services.base_service import CatalogService


class TodoService(CatalogService):

    resource = "Todo"
    envelope = "todos"

    def __init__(self, repo: TodoRepository):
        super().__init__(repo)
