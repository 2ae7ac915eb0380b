# app/repositories/todo_repo.py
from app.repositories.base_repo import CatalogRepository


class TodoRepository(CatalogRepository):

    collection = "todos"
