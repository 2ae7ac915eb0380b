# app/routers/todos.py
from fastapi import APIRouter, Depends, status

from app.core.query import QueryOptions, get_query_options
from app.database import Catalog, get_catalog
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo import TodoCreate, TodoUpdate
from app.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["Todos"])

repo = TodoRepository()
service = TodoService(repo)


@router.get("")
def list_todos(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.list_all(catalog, options)


@router.get("/user/{user_id}")
def list_todos_of_user(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.list_for_user(catalog, user_id, options)


@router.get("/{todo_id}")
def get_todo(
    todo_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.get(catalog, todo_id, options.select)


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_todo(
    payload: TodoCreate,
    catalog: Catalog = Depends(get_catalog),
):
    return service.add(catalog, payload)


@router.put("/{todo_id}")
@router.patch("/{todo_id}")
def update_todo(
    todo_id: int,
    payload: TodoUpdate,
    catalog: Catalog = Depends(get_catalog),
):
    return service.update(catalog, todo_id, payload)


@router.delete("/{todo_id}")
def delete_todo(
    todo_id: int,
    catalog: Catalog = Depends(get_catalog),
):
    return service.delete(catalog, todo_id)
