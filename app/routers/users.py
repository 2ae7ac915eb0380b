# app/routers/users.py
from fastapi import APIRouter, Depends, Query, status

from app.core.query import QueryOptions, get_query_options
from app.database import Catalog, get_catalog
from app.repositories.cart_repo import CartRepository
from app.repositories.post_repo import PostRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.todo_repo import TodoRepository
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserCreate, UserUpdate
from app.services.cart_service import CartService
from app.services.post_service import PostService
from app.services.todo_service import TodoService
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

repo = UserRepository()
service = UserService(
    repo,
    owned={
        "carts": CartService(CartRepository(), ProductRepository()),
        "posts": PostService(PostRepository()),
        "todos": TodoService(TodoRepository()),
    },
)


# -------- Reads --------


@router.get("")
def list_users(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    List all users.

    Pagination via skip/limit, field selection via `select`.
    """
    return service.list_all(catalog, options)


@router.get("/search")
def search_users(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Search users by first/last/maiden name, username and email (`q`).
    """
    return service.search(catalog, options)


@router.get("/filter")
def filter_users(
    key: str = Query(..., description="Field path, e.g. hair.color"),
    value: str = Query(..., description="Value to match (case-insensitive)"),
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Filter users by a (possibly nested) field, e.g. `?key=hair.color&value=Brown`.
    """
    return service.filter(catalog, key, value, options)


@router.get("/{user_id}")
def get_user(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Get a specific user by id.
    """
    return service.get(catalog, user_id, options.select)


@router.get("/{user_id}/carts")
def list_user_carts(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Carts of a user. 404 if the user does not exist.
    """
    return service.list_owned(catalog, user_id, "carts", options)


@router.get("/{user_id}/posts")
def list_user_posts(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Posts of a user. 404 if the user does not exist.
    """
    return service.list_owned(catalog, user_id, "posts", options)


@router.get("/{user_id}/todos")
def list_user_todos(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Todos of a user. 404 if the user does not exist.
    """
    return service.list_owned(catalog, user_id, "todos", options)


# -------- Simulated writes --------


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_user(
    payload: UserCreate,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate adding a user. Returns the supplied fields with a new id.
    """
    return service.add(catalog, payload)


@router.put("/{user_id}")
@router.patch("/{user_id}")
def update_user(
    user_id: int,
    payload: UserUpdate,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate updating a user (shallow overlay; nested objects replaced).
    """
    return service.update(catalog, user_id, payload)


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate deleting a user.
    """
    return service.delete(catalog, user_id)
