# app/routers/posts.py
from fastapi import APIRouter, Depends, status

from app.core.query import QueryOptions, get_query_options
from app.database import Catalog, get_catalog
from app.repositories.post_repo import PostRepository
from app.schemas.post import PostCreate, PostUpdate
from app.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["Posts"])

repo = PostRepository()
service = PostService(repo)


@router.get("")
def list_posts(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.list_all(catalog, options)


@router.get("/search")
def search_posts(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """Search posts by title and body (`q`)."""
    return service.search(catalog, options)


@router.get("/user/{user_id}")
def list_posts_of_user(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.list_for_user(catalog, user_id, options)


@router.get("/{post_id}")
def get_post(
    post_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.get(catalog, post_id, options.select)


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_post(
    payload: PostCreate,
    catalog: Catalog = Depends(get_catalog),
):
    return service.add(catalog, payload)


@router.put("/{post_id}")
@router.patch("/{post_id}")
def update_post(
    post_id: int,
    payload: PostUpdate,
    catalog: Catalog = Depends(get_catalog),
):
    return service.update(catalog, post_id, payload)


@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    catalog: Catalog = Depends(get_catalog),
):
    return service.delete(catalog, post_id)
