# app/services/post_service.py
from app.repositories.post_repo import PostRepository
from app.services.base_service import CatalogService


class PostService(CatalogService):
    """Posts: searchable by title and body, filterable by user."""

    resource = "Post"
    envelope = "posts"
    search_fields = ("title", "body")

    def __init__(self, repo: PostRepository):
        super().__init__(repo)
