# app/repositories/post_repo.py
from app.repositories.base_repo import CatalogRepository


class PostRepository(CatalogRepository):

    collection = "posts"
