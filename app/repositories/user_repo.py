# app/repositories/user_repo.py
from app.repositories.base_repo import CatalogRepository


class UserRepository(CatalogRepository):
    """
    Data access layer for users.

    Users own carts, posts and todos through their `userId`.
    """

    collection = "users"
