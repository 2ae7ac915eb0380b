# app/repositories/cart_repo.py
from app.repositories.base_repo import CatalogRepository


class CartRepository(CatalogRepository):

    collection = "carts"
