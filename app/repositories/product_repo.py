# app/repositories/product_repo.py
import copy
from typing import Any

from app.core.search import distinct_values, filter_by_category
from app.database import Catalog
from app.repositories.base_repo import CatalogRepository


class ProductRepository(CatalogRepository):
    """
    Data access for the product collection.
    """

    collection = "products"

    def list_by_category(self, catalog: Catalog, category: str) -> list[dict[str, Any]]:
        return copy.deepcopy(filter_by_category(self._rows(catalog), category))

    def categories(self, catalog: Catalog) -> list[str]:
        return distinct_values(self._rows(catalog), "category")
