# app/services/product_service.py
from app.core.query import QueryOptions
from app.database import Catalog
from app.repositories.product_repo import ProductRepository
from app.services.base_service import CatalogService


class ProductService(CatalogService):
    """
    Business logic for products.

    Responsibilities:
      - search over title, description, category and brand
      - category listing and filtering (exact, case-sensitive)
      - simulated add/update/delete (see CatalogService)
    """

    resource = "Product"
    envelope = "products"
    search_fields = ("title", "description", "category", "brand")

    def __init__(self, repo: ProductRepository):
        super().__init__(repo)
        self.repo: ProductRepository = repo

    def categories(self, catalog: Catalog) -> list[str]:
        return self.repo.categories(catalog)

    def list_by_category(
        self,
        catalog: Catalog,
        category: str,
        options: QueryOptions,
    ) -> dict:
        """
        Products of one category. An unknown category is an empty page,
        not an error.
        """
        return self.page(self.repo.list_by_category(catalog, category), options)
