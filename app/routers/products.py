# app/routers/products.py
from fastapi import APIRouter, Depends, status

from app.core.query import QueryOptions, get_query_options
from app.database import Catalog, get_catalog
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Reads --------


@router.get("")
def list_products(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    List products.

    - `limit` / `skip` paginate (limit=0 returns everything).
    - `select` keeps only the given comma-separated fields.
    - `sortBy` / `order` sort before paginating.
    """
    return service.list_all(catalog, options)


@router.get("/search")
def search_products(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Case-insensitive search on title, description, category and brand (`q`).
    """
    return service.search(catalog, options)


@router.get("/categories", response_model=list[str])
def list_categories(catalog: Catalog = Depends(get_catalog)):
    """All product categories, in catalog order."""
    return service.categories(catalog)


@router.get("/category/{category_name}")
def list_products_by_category(
    category_name: str,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Products of one category (exact match). Unknown categories give an
    empty list.
    """
    return service.list_by_category(catalog, category_name, options)


@router.get("/{product_id}")
def get_product(
    product_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Get a single product by id.
    """
    return service.get(catalog, product_id, options.select)


# -------- Simulated writes --------


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_product(
    payload: ProductCreate,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate adding a product.

    Returns the product with a new id; nothing is stored.
    """
    return service.add(catalog, payload)


@router.put("/{product_id}")
@router.patch("/{product_id}")
def update_product(
    product_id: int,
    payload: ProductUpdate,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate updating a product (PUT and PATCH behave the same).
    """
    return service.update(catalog, product_id, payload)


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate deleting a product.

    Returns the product with `isDeleted` and `deletedOn`; it is still
    served by GET afterwards.
    """
    return service.delete(catalog, product_id)
