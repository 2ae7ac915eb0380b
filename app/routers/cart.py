# app/routers/cart.py
from fastapi import APIRouter, Depends, status

from app.core.query import QueryOptions, get_query_options
from app.database import Catalog, get_catalog
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartCreate, CartUpdate
from app.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("")
def list_carts(
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    List carts (paginated).
    """
    return service.list_all(catalog, options)


@router.get("/user/{user_id}")
def list_carts_of_user(
    user_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    """
    Carts of a user. Unknown users give an empty list.
    """
    return service.list_for_user(catalog, user_id, options)


@router.get("/{cart_id}")
def get_cart(
    cart_id: int,
    catalog: Catalog = Depends(get_catalog),
    options: QueryOptions = Depends(get_query_options),
):
    return service.get(catalog, cart_id, options.select)


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_cart(
    payload: CartCreate,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate creating a cart from `userId` and `products: [{id, quantity}]`.

    Lines are priced from the product catalog; totals are computed.
    """
    return service.add(catalog, payload)


@router.put("/{cart_id}")
@router.patch("/{cart_id}")
def update_cart(
    cart_id: int,
    payload: CartUpdate,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate updating a cart.

    Pass `merge: true` to keep the existing products.
    """
    return service.update(catalog, cart_id, payload)


@router.delete("/{cart_id}")
def delete_cart(
    cart_id: int,
    catalog: Catalog = Depends(get_catalog),
):
    """
    Simulate deleting a cart.
    """
    return service.delete(catalog, cart_id)
