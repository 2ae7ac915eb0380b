# tests/test_services.py
import pytest

from app.core.errors import NotFoundError
from app.core.query import QueryOptions
from app.database import Catalog
from app.repositories.cart_repo import CartRepository
from app.repositories.post_repo import PostRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.todo_repo import TodoRepository
from app.repositories.user_repo import UserRepository
from app.schemas.cart import CartCreate, CartUpdate
from app.schemas.product import ProductCreate, ProductUpdate
from app.schemas.user import UserUpdate
from app.services.cart_service import CartService
from app.services.post_service import PostService
from app.services.product_service import ProductService
from app.services.todo_service import TodoService
from app.services.user_service import UserService

from conftest import make_product


@pytest.fixture
def products():
    return ProductService(ProductRepository())


@pytest.fixture
def carts():
    return CartService(CartRepository(), ProductRepository())


@pytest.fixture
def users():
    return UserService(
        UserRepository(),
        owned={
            "carts": CartService(CartRepository(), ProductRepository()),
            "posts": PostService(PostRepository()),
            "todos": TodoService(TodoRepository()),
        },
    )


def without_timestamp(record: dict) -> dict:
    return {k: v for k, v in record.items() if k != "deletedOn"}


# ----- Reads -----


def test_list_window_past_the_end(products, hundred_products):
    page = products.list_all(hundred_products, QueryOptions(limit=10, skip=95))
    assert [p["id"] for p in page["products"]] == [96, 97, 98, 99, 100]
    assert page["total"] == 100
    assert page["limit"] == 10
    assert page["skip"] == 95


def test_list_limit_zero_returns_all(products, hundred_products):
    page = products.list_all(hundred_products, QueryOptions(limit=0))
    assert len(page["products"]) == 100


def test_list_applies_select_after_paging(products, catalog):
    page = products.list_all(catalog, QueryOptions(limit=2, select=frozenset({"title"})))
    assert page["products"] == [
        {"id": 1, "title": "iPhone 9"},
        {"id": 2, "title": "iPhone X"},
    ]


def test_list_sorted(products, catalog):
    page = products.list_all(
        catalog, QueryOptions(limit=3, sort_by="price", order="desc")
    )
    assert [p["price"] for p in page["products"]] == [1749, 1499, 1499]


def test_search_products(products, catalog):
    page = products.search(catalog, QueryOptions(q="phone"))
    assert [p["id"] for p in page["products"]] == [1, 2, 3, 4, 5]
    assert page["total"] == 5


def test_empty_search_returns_everything(products, catalog):
    page = products.search(catalog, QueryOptions(limit=0))
    assert page["total"] == 30


def test_categories(products, catalog):
    assert products.categories(catalog) == [
        "smartphones",
        "laptops",
        "fragrances",
        "skincare",
        "groceries",
        "home-decoration",
    ]


def test_unknown_category_is_empty(products, catalog):
    page = products.list_by_category(catalog, "spaceships", QueryOptions())
    assert page == {"products": [], "total": 0, "skip": 0, "limit": 30}


def test_get_missing_product_raises(products, catalog):
    with pytest.raises(NotFoundError):
        products.get(catalog, 9999)


def test_reads_hand_out_copies(products, catalog):
    product = products.get(catalog, 1)
    product["title"] = "changed"
    product["images"].append("x")
    assert products.get(catalog, 1)["title"] == "iPhone 9"
    assert "x" not in products.get(catalog, 1)["images"]


# ----- Simulated writes -----


def test_add_product_gets_next_id_every_time(products, catalog):
    payload = ProductCreate(title="BMW Pencil", price=3)
    first = products.add(catalog, payload)
    second = products.add(catalog, payload)
    assert first == {"id": 31, "title": "BMW Pencil", "price": 3}
    assert second["id"] == 31
    assert products.list_all(catalog, QueryOptions())["total"] == 30


def test_add_product_keeps_unknown_fields_and_camel_case(products, catalog):
    payload = ProductCreate.model_validate(
        {"title": "x", "discountPercentage": 5, "color": "red"}
    )
    added = products.add(catalog, payload)
    assert added["discountPercentage"] == 5
    assert added["color"] == "red"


def test_update_overlays_supplied_fields(products, catalog):
    updated = products.update(catalog, 1, ProductUpdate(title="iPhone Galaxy +1"))
    assert updated["title"] == "iPhone Galaxy +1"
    assert updated["price"] == 549
    assert products.get(catalog, 1)["title"] == "iPhone 9"


def test_update_missing_raises(products, catalog):
    with pytest.raises(NotFoundError):
        products.update(catalog, 9999, ProductUpdate(title="x"))


def test_update_is_pure(users, catalog):
    payload = UserUpdate(last_name="Owais", address={"city": "Lahore"})
    first = users.update(catalog, 1, payload)
    second = users.update(catalog, 1, payload)
    assert first == second
    assert first["address"] == {"city": "Lahore"}
    assert users.get(catalog, 1)["lastName"] == "Medhurst"


def test_delete_is_pure_and_not_persisted(products, catalog):
    original = products.get(catalog, 1)
    first = products.delete(catalog, 1)
    second = products.delete(catalog, 1)

    assert first["isDeleted"] is True
    assert without_timestamp(first) == without_timestamp(second)
    assert without_timestamp(first) == {**original, "isDeleted": True}
    assert products.get(catalog, 1) == original


def test_delete_missing_raises(products, catalog):
    with pytest.raises(NotFoundError):
        products.delete(catalog, 9999)


# ----- Carts -----


def test_add_cart_computes_totals(carts, catalog):
    cart = carts.add(catalog, CartCreate(user_id=5, products=[{"id": 1, "quantity": 3}]))
    assert cart["id"] == 11
    assert cart["userId"] == 5
    assert cart["totalQuantity"] == 3
    assert cart["totalProducts"] == 1
    assert cart["total"] == 1647
    assert cart["discountedTotal"] == 1433.55
    assert carts.list_all(catalog, QueryOptions())["total"] == 10


def test_add_cart_skips_unknown_products(carts, catalog):
    cart = carts.add(
        catalog,
        CartCreate(user_id=1, products=[{"id": 9999, "quantity": 1}, {"id": 30, "quantity": 2}]),
    )
    assert [line["id"] for line in cart["products"]] == [30]
    assert cart["total"] == 60


def test_update_cart_replaces_lines(carts, catalog):
    cart = carts.update(catalog, 1, CartUpdate(products=[{"id": 30, "quantity": 1}]))
    assert [line["id"] for line in cart["products"]] == [30]
    assert cart["userId"] == 9
    assert cart["totalQuantity"] == 1


def test_update_cart_merges_lines(carts, catalog):
    cart = carts.update(
        catalog,
        1,
        CartUpdate(merge=True, products=[{"id": 1, "quantity": 1}, {"id": 30, "quantity": 1}]),
    )
    assert [line["id"] for line in cart["products"]] == [1, 19, 28, 30]
    assert cart["products"][0]["quantity"] == 1
    assert cart["totalQuantity"] == 1 + 1 + 3 + 1


def test_update_cart_without_products_keeps_lines(carts, catalog):
    stored = carts.get(catalog, 1)
    cart = carts.update(catalog, 1, CartUpdate(user_id=3))
    assert cart["userId"] == 3
    assert cart["products"] == stored["products"]
    assert cart["total"] == stored["total"]
    assert carts.get(catalog, 1) == stored


def test_cart_totals_add_up_for_stored_and_computed(carts, catalog):
    computed = carts.add(
        catalog,
        CartCreate(user_id=2, products=[{"id": 3, "quantity": 2}, {"id": 12, "quantity": 4}]),
    )
    stored = carts.list_all(catalog, QueryOptions(limit=0))["carts"]

    for cart in stored + [computed]:
        lines = cart["products"]
        assert cart["total"] == pytest.approx(sum(line["total"] for line in lines))
        assert cart["discountedTotal"] == pytest.approx(
            sum(line["discountedPrice"] for line in lines)
        )
        assert cart["totalQuantity"] == sum(line["quantity"] for line in lines)
        assert cart["totalProducts"] == len(lines)
        assert 0 <= cart["discountedTotal"] <= cart["total"]
        assert cart["totalProducts"] <= cart["totalQuantity"]


def test_carts_of_unknown_user_is_empty(carts, catalog):
    assert carts.list_for_user(catalog, 999, QueryOptions())["carts"] == []


# ----- Users -----


def test_owned_resources_of_user(users, catalog):
    assert [c["id"] for c in users.list_owned(catalog, 1, "carts", QueryOptions())["carts"]] == [5, 10]
    assert [p["id"] for p in users.list_owned(catalog, 1, "posts", QueryOptions())["posts"]] == [4, 9, 13]
    assert [t["id"] for t in users.list_owned(catalog, 1, "todos", QueryOptions())["todos"]] == [3, 9, 20]


def test_owned_resources_of_missing_user_raise(users, catalog):
    with pytest.raises(NotFoundError):
        users.list_owned(catalog, 999, "carts", QueryOptions())


def test_user_with_no_carts_gets_empty_page(users, catalog):
    page = users.list_owned(catalog, 10, "carts", QueryOptions())
    assert page["carts"] == []
    assert page["total"] == 0


def test_filter_users_by_nested_key(users, catalog):
    page = users.filter(catalog, "hair.color", "Brown", QueryOptions())
    assert [u["id"] for u in page["users"]] == [5, 7, 10]


def test_search_users(users, catalog):
    page = users.search(catalog, QueryOptions(q="ter"))
    assert [u["id"] for u in page["users"]] == [1, 3, 9]


def test_fresh_catalog_is_independent():
    empty = Catalog({})
    assert ProductService(ProductRepository()).list_all(empty, QueryOptions())["total"] == 0
    assert ProductService(ProductRepository()).add(empty, ProductCreate(title="a"))["id"] == 1


def test_synthetic_products_search(products):
    catalog = Catalog({"products": [make_product(1, title="Red Apple"), make_product(2)]})
    page = products.search(catalog, QueryOptions(q="apple"))
    assert [p["id"] for p in page["products"]] == [1]
