# app/services/cart_service.py
from app.core.mutation import build_cart, build_cart_product, merge_cart_lines
from app.database import Catalog
from app.repositories.cart_repo import CartRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.cart import CartCreate, CartProductIn, CartUpdate
from app.services.base_service import CatalogService


class CartService(CatalogService):
    """
    Business logic for carts.

    Responsibilities:
      - price cart lines from the product catalog
      - compute line totals and cart totals (half-up, 2 decimals)
      - honor the `merge` flag on update
    """

    resource = "Cart"
    envelope = "carts"

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        super().__init__(cart_repo)
        self.product_repo = product_repo

    # ---- internal helpers ----

    def _build_lines(self, catalog: Catalog, items: list[CartProductIn]) -> list[dict]:
        """
        Cart lines for the requested products.

        Product ids missing from the catalog are skipped. A product
        listed twice keeps its last quantity.
        """
        lines: dict[int, dict] = {}
        for item in items:
            product = self.product_repo.get_by_id(catalog, item.id)
            if product is None:
                continue
            lines[item.id] = build_cart_product(product, item.quantity)
        return list(lines.values())

    # ---- simulated writes ----

    def add(self, catalog: Catalog, payload: CartCreate) -> dict:
        """
        A new cart for `userId` with a fresh id and computed totals.
        """
        lines = self._build_lines(catalog, payload.products)
        return build_cart(self.repo.next_id(catalog), payload.user_id, lines)

    def update(self, catalog: Catalog, cart_id: int, payload: CartUpdate) -> dict:
        """
        The stored cart with new lines and/or owner, totals recomputed.

        Rules:
          - products omitted => existing lines kept
          - merge=False => supplied lines replace the existing ones
          - merge=True  => supplied lines are added to the existing ones
        """
        cart = self.get_or_404(catalog, cart_id)
        lines = cart.get("products", [])

        if payload.products is not None:
            incoming = self._build_lines(catalog, payload.products)
            lines = merge_cart_lines(lines, incoming, payload.merge)

        user_id = payload.user_id if payload.user_id is not None else cart.get("userId")
        return build_cart(cart["id"], user_id, lines)
