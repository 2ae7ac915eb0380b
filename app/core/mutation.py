# app/core/mutation.py
"""
Simulated writes.

Nothing here touches the stored catalog: every function takes plain
dicts and returns new ones. Money values use half-up rounding to
2 decimals.
"""
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from app.core.errors import InternalComputationError

Record = dict[str, Any]

CENT = Decimal("0.01")


def round_money(value) -> float:
    """Round half-up to 2 decimals; whole amounts come back as int."""
    rounded = Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return int(rounded)
    return float(rounded)


def next_id(records: Iterable[Record]) -> int:
    """
    One past the highest id in the collection (1 when empty).

    Nothing is inserted, so repeated adds get the same id.
    """
    return max((int(r["id"]) for r in records), default=0) + 1


def overlay(base: Record, changes: Record) -> Record:
    """
    Shallow field overlay: top-level keys in `changes` win.

    Nested objects are replaced wholesale. `id` is never overwritten.
    """
    merged = {**base, **changes}
    if "id" in base:
        merged["id"] = base["id"]
    return merged


def mark_deleted(record: Record, deleted_on: datetime | None = None) -> Record:
    deleted_on = deleted_on or datetime.now(timezone.utc)
    return {**record, "isDeleted": True, "deletedOn": deleted_on.isoformat()}


# ----- Carts -----


def build_cart_product(product: Record, quantity: int) -> Record:
    """
    A cart line for `quantity` units of a catalog product.
    """
    try:
        price = Decimal(str(product["price"]))
        discount = Decimal(str(product.get("discountPercentage") or 0))
        quantity = int(quantity)
        if quantity < 1:
            raise ValueError(f"quantity must be >= 1, got {quantity}")

        total = price * quantity
        discounted = total * (1 - discount / 100)
        return {
            "id": product["id"],
            "title": product.get("title"),
            "price": product["price"],
            "quantity": quantity,
            "total": round_money(total),
            "discountPercentage": product.get("discountPercentage") or 0,
            "discountedPrice": round_money(discounted),
            "thumbnail": product.get("thumbnail"),
        }
    except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
        raise InternalComputationError(
            f"Cannot build cart line from product {product.get('id')!r}: {exc}"
        ) from exc


def cart_totals(lines: Sequence[Record]) -> Record:
    """
    Cart-level derived fields from its lines.
    """
    try:
        total = sum((Decimal(str(line["total"])) for line in lines), Decimal(0))
        discounted = sum(
            (Decimal(str(line["discountedPrice"])) for line in lines), Decimal(0)
        )
        quantity = sum(int(line["quantity"]) for line in lines)
    except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
        raise InternalComputationError(f"Cannot compute cart totals: {exc}") from exc

    return {
        "total": round_money(total),
        "discountedTotal": round_money(discounted),
        "totalProducts": len(lines),
        "totalQuantity": quantity,
    }


def merge_cart_lines(
    existing: Sequence[Record],
    incoming: Sequence[Record],
    merge: bool,
) -> list[Record]:
    """
    New line list for a cart update.

    merge=False: incoming replaces existing.
    merge=True: incoming is appended; a line for a product already in
    the cart replaces that line in place.
    """
    if not merge:
        return list(incoming)

    lines = {line["id"]: line for line in existing}
    for line in incoming:
        lines[line["id"]] = line
    return list(lines.values())


def build_cart(cart_id: int, user_id, lines: Sequence[Record]) -> Record:
    return {
        "id": cart_id,
        "products": list(lines),
        **cart_totals(lines),
        "userId": user_id,
    }
