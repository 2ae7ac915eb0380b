# app/core/pagination.py
from collections.abc import Sequence
from numbers import Number
from typing import Any, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], limit: int, skip: int) -> tuple[list[T], int]:
    """
    Slice a sequence into one page.

    Returns (page, total) where total is the length before slicing.
    limit=0 returns everything from `skip` onwards; a skip past the end
    gives an empty page.
    """
    total = len(items)
    skip = max(skip, 0)
    limit = max(limit, 0)

    if limit == 0:
        return list(items[skip:]), total
    return list(items[skip : skip + limit]), total


def _sort_key(record: dict[str, Any], field: str):
    # numbers and strings are never compared with each other
    value = record[field]
    if isinstance(value, Number):
        return (False, value)
    return (True, str(value).lower())


def sort_records(
    records: Sequence[dict[str, Any]],
    sort_by: str | None,
    order: str = "asc",
) -> list[dict[str, Any]]:
    """
    Stable sort by a top-level field. No sort_by keeps source order.
    """
    if not sort_by:
        return list(records)

    present = [r for r in records if r.get(sort_by) is not None]
    missing = [r for r in records if r.get(sort_by) is None]

    present.sort(key=lambda r: _sort_key(r, sort_by), reverse=(order == "desc"))
    return present + missing
