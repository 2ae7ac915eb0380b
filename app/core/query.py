# app/core/query.py
from collections.abc import Mapping
from typing import Literal

from fastapi import Request
from pydantic import BaseModel, ConfigDict

from app.core.config import get_settings

Order = Literal["asc", "desc"]


class QueryOptions(BaseModel):
    """
    Normalized list/search options for one request.

    - limit: 0 means "no limit"
    - select: field names to keep in the response, None = all fields
    """

    model_config = ConfigDict(frozen=True)

    limit: int = 30
    skip: int = 0
    select: frozenset[str] | None = None
    q: str | None = None
    sort_by: str | None = None
    order: Order = "asc"


def _to_non_negative_int(raw, default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(float(str(raw).strip()))
    except (TypeError, ValueError, OverflowError):
        return default
    return max(value, 0)


def parse_select(raw: str | None) -> frozenset[str] | None:
    """Split a comma-separated field list, dropping blanks."""
    if not raw:
        return None
    fields = frozenset(part.strip() for part in raw.split(",") if part.strip())
    return fields or None


def normalize_query_options(
    raw: Mapping[str, str],
    default_limit: int = 30,
) -> QueryOptions:
    """
    Build QueryOptions from raw string parameters.

    Never fails: non-numeric limit/skip fall back to the defaults,
    negative values clamp to 0, unknown `order` values become "asc".
    """
    q = (raw.get("q") or "").strip() or None
    sort_by = (raw.get("sortBy") or "").strip() or None
    order = "desc" if (raw.get("order") or "").strip().lower() == "desc" else "asc"

    return QueryOptions(
        limit=_to_non_negative_int(raw.get("limit"), default_limit),
        skip=_to_non_negative_int(raw.get("skip"), 0),
        select=parse_select(raw.get("select")),
        q=q,
        sort_by=sort_by,
        order=order,
    )


def get_query_options(request: Request) -> QueryOptions:
    """
    FastAPI dependency: normalized options from the request query string.
    """
    return normalize_query_options(
        request.query_params,
        default_limit=get_settings().DEFAULT_LIMIT,
    )
