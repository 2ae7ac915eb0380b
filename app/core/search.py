# app/core/search.py
from collections.abc import Iterable, Sequence
from typing import Any

Record = dict[str, Any]


def matches_text(record: Record, needle: str, fields: Iterable[str]) -> bool:
    """
    True if `needle` occurs (case-insensitively) in any of `fields`.
    `needle` must already be lower-cased.
    """
    for field in fields:
        value = record.get(field)
        if value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


def search(
    records: Sequence[Record],
    q: str | None,
    fields: Iterable[str],
) -> list[Record]:
    """
    Substring search over the given fields. Empty `q` matches everything.
    """
    if not q:
        return list(records)
    needle = q.lower()
    fields = tuple(fields)
    return [r for r in records if matches_text(r, needle, fields)]


def filter_by_category(records: Sequence[Record], category: str) -> list[Record]:
    """Exact, case-sensitive category match."""
    return [r for r in records if r.get("category") == category]


def filter_by_owner(
    records: Sequence[Record],
    user_id: int,
    field: str = "userId",
) -> list[Record]:
    """Records whose owner field equals `user_id`."""
    return [r for r in records if r.get(field) == user_id]


_MISSING = object()


def resolve_path(record: Record, path: str):
    """
    Walk a dotted path ("hair.color") into nested dicts.

    Returns a sentinel when any segment is absent.
    """
    current: Any = record
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


def filter_by_key(records: Sequence[Record], key: str, value: str) -> list[Record]:
    """
    Records whose value at dotted `key` equals `value`.

    Comparison is on the string form, case-insensitive, so
    `age=50` and `hair.color=brown` both work from a query string.
    """
    expected = str(value).strip().lower()
    result = []
    for record in records:
        found = resolve_path(record, key)
        if found is _MISSING or isinstance(found, (dict, list)):
            continue
        if str(found).lower() == expected:
            result.append(record)
    return result


def distinct_values(records: Iterable[Record], field: str) -> list:
    """Distinct values of a field, in first-seen order."""
    seen = {}
    for record in records:
        value = record.get(field)
        if value is not None:
            seen.setdefault(value, None)
    return list(seen)
