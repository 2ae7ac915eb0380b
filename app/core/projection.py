# app/core/projection.py
from collections.abc import Iterable
from typing import Any

# Always kept, whatever `select` says.
ALWAYS_SELECTED = frozenset({"id"})


def project_record(
    record: dict[str, Any],
    select: Iterable[str] | None,
) -> dict[str, Any]:
    """
    Keep only the selected fields of a record (plus `id`).

    Unknown field names are ignored. Key order follows the record.
    """
    if not select:
        return record
    wanted = ALWAYS_SELECTED | set(select)
    return {key: value for key, value in record.items() if key in wanted}


def project(records, select: Iterable[str] | None):
    """Apply `project_record` to one record or to a list of records."""
    if isinstance(records, dict):
        return project_record(records, select)
    return [project_record(record, select) for record in records]
