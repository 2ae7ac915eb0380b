# app/repositories/base_repo.py
import copy
from typing import Any

from app.core.mutation import next_id as next_free_id
from app.core.search import filter_by_owner
from app.database import Catalog


class CatalogRepository:
    """
    Data access layer for one catalog collection.

    - Read-only: every record returned is a deep copy.
    - No FastAPI, no business logic.
    """

    collection: str = ""
    owner_field: str = "userId"

    def _rows(self, catalog: Catalog) -> tuple[dict[str, Any], ...]:
        return catalog.collection(self.collection)

    def list_all(self, catalog: Catalog) -> list[dict[str, Any]]:
        return copy.deepcopy(list(self._rows(catalog)))

    def get_by_id(self, catalog: Catalog, record_id: int) -> dict[str, Any] | None:
        for row in self._rows(catalog):
            if row.get("id") == record_id:
                return copy.deepcopy(row)
        return None

    def exists(self, catalog: Catalog, record_id: int) -> bool:
        return any(row.get("id") == record_id for row in self._rows(catalog))

    def list_for_user(self, catalog: Catalog, user_id: int) -> list[dict[str, Any]]:
        rows = filter_by_owner(self._rows(catalog), user_id, self.owner_field)
        return copy.deepcopy(rows)

    def next_id(self, catalog: Catalog) -> int:
        """Id a newly added record would get (nothing is inserted)."""
        return next_free_id(self._rows(catalog))
