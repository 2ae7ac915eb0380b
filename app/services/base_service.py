# app/services/base_service.py
from collections.abc import Iterable
from typing import Any

from sqlmodel import SQLModel

from app.core.errors import NotFoundError
from app.core.mutation import mark_deleted, overlay
from app.core.pagination import paginate, sort_records
from app.core.projection import project
from app.core.query import QueryOptions
from app.core.search import search as text_search
from app.database import Catalog
from app.repositories.base_repo import CatalogRepository

Record = dict[str, Any]


class CatalogService:
    """
    Read and simulated-write operations shared by every entity.

    Reads:  filter/search -> sort -> paginate -> project -> envelope
    Writes: locate (404) -> compute derived view -> return

    Writes never reach the stored catalog: the repository only hands
    out copies, and nothing is written back.
    """

    resource: str = "Record"
    envelope: str = "records"
    search_fields: tuple[str, ...] = ()

    def __init__(self, repo: CatalogRepository):
        self.repo = repo

    # ----- Helpers -----

    def page(self, records: Iterable[Record], options: QueryOptions) -> Record:
        """
        Build the list envelope: {<envelope>: [...], total, skip, limit}.
        """
        ordered = sort_records(list(records), options.sort_by, options.order)
        items, total = paginate(ordered, options.limit, options.skip)
        return {
            self.envelope: project(items, options.select),
            "total": total,
            "skip": options.skip,
            "limit": options.limit,
        }

    def get_or_404(self, catalog: Catalog, record_id: int) -> Record:
        record = self.repo.get_by_id(catalog, record_id)
        if record is None:
            raise NotFoundError(self.resource, record_id)
        return record

    @staticmethod
    def payload_fields(payload: SQLModel) -> Record:
        """
        Fields the client actually sent, wire-named, without `id`.
        """
        fields = payload.model_dump(by_alias=True, exclude_unset=True)
        fields.pop("id", None)
        return fields

    # ----- Reads -----

    def list_all(self, catalog: Catalog, options: QueryOptions) -> Record:
        return self.page(self.repo.list_all(catalog), options)

    def search(self, catalog: Catalog, options: QueryOptions) -> Record:
        matches = text_search(self.repo.list_all(catalog), options.q, self.search_fields)
        return self.page(matches, options)

    def list_for_user(
        self,
        catalog: Catalog,
        user_id: int,
        options: QueryOptions,
    ) -> Record:
        """Records owned by `user_id`; unknown users give an empty page."""
        return self.page(self.repo.list_for_user(catalog, user_id), options)

    def get(
        self,
        catalog: Catalog,
        record_id: int,
        select: Iterable[str] | None = None,
    ) -> Record:
        return project(self.get_or_404(catalog, record_id), select)

    # ----- Simulated writes -----

    def add(self, catalog: Catalog, payload: SQLModel) -> Record:
        """
        The record as if inserted: a fresh id plus the supplied fields.
        """
        return {"id": self.repo.next_id(catalog), **self.payload_fields(payload)}

    def update(self, catalog: Catalog, record_id: int, payload: SQLModel) -> Record:
        """
        The stored record with the supplied fields laid over it.
        PUT and PATCH both land here.
        """
        record = self.get_or_404(catalog, record_id)
        return overlay(record, self.payload_fields(payload))

    def delete(self, catalog: Catalog, record_id: int) -> Record:
        return mark_deleted(self.get_or_404(catalog, record_id))
