# app/services/user_service.py
from app.core.errors import NotFoundError
from app.core.query import QueryOptions
from app.core.search import filter_by_key
from app.database import Catalog
from app.repositories.user_repo import UserRepository
from app.services.base_service import CatalogService


class UserService(CatalogService):
    """
    Business logic for users.

    Responsibilities:
      - search over name/username/email fields
      - key/value filtering on (possibly nested) fields
      - resources owned by a user (carts, posts, todos), 404 when
        the user itself does not exist
      - simulated add/update/delete (see CatalogService)
    """

    resource = "User"
    envelope = "users"
    search_fields = ("firstName", "lastName", "maidenName", "username", "email")

    def __init__(
        self,
        repo: UserRepository,
        owned: dict[str, CatalogService] | None = None,
    ):
        super().__init__(repo)
        # envelope name -> service owning that collection
        self.owned = owned or {}

    def filter(
        self,
        catalog: Catalog,
        key: str,
        value: str,
        options: QueryOptions,
    ) -> dict:
        """
        Users whose field at dotted `key` (e.g. "hair.color") equals `value`.
        """
        return self.page(filter_by_key(self.repo.list_all(catalog), key, value), options)

    def ensure_exists(self, catalog: Catalog, user_id: int) -> None:
        if not self.repo.exists(catalog, user_id):
            raise NotFoundError(self.resource, user_id)

    def list_owned(
        self,
        catalog: Catalog,
        user_id: int,
        kind: str,
        options: QueryOptions,
    ) -> dict:
        """
        Carts, posts or todos of an existing user.

        Raises:
            NotFoundError: if the user does not exist.
        """
        self.ensure_exists(catalog, user_id)
        return self.owned[kind].list_for_user(catalog, user_id, options)
