# app/core/errors.py


class CatalogError(Exception):
    """Base class for errors raised by the query and mutation engines."""


class NotFoundError(CatalogError):
    """
    An id (or owner id) did not resolve to a record.

    Mapped to HTTP 404 in app/main.py.
    """

    def __init__(self, resource: str, value, field: str = "id"):
        self.resource = resource
        self.value = value
        self.field = field
        super().__init__(f"{resource} with {field} '{value}' not found")


class InternalComputationError(CatalogError):
    """
    Deriving a simulated result failed (e.g. a line item without a price).

    Mapped to HTTP 500 in app/main.py. Never retried.
    """
