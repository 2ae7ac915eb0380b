# app/database.py
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from fastapi import Request

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# Static catalog
#
# Every collection is read from <DATA_DIR>/<name>.json once at
# startup (see lifespan in app/main.py) and never written again.
# Collections are stored as tuples; repositories hand out deep
# copies so callers cannot reach the stored records.
# ---------------------------------------------------------

COLLECTIONS = ("products", "carts", "users", "posts", "todos")


class Catalog:
    """
    Read-only, process-wide dataset.

    Build one with `load_catalog()` (from JSON files) or directly from
    in-memory records (tests).
    """

    def __init__(self, collections: Mapping[str, Iterable[dict[str, Any]]]):
        self._collections: dict[str, tuple[dict[str, Any], ...]] = {
            name: tuple(collections.get(name, ())) for name in COLLECTIONS
        }

    def collection(self, name: str) -> tuple[dict[str, Any], ...]:
        if name not in self._collections:
            raise KeyError(f"Unknown collection: {name}")
        return self._collections[name]

    def counts(self) -> dict[str, int]:
        return {name: len(rows) for name, rows in self._collections.items()}


def load_catalog(data_dir: Path | None = None) -> Catalog:
    """
    Read all collections from disk.

    Raises:
        FileNotFoundError / json.JSONDecodeError: the process should not
        start with a broken dataset.
    """
    data_dir = Path(data_dir or get_settings().DATA_DIR)
    collections = {}
    for name in COLLECTIONS:
        path = data_dir / f"{name}.json"
        with path.open(encoding="utf-8") as fh:
            collections[name] = json.load(fh)
        logger.debug("Loaded %d %s from %s", len(collections[name]), name, path)
    return Catalog(collections)


def get_catalog(request: Request) -> Catalog:
    """
    FastAPI dependency that returns the catalog loaded at startup.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(catalog: Catalog = Depends(get_catalog)):
            ...
    """
    return request.app.state.catalog
