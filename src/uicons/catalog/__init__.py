"""Catalog snapshots and index document loading."""

from uicons.catalog.fetch import FetchError, fetch_index, index_url
from uicons.catalog.index import build_index, load_index_file, write_index
from uicons.catalog.store import (
    CatalogSnapshot,
    CatalogStore,
    UninitializedError,
    infer_extension,
)

__all__ = [
    "CatalogSnapshot",
    "CatalogStore",
    "FetchError",
    "UninitializedError",
    "build_index",
    "fetch_index",
    "index_url",
    "infer_extension",
    "load_index_file",
    "write_index",
]
