"""Plan catalog — immutable plan collection and its JSON loader."""

from healthshare.catalog.catalog import CatalogStore, PlanCatalog
from healthshare.catalog.loader import (
    BUNDLED_CATALOG_PATH,
    CatalogError,
    CatalogNotFoundError,
    CatalogValidationError,
    default_catalog,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "PlanCatalog",
    "CatalogStore",
    "load_catalog",
    "parse_catalog",
    "default_catalog",
    "BUNDLED_CATALOG_PATH",
    "CatalogError",
    "CatalogNotFoundError",
    "CatalogValidationError",
]
