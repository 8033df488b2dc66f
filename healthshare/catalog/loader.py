"""Plan catalog loader — JSON dataset → validated, immutable PlanCatalog.

The bundled dataset lives in healthshare/data/provider_plans.json and holds
the published matrices of Zion Healthshare, CrowdHealth, Sedera, MPB Health
and Knew Health. Accepts either ``{"plans": [...]}`` or a bare list.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from healthshare.catalog.catalog import PlanCatalog
from healthshare.config import settings
from healthshare.schemas.catalog import ProviderPlan

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
BUNDLED_CATALOG_PATH = _DATA_DIR / "provider_plans.json"

_plans_adapter = TypeAdapter(list[ProviderPlan])


class CatalogError(Exception):
    """Base error for catalog loading problems."""


class CatalogNotFoundError(CatalogError):
    """The catalog file does not exist."""


class CatalogValidationError(CatalogError):
    """The catalog content breaks the schema or a catalog invariant."""


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _warn_duplicate_rows(plans: Iterable[ProviderPlan]) -> None:
    """Log pairs published twice; lookups keep the first row."""
    for plan in plans:
        seen: set[tuple[str, str]] = set()
        for row in plan.plan_matrix:
            key = (row.age_bracket, row.household_type.value)
            if key in seen:
                logger.warning(
                    "Plan %s has duplicate matrix row %s/%s — first row wins",
                    plan.id, key[0], key[1],
                )
            seen.add(key)


def _extract_records(data: Any) -> list[Any]:
    if isinstance(data, Mapping):
        data = data.get("plans")
    if not isinstance(data, list):
        msg = "Catalog must be a list of plans or an object with a 'plans' list"
        raise CatalogValidationError(msg)
    return data


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_catalog(records: Iterable[Mapping[str, Any] | ProviderPlan]) -> PlanCatalog:
    """Validate plan records and build a PlanCatalog.

    Raises:
        CatalogValidationError: schema failure, duplicate IUA tiers in a row,
            or duplicate plan ids.
    """
    try:
        plans = _plans_adapter.validate_python(list(records))
    except ValidationError as exc:
        raise CatalogValidationError(f"Invalid plan catalog: {exc}") from exc

    _warn_duplicate_rows(plans)

    try:
        return PlanCatalog(plans)
    except ValueError as exc:
        raise CatalogValidationError(str(exc)) from exc


def load_catalog(path: Path | str | None = None) -> PlanCatalog:
    """Load a catalog from a JSON file (default: the bundled dataset)."""
    catalog_path = Path(path) if path is not None else BUNDLED_CATALOG_PATH
    if not catalog_path.exists():
        raise CatalogNotFoundError(f"Plan catalog not found: {catalog_path}")

    with open(catalog_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise CatalogValidationError(f"Plan catalog is not valid JSON: {exc}") from exc

    catalog = parse_catalog(_extract_records(data))
    logger.info("Loaded plan catalog: %d plans from %s", len(catalog), catalog_path)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> PlanCatalog:
    """Catalog configured in settings, loaded once per process."""
    return load_catalog(settings.catalog.catalog_path)
