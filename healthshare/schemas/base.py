"""Shared pydantic base for records that cross the JSON boundary.

Python attributes are snake_case; serialized field names are camelCase
(``monthlyPremium``, ``eligiblePrices``, ...) because the presentation layer
is keyed on them. Input accepts either spelling.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json_dict(self) -> dict:
        """Dump with the camelCase names callers depend on."""
        return self.model_dump(mode="json", by_alias=True)


class FrozenCamelModel(CamelModel):
    """Immutable variant used for catalog records."""

    model_config = ConfigDict(frozen=True)
