"""
Data contracts for the dashboard plugin boundary.

Covers the plugin's custom field values (filter settings) and the
payload handed back to the plugin template.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from steam_deals.contracts.deals import NormalizedDeal
from steam_deals.parsing import number_or_zero


class FilterSettings(BaseModel):
    """
    User-configurable deal filters.

    Thresholds accept numbers or numeric strings; anything else counts
    as 0. ``wishlist_only`` follows plain truthiness.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    min_savings: float = Field(default=0.0, description="Minimum percent off")
    min_deal_rating: float = Field(default=0.0, description="Minimum CheapShark deal rating")
    wishlist_only: bool = Field(
        default=False,
        description="Only show wishlisted games instead of hiding owned ones",
    )

    @field_validator("min_savings", "min_deal_rating", mode="before")
    @classmethod
    def coerce_threshold(cls, v: Any) -> float:
        """Convert form values to a number, 0 when unusable."""
        return number_or_zero(v)

    @field_validator("wishlist_only", mode="before")
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        """Treat any truthy form value as enabled."""
        return bool(v)

    @classmethod
    def from_custom_fields(cls, values: Any) -> "FilterSettings":
        """Build settings from ``custom_fields_values``, defaults when absent."""
        if not isinstance(values, Mapping):
            return cls()
        return cls.model_validate(dict(values))


class DealSelection(BaseModel):
    """
    Result of one selection run.

    Serializes to the plugin payload:
    ``{dealInfo, totalDeals, filteredCount, ownedCount, wishlistCount}``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    deal_info: NormalizedDeal | None = None
    total_deals: int = Field(default=0, ge=0)
    filtered_count: int = Field(default=0, ge=0)
    owned_count: int = Field(default=0, ge=0)
    wishlist_count: int = Field(default=0, ge=0)

    def to_payload(self) -> dict[str, Any]:
        """Plugin-facing dict with camelCase keys."""
        return self.model_dump(by_alias=True)
