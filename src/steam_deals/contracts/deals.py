"""
Data contracts for CheapShark deal records.

CheapShark sends almost everything as strings and the records reach us
through a third-party poller, so no field here is type-checked: values
are carried through exactly as received and only the derived store
fields are computed.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawDeal(BaseModel):
    """
    Deal record as returned by CheapShark ``/deals``.

    Keys follow the API spelling (``dealID``, ``steamAppID``...). Missing
    keys become ``None``; unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    deal_id: Any = Field(default=None, alias="dealID")
    store_id: Any = Field(default=None, alias="storeID")
    steam_app_id: Any = Field(default=None, alias="steamAppID")
    game_id: Any = Field(default=None, alias="gameID")
    title: Any = Field(default=None, alias="title")
    sale_price: Any = Field(default=None, alias="salePrice", description="Decimal string")
    normal_price: Any = Field(default=None, alias="normalPrice", description="Decimal string")
    savings: Any = Field(default=None, alias="savings", description="Percent off, decimal string")
    deal_rating: Any = Field(default=None, alias="dealRating", description="0-10, decimal string")
    metacritic_score: Any = Field(default=None, alias="metacriticScore")
    steam_rating_percent: Any = Field(default=None, alias="steamRatingPercent")
    steam_rating_count: Any = Field(default=None, alias="steamRatingCount")
    steam_rating_text: Any = Field(default=None, alias="steamRatingText")
    release_date: Any = Field(default=None, alias="releaseDate", description="Unix timestamp")
    last_change: Any = Field(default=None, alias="lastChange", description="Unix timestamp")
    thumb: Any = Field(default=None, alias="thumb")
    internal_name: Any = Field(default=None, alias="internalName")


class NormalizedDeal(BaseModel):
    """
    Deal as handed to the dashboard template.

    Serializes with camelCase keys (``dealId``, ``storeIconUrl``...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    deal_id: Any = None
    store_id: Any = None
    store_name: str
    store_icon_url: str
    steam_app_id: Any = None
    game_id: Any = None
    title: Any = None
    sale_price: Any = None
    normal_price: Any = None
    savings: Any = None
    deal_rating: Any = None
    metacritic_score: Any = None
    steam_rating_percent: Any = None
    steam_rating_count: Any = None
    steam_rating_text: Any = None
    release_date: Any = None
    last_change: Any = None
    thumb: Any = None
    internal_name: Any = None
