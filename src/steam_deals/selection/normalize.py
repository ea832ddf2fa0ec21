"""
Deal normalization.

Maps CheapShark deal records onto ``NormalizedDeal``: camelCase keys,
values passed through untouched, plus the derived store name and store
icon URL.
"""

from collections.abc import Mapping
from typing import Any

from steam_deals.contracts import NormalizedDeal, RawDeal
from steam_deals.logger import get_logger
from steam_deals.stores import STORE_ICON_BASE_URL, store_icon_url, store_name

logger = get_logger(__name__, component="normalize")


def normalize_deal(
    raw: Mapping[str, Any] | RawDeal,
    icon_base_url: str = STORE_ICON_BASE_URL,
) -> NormalizedDeal:
    """
    Normalize one CheapShark deal record.

    Args:
        raw: Deal as received from the API (or an already parsed RawDeal)
        icon_base_url: Base URL for store icons

    Returns:
        NormalizedDeal with store name and icon URL filled in
    """
    deal = raw if isinstance(raw, RawDeal) else RawDeal.model_validate(dict(raw))

    return NormalizedDeal(
        deal_id=deal.deal_id,
        store_id=deal.store_id,
        store_name=store_name(deal.store_id),
        store_icon_url=store_icon_url(deal.store_id, icon_base_url),
        steam_app_id=deal.steam_app_id,
        game_id=deal.game_id,
        title=deal.title,
        sale_price=deal.sale_price,
        normal_price=deal.normal_price,
        savings=deal.savings,
        deal_rating=deal.deal_rating,
        metacritic_score=deal.metacritic_score,
        steam_rating_percent=deal.steam_rating_percent,
        steam_rating_count=deal.steam_rating_count,
        steam_rating_text=deal.steam_rating_text,
        release_date=deal.release_date,
        last_change=deal.last_change,
        thumb=deal.thumb,
        internal_name=deal.internal_name,
    )


def extract_raw_deals(deals_payload: Any) -> list[Mapping[str, Any]]:
    """
    Pull deal records out of a ``{"data": [...]}`` payload.

    A missing or non-list ``data`` yields an empty list. Entries that
    are not objects are skipped.
    """
    if not isinstance(deals_payload, Mapping):
        return []

    data = deals_payload.get("data")
    if not isinstance(data, list):
        return []

    records = [entry for entry in data if isinstance(entry, Mapping)]
    skipped = len(data) - len(records)
    if skipped:
        logger.warning("Skipped malformed deal entries", skipped=skipped, received=len(data))

    return records


def normalize_deals(
    deals_payload: Any,
    icon_base_url: str = STORE_ICON_BASE_URL,
) -> list[NormalizedDeal]:
    """Normalize every deal in a CheapShark deals payload, keeping order."""
    return [normalize_deal(raw, icon_base_url) for raw in extract_raw_deals(deals_payload)]
