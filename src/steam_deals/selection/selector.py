"""
Deal of the moment selection.

Filters normalized deals by savings, deal rating, and the user's Steam
library, then picks one survivor uniformly at random. Pure apart from
logging: inputs are never mutated and malformed input degrades to
empty sets and zero thresholds instead of raising.

Usage:
    >>> from steam_deals.selection import run_transform
    >>> payload = run_transform({"IDX_0": {"data": deals}, "IDX_1": owned})
    >>> payload["dealInfo"]["storeName"]
"""

import random
from collections.abc import Mapping, Sequence
from typing import Any

from steam_deals.contracts import DealSelection, FilterSettings, NormalizedDeal
from steam_deals.logger import get_logger
from steam_deals.parsing import parse_float, parse_int
from steam_deals.selection.library import owned_app_ids, wishlist_app_ids
from steam_deals.selection.normalize import normalize_deals
from steam_deals.stores import STORE_ICON_BASE_URL

logger = get_logger(__name__, component="selector")

# Polling envelope keys, in polling URL order
DEALS_KEY = "IDX_0"
OWNED_GAMES_KEY = "IDX_1"
WISHLIST_KEY = "IDX_2"


def passes_filters(
    deal: NormalizedDeal,
    settings: FilterSettings,
    owned: set[int],
    wishlist: set[int | float],
) -> bool:
    """
    Check one deal against thresholds and library state.

    Unparsable savings/rating count as 0. An unparsable Steam app ID is
    never in either set, so it fails wishlist mode and passes the
    ownership check.
    """
    savings = parse_float(deal.savings) or 0.0
    rating = parse_float(deal.deal_rating) or 0.0

    if savings < settings.min_savings:
        logger.debug(
            "Filtered out deal: savings below minimum",
            deal_id=deal.deal_id,
            savings=savings,
            min_savings=settings.min_savings,
        )
        return False

    if rating < settings.min_deal_rating:
        logger.debug(
            "Filtered out deal: rating below minimum",
            deal_id=deal.deal_id,
            rating=rating,
            min_deal_rating=settings.min_deal_rating,
        )
        return False

    app_id = parse_int(deal.steam_app_id)

    if settings.wishlist_only:
        if app_id is None or app_id not in wishlist:
            logger.debug("Filtered out deal: not wishlisted", deal_id=deal.deal_id, app_id=app_id)
            return False
        return True

    if app_id is not None and app_id in owned:
        logger.debug("Filtered out deal: already owned", deal_id=deal.deal_id, app_id=app_id)
        return False

    return True


def filter_deals(
    deals: Sequence[NormalizedDeal],
    settings: FilterSettings,
    owned: set[int],
    wishlist: set[int | float] | None = None,
) -> list[NormalizedDeal]:
    """Keep the deals that pass ``passes_filters``, preserving order."""
    wishlist = wishlist if wishlist is not None else set()
    return [deal for deal in deals if passes_filters(deal, settings, owned, wishlist)]


def pick_random(
    deals: Sequence[NormalizedDeal],
    rng: random.Random | None = None,
) -> NormalizedDeal | None:
    """Pick one deal uniformly at random, ``None`` when there are none."""
    if not deals:
        return None
    draw = rng.randrange if rng is not None else random.randrange
    return deals[draw(len(deals))]


def select_deal(
    deals_payload: Any = None,
    owned_games_payload: Any = None,
    wishlist_payload: Any = None,
    settings: FilterSettings | Mapping[str, Any] | None = None,
    *,
    rng: random.Random | None = None,
    icon_base_url: str = STORE_ICON_BASE_URL,
) -> DealSelection:
    """
    Select the deal of the moment.

    Args:
        deals_payload: CheapShark deals, ``{"data": [deal, ...]}``
        owned_games_payload: Steam ``GetOwnedGames`` response
        wishlist_payload: Steam ``GetWishlist`` response (optional)
        settings: Filter settings or raw ``custom_fields_values``
        rng: Random source (module-level ``random`` if None)
        icon_base_url: Base URL for store icons

    Returns:
        DealSelection with the chosen deal (or None) and counts
    """
    if not isinstance(settings, FilterSettings):
        settings = FilterSettings.from_custom_fields(settings)

    deals = normalize_deals(deals_payload, icon_base_url)
    owned = owned_app_ids(owned_games_payload)
    wishlist = wishlist_app_ids(wishlist_payload)

    filtered = filter_deals(deals, settings, owned, wishlist)
    chosen = pick_random(filtered, rng)

    logger.info(
        "Deal selection complete",
        total_deals=len(deals),
        filtered_count=len(filtered),
        owned_count=len(owned),
        wishlist_count=len(wishlist),
        wishlist_only=settings.wishlist_only,
        deal_id=chosen.deal_id if chosen else None,
    )

    return DealSelection(
        deal_info=chosen,
        total_deals=len(deals),
        filtered_count=len(filtered),
        owned_count=len(owned),
        wishlist_count=len(wishlist),
    )


def custom_field_values(envelope: Mapping[str, Any]) -> Any:
    """Dig ``trmnl.plugin_settings.custom_fields_values`` out of an envelope."""
    node: Any = envelope
    for key in ("trmnl", "plugin_settings", "custom_fields_values"):
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def run_transform(
    envelope: Any,
    *,
    rng: random.Random | None = None,
    icon_base_url: str = STORE_ICON_BASE_URL,
) -> dict[str, Any]:
    """
    Run selection on a plugin polling envelope.

    Args:
        envelope: ``{"IDX_0": deals, "IDX_1": owned, "IDX_2": wishlist, "trmnl": {...}}``
        rng: Random source (module-level ``random`` if None)
        icon_base_url: Base URL for store icons

    Returns:
        Plugin payload with camelCase keys
    """
    if not isinstance(envelope, Mapping):
        envelope = {}

    selection = select_deal(
        envelope.get(DEALS_KEY),
        envelope.get(OWNED_GAMES_KEY),
        envelope.get(WISHLIST_KEY),
        FilterSettings.from_custom_fields(custom_field_values(envelope)),
        rng=rng,
        icon_base_url=icon_base_url,
    )
    return selection.to_payload()
