"""
Deal selection for the dashboard widget.

Normalization, Steam library lookups, filtering and random pick.
"""

from steam_deals.selection.library import owned_app_ids, wishlist_app_ids
from steam_deals.selection.normalize import extract_raw_deals, normalize_deal, normalize_deals
from steam_deals.selection.selector import (
    DEALS_KEY,
    OWNED_GAMES_KEY,
    WISHLIST_KEY,
    custom_field_values,
    filter_deals,
    passes_filters,
    pick_random,
    run_transform,
    select_deal,
)

__all__ = [
    "DEALS_KEY",
    "OWNED_GAMES_KEY",
    "WISHLIST_KEY",
    "custom_field_values",
    "extract_raw_deals",
    "filter_deals",
    "normalize_deal",
    "normalize_deals",
    "owned_app_ids",
    "passes_filters",
    "pick_random",
    "run_transform",
    "select_deal",
    "wishlist_app_ids",
]
