"""
Steam Deals.

Picks a "deal of the moment" from CheapShark deals, skipping games the
user already owns (or keeping only wishlisted ones), for an e-paper
dashboard plugin.
"""

from steam_deals.contracts import DealSelection, FilterSettings, NormalizedDeal
from steam_deals.selection import run_transform, select_deal

__version__ = "0.1.0"

__all__ = [
    "DealSelection",
    "FilterSettings",
    "NormalizedDeal",
    "run_transform",
    "select_deal",
    "__version__",
]
