"""
Data contracts for deal records and the dashboard plugin boundary.

Pydantic models describing what comes in from CheapShark and what goes
out to the plugin template.
"""

from steam_deals.contracts.deals import NormalizedDeal, RawDeal
from steam_deals.contracts.plugin import DealSelection, FilterSettings

__all__ = [
    "DealSelection",
    "FilterSettings",
    "NormalizedDeal",
    "RawDeal",
]
