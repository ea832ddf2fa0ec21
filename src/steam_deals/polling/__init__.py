"""
Polling sources for the deal widget.

Fetches the CheapShark and Steam payloads the selector consumes.
"""

from steam_deals.polling.fetcher import (
    APIError,
    ConfigurationError,
    FetchError,
    PayloadFetcher,
)

__all__ = [
    "APIError",
    "ConfigurationError",
    "FetchError",
    "PayloadFetcher",
]
