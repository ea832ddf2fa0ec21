"""
Payload fetcher for the three plugin polling sources.

Fetches CheapShark deals, the user's owned Steam games and their Steam
wishlist, and assembles them into the polling envelope consumed by
``run_transform``. This runs outside the selector; the selector never
touches the network.
"""

import asyncio
import time
from datetime import datetime, timezone
from typing import Any

import httpx

from steam_deals.config import Settings, get_settings
from steam_deals.logger import get_logger
from steam_deals.selection.selector import DEALS_KEY, OWNED_GAMES_KEY, WISHLIST_KEY


class FetchError(Exception):
    """Base exception for polling errors."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        endpoint: str | None = None,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.source = source
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class APIError(FetchError):
    """Raised when an API returns an error response."""

    pass


class ConfigurationError(FetchError):
    """Raised when a source needs settings that are not configured."""

    pass


class PayloadFetcher:
    """
    Async client for the deal, owned-games and wishlist sources.

    Example:
        >>> async with PayloadFetcher() as fetcher:
        ...     envelope = await fetcher.fetch_envelope({"min_savings": 50})
        >>> run_transform(envelope)
    """

    SOURCE_DEALS = "cheapshark_deals_api"
    SOURCE_OWNED = "steam_owned_games_api"
    SOURCE_WISHLIST = "steam_wishlist_api"

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the fetcher.

        Args:
            settings: Application settings (cached settings if None)
        """
        self._settings = settings or get_settings()
        self._logger = get_logger(self.__class__.__name__, component="poller")
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            timeout = max(
                self._settings.cheapshark.timeout_seconds,
                self._settings.steam.timeout_seconds,
            )
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                follow_redirects=True,
                headers={
                    "User-Agent": "SteamDeals/1.0",
                    "Accept": "application/json",
                },
            )
        return self._client

    @property
    def steam_configured(self) -> bool:
        """Check if Steam library sources can be queried."""
        return self._settings.steam.is_configured

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "PayloadFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def _get_json(self, source: str, url: str, params: dict[str, str]) -> Any:
        """
        GET a JSON document.

        Raises:
            APIError: If the API answers with status >= 400
            FetchError: On transport failure or a body that is not JSON
        """
        start_time = time.perf_counter()
        self._logger.debug("Making request", source=source, url=url)

        try:
            response = await self.client.get(url, params=params)
        except httpx.HTTPError as e:
            self._logger.error("Request failed", source=source, url=url, error=str(e))
            raise FetchError(
                f"Request failed: {e}",
                source=source,
                endpoint=url,
                original_error=e,
            ) from e

        if response.status_code >= 400:
            self._logger.error(
                "API error",
                source=source,
                url=url,
                status_code=response.status_code,
            )
            raise APIError(
                f"API error: {response.status_code}",
                source=source,
                endpoint=url,
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise FetchError(
                "Response is not valid JSON",
                source=source,
                endpoint=url,
                status_code=response.status_code,
                original_error=e,
            ) from e

        self._logger.info(
            "Fetched payload",
            source=source,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return body

    def _steam_params(self, source: str) -> dict[str, str]:
        steam = self._settings.steam
        if not steam.is_configured or steam.api_key is None or steam.steam_id is None:
            raise ConfigurationError(
                "STEAM_API_KEY and STEAM_STEAM_ID are required for Steam sources",
                source=source,
            )
        return {"key": steam.api_key.get_secret_value(), "steamid": steam.steam_id}

    async def fetch_deals(self, **params: Any) -> dict[str, Any]:
        """
        Fetch current deals from CheapShark ``/deals``.

        Args:
            **params: Extra query parameters (``storeID``, ``upperPrice``...)

        Returns:
            ``{"data": [deal, ...]}``, the shape the plugin poller produces
            for array responses
        """
        cheapshark = self._settings.cheapshark
        query = {"pageSize": str(cheapshark.page_size)}
        query.update({key: str(value) for key, value in params.items()})

        body = await self._get_json(self.SOURCE_DEALS, f"{cheapshark.base_url}/deals", query)
        return {"data": body if isinstance(body, list) else []}

    async def fetch_owned_games(self) -> Any:
        """Fetch the user's library from ``IPlayerService/GetOwnedGames``."""
        params = self._steam_params(self.SOURCE_OWNED)
        params["include_played_free_games"] = "1"
        url = f"{self._settings.steam.base_url}/IPlayerService/GetOwnedGames/v1/"
        return await self._get_json(self.SOURCE_OWNED, url, params)

    async def fetch_wishlist(self) -> Any:
        """Fetch the user's wishlist from ``IWishlistService/GetWishlist``."""
        params = self._steam_params(self.SOURCE_WISHLIST)
        url = f"{self._settings.steam.base_url}/IWishlistService/GetWishlist/v1/"
        return await self._get_json(self.SOURCE_WISHLIST, url, params)

    async def fetch_envelope(
        self,
        custom_fields: dict[str, Any] | None = None,
        **deal_params: Any,
    ) -> dict[str, Any]:
        """
        Fetch all sources concurrently and build the polling envelope.

        Steam sources are left out when no Steam credentials are
        configured; the selector then treats the library as empty.

        Args:
            custom_fields: Plugin custom field values (filter settings)
            **deal_params: Extra CheapShark query parameters

        Returns:
            ``{"IDX_0": ..., "IDX_1": ..., "IDX_2": ..., "trmnl": {...}}``
        """
        envelope: dict[str, Any] = {
            "trmnl": {"plugin_settings": {"custom_fields_values": dict(custom_fields or {})}},
        }

        if self.steam_configured:
            deals, owned, wishlist = await asyncio.gather(
                self.fetch_deals(**deal_params),
                self.fetch_owned_games(),
                self.fetch_wishlist(),
            )
            envelope[OWNED_GAMES_KEY] = owned
            envelope[WISHLIST_KEY] = wishlist
        else:
            self._logger.warning("Steam credentials not configured, skipping library sources")
            deals = await self.fetch_deals(**deal_params)

        envelope[DEALS_KEY] = deals
        return envelope
