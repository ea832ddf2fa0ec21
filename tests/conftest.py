"""Shared fixtures for deal selection tests."""

import json
from pathlib import Path
from typing import Any, cast

import pytest
import structlog

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> Any:
    """Load a JSON fixture file."""
    with (FIXTURES_DIR / name).open(encoding="utf-8") as f:
        return json.load(f)


def make_deal(**overrides: Any) -> dict[str, Any]:
    """Build a CheapShark deal record with sensible defaults."""
    deal: dict[str, Any] = {
        "dealID": "deal-1",
        "storeID": "1",
        "steamAppID": "100",
        "gameID": "1000",
        "title": "Test Game",
        "salePrice": "4.99",
        "normalPrice": "9.99",
        "savings": "50",
        "dealRating": "8.0",
        "metacriticScore": "80",
        "steamRatingPercent": "90",
        "steamRatingCount": "1000",
        "steamRatingText": "Very Positive",
        "releaseDate": 1600000000,
        "lastChange": 1700000000,
        "thumb": "https://example.com/thumb.jpg",
        "internalName": "TESTGAME",
    }
    deal.update(overrides)
    return deal


@pytest.fixture(autouse=True)
def quiet_logging() -> Any:
    """Keep log output off stdout so CLI output can be parsed."""
    structlog.configure(
        processors=[structlog.processors.JSONRenderer()],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def cheapshark_deals() -> list[dict[str, Any]]:
    """CheapShark /deals response (a bare list)."""
    return cast(list[dict[str, Any]], load_fixture("cheapshark_deals.json"))


@pytest.fixture
def deals_payload(cheapshark_deals: list[dict[str, Any]]) -> dict[str, Any]:
    """Deals as the plugin poller nests them."""
    return {"data": cheapshark_deals}


@pytest.fixture
def owned_games_payload() -> dict[str, Any]:
    """Steam GetOwnedGames response."""
    return cast(dict[str, Any], load_fixture("steam_owned_games.json"))


@pytest.fixture
def wishlist_payload() -> dict[str, Any]:
    """Steam GetWishlist response."""
    return cast(dict[str, Any], load_fixture("steam_wishlist.json"))


@pytest.fixture
def envelope() -> dict[str, Any]:
    """Full plugin polling envelope."""
    return cast(dict[str, Any], load_fixture("envelope.json"))
