"""
Steam library lookups: owned games and wishlist.

Both readers accept the raw Steam Web API payloads and never raise;
anything they do not recognize yields an empty set.
"""

from collections.abc import Mapping
from typing import Any


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _as_app_id(value: Any) -> int | None:
    """Integer app IDs only; integral floats are accepted as JSON allows ``5.0``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _response_object(payload: Any) -> Mapping[str, Any] | None:
    if not isinstance(payload, Mapping):
        return None
    response = payload.get("response")
    return response if isinstance(response, Mapping) else None


def owned_app_ids(owned_games_payload: Any) -> set[int]:
    """
    App IDs from an ``IPlayerService/GetOwnedGames`` payload.

    Reads ``response.games[].appid``; games without an integer ``appid``
    are ignored.
    """
    response = _response_object(owned_games_payload)
    if response is None:
        return set()

    games = response.get("games")
    if not isinstance(games, list):
        return set()

    owned = set()
    for game in games:
        if not isinstance(game, Mapping):
            continue
        app_id = _as_app_id(game.get("appid"))
        if app_id is not None:
            owned.add(app_id)
    return owned


def wishlist_app_ids(wishlist_payload: Any) -> set[int | float]:
    """
    App IDs from a Steam wishlist payload.

    The wishlist endpoint has changed shape over time, so these are
    tried in order under ``response``:

    1. ``items``: list of ``{"appid": int, "priority": ..., "date_added": ...}``
    2. ``rgWishlist``: flat list of app IDs
    3. the first field holding a list made only of numbers

    Returns:
        Set of app IDs, empty when the shape is not recognized
    """
    response = _response_object(wishlist_payload)
    if response is None:
        return set()

    items = response.get("items")
    if isinstance(items, list):
        app_ids = (
            _as_app_id(item.get("appid")) for item in items if isinstance(item, Mapping)
        )
        return {app_id for app_id in app_ids if app_id is not None}

    legacy = response.get("rgWishlist")
    if isinstance(legacy, list):
        app_ids = (_as_app_id(value) for value in legacy)
        return {app_id for app_id in app_ids if app_id is not None}

    for value in response.values():
        if isinstance(value, list) and all(_is_number(n) for n in value):
            return set(value)

    return set()
