"""
CheapShark storefront lookup.

Static store ID → display name table (CheapShark Stores Info endpoint)
and store icon URL construction. Icons live at
``{base}/{index}.png`` where ``index = storeID - 1``.
"""

from typing import Any

from steam_deals.parsing import parse_int

STORE_ICON_BASE_URL = "https://www.cheapshark.com/img/stores/icons"

STORE_NAMES: dict[str, str] = {
    "1": "Steam",
    "2": "GamersGate",
    "3": "GreenManGaming",
    "4": "Amazon",
    "5": "GameStop",
    "6": "Direct2Drive",
    "7": "GOG",
    "8": "Origin",
    "9": "Get Games",
    "10": "Shiny Loot",
    "11": "Humble Store",
    "12": "Desura",
    "13": "Uplay",
    "14": "IndieGameStand",
    "15": "Fanatical",
    "16": "Gamesrocket",
    "17": "Games Republic",
    "18": "SilaGames",
    "19": "Playfield",
    "20": "ImperialGames",
    "21": "WinGameStore",
    "22": "FunStockDigital",
    "23": "GameBillet",
    "24": "Voidu",
    "25": "Epic Games Store",
    "26": "Razer Game Store",
    "27": "Gamesplanet",
    "28": "Gamesload",
    "29": "2Game",
    "30": "IndieGala",
    "31": "Blizzard Shop",
    "32": "AllYouPlay",
    "33": "DLGamer",
    "34": "Noctre",
    "35": "DreamGame",
}


def store_name(store_id: Any) -> str:
    """Display name for a store ID, ``"Store {id}"`` when unknown."""
    return STORE_NAMES.get(str(store_id), f"Store {store_id}")


def store_icon_url(store_id: Any, base_url: str = STORE_ICON_BASE_URL) -> str:
    """
    Icon URL for a store ID.

    Unparsable or non-positive IDs are clamped to icon index 0.
    """
    index = max(0, (parse_int(store_id) or 0) - 1)
    return f"{base_url.rstrip('/')}/{index}.png"
