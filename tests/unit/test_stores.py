"""Tests for store lookup and icon URLs."""

import pytest

from steam_deals.stores import STORE_ICON_BASE_URL, STORE_NAMES, store_icon_url, store_name


class TestStoreNames:
    """Tests for the store name table."""

    def test_table_has_35_stores(self) -> None:
        """Test that the table covers store IDs 1 through 35."""
        assert len(STORE_NAMES) == 35
        assert set(STORE_NAMES) == {str(i) for i in range(1, 36)}

    def test_known_stores(self) -> None:
        """Test a few well-known storefronts."""
        assert store_name("1") == "Steam"
        assert store_name("7") == "GOG"
        assert store_name("25") == "Epic Games Store"
        assert store_name("35") == "DreamGame"

    def test_unknown_store_fallback(self) -> None:
        """Test fallback label for unknown store IDs."""
        assert store_name("99") == "Store 99"
        assert store_name("abc") == "Store abc"

    def test_integer_store_id(self) -> None:
        """Test that integer IDs resolve like their string form."""
        assert store_name(11) == "Humble Store"


class TestStoreIconUrl:
    """Tests for store icon URL construction."""

    def test_steam_icon_is_index_zero(self) -> None:
        """Test that store 1 maps to icon 0."""
        assert store_icon_url("1") == f"{STORE_ICON_BASE_URL}/0.png"

    def test_unknown_store_icon(self) -> None:
        """Test best-effort icon index for unknown stores."""
        assert store_icon_url("99").endswith("/98.png")

    @pytest.mark.parametrize("store_id", ["0", "-5", "abc", "", None, [1]])
    def test_clamped_to_zero(self, store_id: object) -> None:
        """Test that non-positive or unparsable IDs clamp to icon 0."""
        assert store_icon_url(store_id).endswith("/0.png")

    def test_custom_base_url(self) -> None:
        """Test that a trailing slash on the base URL is not doubled."""
        assert store_icon_url("7", "https://cdn.example.com/icons/") == (
            "https://cdn.example.com/icons/6.png"
        )
