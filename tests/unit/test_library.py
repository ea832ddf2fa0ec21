"""Tests for Steam owned-games and wishlist lookups."""

from typing import Any

import pytest

from steam_deals.selection import owned_app_ids, wishlist_app_ids


class TestOwnedAppIds:
    """Tests for owned_app_ids."""

    def test_fixture_payload(self, owned_games_payload: dict[str, Any]) -> None:
        """Test reading a GetOwnedGames response."""
        assert owned_app_ids(owned_games_payload) == {367520, 620}

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {},
            {"response": {}},
            {"response": {"games": "none"}},
            {"response": []},
            "not a payload",
        ],
    )
    def test_missing_games_is_empty(self, payload: Any) -> None:
        """Test that missing or malformed game lists yield an empty set."""
        assert owned_app_ids(payload) == set()

    def test_skips_entries_without_integer_appid(self) -> None:
        """Test that only integer app IDs are kept."""
        payload = {"response": {"games": [{"appid": 10}, {"appid": "20"}, {}, 30, None]}}

        assert owned_app_ids(payload) == {10}

    def test_duplicates_counted_once(self) -> None:
        """Test that the result is a set."""
        payload = {"response": {"games": [{"appid": 10}, {"appid": 10}]}}

        assert owned_app_ids(payload) == {10}


class TestWishlistAppIds:
    """Tests for wishlist_app_ids."""

    def test_items_shape(self, wishlist_payload: dict[str, Any]) -> None:
        """Test the IWishlistService items shape."""
        assert wishlist_app_ids(wishlist_payload) == {504230, 1145360}

    def test_items_skip_non_integer(self) -> None:
        """Test that items without an integer appid are dropped."""
        payload = {"response": {"items": [{"appid": 1}, {"appid": 2.5}, {"priority": 0}, "x"]}}

        assert wishlist_app_ids(payload) == {1}

    def test_rg_wishlist_shape(self) -> None:
        """Test the legacy flat rgWishlist shape."""
        payload = {"response": {"rgWishlist": [10, 20, "30", True]}}

        assert wishlist_app_ids(payload) == {10, 20}

    def test_items_take_precedence(self) -> None:
        """Test that items wins over rgWishlist."""
        payload = {"response": {"items": [{"appid": 1}], "rgWishlist": [2]}}

        assert wishlist_app_ids(payload) == {1}

    def test_fallback_numeric_array(self) -> None:
        """Test scanning for the first all-numeric array."""
        payload = {"response": {"count": 2, "names": ["a", "b"], "appids": [5, 6]}}

        assert wishlist_app_ids(payload) == {5, 6}

    def test_fallback_ignores_mixed_arrays(self) -> None:
        """Test that arrays with non-numbers are skipped by the scan."""
        payload = {"response": {"mixed": [1, "2"], "bools": [True]}}

        assert wishlist_app_ids(payload) == set()

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {},
            {"response": {"foo": "bar"}},
            {"response": "private"},
            {"success": 2},
        ],
    )
    def test_unrecognized_shape_is_empty(self, payload: Any) -> None:
        """Test that unknown shapes yield an empty set instead of failing."""
        assert wishlist_app_ids(payload) == set()
