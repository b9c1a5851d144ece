"""
Unit tests for SettingsBackedStore adapter.

Tests verify the store implements SettingsStore protocol,
resolves keys at call time and reports missing keys.
"""

import pytest

from src.adapters.settings import SettingsBackedStore
from src.config.settings import Settings
from src.domain.exceptions import SettingNotFound


class TestSettingsStoreProtocol:
    """Tests for SettingsStore protocol compliance."""

    def test_implements_settings_store_protocol(self, settings: Settings) -> None:
        """SettingsBackedStore satisfies the SettingsStore protocol."""
        from src.domain.ports import SettingsStore

        store = SettingsBackedStore(settings)

        def accepts_store(s: SettingsStore) -> None:
            pass

        accepts_store(store)
        assert callable(store.get)

    def test_no_explicit_inheritance(self) -> None:
        """SettingsBackedStore uses structural subtyping, not inheritance."""
        assert SettingsBackedStore.__bases__ == (object,)


class TestGet:
    """Tests for get()."""

    def test_returns_configured_value(self, settings_store: SettingsBackedStore) -> None:
        """Configured keys resolve to their values."""
        assert settings_store.get("zerotier_central_api_token") == "zt-test-token"
        assert settings_store.get("postmark_server_token") == "pm-test-token"

    def test_missing_value_raises(self) -> None:
        """Keys left at None raise SettingNotFound."""
        store = SettingsBackedStore(Settings(_env_file=None, zerotier_network_id=None))

        with pytest.raises(SettingNotFound) as exc_info:
            store.get("zerotier_network_id")
        assert exc_info.value.key == "zerotier_network_id"

    def test_empty_value_raises(self) -> None:
        """Empty strings count as absent."""
        store = SettingsBackedStore(Settings(_env_file=None, postmark_server_token=""))

        with pytest.raises(SettingNotFound):
            store.get("postmark_server_token")

    def test_unknown_key_raises(self, settings_store: SettingsBackedStore) -> None:
        """Keys that are not settings raise SettingNotFound."""
        with pytest.raises(SettingNotFound):
            settings_store.get("no_such_setting")

    def test_values_are_read_at_call_time(self, settings: Settings) -> None:
        """Changes to the settings object are visible on the next lookup."""
        store = SettingsBackedStore(settings)
        assert store.get("zerotier_network_id") == "8056c2e21c000001"

        settings.zerotier_network_id = "rotated"

        assert store.get("zerotier_network_id") == "rotated"

    def test_non_string_values_are_stringified(self, settings_store: SettingsBackedStore) -> None:
        """Numeric settings come back as strings."""
        assert settings_store.get("http_timeout_seconds") == "10.0"
