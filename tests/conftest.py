"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings with provider credentials configured
- The SettingsStore port backed by those settings
"""

import pytest
from fakes import NETWORK_ID, POSTMARK_TOKEN, ZT_TOKEN

from src.adapters.settings import SettingsBackedStore
from src.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Settings with every provider credential configured."""
    return Settings(
        _env_file=None,
        zerotier_central_api_token=ZT_TOKEN,
        zerotier_network_id=NETWORK_ID,
        postmark_server_token=POSTMARK_TOKEN,
    )


@pytest.fixture
def settings_store(settings: Settings) -> SettingsBackedStore:
    """SettingsStore port backed by the test settings."""
    return SettingsBackedStore(settings)
