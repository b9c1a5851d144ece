"""Settings adapters - Configuration lookups for the domain."""

from .store import SettingsBackedStore

__all__ = ["SettingsBackedStore"]
