"""
Settings store adapter - Implements SettingsStore protocol.

Looks keys up on the pydantic-settings Settings object every time they
are requested; nothing is copied out at construction.
"""

from src.config.settings import Settings
from src.domain.exceptions import SettingNotFound


class SettingsBackedStore:
    """
    Implements SettingsStore protocol on top of Settings.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def get(self, key: str) -> str:
        """
        Resolve a setting by attribute name.

        Raises:
            SettingNotFound: If the key is unknown, None or empty
        """
        value = getattr(self._settings, key, None)
        if value is None or value == "":
            raise SettingNotFound(key)
        return str(value)
