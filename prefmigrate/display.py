"""Full-screen display mode preference.

The mode used to be a single boolean (`fullscreenReview`); it is now stored
as a string enum value under `fullscreenMode`.
"""

from __future__ import annotations

import logging
from enum import Enum

from prefmigrate.store import PreferenceStore

logger = logging.getLogger(__name__)

PREF_KEY = "fullscreenMode"
LEGACY_PREF_KEY = "fullscreenReview"


class FullScreenMode(str, Enum):
    BARS_SHOWN = "0"
    HIDE_SYSTEM_BARS = "1"
    FULLSCREEN_ALL_GONE = "2"

    @classmethod
    def default(cls) -> FullScreenMode:
        return cls.BARS_SHOWN

    @classmethod
    def from_preference(cls, store: PreferenceStore) -> FullScreenMode:
        """Read the current mode, falling back to the default for unknown values."""
        value = store.get_str(PREF_KEY, cls.default().value)
        try:
            return cls(value)
        except ValueError:
            return cls.default()


def upgrade_from_legacy_preference(store: PreferenceStore) -> None:
    """Replace the legacy boolean with its `FullScreenMode` equivalent."""
    if not store.contains(LEGACY_PREF_KEY):
        return

    if store.get_bool(LEGACY_PREF_KEY, False):
        mode = FullScreenMode.HIDE_SYSTEM_BARS
    else:
        mode = FullScreenMode.BARS_SHOWN
    logger.info("Upgrading legacy full screen preference to mode %s", mode.name)
    store.set_str(PREF_KEY, mode.value)
    store.remove(LEGACY_PREF_KEY)
