"""Migration 001: preference upgrades from before versioned upgrades existed.

Until then, upgrades were detected by comparing the previously installed
package version code against fixed build numbers rather than by reading a
version stored in the preferences. The thresholds below are historical
release codes and must not change.
"""

from __future__ import annotations

import functools
import logging

from prefmigrate import display
from prefmigrate.store import PreferenceStore
from prefmigrate.types import (
    LegacyVersionIdentifier,
    PreferenceUpgrade,
    UpgradeAction,
)

logger = logging.getLogger(__name__)

VERSION = 1

# The latest package version that included preference changes requiring
# handling. Do not modify: newer changes must be added as new upgrades.
CHECK_PREFERENCES_AT_VERSION = 20500225

# Preferences from releases this old are incompatible and are discarded.
CLEAR_PREFERENCES_BEFORE_VERSION = 20300130

# 2.5alpha35 renamed the zoom preferences and dropped `useBackup`.
FIX_ZOOM_BEFORE_VERSION = 20500135


def needs_legacy_preference_upgrade(previous_version_code: LegacyVersionIdentifier) -> bool:
    return previous_version_code < CHECK_PREFERENCES_AT_VERSION


def upgrade(
    store: PreferenceStore,
    previous_version_code: LegacyVersionIdentifier,
    full_screen_upgrade: UpgradeAction | None = None,
) -> None:
    if not needs_legacy_preference_upgrade(previous_version_code):
        return

    logger.info("Running legacy preference upgrade from %d", previous_version_code)

    if previous_version_code < CLEAR_PREFERENCES_BEFORE_VERSION:
        logger.info("Old version - clearing preferences")
        store.clear()

    if previous_version_code < FIX_ZOOM_BEFORE_VERSION:
        logger.info("Old version - fixing zoom")
        old_card_zoom = store.get_int("relativeDisplayFontSize", 100)
        old_image_zoom = store.get_int("relativeImageSize", 100)
        store.set_int("cardZoom", old_card_zoom)
        store.set_int("imageZoom", old_image_zoom)
        if not store.get_bool("useBackup", True):
            store.set_int("backupMax", 0)
        store.remove("useBackup")
        store.remove("intentAdditionInstantAdd")

    (full_screen_upgrade or display.upgrade_from_legacy_preference)(store)


def legacy_preference_upgrade(
    previous_version_code: LegacyVersionIdentifier,
    full_screen_upgrade: UpgradeAction | None = None,
) -> PreferenceUpgrade:
    """Build the step record for the given previously installed version code."""
    return PreferenceUpgrade(
        version=VERSION,
        name="LegacyPreferenceUpgrade",
        upgrade=functools.partial(
            upgrade,
            previous_version_code=previous_version_code,
            full_screen_upgrade=full_screen_upgrade,
        ),
        legacy_previous_version_code=previous_version_code,
    )
