"""Migration runner — applies pending preference upgrades.

The preference version lives in the store under `preferenceUpgradeVersion`
(0 when absent). Each upgrade's own version is written immediately after it
runs, so an interrupted run resumes from the next unapplied upgrade.

Versions are overwritten, not max-combined: if the registry ever lists a
lower version after a higher one, the stored version goes back down and the
higher upgrade runs again on the next call.
"""

from __future__ import annotations

import logging

from prefmigrate.migrations.registry import all_upgrades, latest_version
from prefmigrate.store import PreferenceStore
from prefmigrate.types import (
    LegacyVersionIdentifier,
    PreferenceUpgrade,
    UpgradeRegistry,
    VersionIdentifier,
)

logger = logging.getLogger(__name__)

PREFERENCE_VERSION_KEY = "preferenceUpgradeVersion"


def get_preference_version(store: PreferenceStore) -> VersionIdentifier:
    return store.get_int(PREFERENCE_VERSION_KEY, 0)


def set_preference_version(store: PreferenceStore, version: VersionIdentifier) -> None:
    logger.info("Upgrading preference version to %d", version)
    store.set_int(PREFERENCE_VERSION_KEY, version)


def get_pending_upgrades(
    store: PreferenceStore,
    legacy_previous_version_code: LegacyVersionIdentifier,
    registry: UpgradeRegistry = all_upgrades,
) -> list[PreferenceUpgrade]:
    """Upgrades newer than the stored version, in registry order."""
    current = get_preference_version(store)
    return [
        u for u in registry(legacy_previous_version_code)
        if u.version > current
    ]


def perform_upgrade(store: PreferenceStore, upgrade: PreferenceUpgrade) -> None:
    logger.info("Running preference upgrade: %s", upgrade.name)
    upgrade.upgrade(store)
    set_preference_version(store, upgrade.version)


def apply_upgrades(
    store: PreferenceStore,
    legacy_previous_version_code: LegacyVersionIdentifier,
    registry: UpgradeRegistry = all_upgrades,
) -> bool:
    """Apply all pending upgrades. Returns whether any were pending."""
    pending = get_pending_upgrades(store, legacy_previous_version_code, registry)

    for upgrade in pending:
        perform_upgrade(store, upgrade)

    return len(pending) > 0


def set_preferences_to_latest_version(
    store: PreferenceStore,
    registry: UpgradeRegistry = all_upgrades,
) -> None:
    """Sets the preference version such that no upgrades need to be applied."""
    set_preference_version(store, latest_version(registry))
