"""Preference upgrade service — the entry points a host calls at startup."""

from __future__ import annotations

import logging

from prefmigrate.config import PrefMigrateSettings, settings
from prefmigrate.migrations.runner import (
    apply_upgrades,
    set_preferences_to_latest_version,
)
from prefmigrate.store import JsonFilePreferenceStore, PreferenceStore
from prefmigrate.types import LegacyVersionIdentifier

logger = logging.getLogger(__name__)


def upgrade_preferences(
    store: PreferenceStore,
    previous_version_code: LegacyVersionIdentifier,
) -> bool:
    """Run all pending upgrades. Returns whether any preferences were upgraded."""
    return apply_upgrades(store, previous_version_code)


def mark_preferences_up_to_date(store: PreferenceStore) -> None:
    """Specifies that no preference upgrades need to happen.

    Typically because the app has been run for the first time, or the
    preferences have been deleted.
    """
    logger.info("Marking preferences as up to date")
    set_preferences_to_latest_version(store)


def open_preferences(config: PrefMigrateSettings | None = None) -> JsonFilePreferenceStore:
    """Open the preference store named by the configuration."""
    config = config or settings
    return JsonFilePreferenceStore(config.preferences_path)


def upgrade_default_preferences(
    previous_version_code: LegacyVersionIdentifier,
    config: PrefMigrateSettings | None = None,
) -> bool:
    return upgrade_preferences(open_preferences(config), previous_version_code)
