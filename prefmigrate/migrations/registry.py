"""Upgrade registry — every known preference upgrade, in application order.

To add a preference upgrade:
  * write an `m_NNN_description.py` module exposing a builder that returns a
    `PreferenceUpgrade` (only the legacy step may use the legacy version code)
  * give it a version identifier one greater than the previous upgrade
  * append it to the list in `all_upgrades()`
"""

from __future__ import annotations

from collections import Counter

from prefmigrate.exceptions import DuplicateUpgradeVersionError
from prefmigrate.migrations.m_001_legacy import legacy_preference_upgrade
from prefmigrate.types import (
    LegacyVersionIdentifier,
    PreferenceUpgrade,
    UpgradeRegistry,
    VersionIdentifier,
)

# A legacy version code whose value doesn't matter because the result is
# only used for its version identifiers.
IGNORED_LEGACY_VERSION_CODE = 0


def all_upgrades(legacy_previous_version_code: LegacyVersionIdentifier) -> list[PreferenceUpgrade]:
    """Returns all preference upgrades. Built fresh on every call."""
    upgrades = [
        legacy_preference_upgrade(legacy_previous_version_code),
    ]
    validate_upgrades(upgrades)
    return upgrades


def validate_upgrades(upgrades: list[PreferenceUpgrade]) -> None:
    counts = Counter(u.version for u in upgrades)
    duplicates = sorted(v for v, n in counts.items() if n > 1)
    if duplicates:
        raise DuplicateUpgradeVersionError(
            f"Duplicate preference upgrade versions: {duplicates}"
        )


def all_version_identifiers(registry: UpgradeRegistry = all_upgrades) -> list[VersionIdentifier]:
    """Returns the version identifiers of all upgrades, in registry order."""
    return [u.version for u in registry(IGNORED_LEGACY_VERSION_CODE)]


def latest_version(registry: UpgradeRegistry = all_upgrades) -> VersionIdentifier:
    """The latest preference version.

    A store set to this version has no pending upgrades.
    """
    return max(all_version_identifiers(registry), default=0)
