"""Tests for the preference upgrade registry."""

import pytest
from pydantic import ValidationError

from prefmigrate.exceptions import DuplicateUpgradeVersionError
from prefmigrate.migrations.registry import (
    all_upgrades,
    all_version_identifiers,
    latest_version,
    validate_upgrades,
)
from prefmigrate.types import PreferenceUpgrade


def _noop(store):
    pass


def test_all_upgrades_contains_legacy_step():
    upgrades = all_upgrades(20500100)
    assert [u.version for u in upgrades] == [1]
    assert upgrades[0].name == "LegacyPreferenceUpgrade"
    assert upgrades[0].legacy_previous_version_code == 20500100


def test_all_upgrades_is_restartable():
    first = all_upgrades(0)
    second = all_upgrades(0)
    assert [u.version for u in first] == [u.version for u in second]
    assert first is not second


def test_version_identifiers_are_unique_and_positive():
    versions = all_version_identifiers()
    assert len(versions) == len(set(versions))
    assert all(v > 0 for v in versions)


def test_version_identifiers_do_not_depend_on_legacy_code():
    assert [u.version for u in all_upgrades(0)] == [u.version for u in all_upgrades(30000000)]


def test_latest_version_current_registry():
    assert latest_version() == 1


def test_latest_version_empty_registry():
    assert latest_version(lambda code: []) == 0


def test_latest_version_is_max_not_last():
    def registry(code):
        return [
            PreferenceUpgrade(version=v, name=str(v), upgrade=_noop)
            for v in (2, 7, 3)
        ]
    assert latest_version(registry) == 7


def test_validate_rejects_duplicates():
    upgrades = [
        PreferenceUpgrade(version=1, name="a", upgrade=_noop),
        PreferenceUpgrade(version=1, name="b", upgrade=_noop),
    ]
    with pytest.raises(DuplicateUpgradeVersionError, match=r"\[1\]"):
        validate_upgrades(upgrades)


def test_upgrade_version_must_be_positive():
    with pytest.raises(ValidationError):
        PreferenceUpgrade(version=0, name="zero", upgrade=_noop)


def test_upgrade_record_is_frozen():
    upgrade = PreferenceUpgrade(version=1, name="a", upgrade=_noop)
    with pytest.raises(ValidationError):
        upgrade.version = 2
