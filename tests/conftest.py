"""Shared test fixtures — in-memory stores and recording upgrade registries."""

from __future__ import annotations

import pytest

from prefmigrate.store import MemoryPreferenceStore
from prefmigrate.types import PreferenceUpgrade


class RecordingRegistry:
    """Registry of no-op upgrades that records which ones ran, in order."""

    def __init__(self, versions: list[int]):
        self.versions = versions
        self.calls: list[int] = []  # versions whose upgrade body ran
        self.legacy_codes: list[int] = []

    def _action(self, version: int):
        def _run(store):
            self.calls.append(version)
        return _run

    def __call__(self, legacy_previous_version_code: int) -> list[PreferenceUpgrade]:
        self.legacy_codes.append(legacy_previous_version_code)
        return [
            PreferenceUpgrade(version=v, name=f"Upgrade{v}", upgrade=self._action(v))
            for v in self.versions
        ]


@pytest.fixture
def store():
    return MemoryPreferenceStore()


@pytest.fixture
def recording_registry():
    def _factory(versions: list[int]) -> RecordingRegistry:
        return RecordingRegistry(versions)
    return _factory


@pytest.fixture
def prefs_path(tmp_path):
    return tmp_path / "prefs" / "preferences.json"
