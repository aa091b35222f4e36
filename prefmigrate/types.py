"""Core types shared by the registry, the runner and the upgrade steps."""

from __future__ import annotations

from typing import Callable, TypeAlias

from pydantic import BaseModel, Field

from prefmigrate.store import PreferenceStore

# ── ID Types ──────────────────────────────────────────────────────────────────

VersionIdentifier: TypeAlias = int
LegacyVersionIdentifier: TypeAlias = int

UpgradeAction = Callable[[PreferenceStore], None]


# ── Upgrade Steps ─────────────────────────────────────────────────────────────


class PreferenceUpgrade(BaseModel):
    """One versioned unit of preference migration.

    `version` is written to the store as soon as `upgrade` returns, so a
    step runs at most once per store. Only the legacy step sets
    `legacy_previous_version_code`.
    """

    version: VersionIdentifier = Field(gt=0)
    name: str
    upgrade: UpgradeAction
    legacy_previous_version_code: LegacyVersionIdentifier | None = None

    model_config = {"frozen": True}


UpgradeRegistry = Callable[[LegacyVersionIdentifier], list[PreferenceUpgrade]]
