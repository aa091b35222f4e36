"""Custom exception hierarchy for prefmigrate."""


class PrefMigrateError(Exception):
    """Base for all preference migration errors."""


class PreferenceStoreError(PrefMigrateError):
    """The backing file of a preference store could not be read."""


class PreferenceTypeError(PrefMigrateError):
    """A typed read found a value of a different type under the key."""


class DuplicateUpgradeVersionError(PrefMigrateError):
    """Two preference upgrades share a version identifier."""
