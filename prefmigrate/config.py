"""Global configuration — loaded from environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings


class PrefMigrateSettings(BaseSettings):
    preferences_path: Path = Path(".prefmigrate/preferences.json")
    log_level: str = "INFO"

    model_config = {"env_prefix": "PREFMIGRATE_"}


settings = PrefMigrateSettings()
