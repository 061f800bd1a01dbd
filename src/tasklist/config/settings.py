"""Application settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE = "tasklist.yml"

StorageBackend = Literal["memory", "directory", "http"]


def _default_storage_dir() -> Path:
    return Path.home() / ".local" / "share" / "tasklist"


class Settings(BaseSettings):
    """Application settings.

    Sources, highest priority first: constructor arguments (CLI flags),
    ``TASKLIST_*`` environment variables, then ``tasklist.yml`` in the
    working directory.
    """

    storage: StorageBackend = Field(
        default="directory",
        description="Key-value backend: memory, directory or http",
    )

    storage_dir: Path = Field(
        default_factory=_default_storage_dir,
        description="Directory for the directory backend",
    )

    storage_url: str | None = Field(
        default=None,
        description="Base URL of the key-value service for the http backend",
    )

    storage_token: str | None = Field(
        default=None,
        description="Optional bearer token for the http backend",
    )

    storage_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Request timeout in seconds for the http backend",
    )

    namespace: str = Field(
        default="todo",
        min_length=1,
        pattern=r"^[^:]+$",
        description="Key prefix grouping all task entries",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = SettingsConfigDict(
        env_prefix="TASKLIST_",
        yaml_file=CONFIG_FILE,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )
