from typing import Annotated, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, PydanticBaseSettingsSource, YamlConfigSettingsSource

from partid.bootstrap.config.loader import get_configfile
from partid.core.exception import ConfigError
from partid.core.space import LogicalSpace


class PartitioningSettings(BaseModel):
    partition_count: Annotated[
        int | None,
        Field(
            description=(
                "Default number of partitions (N) used when a caller does not pass one.\n"
                "Every key maps to a partition id in [0, N).\n\n"
                "N must be between 1 and 32767: the logical space holds 32767 values,\n"
                "so a larger N would leave some partitions without any key.\n\n"
                "This value MUST be identical for every client routing to the same\n"
                "store. Changing it moves almost every key to a different partition."
            ),
            default=None,
            ge=1,
            le=LogicalSpace.SIZE,
        )
    ]

    range_cache_size: Annotated[
        int,
        Field(
            description=(
                "Number of range tables kept in memory, one per distinct partition count.\n"
                "A range table only depends on the partition count, so caching it is\n"
                "always safe. 0 disables the cache and rebuilds the table on every call."
            ),
            default=128,
            ge=0,
        )
    ]


class LoggingSettings(BaseModel):
    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description=(
                "Logging verbosity applied by setup_logging().\n"
                "DEBUG    → range table builds and config resolution.\n"
                "INFO     → standard operational logs (default).\n"
                "WARNING  → only warnings and errors."
            ),
            default="INFO"
        )
    ]


class PartidConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PARTID_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    partitioning: Annotated[
        PartitioningSettings,
        Field(
            description=(
                "Partitioning configuration.\n"
                "Defines the default partition count and how range tables are cached."
            ),
            default_factory=PartitioningSettings
        )
    ]

    logging: Annotated[
        LoggingSettings,
        Field(
            description="Logging configuration.",
            default_factory=LoggingSettings
        )
    ]

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
            YamlConfigSettingsSource(settings_cls, yaml_file=get_configfile()),
        )


def load_config(**overrides) -> PartidConfig:
    try:
        return PartidConfig(**overrides)
    except ValidationError as exc:
        raise ConfigError(f"[config] Invalid configuration: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"[config] Cannot parse configuration file {get_configfile()}: {exc}") from exc
    except ValueError as exc:
        # YamlConfigSettingsSource rejects a document that is not a mapping
        raise ConfigError(f"[config] Cannot load configuration file {get_configfile()}: {exc}") from exc
