from functools import lru_cache

from partid.bootstrap.config.settings import PartidConfig, load_config
from partid.core.resolver import PartitionResolver
from partid.core.utils.log import setup_logging


@lru_cache
def get_config() -> PartidConfig:
    return load_config()


@lru_cache
def get_resolver() -> PartitionResolver:
    return PartitionResolver.from_config(get_config())


def configure_logging() -> None:
    setup_logging(get_config().logging.level)
