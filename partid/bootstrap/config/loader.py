import logging
import os
from functools import lru_cache
from pathlib import Path

from partid.core.exception import ConfigError

CONFIG_ENV = "PARTID_CONFIG"
DEFAULT_CONFIG_NAME = "partid.yaml"

_logger = logging.getLogger("partid.bootstrap.config")


@lru_cache
def get_configfile() -> Path | None:
    # Priority: ENV > default file in current working directory
    raw = os.getenv(CONFIG_ENV)

    if raw is not None:
        file = Path(raw)
        if not file.is_file():
            raise ConfigError(
                f"[config] Configuration file not found: '{file}'.\n"
                f"  - Fix the {CONFIG_ENV} environment variable\n"
                f"  - Or unset it to fall back to './{DEFAULT_CONFIG_NAME}'."
            )
        _logger.debug(f"Using configuration file {file} from {CONFIG_ENV}")
        return file

    file = Path.cwd() / DEFAULT_CONFIG_NAME
    if file.is_file():
        _logger.debug(f"Using configuration file {file}")
        return file

    _logger.info("No configuration file found, using environment and defaults")
    return None
