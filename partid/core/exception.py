class PartidError(Exception):
    pass


class InvalidArgument(PartidError, ValueError):
    pass


class ConfigError(PartidError):
    pass
