import logging

DEFAULT_FORMAT = '%(asctime)s [%(name)s:%(funcName)s] %(levelname)-8s : %(message)s'


def setup_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> None:
    logging.basicConfig(level=level, format=fmt)
