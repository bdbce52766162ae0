import logging

LOGGER_NAME = "geoindex"

logger = logging.getLogger(LOGGER_NAME)

# la salida la configura la aplicación que use el índice
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)
