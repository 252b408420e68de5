import logging

LOGGER_NAME = "planar_index"

logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.setLevel(logging.INFO)


def get_logger(component: str) -> logging.Logger:
    """Child logger such as ``planar_index.kdtree``; level follows the package logger."""
    return logger.getChild(component)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
