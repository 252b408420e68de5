from . import logger
from .settings import IndexSettings, apply_settings, get_settings

__all__ = ["logger", "IndexSettings", "apply_settings", "get_settings"]
