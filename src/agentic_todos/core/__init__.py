"""Application-wide constants and filesystem locations."""

from .config import APP_AUTHOR, APP_NAME, DATA_DIR

__all__ = ["APP_AUTHOR", "APP_NAME", "DATA_DIR"]
