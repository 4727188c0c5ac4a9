from .app_config import AppConfig
from .log_config import LogConfig
from .view_config import ViewConfig

__all__ = ["AppConfig", "LogConfig", "ViewConfig"]
