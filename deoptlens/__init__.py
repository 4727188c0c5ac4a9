#!filepath: deoptlens/__init__.py

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig
from .model import (
    FilePosition,
    Location,
    FunctionEntry,
    IcEntry,
    DeoptEntry,
    FunctionReference,
    LogFile,
    LogBuilder,
    CONFLICT,
)
from .services import opened_logs

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "FilePosition", "Location",
    "FunctionEntry", "IcEntry", "DeoptEntry",
    "FunctionReference",
    "LogFile", "LogBuilder",
    "CONFLICT",
    "opened_logs",
]
