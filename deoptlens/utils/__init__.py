from .logger import Logging, logs, init_logging
from .errors import (
    DeoptLensError,
    UnknownTimelineEventError,
    LogFrozenError,
    LogNotFrozenError,
    DuplicateEntryError,
    TimelineOrderError,
)

__all__ = [
    "Logging",
    "logs",
    "init_logging",
    "DeoptLensError",
    "UnknownTimelineEventError",
    "LogFrozenError",
    "LogNotFrozenError",
    "DuplicateEntryError",
    "TimelineOrderError",
]
