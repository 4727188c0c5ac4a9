from .file_position import FilePosition, Location
from .severity import (
    Conflict,
    CONFLICT,
    CurrentState,
    severity_of,
    worst_by_severity,
    function_state_rank,
    is_optimized_function_state,
)
from .ic_entry import IcEntry, IcUpdate
from .deopt_entry import DeoptEntry, DeoptUpdate
from .timeline import (
    FunctionTimelineEvent,
    CreatedEvent,
    UpdatedEvent,
    MovedEvent,
    DeletedEvent,
    SfiMovedEvent,
    DeoptEvent,
    IcEvent,
    event_tag,
    unreachable,
)
from .function_entry import FunctionEntry, FunctionUpdate
from .function_reference import FunctionReference
from .log_file import LogFile
from .log_builder import LogBuilder
from .derived import (
    current_state,
    label,
    worst_update,
    worst_state,
    hit_count,
    function_reference_for,
)

__all__ = [
    "FilePosition", "Location",
    "Conflict", "CONFLICT", "CurrentState",
    "severity_of", "worst_by_severity", "function_state_rank", "is_optimized_function_state",
    "IcEntry", "IcUpdate",
    "DeoptEntry", "DeoptUpdate",
    "FunctionTimelineEvent", "CreatedEvent", "UpdatedEvent", "MovedEvent",
    "DeletedEvent", "SfiMovedEvent", "DeoptEvent", "IcEvent",
    "event_tag", "unreachable",
    "FunctionEntry", "FunctionUpdate",
    "FunctionReference",
    "LogFile",
    "LogBuilder",
    "current_state", "label", "worst_update", "worst_state", "hit_count",
    "function_reference_for",
]
