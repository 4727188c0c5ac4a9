#!filepath: deoptlens/views/function_history.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from deoptlens.config.view_config import ViewConfig
from deoptlens.enums.code_kind import format_code_kind
from deoptlens.enums.deoptimize_kind import format_deoptimize_kind
from deoptlens.enums.function_state import format_function_state
from deoptlens.enums.ic_state import format_ic_state
from deoptlens.enums.ic_type import format_ic_type
from deoptlens.model.file_position import Location
from deoptlens.model.function_entry import FunctionEntry
from deoptlens.model.log_file import LogFile
from deoptlens.model.timeline import (
    CreatedEvent,
    DeletedEvent,
    DeoptEvent,
    FunctionTimelineEvent,
    IcEvent,
    MovedEvent,
    SfiMovedEvent,
    UpdatedEvent,
    unreachable,
)
from deoptlens.utils.logger import logs
from deoptlens.views.formatting import format_address, format_location, format_timestamp

HISTORY_COLUMNS = ["timestamp", "event", "description", "link"]


@dataclass(frozen=True)
class HistoryRow:
    """
    One rendered timeline event.

    ``link`` is the source location the event title should navigate to
    (the deopt / IC site), None for code events.
    """
    timestamp: str
    event: str
    description: List[str]
    link: Optional[Location] = None


def _event_title(event: FunctionTimelineEvent) -> str:
    match event:
        case CreatedEvent():
            return "Created"
        case UpdatedEvent():
            return "Updated"
        case MovedEvent():
            return "Moved"
        case DeletedEvent():
            return "Deleted"
        case SfiMovedEvent():
            return "SFI Moved"
        case DeoptEvent():
            return f"{format_deoptimize_kind(event.update.bailout_type)} Deopt"
        case IcEvent():
            return format_ic_type(event.update.type)
        case _:
            unreachable(event)


def _event_description(event: FunctionTimelineEvent, log: LogFile, config: ViewConfig) -> List[str]:
    match event:
        case CreatedEvent() | UpdatedEvent():
            return [
                f"Type: {event.event_type}",
                f"Kind: {format_code_kind(event.code_kind, log.engine_version)}",
                f"Size: {event.size}",
                f"State: {format_function_state(event.state)}",
                f"Address: {format_address(event.start_address, config)}",
                f"Shared Function: {format_address(event.func_start_address, config)}",
            ]
        case MovedEvent() | SfiMovedEvent():
            return [
                f"From: {format_address(event.from_address, config)}",
                f"To: {format_address(event.to_address, config)}",
            ]
        case DeletedEvent():
            return [f"Address: {format_address(event.start_address, config)}"]
        case DeoptEvent():
            return [f"Reason: {event.update.deopt_reason}"]
        case IcEvent():
            return [
                f"Key: {event.update.key}",
                f"Old: {format_ic_state(event.update.old_state)}",
                f"New: {format_ic_state(event.update.new_state)}",
            ]
        case _:
            unreachable(event)


def _event_link(event: FunctionTimelineEvent, log: LogFile) -> Optional[Location]:
    match event:
        case DeoptEvent():
            site = log.find_deopt_entry_by_file_position(event.deopt_position)
            return site.reference_location if site is not None else None
        case IcEvent():
            site = log.find_ic_entry_by_file_position(event.ic_position)
            return site.reference_location if site is not None else None
        case CreatedEvent() | UpdatedEvent() | MovedEvent() | DeletedEvent() | SfiMovedEvent():
            return None
        case _:
            unreachable(event)


def function_history_rows(
        entry: FunctionEntry,
        log: LogFile,
        config: Optional[ViewConfig] = None,
) -> List[HistoryRow]:
    """
    Chronological rows for one function. Raises UnknownTimelineEventError on
    an event outside the known union; nothing partial is returned.
    """
    config = config or ViewConfig()
    rows = []
    for event in entry.timeline:
        title = _event_title(event)
        rows.append(
            HistoryRow(
                timestamp=format_timestamp(event.timestamp, config),
                event=title,
                description=_event_description(event, log, config),
                link=_event_link(event, log),
            )
        )
    return rows


def function_history_frame(
        entry: FunctionEntry,
        log: LogFile,
        config: Optional[ViewConfig] = None,
) -> pd.DataFrame:
    rows = function_history_rows(entry, log, config)
    return pd.DataFrame(
        [
            {
                "timestamp": row.timestamp,
                "event": row.event,
                "description": "; ".join(row.description),
                "link": str(row.link) if row.link is not None else None,
            }
            for row in rows
        ],
        columns=HISTORY_COLUMNS,
    )


@logs.catch(msg="failed to render function history")
def render_function_history(
        entry: FunctionEntry,
        log: LogFile,
        config: Optional[ViewConfig] = None,
) -> str:
    """
    Plain-text history page: title, location, then the event table.
    """
    config = config or ViewConfig()
    frame = function_history_frame(entry, log, config)
    location = format_location(entry.reference_location, config, include_position=True)
    header = [entry.function_name, f"Location: {location}", ""]
    if frame.empty:
        return "\n".join(header + ["(no events)"])
    table = frame.drop(columns=["link"]).to_string(index=False)
    return "\n".join(header + [table])
