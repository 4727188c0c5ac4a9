#!filepath: deoptlens/views/ranking.py
"""
Worst-first tables over a frozen log.

Sort keys come from the severity tables; ties keep index order (stable sort)
so the same log always yields the same table.
"""
from __future__ import annotations

from typing import Optional

import pandas as pd

from deoptlens.config.view_config import ViewConfig
from deoptlens.enums.ic_state import format_ic_state
from deoptlens.model.log_file import LogFile
from deoptlens.model.severity import CONFLICT, function_state_rank, severity_of
from deoptlens.views.formatting import format_location

FUNCTION_COLUMNS = ["function", "position", "location", "state", "rank", "updates", "events"]
IC_COLUMNS = ["ic_type", "position", "location", "state", "severity", "hit_count", "function"]
# may hold None; object dtype keeps it None
IC_OPTIONAL_COLUMNS = ["ic_type", "state", "function"]


def rank_functions(log: LogFile, config: Optional[ViewConfig] = None) -> pd.DataFrame:
    config = config or ViewConfig()
    records = []
    for entry in log.function_entries.values():
        state = entry.current_state()
        records.append({
            "function": entry.function_name,
            "position": str(entry.file_position),
            "location": format_location(entry.reference_location, config, include_position=True),
            "state": "mixed" if state is CONFLICT else state.name,
            "rank": function_state_rank(state),
            "updates": len(entry.updates),
            "events": len(entry.timeline),
        })
    frame = pd.DataFrame.from_records(records, columns=FUNCTION_COLUMNS)
    return frame.sort_values(
        ["rank", "updates"], ascending=[False, False], kind="mergesort"
    ).reset_index(drop=True)


def rank_ics(log: LogFile, config: Optional[ViewConfig] = None) -> pd.DataFrame:
    config = config or ViewConfig()
    records = []
    for entry in log.ic_entries.values():
        update = entry.worst_update()
        reference = log.function_reference_for(entry)
        records.append({
            "ic_type": update.type.value if update else None,
            "position": str(entry.file_position),
            "location": format_location(entry.reference_location, config, include_position=True),
            "state": format_ic_state(update.new_state) if update else None,
            "severity": severity_of(update.new_state) if update else -1,
            "hit_count": entry.hit_count(),
            "function": reference.function_name if reference else None,
        })
    frame = pd.DataFrame.from_records(records, columns=IC_COLUMNS)
    for column in IC_OPTIONAL_COLUMNS:
        frame[column] = pd.Series([r[column] for r in records], index=frame.index, dtype=object)
    return frame.sort_values(
        ["severity", "hit_count"], ascending=[False, False], kind="mergesort"
    ).reset_index(drop=True)
