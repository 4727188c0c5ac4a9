#!filepath: deoptlens/model/ic_entry.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from deoptlens.enums.ic_state import IcState, format_ic_state
from deoptlens.enums.ic_type import IcType
from deoptlens.model.entry_base import IngestedEntry
from deoptlens.model.file_position import FilePosition, Location
from deoptlens.model.severity import worst_by_severity


@dataclass(frozen=True)
class IcUpdate:
    """
    One inline-cache transition at a call site.

    ``function_position`` is a handle on the function that was executing when
    the transition happened. It is resolved through the owning LogFile and may
    be None when the producer could not attribute the transition.
    """
    timestamp: int
    type: IcType
    key: str
    old_state: IcState
    new_state: IcState
    function_position: Optional[FilePosition] = None
    map_address: Optional[int] = None
    modifier: str = ""
    slow_reason: str = ""


@dataclass(eq=False)
class IcEntry(IngestedEntry):
    file_position: FilePosition
    function_name: str = ""
    reference_location: Optional[Location] = None
    updates: Sequence[IcUpdate] = field(default_factory=list)

    def append_update(self, update: IcUpdate) -> None:
        self._ensure_mutable()
        self.check_order(self.updates, update, "IC update")
        self.updates.append(update)

    def _freeze_sequences(self) -> None:
        object.__setattr__(self, "updates", tuple(self.updates))

    # ---------------- derived ----------------
    def worst_update(self) -> Optional[IcUpdate]:
        """
        Update with the highest severity; the last one wins on ties so that the
        most recent transition into the worst tier is the one surfaced.
        """
        return self._memo("_cache_worst_update", self._find_worst_update)

    def _find_worst_update(self) -> Optional[IcUpdate]:
        return worst_by_severity(self.updates, lambda update: update.new_state)

    def worst_state(self) -> Optional[IcState]:
        update = self.worst_update()
        return update.new_state if update is not None else None

    def hit_count(self) -> int:
        return len(self.updates)

    def label(self) -> str:
        return f"{format_ic_head(self.worst_update())} ({self.hit_count()})"


def format_ic_head(update: Optional[IcUpdate]) -> str:
    """``"<type>: <state>"`` of one transition, shared by labels and tooltips."""
    if update is None:
        return "Unknown"
    return f"{update.type.value}: {format_ic_state(update.new_state)}"
