# deoptlens/model/deopt_entry.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from deoptlens.enums.deoptimize_kind import DeoptimizeKind
from deoptlens.model.entry_base import IngestedEntry
from deoptlens.model.file_position import FilePosition, Location


@dataclass(frozen=True)
class DeoptUpdate:
    timestamp: int
    bailout_type: DeoptimizeKind
    deopt_reason: str
    inlined: bool = False
    function_position: Optional[FilePosition] = None


@dataclass(eq=False)
class DeoptEntry(IngestedEntry):
    """
    Deoptimization site: every bailout observed at one source position.
    """
    file_position: FilePosition
    function_name: str = ""
    reference_location: Optional[Location] = None
    updates: Sequence[DeoptUpdate] = field(default_factory=list)

    def append_update(self, update: DeoptUpdate) -> None:
        self._ensure_mutable()
        self.check_order(self.updates, update, "deopt")
        self.updates.append(update)

    def _freeze_sequences(self) -> None:
        object.__setattr__(self, "updates", tuple(self.updates))

    def hit_count(self) -> int:
        return len(self.updates)
