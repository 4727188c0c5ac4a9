#!filepath: deoptlens/model/function_entry.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from deoptlens.enums.function_state import FunctionState, is_optimized_function_state
from deoptlens.enums.symbol_kind import SymbolKind
from deoptlens.model.entry_base import IngestedEntry
from deoptlens.model.file_position import FilePosition, Location
from deoptlens.model.severity import CONFLICT, CurrentState
from deoptlens.model.timeline import FunctionTimelineEvent


@dataclass(frozen=True)
class FunctionUpdate:
    """
    One (re)compilation of a function.
    """
    timestamp: int
    state: FunctionState
    code_kind: int
    size: int
    start_address: int
    func_start_address: int
    event_type: str = ""


@dataclass(eq=False)
class FunctionEntry(IngestedEntry):
    """
    One logical function over its lifetime.

    ``updates`` holds the compilations only; ``timeline`` holds every event
    (compilations, code moves, deopts, IC transitions) in timestamp order.
    """
    function_name: str
    file_position: FilePosition
    symbol_kind: SymbolKind = SymbolKind.Function
    reference_location: Optional[Location] = None
    updates: Sequence[FunctionUpdate] = field(default_factory=list)
    timeline: Sequence[FunctionTimelineEvent] = field(default_factory=list)

    def append_update(self, update: FunctionUpdate) -> None:
        self._ensure_mutable()
        self.check_order(self.updates, update, "function update")
        self.updates.append(update)

    def append_event(self, event: FunctionTimelineEvent) -> None:
        self._ensure_mutable()
        self.check_order(self.timeline, event, "timeline event")
        self.timeline.append(event)

    def _freeze_sequences(self) -> None:
        object.__setattr__(self, "updates", tuple(self.updates))
        object.__setattr__(self, "timeline", tuple(self.timeline))

    # ---------------- derived ----------------
    def current_state(self) -> CurrentState:
        return self._memo("_cache_current_state", self._derive_current_state)

    def _derive_current_state(self) -> CurrentState:
        optimized = sum(1 for u in self.updates if is_optimized_function_state(u.state))
        if optimized > 1:
            return CONFLICT
        if not self.updates:
            return FunctionState.Compiled
        return self.updates[-1].state

    def label(self) -> str:
        return f"{self.function_name} ({len(self.updates)})"
