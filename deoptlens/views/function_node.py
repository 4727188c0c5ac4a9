#!filepath: deoptlens/views/function_node.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from deoptlens.config.view_config import ViewConfig
from deoptlens.enums.function_state import FunctionState
from deoptlens.enums.symbol_kind import SymbolKind
from deoptlens.model.entry_base import UNSET
from deoptlens.model.function_entry import FunctionEntry
from deoptlens.model.function_reference import FunctionReference
from deoptlens.model.log_file import LogFile
from deoptlens.model.severity import CONFLICT, CurrentState
from deoptlens.utils.errors import LogNotFrozenError
from deoptlens.views.formatting import format_location

SYMBOL_ICONS: Mapping[SymbolKind, str] = MappingProxyType({
    SymbolKind.Function: "symbol-function",
    SymbolKind.Class: "symbol-class",
    SymbolKind.Namespace: "symbol-namespace",
    SymbolKind.Enum: "symbol-enum",
    SymbolKind.Method: "symbol-method",
    SymbolKind.Property: "symbol-property",
    SymbolKind.Field: "symbol-field",
    SymbolKind.Constructor: "symbol-constructor",
})

STATE_COLORS: Mapping[CurrentState, str] = MappingProxyType({
    FunctionState.Compiled: "gray",
    FunctionState.Interpreted: "yellow",
    FunctionState.CompiledSparkplug: "blue",
    FunctionState.NativeContextIndependent: "blue",
    FunctionState.Optimized: "green",
    FunctionState.OptimizedTurboprop: "green",
    FunctionState.OptimizedMaglev: "green",
    CONFLICT: "red",
})


class FunctionNode:
    """
    Tree row for one function entry. Reads derived state only.
    """

    def __init__(self, log: LogFile, entry: FunctionEntry, config: Optional[ViewConfig] = None):
        if not log.is_frozen:
            raise LogNotFrozenError("nodes read derived state; freeze the log first")
        self.log = log
        self.func = entry
        self.config = config or ViewConfig()
        self._state = UNSET
        self._function_reference = UNSET

    @property
    def file(self) -> str:
        return self.func.file_position.file

    @property
    def state(self) -> CurrentState:
        if self._state is UNSET:
            self._state = self.func.current_state()
        return self._state

    @property
    def function_reference(self) -> FunctionReference:
        if self._function_reference is UNSET:
            self._function_reference = self.log.function_reference_for(self.func)
        return self._function_reference

    @property
    def label(self) -> str:
        # name plus number of compilations
        return self.func.label()

    @property
    def description(self) -> str:
        return format_location(self.func.reference_location, self.config)

    @property
    def icon(self) -> Optional[str]:
        return SYMBOL_ICONS.get(self.func.symbol_kind)

    @property
    def color(self) -> str:
        return STATE_COLORS[self.state]

    @property
    def state_text(self) -> str:
        return "mixed" if self.state is CONFLICT else self.state.name

    def __repr__(self) -> str:
        return f"FunctionNode({self.label!r}, state={self.state_text})"
