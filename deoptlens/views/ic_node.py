#!filepath: deoptlens/views/ic_node.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from deoptlens.config.view_config import ViewConfig
from deoptlens.enums.ic_state import IcState
from deoptlens.enums.ic_type import IcType
from deoptlens.model.entry_base import UNSET
from deoptlens.model.function_reference import FunctionReference
from deoptlens.model.ic_entry import IcEntry, format_ic_head
from deoptlens.model.log_file import LogFile
from deoptlens.model.severity import severity_of
from deoptlens.utils.errors import LogNotFrozenError
from deoptlens.views.formatting import format_location

# (icon, color); loads and stores of the same family share the icon
IC_TYPE_ICONS: Mapping[Optional[IcType], Tuple[str, Optional[str]]] = MappingProxyType({
    IcType.LoadGlobalIC: ("symbol-variable", "field"),
    IcType.StoreGlobalIC: ("symbol-variable", "method"),
    IcType.LoadIC: ("symbol-field", "field"),
    IcType.StoreIC: ("symbol-field", "method"),
    IcType.KeyedLoadIC: ("symbol-string", "field"),
    IcType.KeyedStoreIC: ("symbol-string", "method"),
    IcType.StoreInArrayLiteralIC: ("symbol-array", None),
    None: ("symbol-misc", None),
})

# indexed by severity_of(state)
SEVERITY_COLORS: Tuple[str, ...] = (
    "gray",     # no feedback
    "gray",     # uninitialized
    "green",    # premonomorphic
    "green",    # monomorphic
    "green",    # recompute handler
    "yellow",   # polymorphic
    "red",      # megamorphic
    "red",      # megaDOM
    "red",      # generic
)


class IcNode:
    """
    Tree row for one IC call site, labelled by its worst transition.
    """

    def __init__(self, log: LogFile, entry: IcEntry, config: Optional[ViewConfig] = None):
        if not log.is_frozen:
            raise LogNotFrozenError("nodes read derived state; freeze the log first")
        self.log = log
        self.ic = entry
        self.config = config or ViewConfig()
        self._state = UNSET
        self._function_reference = UNSET

    @property
    def file(self) -> str:
        return self.ic.file_position.file

    @property
    def state(self) -> Optional[IcState]:
        if self._state is UNSET:
            self._state = self.ic.worst_state()
        return self._state

    @property
    def hit_count(self) -> int:
        return self.ic.hit_count()

    @property
    def function_reference(self) -> Optional[FunctionReference]:
        if self._function_reference is UNSET:
            self._function_reference = self.log.function_reference_for(self.ic)
        return self._function_reference

    @property
    def label(self) -> str:
        return self.ic.label()

    @property
    def description(self) -> str:
        return format_location(self.ic.reference_location, self.config, include_position=True)

    @property
    def icon(self) -> Tuple[str, Optional[str]]:
        update = self.ic.worst_update()
        return IC_TYPE_ICONS[update.type if update is not None else None]

    @property
    def color(self) -> str:
        if self.state is None:
            return "gray"
        return SEVERITY_COLORS[severity_of(self.state)]

    @property
    def tooltip(self) -> str:
        lines = [format_ic_head(self.ic.worst_update()), "", f"hit count: {self.hit_count}"]
        reference = self.function_reference
        if reference is not None:
            lines.append(f"function: {reference.function_name}")
            lines.append(f"file: {format_location(reference.location, self.config, include_position=True)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"IcNode({self.label!r})"
