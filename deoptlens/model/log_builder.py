#!filepath: deoptlens/model/log_builder.py
from __future__ import annotations

from typing import Optional

from deoptlens.enums.deoptimize_kind import DeoptimizeKind
from deoptlens.enums.engine_version import EngineVersion
from deoptlens.enums.function_state import FunctionState
from deoptlens.enums.ic_state import IcState
from deoptlens.enums.ic_type import IcType
from deoptlens.enums.symbol_kind import SymbolKind
from deoptlens.model.deopt_entry import DeoptEntry, DeoptUpdate
from deoptlens.model.file_position import FilePosition, Location
from deoptlens.model.function_entry import FunctionEntry, FunctionUpdate
from deoptlens.model.ic_entry import IcEntry, IcUpdate
from deoptlens.model.log_file import LogFile
from deoptlens.model.timeline import (
    CreatedEvent,
    DeletedEvent,
    DeoptEvent,
    IcEvent,
    MovedEvent,
    SfiMovedEvent,
    UpdatedEvent,
)
from deoptlens.utils.errors import LogFrozenError
from deoptlens.utils.logger import logs


class LogBuilder:
    """
    Producer-side ingestion API.

    Records must arrive in timestamp order per entry; ``build()`` is the single
    ingestion-complete signal and hands out the frozen LogFile. The builder is
    dead afterwards.

    Usage:
        builder = LogBuilder(source="v8.log")
        builder.record_code_creation(pos, timestamp=10, state=FunctionState.Interpreted, ...)
        builder.record_ic(site, timestamp=12, ic_type=IcType.LoadIC, ...)
        log = builder.build()
    """

    def __init__(
            self,
            *,
            engine_version: Optional[EngineVersion] = None,
            source: Optional[str] = None,
    ) -> None:
        self._log: Optional[LogFile] = LogFile(engine_version=engine_version, source=source)

    @property
    def log(self) -> LogFile:
        if self._log is None:
            raise LogFrozenError("builder already built its log")
        return self._log

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------
    def declare_function(
            self,
            position: FilePosition,
            name: str,
            *,
            symbol_kind: SymbolKind = SymbolKind.Function,
            reference_location: Optional[Location] = None,
    ) -> FunctionEntry:
        """
        Get-or-create the function entry at ``position``.
        """
        log = self.log
        entry = log.find_function_entry_by_file_position(position)
        if entry is None:
            entry = log.add_function_entry(
                FunctionEntry(
                    function_name=name,
                    file_position=position,
                    symbol_kind=symbol_kind,
                    reference_location=reference_location,
                )
            )
            logs.debug(f"[ingest] function {name} at {position}")
        return entry

    def _ic_entry(self, position: FilePosition, function_name: str,
                  reference_location: Optional[Location]) -> IcEntry:
        log = self.log
        entry = log.find_ic_entry_by_file_position(position)
        if entry is None:
            entry = log.add_ic_entry(
                IcEntry(
                    file_position=position,
                    function_name=function_name,
                    reference_location=reference_location,
                )
            )
            logs.debug(f"[ingest] IC site at {position}")
        return entry

    def _deopt_entry(self, position: FilePosition, function_name: str,
                     reference_location: Optional[Location]) -> DeoptEntry:
        log = self.log
        entry = log.find_deopt_entry_by_file_position(position)
        if entry is None:
            entry = log.add_deopt_entry(
                DeoptEntry(
                    file_position=position,
                    function_name=function_name,
                    reference_location=reference_location,
                )
            )
            logs.debug(f"[ingest] deopt site at {position}")
        return entry

    def _function(self, position: FilePosition) -> FunctionEntry:
        entry = self.log.find_function_entry_by_file_position(position)
        if entry is None:
            raise KeyError(f"function at {position} was never declared")
        return entry

    # ------------------------------------------------------------------
    # Function code events
    # ------------------------------------------------------------------
    def record_code_creation(
            self,
            position: FilePosition,
            *,
            timestamp: int,
            state: FunctionState,
            code_kind: int = 0,
            size: int = 0,
            start_address: int = 0,
            func_start_address: int = 0,
            event_type: str = "",
            name: Optional[str] = None,
    ) -> FunctionUpdate:
        """
        (Re)compilation: a FunctionUpdate plus a ``created`` event the first
        time and ``updated`` events afterwards. ``name`` declares the function
        if it is not known yet.
        """
        entry = (
            self.declare_function(position, name)
            if name is not None
            else self._function(position)
        )
        update = FunctionUpdate(
            timestamp=timestamp,
            state=state,
            code_kind=code_kind,
            size=size,
            start_address=start_address,
            func_start_address=func_start_address,
            event_type=event_type,
        )
        event_cls = UpdatedEvent if entry.updates else CreatedEvent
        event = event_cls(
            timestamp=timestamp,
            event_type=event_type,
            code_kind=code_kind,
            size=size,
            state=state,
            start_address=start_address,
            func_start_address=func_start_address,
        )
        # check the timeline first so a rejected record leaves both sequences untouched
        entry.check_order(entry.timeline, event, "timeline event")
        entry.append_update(update)
        entry.append_event(event)
        return update

    def record_code_move(self, position: FilePosition, *, timestamp: int,
                         from_address: int, to_address: int) -> None:
        self._function(position).append_event(
            MovedEvent(timestamp=timestamp, from_address=from_address, to_address=to_address)
        )

    def record_code_delete(self, position: FilePosition, *, timestamp: int,
                           start_address: int) -> None:
        self._function(position).append_event(
            DeletedEvent(timestamp=timestamp, start_address=start_address)
        )

    def record_sfi_move(self, position: FilePosition, *, timestamp: int,
                        from_address: int, to_address: int) -> None:
        self._function(position).append_event(
            SfiMovedEvent(timestamp=timestamp, from_address=from_address, to_address=to_address)
        )

    # ------------------------------------------------------------------
    # Deopts / ICs
    # ------------------------------------------------------------------
    def record_deopt(
            self,
            position: FilePosition,
            *,
            timestamp: int,
            bailout_type: DeoptimizeKind,
            deopt_reason: str,
            inlined: bool = False,
            function_position: Optional[FilePosition] = None,
            function_name: str = "",
            reference_location: Optional[Location] = None,
    ) -> DeoptUpdate:
        function = self.log.resolve_function(function_position)
        update = DeoptUpdate(
            timestamp=timestamp,
            bailout_type=bailout_type,
            deopt_reason=deopt_reason,
            inlined=inlined,
            function_position=function.file_position if function else None,
        )
        if function is not None:
            function.check_order(function.timeline, update, "timeline event")
        entry = self._deopt_entry(position, function_name or (function.function_name if function else ""),
                                  reference_location)
        entry.append_update(update)
        if function is not None:
            function.append_event(DeoptEvent(deopt_position=position, update=update))
        return update

    def record_ic(
            self,
            position: FilePosition,
            *,
            timestamp: int,
            ic_type: IcType,
            key: str,
            old_state: IcState,
            new_state: IcState,
            function_position: Optional[FilePosition] = None,
            function_name: str = "",
            reference_location: Optional[Location] = None,
            map_address: Optional[int] = None,
            modifier: str = "",
            slow_reason: str = "",
    ) -> IcUpdate:
        """
        IC transition. ``function_position`` only sticks when it names a
        declared function, so every stored handle resolves in this log.
        """
        function = self.log.resolve_function(function_position)
        if function_position is not None and function is None:
            logs.debug(f"[ingest] IC at {position}: unknown function {function_position}, dropping link")
        update = IcUpdate(
            timestamp=timestamp,
            type=ic_type,
            key=key,
            old_state=old_state,
            new_state=new_state,
            function_position=function.file_position if function else None,
            map_address=map_address,
            modifier=modifier,
            slow_reason=slow_reason,
        )
        if function is not None:
            function.check_order(function.timeline, update, "timeline event")
        entry = self._ic_entry(position, function_name or (function.function_name if function else ""),
                               reference_location)
        entry.append_update(update)
        if function is not None:
            function.append_event(IcEvent(ic_position=position, update=update))
        return update

    # ------------------------------------------------------------------
    @logs.catch(msg="failed to freeze log", log_time=True)
    def build(self) -> LogFile:
        log = self.log
        log.freeze()
        self._log = None
        return log
