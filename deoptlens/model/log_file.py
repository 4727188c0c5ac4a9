#!filepath: deoptlens/model/log_file.py
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, TypeVar, Union, overload

from deoptlens.enums.engine_version import EngineVersion
from deoptlens.model.deopt_entry import DeoptEntry
from deoptlens.model.file_position import FilePosition
from deoptlens.model.function_entry import FunctionEntry
from deoptlens.model.function_reference import FunctionReference
from deoptlens.model.ic_entry import IcEntry
from deoptlens.utils.errors import DuplicateEntryError, LogFrozenError
from deoptlens.utils.logger import logs

E = TypeVar("E", FunctionEntry, IcEntry, DeoptEntry)


class LogFile:
    """
    Entry index for one loaded trace (sole owner of every entry).

    Design rules (frozen):
      1. every entry is keyed by its file position, unique per entry kind
      2. cross-entity links are positions resolved here, never object pointers
      3. built once, ``freeze()``d, then only read; a new trace means a new LogFile
    """

    def __init__(
            self,
            *,
            engine_version: Optional[EngineVersion] = None,
            source: Optional[str] = None,
    ) -> None:
        self.engine_version = engine_version
        self.source = source
        self._functions: Dict[FilePosition, FunctionEntry] = {}
        self._ics: Dict[FilePosition, IcEntry] = {}
        self._deopts: Dict[FilePosition, DeoptEntry] = {}
        self._references: Dict[FilePosition, FunctionReference] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Ingestion (producer only)
    # ------------------------------------------------------------------
    def add_function_entry(self, entry: FunctionEntry) -> FunctionEntry:
        return self._add(self._functions, entry, "function")

    def add_ic_entry(self, entry: IcEntry) -> IcEntry:
        return self._add(self._ics, entry, "IC")

    def add_deopt_entry(self, entry: DeoptEntry) -> DeoptEntry:
        return self._add(self._deopts, entry, "deopt")

    def _add(self, table: Dict[FilePosition, E], entry: E, kind: str) -> E:
        if self._frozen:
            raise LogFrozenError(f"log is frozen; cannot add {kind} entry at {entry.file_position}")
        if entry.file_position in table:
            raise DuplicateEntryError(f"duplicate {kind} entry at {entry.file_position}")
        table[entry.file_position] = entry
        return entry

    def freeze(self) -> None:
        """
        Ingestion-complete signal: freezes every entry, then the index itself.
        """
        if self._frozen:
            return
        for table in (self._functions, self._ics, self._deopts):
            for entry in table.values():
                entry.freeze()
        self._frozen = True
        logs.info(
            f"[log] frozen source={self.source} functions={len(self._functions)} "
            f"ics={len(self._ics)} deopts={len(self._deopts)}"
        )

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def function_entries(self) -> Mapping[FilePosition, FunctionEntry]:
        return MappingProxyType(self._functions)

    @property
    def ic_entries(self) -> Mapping[FilePosition, IcEntry]:
        return MappingProxyType(self._ics)

    @property
    def deopt_entries(self) -> Mapping[FilePosition, DeoptEntry]:
        return MappingProxyType(self._deopts)

    def __iter__(self) -> Iterator[Union[FunctionEntry, IcEntry, DeoptEntry]]:
        yield from self._functions.values()
        yield from self._ics.values()
        yield from self._deopts.values()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def find_function_entry_by_file_position(self, position: FilePosition) -> Optional[FunctionEntry]:
        return self._functions.get(position)

    def find_ic_entry_by_file_position(self, position: FilePosition) -> Optional[IcEntry]:
        return self._ics.get(position)

    def find_deopt_entry_by_file_position(self, position: FilePosition) -> Optional[DeoptEntry]:
        return self._deopts.get(position)

    def resolve_function(self, position: Optional[FilePosition]) -> Optional[FunctionEntry]:
        if position is None:
            return None
        return self._functions.get(position)

    def function_entries_in_file(self, file: str) -> List[FunctionEntry]:
        return _in_file(self._functions, file)

    def ic_entries_in_file(self, file: str) -> List[IcEntry]:
        return _in_file(self._ics, file)

    def files(self) -> List[str]:
        return sorted({pos.file for table in (self._functions, self._ics, self._deopts) for pos in table})

    # ------------------------------------------------------------------
    # Cross references
    # ------------------------------------------------------------------
    @overload
    def function_reference_for(self, entry: FunctionEntry) -> FunctionReference: ...

    @overload
    def function_reference_for(self, entry: IcEntry) -> Optional[FunctionReference]: ...

    def function_reference_for(self, entry):
        """
        - FunctionEntry: reference to itself, always defined
        - IcEntry: function executing during the worst transition, or None
        Memoized here per function position once the log is frozen.
        """
        if isinstance(entry, IcEntry):
            update = entry.worst_update()
            if update is None:
                return None
            target = self.resolve_function(update.function_position)
            if target is None:
                return None
            return self.function_reference_for(target)

        if not self._frozen:
            return FunctionReference.from_function_entry(entry)
        reference = self._references.get(entry.file_position)
        if reference is None:
            reference = FunctionReference.from_function_entry(entry)
            self._references[entry.file_position] = reference
        return reference

    def __repr__(self) -> str:
        return (
            f"LogFile(source={self.source!r}, functions={len(self._functions)}, "
            f"ics={len(self._ics)}, deopts={len(self._deopts)}, frozen={self._frozen})"
        )


def _in_file(table: Mapping[FilePosition, E], file: str) -> List[E]:
    return [table[pos] for pos in sorted(pos for pos in table if pos.file == file)]
