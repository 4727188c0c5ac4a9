#!filepath: deoptlens/model/derived.py
"""
Derived getters handed to presentation code.

Plain functions over frozen entries; each one delegates to the entry's
memoized cell, so calling them repeatedly is free and always returns the
same value.
"""
from __future__ import annotations

from typing import Optional, Union, overload

from deoptlens.enums.ic_state import IcState
from deoptlens.model.deopt_entry import DeoptEntry
from deoptlens.model.function_entry import FunctionEntry
from deoptlens.model.function_reference import FunctionReference
from deoptlens.model.ic_entry import IcEntry, IcUpdate
from deoptlens.model.log_file import LogFile
from deoptlens.model.severity import CurrentState


def current_state(entry: FunctionEntry) -> CurrentState:
    return entry.current_state()


def label(entry: Union[FunctionEntry, IcEntry]) -> str:
    return entry.label()


def worst_update(entry: IcEntry) -> Optional[IcUpdate]:
    return entry.worst_update()


def worst_state(entry: IcEntry) -> Optional[IcState]:
    return entry.worst_state()


def hit_count(entry: Union[IcEntry, DeoptEntry]) -> int:
    return entry.hit_count()


@overload
def function_reference_for(entry: FunctionEntry, log: Optional[LogFile] = None) -> FunctionReference: ...


@overload
def function_reference_for(entry: IcEntry, log: LogFile) -> Optional[FunctionReference]: ...


def function_reference_for(entry, log=None):
    """
    FunctionEntry → its own reference (``log`` only adds memoization).
    IcEntry → reference to the function executing during the worst
    transition; needs the owning ``log`` to resolve the handle.
    """
    if log is not None:
        return log.function_reference_for(entry)
    if isinstance(entry, IcEntry):
        raise TypeError("resolving an IC entry's function needs the owning LogFile")
    return FunctionReference.from_function_entry(entry)
