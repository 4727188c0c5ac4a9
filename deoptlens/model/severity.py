#!filepath: deoptlens/model/severity.py
"""
Severity ranking (frozen tables)

- IC states: total order, higher = more degraded cache behaviour
- function states: optimized / not optimized classification, plus a display
  rank used when sorting functions worst-first

Tables only; no rendering concerns.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, TypeVar, Union

from deoptlens.enums.function_state import FunctionState, is_optimized_function_state
from deoptlens.enums.ic_state import IcState


class Conflict(Enum):
    """
    Current state of a function that took more than one optimized path; no
    single FunctionState summarizes it.
    """
    CONFLICT = "conflict"

    def __str__(self) -> str:
        return "mixed"


CONFLICT = Conflict.CONFLICT

CurrentState = Union[FunctionState, Conflict]

T = TypeVar("T")


IC_STATE_SEVERITY: Mapping[IcState, int] = MappingProxyType({
    IcState.NoFeedback: 0,
    IcState.Uninitialized: 1,
    IcState.Premonomorphic: 2,
    IcState.Monomorphic: 3,
    IcState.RecomputeHandler: 4,
    IcState.Polymorphic: 5,
    IcState.Megamorphic: 6,
    IcState.MegaDOM: 7,
    IcState.Generic: 8,
})

# worst-first sorting of functions: optimized code is healthy, code stuck in
# the interpreter is not, a conflicting history is the worst
FUNCTION_STATE_RANK: Mapping[CurrentState, int] = MappingProxyType({
    FunctionState.Optimized: 0,
    FunctionState.OptimizedTurboprop: 0,
    FunctionState.OptimizedMaglev: 0,
    FunctionState.CompiledSparkplug: 1,
    FunctionState.NativeContextIndependent: 1,
    FunctionState.Compiled: 2,
    FunctionState.Interpreted: 3,
    CONFLICT: 4,
})


def severity_of(state: IcState) -> int:
    return IC_STATE_SEVERITY[state]


def worst_by_severity(items: Iterable[T], state_of: Callable[[T], IcState]) -> Optional[T]:
    """
    Item whose IC state has the highest severity; on ties the later one wins.
    """
    worst: Optional[T] = None
    for item in items:
        if worst is None or severity_of(state_of(item)) >= severity_of(state_of(worst)):
            worst = item
    return worst


def function_state_rank(state: CurrentState) -> int:
    return FUNCTION_STATE_RANK[state]


__all__ = [
    "Conflict",
    "CONFLICT",
    "CurrentState",
    "IC_STATE_SEVERITY",
    "FUNCTION_STATE_RANK",
    "severity_of",
    "worst_by_severity",
    "function_state_rank",
    "is_optimized_function_state",
]
