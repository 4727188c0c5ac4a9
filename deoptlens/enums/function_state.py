#!filepath: deoptlens/enums/function_state.py
from __future__ import annotations

from enum import IntEnum


class FunctionState(IntEnum):
    """
    Compilation tier of a function's code, as reported by the engine.
    """
    Compiled = 0
    Optimized = 1
    Interpreted = 2
    OptimizedTurboprop = 3
    NativeContextIndependent = 4
    CompiledSparkplug = 5
    OptimizedMaglev = 6


# engine marker → state; the empty marker means plain compiled code
_MARKERS = {
    "": FunctionState.Compiled,
    "*": FunctionState.Optimized,
    "~": FunctionState.Interpreted,
    "-": FunctionState.NativeContextIndependent,
    "^": FunctionState.CompiledSparkplug,
    "+": FunctionState.OptimizedMaglev,
}

_OPTIMIZED = frozenset({
    FunctionState.Optimized,
    FunctionState.OptimizedTurboprop,
    FunctionState.OptimizedMaglev,
})

_NAMES = {
    FunctionState.Compiled: "Compiled",
    FunctionState.Optimized: "Optimized (TurboFan)",
    FunctionState.Interpreted: "Interpreted (Ignition)",
    FunctionState.OptimizedTurboprop: "Optimized (Turboprop)",
    FunctionState.NativeContextIndependent: "Native Context Independent",
    FunctionState.CompiledSparkplug: "Compiled (Sparkplug)",
    FunctionState.OptimizedMaglev: "Optimized (Maglev)",
}


def parse_function_state(marker: str) -> FunctionState:
    try:
        return _MARKERS[marker]
    except KeyError:
        raise ValueError(f"Unknown function state marker: {marker!r}") from None


def is_optimized_function_state(state: FunctionState) -> bool:
    """
    True for every JIT-optimized tier, False for interpreted/baseline/compiled code.
    """
    return state in _OPTIMIZED


def format_function_state(state: FunctionState) -> str:
    return _NAMES.get(state, f"Unknown({int(state)})")
