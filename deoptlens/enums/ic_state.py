#!filepath: deoptlens/enums/ic_state.py
from __future__ import annotations

from enum import IntEnum


class IcState(IntEnum):
    """
    Inline-cache state. Ordinals follow the engine's own enumeration; use
    ``severity_of`` (deoptlens.model.severity) for "worse than" comparisons.
    """
    NoFeedback = -1
    Uninitialized = 0
    Premonomorphic = 1
    Monomorphic = 2
    RecomputeHandler = 3
    Polymorphic = 4
    Megamorphic = 5
    MegaDOM = 6
    Generic = 7


_MARKERS = {
    "X": IcState.NoFeedback,
    "0": IcState.Uninitialized,
    ".": IcState.Premonomorphic,
    "1": IcState.Monomorphic,
    "^": IcState.RecomputeHandler,
    "P": IcState.Polymorphic,
    "N": IcState.Megamorphic,
    "D": IcState.MegaDOM,
    "G": IcState.Generic,
}

_NAMES = {
    IcState.NoFeedback: "no feedback",
    IcState.Uninitialized: "uninitialized",
    IcState.Premonomorphic: "premonomorphic",
    IcState.Monomorphic: "monomorphic",
    IcState.RecomputeHandler: "recompute handler",
    IcState.Polymorphic: "polymorphic",
    IcState.Megamorphic: "megamorphic",
    IcState.MegaDOM: "megaDOM",
    IcState.Generic: "generic",
}


def parse_ic_state(marker: str) -> IcState:
    try:
        return _MARKERS[marker]
    except KeyError:
        raise ValueError(f"Unknown IC state marker: {marker!r}") from None


def format_ic_state(state: IcState) -> str:
    return _NAMES.get(state, f"unknown({int(state)})")
