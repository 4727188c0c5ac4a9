# deoptlens/enums/deoptimize_kind.py
from __future__ import annotations

from enum import IntEnum


class DeoptimizeKind(IntEnum):
    Eager = 0
    Soft = 1
    Lazy = 2
    EagerWithResume = 3


def parse_deoptimize_kind(text: str) -> DeoptimizeKind:
    """
    Bailout type as written by the engine, e.g. ``"eager"`` or ``"soft"``.
    """
    normalized = text.strip().replace("-", "_").replace(" ", "_").lower()
    for kind in DeoptimizeKind:
        if _snake(kind.name) == normalized:
            return kind
    raise ValueError(f"Unknown bailout type: {text!r}")


def format_deoptimize_kind(kind: DeoptimizeKind) -> str:
    return kind.name


def _snake(name: str) -> str:
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i:
            out.append("_")
        out.append(ch.lower())
    return "".join(out)
