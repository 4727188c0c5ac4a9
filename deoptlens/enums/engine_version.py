# deoptlens/enums/engine_version.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class EngineVersion:
    """
    Version of the engine that wrote the trace (major.minor.build.patch).
    Several engine enumerations are only meaningful for a given version range.
    """
    major: int
    minor: int = 0
    build: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> "EngineVersion":
        parts = text.strip().split(".")
        if not parts or len(parts) > 4:
            raise ValueError(f"Invalid engine version: {text!r}")
        try:
            numbers = [int(p) for p in parts]
        except ValueError:
            raise ValueError(f"Invalid engine version: {text!r}") from None
        return cls(*numbers)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}.{self.patch}"
