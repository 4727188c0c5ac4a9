#!filepath: deoptlens/model/entry_base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from deoptlens.utils.errors import LogFrozenError, TimelineOrderError

T = TypeVar("T")

# empty cache cell; None is a legitimate cached value
UNSET: Any = object()


class IngestedEntry(ABC):
    """
    Base of every entry owned by a LogFile.

    Lifecycle (frozen):
      1. built by the producer: sequences are lists, appends must keep
         timestamps non-decreasing
      2. ``freeze()``: sequences become tuples, public fields become read-only
      3. derived values are cached in private ``_cache_*`` cells, only once
         frozen; nothing invalidates them, so a future mutable-ingestion mode
         would have to reset the cells itself
    """

    _frozen: bool

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False) and not name.startswith("_cache_"):
            raise LogFrozenError(
                f"{type(self).__name__} is frozen; cannot set {name!r}"
            )
        object.__setattr__(self, name, value)

    @property
    def is_frozen(self) -> bool:
        return getattr(self, "_frozen", False)

    def freeze(self) -> None:
        if self.is_frozen:
            return
        self._freeze_sequences()
        object.__setattr__(self, "_frozen", True)

    @abstractmethod
    def _freeze_sequences(self) -> None:
        """Swap the entry's list fields for tuples."""

    # --------------------------------------------------
    def _ensure_mutable(self) -> None:
        if self.is_frozen:
            raise LogFrozenError(f"{type(self).__name__} is frozen")

    @staticmethod
    def check_order(sequence, item, what: str) -> None:
        if sequence and item.timestamp < sequence[-1].timestamp:
            raise TimelineOrderError(
                f"{what} at t={item.timestamp} precedes last recorded t={sequence[-1].timestamp}"
            )

    def _memo(self, cell: str, compute: Callable[[], T]) -> T:
        if not self.is_frozen:
            return compute()
        value = getattr(self, cell, UNSET)
        if value is UNSET:
            value = compute()
            setattr(self, cell, value)
        return value
