# deoptlens/model/function_reference.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from deoptlens.model.file_position import FilePosition, Location

if TYPE_CHECKING:
    from deoptlens.model.function_entry import FunctionEntry
    from deoptlens.model.log_file import LogFile


@dataclass(frozen=True)
class FunctionReference:
    """
    Navigation handle for a function entry. Holds the entry's key, not the
    entry itself; ``resolve`` goes back through the owning log.
    """
    function_position: FilePosition
    function_name: str
    location: Optional[Location] = None

    @classmethod
    def from_function_entry(cls, entry: "FunctionEntry") -> "FunctionReference":
        return cls(
            function_position=entry.file_position,
            function_name=entry.function_name,
            location=entry.reference_location,
        )

    def resolve(self, log: "LogFile") -> Optional["FunctionEntry"]:
        return log.find_function_entry_by_file_position(self.function_position)
