#!filepath: deoptlens/model/file_position.py
from __future__ import annotations

import posixpath
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, order=True)
class FilePosition:
    """
    A position in a source file (1-based line and column).

    Used as the identity of function / IC / deopt entries inside one log, so it
    must stay hashable and totally ordered.
    """
    file: str
    line: int
    column: int

    @classmethod
    def parse(cls, text: str) -> "FilePosition":
        """
        Parse ``file:line:column``. The file part may itself contain ``:``
        (drive letters, URIs), so only the last two fields are numeric.
        """
        parts = text.rsplit(":", 2)
        if len(parts) != 3 or not parts[0]:
            raise ValueError(f"Invalid file position: {text!r}")
        file, line, column = parts
        try:
            return cls(file, int(line), int(column))
        except ValueError:
            raise ValueError(f"Invalid file position: {text!r}") from None

    @property
    def basename(self) -> str:
        return posixpath.basename(self.file.replace("\\", "/"))

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Location:
    """
    Source range an entry refers to. ``end`` is optional: most trace records
    only carry a start position.
    """
    start: FilePosition
    end: Optional[FilePosition] = None

    @classmethod
    def at(cls, file: str, line: int, column: int) -> "Location":
        return cls(FilePosition(file, line, column))

    @property
    def file(self) -> str:
        return self.start.file

    def format(self, include_position: bool = True, basename: bool = False) -> str:
        file = self.start.basename if basename else self.start.file
        if not include_position:
            return file
        return f"{file}:{self.start.line}:{self.start.column}"

    def __str__(self) -> str:
        return self.format()
