#!filepath: deoptlens/services/opened_log.py
from __future__ import annotations

from typing import Callable, List, Optional

from deoptlens.model.file_position import FilePosition
from deoptlens.model.function_entry import FunctionEntry
from deoptlens.model.log_file import LogFile
from deoptlens.utils.errors import LogNotFrozenError
from deoptlens.utils.logger import logs

Listener = Callable[[LogFile], None]


class OpenedLogService:
    """
    Holds "the opened log" for presentation code.

    - only frozen logs can be opened
    - opening a new log closes the previous one first
    - listeners are called synchronously, in subscription order
    """

    def __init__(self) -> None:
        self._log: Optional[LogFile] = None
        self._open_listeners: List[Listener] = []
        self._close_listeners: List[Listener] = []

    @property
    def opened_log(self) -> Optional[LogFile]:
        return self._log

    def open(self, log: LogFile) -> LogFile:
        if not log.is_frozen:
            raise LogNotFrozenError("only a frozen log can be opened")
        if self._log is log:
            return log
        self.close()
        self._log = log
        logs.info(f"[service] opened {log!r}")
        for listener in list(self._open_listeners):
            listener(log)
        return log

    def close(self) -> None:
        log, self._log = self._log, None
        if log is None:
            return
        logs.info(f"[service] closed {log!r}")
        for listener in list(self._close_listeners):
            listener(log)

    def on_did_open(self, listener: Listener) -> Callable[[], None]:
        return _subscribe(self._open_listeners, listener)

    def on_did_close(self, listener: Listener) -> Callable[[], None]:
        return _subscribe(self._close_listeners, listener)

    def find_function_entry_by_file_position(self, position: FilePosition) -> Optional[FunctionEntry]:
        if self._log is None:
            return None
        return self._log.find_function_entry_by_file_position(position)


def _subscribe(listeners: List[Listener], listener: Listener) -> Callable[[], None]:
    listeners.append(listener)

    def dispose() -> None:
        if listener in listeners:
            listeners.remove(listener)

    return dispose


# shared instance
opened_logs = OpenedLogService()
