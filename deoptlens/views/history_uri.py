# deoptlens/views/history_uri.py
from __future__ import annotations

from typing import Optional
from urllib.parse import quote, unquote

from deoptlens.config.view_config import ViewConfig
from deoptlens.model.file_position import FilePosition
from deoptlens.model.function_entry import FunctionEntry
from deoptlens.model.log_file import LogFile


def uri_for_function_entry(entry: FunctionEntry, config: Optional[ViewConfig] = None) -> str:
    """
    ``<scheme>:<quoted file position>/<quoted function name>.md``
    """
    config = config or ViewConfig()
    position = quote(str(entry.file_position), safe="")
    name = quote(entry.function_name, safe="")
    return f"{config.history_uri_scheme}:{position}/{name}.md"


def function_entry_from_uri(
        uri: str,
        log: Optional[LogFile],
        config: Optional[ViewConfig] = None,
) -> Optional[FunctionEntry]:
    """
    Reverse of ``uri_for_function_entry``. Foreign schemes, malformed positions,
    no log and stale positions all come back as None.
    """
    config = config or ViewConfig()
    prefix = f"{config.history_uri_scheme}:"
    if log is None or not uri.startswith(prefix):
        return None
    position_text = unquote(uri[len(prefix):].split("/")[0])
    if not position_text:
        return None
    try:
        position = FilePosition.parse(position_text)
    except ValueError:
        return None
    return log.find_function_entry_by_file_position(position)
