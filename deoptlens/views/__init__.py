from .formatting import format_address, format_timestamp, format_location
from .function_node import FunctionNode
from .ic_node import IcNode
from .function_history import (
    HistoryRow,
    function_history_rows,
    function_history_frame,
    render_function_history,
)
from .ranking import rank_functions, rank_ics
from .history_uri import uri_for_function_entry, function_entry_from_uri

__all__ = [
    "format_address", "format_timestamp", "format_location",
    "FunctionNode", "IcNode",
    "HistoryRow", "function_history_rows", "function_history_frame", "render_function_history",
    "rank_functions", "rank_ics",
    "uri_for_function_entry", "function_entry_from_uri",
]
