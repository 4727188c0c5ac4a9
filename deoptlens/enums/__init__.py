from .function_state import (
    FunctionState,
    parse_function_state,
    is_optimized_function_state,
    format_function_state,
)
from .ic_state import IcState, parse_ic_state, format_ic_state
from .ic_type import IcType, format_ic_type
from .deoptimize_kind import DeoptimizeKind, parse_deoptimize_kind, format_deoptimize_kind
from .symbol_kind import SymbolKind
from .engine_version import EngineVersion
from .code_kind import format_code_kind

__all__ = [
    "FunctionState",
    "parse_function_state",
    "is_optimized_function_state",
    "format_function_state",
    "IcState",
    "parse_ic_state",
    "format_ic_state",
    "IcType",
    "format_ic_type",
    "DeoptimizeKind",
    "parse_deoptimize_kind",
    "format_deoptimize_kind",
    "SymbolKind",
    "EngineVersion",
    "format_code_kind",
]
