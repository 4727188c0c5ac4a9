#!filepath: deoptlens/enums/code_kind.py
from __future__ import annotations

from typing import Optional, Tuple

from .engine_version import EngineVersion

# The engine renumbered its code kinds when the Sparkplug/Maglev tiers
# replaced NCI/Turboprop; a raw code kind is only readable with the table
# matching the version that wrote the log.
_LEGACY_CODE_KINDS: Tuple[str, ...] = (
    "BYTECODE_HANDLER",
    "FOR_TESTING",
    "BUILTIN",
    "REGEXP",
    "WASM_FUNCTION",
    "WASM_TO_CAPI_FUNCTION",
    "WASM_TO_JS_FUNCTION",
    "JS_TO_WASM_FUNCTION",
    "JS_TO_JS_FUNCTION",
    "C_WASM_ENTRY",
    "INTERPRETED_FUNCTION",
    "NATIVE_CONTEXT_INDEPENDENT",
    "TURBOPROP",
    "TURBOFAN",
)

_CURRENT_CODE_KINDS: Tuple[str, ...] = (
    "BYTECODE_HANDLER",
    "FOR_TESTING",
    "BUILTIN",
    "REGEXP",
    "WASM_FUNCTION",
    "WASM_TO_CAPI_FUNCTION",
    "WASM_TO_JS_FUNCTION",
    "JS_TO_WASM_FUNCTION",
    "JS_TO_JS_FUNCTION",
    "C_WASM_ENTRY",
    "INTERPRETED_FUNCTION",
    "BASELINE",
    "MAGLEV",
    "TURBOFAN",
)

# first version using the current table
CURRENT_TABLE_SINCE = EngineVersion(9, 1)


def code_kind_table(version: Optional[EngineVersion]) -> Tuple[str, ...]:
    if version is not None and version < CURRENT_TABLE_SINCE:
        return _LEGACY_CODE_KINDS
    return _CURRENT_CODE_KINDS


def format_code_kind(kind: int, version: Optional[EngineVersion] = None) -> str:
    """
    Name of a raw code kind for the given engine version. Logs without a
    version are read with the current table.
    """
    table = code_kind_table(version)
    if 0 <= kind < len(table):
        return table[kind]
    return f"Unknown({kind})"
