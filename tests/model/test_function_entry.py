#!filepath: tests/model/test_function_entry.py
import pytest

from deoptlens.enums import FunctionState
from deoptlens.model import CONFLICT, FilePosition, FunctionEntry, FunctionUpdate
from deoptlens.model.entry_base import IngestedEntry
from deoptlens.utils.errors import LogFrozenError, TimelineOrderError


def _entry(name="f", states=()):
    entry = FunctionEntry(function_name=name, file_position=FilePosition("/a.js", 1, 1))
    for ts, state in enumerate(states, start=1):
        entry.append_update(
            FunctionUpdate(timestamp=ts, state=state, code_kind=0, size=0,
                           start_address=0, func_start_address=0)
        )
    entry.freeze()
    return entry


@pytest.mark.contract
def test_no_updates_defaults_to_compiled():
    entry = _entry("baz")
    assert entry.current_state() is FunctionState.Compiled


def test_single_compiled_update():
    entry = _entry("bar", [FunctionState.Compiled])
    assert entry.current_state() is FunctionState.Compiled
    assert entry.label() == "bar (1)"


def test_one_optimized_update_among_others_is_the_state_when_last():
    entry = _entry("f", [FunctionState.Interpreted, FunctionState.CompiledSparkplug,
                         FunctionState.OptimizedMaglev])
    assert entry.current_state() is FunctionState.OptimizedMaglev


def test_one_optimized_update_then_lower_tier_reports_last_update():
    entry = _entry("f", [FunctionState.Optimized, FunctionState.Interpreted])
    assert entry.current_state() is FunctionState.Interpreted


@pytest.mark.contract
def test_two_optimized_updates_is_a_conflict():
    entry = _entry("foo", [FunctionState.Compiled, FunctionState.Optimized,
                           FunctionState.Interpreted, FunctionState.Optimized])
    assert entry.current_state() is CONFLICT
    assert str(entry.current_state()) == "mixed"


def test_mixed_optimizing_tiers_also_conflict():
    entry = _entry("f", [FunctionState.OptimizedMaglev, FunctionState.Optimized])
    assert entry.current_state() is CONFLICT


def test_label_counts_updates_only():
    entry = _entry("loop", [FunctionState.Interpreted] * 3)
    assert entry.label() == "loop (3)"


@pytest.mark.contract
def test_current_state_is_idempotent_and_cached_after_freeze():
    entry = _entry("f", [FunctionState.Optimized])
    first = entry.current_state()
    assert entry.current_state() is first
    assert entry._cache_current_state is first


def test_unfrozen_entry_is_not_cached():
    entry = FunctionEntry(function_name="f", file_position=FilePosition("/a.js", 1, 1))
    assert entry.current_state() is FunctionState.Compiled
    entry.append_update(FunctionUpdate(timestamp=1, state=FunctionState.Optimized, code_kind=0,
                                       size=0, start_address=0, func_start_address=0))
    assert entry.current_state() is FunctionState.Optimized


def test_frozen_entry_rejects_mutation():
    entry = _entry("f", [FunctionState.Compiled])
    assert isinstance(entry.updates, tuple)
    with pytest.raises(LogFrozenError):
        entry.append_update(FunctionUpdate(timestamp=9, state=FunctionState.Compiled, code_kind=0,
                                           size=0, start_address=0, func_start_address=0))
    with pytest.raises(LogFrozenError):
        entry.function_name = "g"


def test_out_of_order_update_rejected():
    entry = FunctionEntry(function_name="f", file_position=FilePosition("/a.js", 1, 1))
    entry.append_update(FunctionUpdate(timestamp=5, state=FunctionState.Compiled, code_kind=0,
                                       size=0, start_address=0, func_start_address=0))
    with pytest.raises(TimelineOrderError):
        entry.append_update(FunctionUpdate(timestamp=4, state=FunctionState.Compiled, code_kind=0,
                                           size=0, start_address=0, func_start_address=0))
    assert len(entry.updates) == 1


def test_entry_base_is_abstract():
    with pytest.raises(TypeError):
        IngestedEntry()
