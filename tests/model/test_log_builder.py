#!filepath: tests/model/test_log_builder.py
import pytest

from conftest import BAR, BAZ, DEOPT_FOO, FOO, IC_AB, IC_XY
from deoptlens.enums import DeoptimizeKind, FunctionState, IcState, IcType
from deoptlens.model import CONFLICT, FilePosition
from deoptlens.utils.errors import LogFrozenError, TimelineOrderError


def test_scenarios(sample_log):
    foo = sample_log.find_function_entry_by_file_position(FOO)
    bar = sample_log.find_function_entry_by_file_position(BAR)
    baz = sample_log.find_function_entry_by_file_position(BAZ)

    assert foo.current_state() is CONFLICT
    assert bar.current_state() is FunctionState.Compiled
    assert bar.label() == "bar (1)"
    assert baz.current_state() is FunctionState.Compiled
    assert baz.updates == ()

    xy = sample_log.find_ic_entry_by_file_position(IC_XY)
    assert xy.worst_state() is IcState.Megamorphic
    assert xy.worst_update().timestamp == 13
    assert xy.hit_count() == 3

    ab = sample_log.find_ic_entry_by_file_position(IC_AB)
    assert ab.worst_update().timestamp == 50


def test_timeline_tags_in_order(sample_log):
    foo = sample_log.find_function_entry_by_file_position(FOO)
    assert [e.event for e in foo.timeline] == [
        "created", "ic", "ic", "ic", "updated", "deopt", "updated", "updated",
    ]
    timestamps = [e.timestamp for e in foo.timeline]
    assert timestamps == sorted(timestamps)

    baz = sample_log.find_function_entry_by_file_position(BAZ)
    assert [e.event for e in baz.timeline] == ["moved"]


def test_deopt_site_recorded(sample_log):
    site = sample_log.find_deopt_entry_by_file_position(DEOPT_FOO)
    assert site.hit_count() == 1
    assert site.function_name == "foo"
    assert site.updates[0].bailout_type is DeoptimizeKind.Eager
    assert site.updates[0].function_position == FOO


def test_unknown_function_link_is_dropped(builder):
    builder.record_ic(IC_XY, timestamp=1, ic_type=IcType.LoadIC, key="k",
                      old_state=IcState.Uninitialized, new_state=IcState.Monomorphic,
                      function_position=FilePosition("/ghost.js", 1, 1))
    log = builder.build()
    update = log.find_ic_entry_by_file_position(IC_XY).updates[0]
    assert update.function_position is None


@pytest.mark.contract
def test_out_of_order_record_rejected_without_side_effects(builder):
    builder.record_code_creation(FOO, timestamp=10, state=FunctionState.Interpreted, name="foo")
    builder.record_ic(IC_XY, timestamp=20, ic_type=IcType.LoadIC, key="k",
                      old_state=IcState.Uninitialized, new_state=IcState.Monomorphic,
                      function_position=FOO)

    with pytest.raises(TimelineOrderError):
        builder.record_code_creation(FOO, timestamp=15, state=FunctionState.Optimized)

    foo = builder.log.find_function_entry_by_file_position(FOO)
    assert len(foo.updates) == 1
    assert len(foo.timeline) == 2

    with pytest.raises(TimelineOrderError):
        builder.record_ic(IC_AB, timestamp=5, ic_type=IcType.LoadIC, key="k",
                          old_state=IcState.Uninitialized, new_state=IcState.Monomorphic,
                          function_position=FOO)
    assert builder.log.find_ic_entry_by_file_position(IC_AB) is None


def test_events_for_undeclared_function_rejected(builder):
    with pytest.raises(KeyError):
        builder.record_code_move(FOO, timestamp=1, from_address=1, to_address=2)


def test_declare_function_is_get_or_create(builder):
    first = builder.declare_function(FOO, "foo")
    assert builder.declare_function(FOO, "other") is first


@pytest.mark.contract
def test_build_freezes_and_retires_builder(builder):
    builder.record_code_creation(FOO, timestamp=1, state=FunctionState.Compiled, name="foo")
    log = builder.build()
    assert log.is_frozen
    assert log.find_function_entry_by_file_position(FOO).is_frozen
    with pytest.raises(LogFrozenError):
        builder.declare_function(BAR, "bar")
    with pytest.raises(LogFrozenError):
        builder.build()


def test_delete_and_sfi_move_only_touch_the_timeline(builder):
    builder.declare_function(BAZ, "baz")
    builder.record_sfi_move(BAZ, timestamp=5, from_address=0x100, to_address=0x200)
    builder.record_code_delete(BAZ, timestamp=9, start_address=0x200)
    log = builder.build()

    baz = log.find_function_entry_by_file_position(BAZ)
    assert [e.event for e in baz.timeline] == ["sfi-moved", "deleted"]
    assert baz.updates == ()
    assert baz.current_state() is FunctionState.Compiled
    assert baz.label() == "baz (0)"


def test_delete_out_of_order_rejected(builder):
    builder.declare_function(BAZ, "baz")
    builder.record_sfi_move(BAZ, timestamp=5, from_address=0x100, to_address=0x200)
    with pytest.raises(TimelineOrderError):
        builder.record_code_delete(BAZ, timestamp=4, start_address=0x200)
    assert len(builder.log.find_function_entry_by_file_position(BAZ).timeline) == 1
