# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from deoptlens.enums import DeoptimizeKind, FunctionState, IcState, IcType, SymbolKind
from deoptlens.model import FilePosition, Location, LogBuilder


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


# -------------------------
# positions
# -------------------------
FOO = FilePosition("/src/app.js", 1, 1)
BAR = FilePosition("/src/app.js", 10, 1)
BAZ = FilePosition("/src/lib.js", 3, 5)
IC_XY = FilePosition("/src/app.js", 2, 9)
IC_AB = FilePosition("/src/app.js", 12, 3)
IC_ORPHAN = FilePosition("/src/lib.js", 7, 2)
DEOPT_FOO = FilePosition("/src/app.js", 4, 7)


@pytest.fixture
def builder() -> LogBuilder:
    return LogBuilder(source="v8.log")


def populate(builder: LogBuilder) -> LogBuilder:
    """
    foo: Interpreted@10 → Optimized@20 → deopt@30 → Interpreted@30 → Optimized@40 (conflict)
    bar: Compiled@5
    baz: declared only, moved once
    x.y: LoadIC Premonomorphic@11 → Monomorphic@12 → Megamorphic@13 (in foo)
    a.b: StoreIC Megamorphic@14, Megamorphic@50 (in bar)
    orphan: LoadIC Polymorphic@60, no attributable function
    """
    builder.declare_function(FOO, "foo", reference_location=Location(FOO))
    builder.declare_function(BAR, "bar", symbol_kind=SymbolKind.Method, reference_location=Location(BAR))
    builder.declare_function(BAZ, "baz", symbol_kind=SymbolKind.Class)

    builder.record_code_creation(BAR, timestamp=5, state=FunctionState.Compiled,
                                 code_kind=10, size=64, start_address=0x1000,
                                 func_start_address=0x2000, event_type="LazyCompile")
    builder.record_code_creation(FOO, timestamp=10, state=FunctionState.Interpreted,
                                 code_kind=10, size=120, start_address=0x3000,
                                 func_start_address=0x4000, event_type="Function")

    for ts, old, new in [
        (11, IcState.Uninitialized, IcState.Premonomorphic),
        (12, IcState.Premonomorphic, IcState.Monomorphic),
        (13, IcState.Monomorphic, IcState.Megamorphic),
    ]:
        builder.record_ic(IC_XY, timestamp=ts, ic_type=IcType.LoadIC, key="y",
                          old_state=old, new_state=new, function_position=FOO,
                          reference_location=Location(IC_XY))

    builder.record_ic(IC_AB, timestamp=14, ic_type=IcType.StoreIC, key="b",
                      old_state=IcState.Polymorphic, new_state=IcState.Megamorphic,
                      function_position=BAR)

    builder.record_code_creation(FOO, timestamp=20, state=FunctionState.Optimized,
                                 code_kind=13, size=300, start_address=0x5000,
                                 func_start_address=0x4000, event_type="Function")
    builder.record_deopt(DEOPT_FOO, timestamp=30, bailout_type=DeoptimizeKind.Eager,
                         deopt_reason="wrong map", function_position=FOO,
                         reference_location=Location(DEOPT_FOO))
    builder.record_code_creation(FOO, timestamp=30, state=FunctionState.Interpreted,
                                 code_kind=10, size=120, start_address=0x3000,
                                 func_start_address=0x4000, event_type="Function")
    builder.record_code_creation(FOO, timestamp=40, state=FunctionState.Optimized,
                                 code_kind=13, size=310, start_address=0x6000,
                                 func_start_address=0x4000, event_type="Function")

    builder.record_code_move(BAZ, timestamp=45, from_address=0x7000, to_address=0x8000)

    builder.record_ic(IC_AB, timestamp=50, ic_type=IcType.StoreIC, key="b",
                      old_state=IcState.Megamorphic, new_state=IcState.Megamorphic,
                      function_position=BAR)
    builder.record_ic(IC_ORPHAN, timestamp=60, ic_type=IcType.LoadIC, key="z",
                      old_state=IcState.Monomorphic, new_state=IcState.Polymorphic)
    return builder


@pytest.fixture
def sample_log(builder):
    return populate(builder).build()
