# deoptlens/views/formatting.py
from __future__ import annotations

from typing import Optional

from deoptlens.config.view_config import ViewConfig
from deoptlens.model.file_position import Location

_DEFAULT = ViewConfig()


def format_address(address: int, config: ViewConfig = _DEFAULT) -> str:
    return f"0x{address:0{config.address_width}x}"


def format_timestamp(timestamp_us: int, config: ViewConfig = _DEFAULT) -> str:
    """
    Trace timestamps are microseconds since the log origin; shown as ms.
    """
    return f"{timestamp_us / 1000:.{config.timestamp_precision}f}ms"


def format_location(
        location: Optional[Location],
        config: ViewConfig = _DEFAULT,
        *,
        include_position: bool = False,
        basename: bool = True,
) -> str:
    if location is None:
        return config.unknown_location_text
    return location.format(include_position=include_position, basename=basename)
