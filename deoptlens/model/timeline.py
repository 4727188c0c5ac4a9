#!filepath: deoptlens/model/timeline.py
"""
Function timeline events (closed union)

Every event a function can go through, in one chronological stream:

    created | updated | moved | deleted | sfi-moved | deopt | ic

Consumers dispatch with ``match`` over the concrete classes and end with
``case _: unreachable(event)``. An object outside the union means the
producer broke the contract and the consumer must stop.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, NoReturn, Union

from deoptlens.enums.function_state import FunctionState
from deoptlens.model.deopt_entry import DeoptUpdate
from deoptlens.model.file_position import FilePosition
from deoptlens.model.ic_entry import IcUpdate
from deoptlens.utils.errors import UnknownTimelineEventError


@dataclass(frozen=True)
class _CodeEvent:
    timestamp: int
    event_type: str
    code_kind: int
    size: int
    state: FunctionState
    start_address: int
    func_start_address: int


@dataclass(frozen=True)
class CreatedEvent(_CodeEvent):
    event: ClassVar[str] = "created"


@dataclass(frozen=True)
class UpdatedEvent(_CodeEvent):
    event: ClassVar[str] = "updated"


@dataclass(frozen=True)
class MovedEvent:
    timestamp: int
    from_address: int
    to_address: int
    event: ClassVar[str] = "moved"


@dataclass(frozen=True)
class DeletedEvent:
    timestamp: int
    start_address: int
    event: ClassVar[str] = "deleted"


@dataclass(frozen=True)
class SfiMovedEvent:
    timestamp: int
    from_address: int
    to_address: int
    event: ClassVar[str] = "sfi-moved"


@dataclass(frozen=True)
class DeoptEvent:
    deopt_position: FilePosition
    update: DeoptUpdate
    event: ClassVar[str] = "deopt"

    @property
    def timestamp(self) -> int:
        return self.update.timestamp


@dataclass(frozen=True)
class IcEvent:
    ic_position: FilePosition
    update: IcUpdate
    event: ClassVar[str] = "ic"

    @property
    def timestamp(self) -> int:
        return self.update.timestamp


FunctionTimelineEvent = Union[
    CreatedEvent,
    UpdatedEvent,
    MovedEvent,
    DeletedEvent,
    SfiMovedEvent,
    DeoptEvent,
    IcEvent,
]


def unreachable(event: NoReturn) -> NoReturn:
    raise UnknownTimelineEventError(event)


def event_tag(event: FunctionTimelineEvent) -> str:
    match event:
        case (CreatedEvent() | UpdatedEvent() | MovedEvent() | DeletedEvent()
              | SfiMovedEvent() | DeoptEvent() | IcEvent()):
            return event.event
        case _:
            unreachable(event)
