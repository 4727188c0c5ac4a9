# deoptlens/utils/errors.py
class DeoptLensError(RuntimeError):
    """
    Base class for every error raised by deoptlens.
    """


class UnknownTimelineEventError(DeoptLensError):
    """
    Raised when a timeline consumer meets an event that is not one of the
    known variants. The producer broke the closed-variant contract; there is
    no safe default, so the current operation is aborted.
    """

    def __init__(self, event: object):
        self.event = event
        super().__init__(f"Unknown timeline event: {event!r}")


class LogFrozenError(DeoptLensError):
    """
    Raised on any attempt to mutate an entry or a log after ingestion completed.
    """


class LogNotFrozenError(DeoptLensError):
    """
    Raised when a log that is still being ingested is handed to readers.
    """


class DuplicateEntryError(DeoptLensError):
    """
    Raised when two entries of the same kind claim the same file position.
    """


class TimelineOrderError(DeoptLensError):
    """
    Raised when an update would break the timestamp order of an entry.
    """
