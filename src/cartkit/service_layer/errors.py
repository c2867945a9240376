"""Service-layer error definitions."""


class EventRecordError(ValueError):
    """Base class for errors converting plain records into domain events."""


class UnknownEventTypeError(EventRecordError):
    """Raised when a record's `event_type` names no known cart event."""

    def __init__(self, event_type: object) -> None:
        super().__init__(f"Unknown event type: {event_type}")
        self.event_type = event_type


class InvalidEventRecordError(EventRecordError):
    """Raised when a record is missing fields or holds unparsable values."""

    def __init__(self, event_type: str, reason: str) -> None:
        super().__init__(f"Invalid {event_type} record: {reason}")
        self.event_type = event_type
        self.reason = reason
