"""
Base class for Domain Events.

Domain Events are immutable records of something that happened to an
aggregate, e.g. a submission being reviewed. They carry the audit trail
(who did what, when) without the aggregate needing to know who listens.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Subclasses should be decorated with @dataclass(frozen=True),
    be named in past tense (SubmissionReviewed) and define their
    specific attributes.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization (e.g. log fields)."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, (datetime, date)):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
