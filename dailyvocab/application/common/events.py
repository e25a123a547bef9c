"""Dispatch of domain events collected from aggregates."""

import structlog

from dailyvocab.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)


def publish_events(events: list[DomainEvent], **context: object) -> None:
    """
    Emit each event as a structured log line.

    Called after the aggregate is persisted, so a rejected write never
    produces an audit entry.
    """
    for event in events:
        logger.info("domain_event", **context, **event.to_dict())
