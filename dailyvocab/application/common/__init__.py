"""
Application common module.

Contains the building blocks shared by all use cases:
- ClockProtocol: Injectable source of "today" and "now"
- Result: Success/Failure type for use case outcomes
- publish_events: Structured logging of domain events after persistence
"""

from .clock import ClockProtocol
from .events import publish_events
from .result import Failure, Result, Success

__all__ = [
    "ClockProtocol",
    "Failure",
    "Result",
    "Success",
    "publish_events",
]
