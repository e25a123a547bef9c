"""Protocol for the current-date source."""

from datetime import date, datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """
    Single source of "today" for every submission rule.

    Injected so the rules can be exercised without depending on the wall clock.
    """

    def today(self) -> date:
        """Return the current calendar day in the dashboard's timezone."""
        ...

    def now(self) -> datetime:
        """Return the current timezone-aware timestamp."""
        ...
