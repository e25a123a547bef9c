"""Domain service deciding which calendar days are due or missed."""

from collections.abc import Container, Iterator
from datetime import date, timedelta

from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.identity.entities.user import Learner

ONE_DAY = timedelta(days=1)


class SubmissionWindowTracker:
    """
    Stateless apart from a fixed "today".

    "today" is captured once when the tracker is built (from the injected
    clock), so every decision made during one request agrees on the date.
    """

    def __init__(self, today: date) -> None:
        self._today = today

    @property
    def today(self) -> date:
        return self._today

    def is_due(self, learner: Learner, day: date) -> bool:
        """A day is due once the learner is enrolled and the day has started."""
        return learner.enrollment_start <= day <= self._today

    def has_deadline_passed(self, day: date) -> bool:
        """The window for a day closes at the end of that day."""
        return day < self._today

    def find_missed_dates(
        self,
        learner: Learner,
        range_start: date,
        range_end: date,
        submitted_dates: Container[date],
    ) -> Iterator[date]:
        """
        Lazily yield missed days in ascending order.

        A day is missed when it lies inside [range_start, range_end], is not
        before enrollment, has no submission and its deadline has passed.

        Args:
            learner: Learner whose history is scanned
            range_start: First day of the range (inclusive)
            range_end: Last day of the range (inclusive)
            submitted_dates: Days that already have a submission record

        Raises:
            ValidationError: If range_start is after range_end
        """
        if range_start > range_end:
            raise ValidationError(
                "Range start must not be after range end", field="range_start", value=range_start
            )
        # Nothing on or after today can be missed yet
        return self._iter_missed(
            max(range_start, learner.enrollment_start),
            min(range_end, self._today - ONE_DAY),
            submitted_dates,
        )

    @staticmethod
    def _iter_missed(first: date, last: date, submitted_dates: Container[date]) -> Iterator[date]:
        day = first
        while day <= last:
            if day not in submitted_dates:
                yield day
            day += ONE_DAY
