"""Domain service deriving read-only progress statistics from history."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from dailyvocab.domain.identity.entities.user import Learner
from dailyvocab.domain.practice.entities.submission import Submission
from dailyvocab.domain.practice.rules import SubmissionRules


@dataclass(frozen=True)
class WeeklyStats:
    """Statistics over the trailing window ending at as_of."""

    window_start: date
    window_end: date
    completed_count: int
    average_stars: float
    current_streak: int


@dataclass(frozen=True)
class LearnerOverview:
    """Lifetime counters for one learner."""

    total_submissions: int
    reviewed_count: int
    pending_count: int
    average_stars: float


def _average_stars(submissions: Iterable[Submission]) -> float:
    stars = [s.stars for s in submissions if s.stars is not None]
    if not stars:
        return 0.0
    return sum(stars) / len(stars)


class ProgressAggregator:
    """Stateless: every method is a pure function of the records passed in."""

    def __init__(self, rules: SubmissionRules) -> None:
        self.rules = rules

    def compute_weekly_stats(
        self, learner: Learner, as_of: date, submissions: Iterable[Submission]
    ) -> WeeklyStats:
        """
        Compute completion count, average rating and streak.

        Args:
            learner: Learner the statistics are for; other learners' records are ignored
            as_of: Last day of the window (inclusive)
            submissions: The learner's record history (any order, may extend beyond the window)

        Returns:
            WeeklyStats for [as_of - (window - 1), as_of]
        """
        window_start = as_of - timedelta(days=self.rules.stats_window_days - 1)
        own = [s for s in submissions if s.learner_id == learner.id]
        in_window = [s for s in own if window_start <= s.submission_date <= as_of]

        return WeeklyStats(
            window_start=window_start,
            window_end=as_of,
            completed_count=len(in_window),
            average_stars=_average_stars(in_window),
            current_streak=self.compute_streak({s.submission_date for s in own}, as_of),
        )

    @staticmethod
    def compute_streak(submitted_dates: set[date], as_of: date) -> int:
        """
        Count consecutive submitted days walking backward.

        The walk starts at as_of when it has a submission, otherwise at the
        latest submitted day before it, and stops at the first gap.
        """
        candidates = [d for d in submitted_dates if d <= as_of]
        if not candidates:
            return 0
        day = as_of if as_of in submitted_dates else max(candidates)
        streak = 0
        while day in submitted_dates:
            streak += 1
            day -= timedelta(days=1)
        return streak

    @staticmethod
    def compute_overview(submissions: Iterable[Submission]) -> LearnerOverview:
        submissions = list(submissions)
        reviewed = [s for s in submissions if s.is_reviewed]
        return LearnerOverview(
            total_submissions=len(submissions),
            reviewed_count=len(reviewed),
            pending_count=len(submissions) - len(reviewed),
            average_stars=_average_stars(reviewed),
        )
