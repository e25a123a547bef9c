"""Domain service computing how many entries a learner owes for a day."""

from collections.abc import Container
from dataclasses import dataclass
from datetime import date, timedelta

from dailyvocab.domain.identity.entities.user import Learner
from dailyvocab.domain.practice.rules import SubmissionRules


@dataclass(frozen=True)
class PenaltyAssessment:
    """Breakdown of the entry requirement for one target day."""

    target_date: date
    missed_days: int
    baseline_entry_count: int
    penalty_entry_count: int

    @property
    def required_entry_count(self) -> int:
        return self.baseline_entry_count + self.penalty_entry_count


class PenaltyAccrualEngine:
    """
    Pure function of the learner's submission dates and the rules.

    The penalty accrues for each consecutive day without a submission
    directly before the target day. Any existing submission, pending or
    reviewed, ends the run. So does the enrollment start: days before a
    learner enrolled never count.
    """

    def __init__(self, rules: SubmissionRules) -> None:
        self.rules = rules

    def count_missed_days(
        self, learner: Learner, target_date: date, submitted_dates: Container[date]
    ) -> int:
        """Count consecutive days without a submission immediately before target_date."""
        missed = 0
        day = target_date - timedelta(days=1)
        while day >= learner.enrollment_start and day not in submitted_dates:
            missed += 1
            day -= timedelta(days=1)
        return missed

    def assess(
        self, learner: Learner, target_date: date, submitted_dates: Container[date]
    ) -> PenaltyAssessment:
        missed = self.count_missed_days(learner, target_date, submitted_dates)
        return PenaltyAssessment(
            target_date=target_date,
            missed_days=missed,
            baseline_entry_count=self.rules.baseline_entry_count,
            penalty_entry_count=missed * self.rules.penalty_per_missed_day,
        )

    def compute_required_entry_count(
        self, learner: Learner, target_date: date, submitted_dates: Container[date]
    ) -> int:
        """
        Args:
            learner: Learner the submission belongs to
            target_date: Day the submission is for
            submitted_dates: Days that already have a submission record

        Returns:
            BASELINE_ENTRY_COUNT + missed_days * PENALTY_PER_MISSED_DAY
        """
        return self.assess(learner, target_date, submitted_dates).required_entry_count
