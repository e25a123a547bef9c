from .penalty_accrual import PenaltyAccrualEngine, PenaltyAssessment
from .progress_aggregator import LearnerOverview, ProgressAggregator, WeeklyStats
from .submission_calendar import CalendarDay, DayStatus, SubmissionCalendar
from .submission_window import SubmissionWindowTracker

__all__ = [
    "CalendarDay",
    "DayStatus",
    "LearnerOverview",
    "PenaltyAccrualEngine",
    "PenaltyAssessment",
    "ProgressAggregator",
    "SubmissionCalendar",
    "SubmissionWindowTracker",
    "WeeklyStats",
]
