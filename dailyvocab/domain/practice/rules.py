"""Configuration of the daily submission rules, as seen by the domain."""

from dataclasses import dataclass

from dailyvocab.domain.common.value_object import ValueObject

DEFAULT_BASELINE_ENTRY_COUNT = 5
DEFAULT_PENALTY_PER_MISSED_DAY = 3
DEFAULT_STAR_MIN = 0
DEFAULT_STAR_MAX = 3
DEFAULT_STATS_WINDOW_DAYS = 7


@dataclass(frozen=True)
class SubmissionRules(ValueObject):
    """
    Immutable rule set handed to every domain service.

    Business Rules:
    - At least one entry is always required
    - Penalty per missed day is non-negative
    - star_min <= star_max, both non-negative
    - Stats window covers at least one day
    """

    baseline_entry_count: int = DEFAULT_BASELINE_ENTRY_COUNT
    penalty_per_missed_day: int = DEFAULT_PENALTY_PER_MISSED_DAY
    star_min: int = DEFAULT_STAR_MIN
    star_max: int = DEFAULT_STAR_MAX
    stats_window_days: int = DEFAULT_STATS_WINDOW_DAYS

    def __post_init__(self) -> None:
        if self.baseline_entry_count < 1:
            raise ValueError("baseline_entry_count must be at least 1")
        if self.penalty_per_missed_day < 0:
            raise ValueError("penalty_per_missed_day cannot be negative")
        if self.star_min < 0 or self.star_max < self.star_min:
            raise ValueError("star range must satisfy 0 <= star_min <= star_max")
        if self.stats_window_days < 1:
            raise ValueError("stats_window_days must be at least 1")
