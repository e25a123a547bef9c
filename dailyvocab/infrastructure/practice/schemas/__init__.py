from .progress_schemas import (
    CalendarDaySchema,
    LearnerOverviewResponse,
    SubmissionCalendarResponse,
    WeeklyStatsResponse,
)
from .submission_schemas import (
    EntryRequirementResponse,
    MissedDatesResponse,
    PendingReviewsResponse,
    ReviewRequest,
    ReviewResponse,
    Submission,
    SubmissionCreateRequest,
    SubmissionCreateResponse,
    SubmissionsListResponse,
    SubmissionUpdateRequest,
    SubmissionUpdateResponse,
    WordEntrySchema,
)

__all__ = [
    "CalendarDaySchema",
    "EntryRequirementResponse",
    "LearnerOverviewResponse",
    "MissedDatesResponse",
    "PendingReviewsResponse",
    "ReviewRequest",
    "ReviewResponse",
    "Submission",
    "SubmissionCalendarResponse",
    "SubmissionCreateRequest",
    "SubmissionCreateResponse",
    "SubmissionUpdateRequest",
    "SubmissionUpdateResponse",
    "SubmissionsListResponse",
    "WeeklyStatsResponse",
    "WordEntrySchema",
]
