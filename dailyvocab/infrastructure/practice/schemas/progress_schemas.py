"""Pydantic schemas for progress and calendar responses."""

import datetime

from pydantic import BaseModel, Field

from dailyvocab.domain.practice.services.submission_calendar import DayStatus


class WeeklyStatsResponse(BaseModel):
    window_start: datetime.date
    window_end: datetime.date
    completed_count: int = Field(..., description="Submissions inside the window")
    average_stars: float = Field(..., description="Mean stars of reviewed submissions, 0 if none")
    current_streak: int = Field(..., description="Consecutive days with a submission")


class CalendarDaySchema(BaseModel):
    date: datetime.date
    status: DayStatus
    stars: int | None = None


class SubmissionCalendarResponse(BaseModel):
    year: int
    month: int
    days: list[CalendarDaySchema]


class LearnerOverviewResponse(BaseModel):
    total_submissions: int
    reviewed_count: int
    pending_count: int
    average_stars: float
