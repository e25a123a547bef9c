"""Pydantic schemas for Submission API request/response validation."""

from datetime import date, datetime

from pydantic import BaseModel, Field, StrictInt

from dailyvocab.application.practice.use_cases.dtos import WordEntryData
from dailyvocab.domain.practice.entities.submission import ReviewState
from dailyvocab.domain.practice.entities.submission import Submission as SubmissionEntity


class WordEntrySchema(BaseModel):
    """One vocabulary entry. Blank values are rejected by the domain, not here."""

    word: str = Field(..., max_length=200, description="The vocabulary word")
    meaning: str = Field(..., max_length=500, description="Meaning of the word")
    sentence: str = Field(..., max_length=1000, description="Sample sentence using the word")
    description: str = Field(..., max_length=1000, description="Additional context")

    def to_data(self) -> WordEntryData:
        return WordEntryData(
            word=self.word,
            meaning=self.meaning,
            sentence=self.sentence,
            description=self.description,
        )


class Submission(BaseModel):
    """Schema for Submission response."""

    id: int
    learner_id: int
    submission_date: date
    entries: list[WordEntrySchema]
    required_entry_count: int
    submitted_at: datetime
    status: ReviewState
    stars: int | None
    comment: str | None
    reviewer_id: int | None
    reviewed_at: datetime | None

    @classmethod
    def from_entity(cls, entity: SubmissionEntity) -> "Submission":
        return cls(
            id=entity.id.value,
            learner_id=entity.learner_id.value,
            submission_date=entity.submission_date,
            entries=[WordEntrySchema(**e.to_primitive()) for e in entity.entries],
            required_entry_count=entity.required_entry_count,
            submitted_at=entity.submitted_at,
            status=entity.state,
            stars=entity.stars,
            comment=entity.comment,
            reviewer_id=entity.reviewer_id.value if entity.reviewer_id else None,
            reviewed_at=entity.reviewed_at,
        )


class SubmissionCreateRequest(BaseModel):
    """Schema for creating the daily submission."""

    submission_date: date | None = Field(
        None, description="Day the submission is for (defaults to today)"
    )
    entries: list[WordEntrySchema] = Field(..., description="Vocabulary entries")


class SubmissionCreateResponse(BaseModel):
    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    submission: Submission = Field(..., description="Created submission")


class SubmissionUpdateRequest(BaseModel):
    entries: list[WordEntrySchema] = Field(..., description="Replacement vocabulary entries")


class SubmissionUpdateResponse(BaseModel):
    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    submission: Submission = Field(..., description="Updated submission")


class SubmissionsListResponse(BaseModel):
    submissions: list[Submission] = Field(..., description="Submissions, oldest date first")


class EntryRequirementResponse(BaseModel):
    """How many entries a submission for target_date needs, and why."""

    target_date: date
    missed_days: int = Field(..., description="Consecutive missed days before target_date")
    baseline_entry_count: int
    penalty_entry_count: int = Field(..., description="Extra entries owed for missed days")
    required_entry_count: int


class MissedDatesResponse(BaseModel):
    missed_dates: list[date] = Field(..., description="Missed days, ascending")


class ReviewRequest(BaseModel):
    stars: StrictInt = Field(
        ..., description="Whole-number rating; the allowed range is configured server-side"
    )
    comment: str | None = Field(None, description="Optional feedback for the learner")


class ReviewResponse(BaseModel):
    success: bool = Field(..., description="Whether the review was stored")
    message: str = Field(..., description="Response message")
    submission: Submission = Field(..., description="Reviewed submission")


class PendingReviewsResponse(BaseModel):
    submissions: list[Submission] = Field(..., description="Pending submissions, oldest first")
