from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier (learners and reviewers alike)."""

    value: int


@dataclass(frozen=True)
class SubmissionId(EntityId):
    """Strongly-typed submission record identifier."""

    value: int
