"""User entity and the learner view of it."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from dailyvocab.domain.common.entity import Entity
from dailyvocab.domain.common.exceptions import ValidationError
from dailyvocab.domain.common.value_object import ValueObject
from dailyvocab.domain.common.value_objects.ids import UserId

# Domain constraints
MAX_EMAIL_LENGTH = 100
MAX_NAME_LENGTH = 100


class Role(StrEnum):
    """Closed set of dashboard roles."""

    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"

    @property
    def can_review(self) -> bool:
        return self in (Role.TEACHER, Role.ADMIN)


@dataclass(frozen=True)
class Learner(ValueObject):
    """
    The part of a user the submission rules care about.

    enrollment_start is the lower bound for every missed-day scan:
    nothing before it can ever count against the learner.
    """

    id: UserId
    enrollment_start: date


@dataclass
class User(Entity[UserId]):
    """
    User entity.

    Business Rules:
    - Email must be non-empty and at most MAX_EMAIL_LENGTH characters
    - Name must be non-empty
    - Only students submit daily tasks (see as_learner)
    """

    id: UserId
    email: str
    name: str
    role: Role
    enrolled_on: date
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.email or not self.email.strip():
            raise ValidationError("Email cannot be empty", field="email", value=self.email)
        if len(self.email) > MAX_EMAIL_LENGTH:
            raise ValidationError(
                f"Email cannot exceed {MAX_EMAIL_LENGTH} characters",
                field="email",
                value=self.email,
            )
        if not self.name or not self.name.strip():
            raise ValidationError("Name cannot be empty", field="name", value=self.name)
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValidationError(
                f"Name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=self.name
            )

    @property
    def is_learner(self) -> bool:
        return self.role is Role.STUDENT

    def as_learner(self) -> Learner:
        """
        Return the learner view of this user.

        Raises:
            ValidationError: If the user is not a student
        """
        if not self.is_learner:
            raise ValidationError(
                "Only students submit daily vocabulary tasks", field="role", value=self.role.value
            )
        return Learner(id=self.id, enrollment_start=self.enrolled_on)

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        name: str,
        role: Role,
        enrolled_on: date,
        created_at: datetime | None = None,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            name=name,
            role=role,
            enrolled_on=enrolled_on,
            created_at=created_at,
        )
