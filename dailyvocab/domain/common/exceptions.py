"""
Domain layer exceptions.

These exceptions represent expected, recoverable business conditions:
a malformed submission, an illegal state transition, a duplicate record
or a reference to something that does not exist. The application layer
folds them into typed results and the HTTP layer maps each one to a
status code. Storage failures are not part of this hierarchy.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions inherit from this class so they can be caught
    and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when input violates a business rule.

    Example: a word entry with a blank meaning, too few entries for the
    penalty in effect, or a star rating outside the allowed range.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class StateError(DomainError):
    """
    Raised when an operation is not allowed in the aggregate's current state.

    Example: a learner editing a submission that has already been reviewed.
    """

    def __init__(self, aggregate: str, state: str, message: str | None = None) -> None:
        msg = message or f"{aggregate} cannot be modified in state {state}"
        super().__init__(msg, {"aggregate": aggregate, "state": state})
        self.aggregate = aggregate
        self.state = state


class ConflictError(DomainError):
    """
    Raised when creating something that already exists.

    Example: a second submission for the same learner and date.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message, details)


class NotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: reviewing a submission id that doesn't exist.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id
