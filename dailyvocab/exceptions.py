"""HTTP translation of the domain error taxonomy."""

from fastapi import HTTPException
from starlette import status

from dailyvocab.domain.common.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    StateError,
    ValidationError,
)

# Most specific first; DomainError itself is the fallback
DOMAIN_ERROR_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_422_UNPROCESSABLE_CONTENT),
    (StateError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_code_for(error: DomainError) -> int:
    """Map a domain error to its HTTP status code."""
    for error_type, status_code in DOMAIN_ERROR_STATUS_CODES:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not identify the acting user",
)
