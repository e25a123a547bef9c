from typing import TypeVar

from dailyvocab.application.common.result import Result
from dailyvocab.domain.common.exceptions import DomainError

T = TypeVar("T")


def unwrap_or_raise(result: Result[T, DomainError]) -> T:
    """
    Return the success value or re-raise the business error.

    The application-level exception handler turns the raised DomainError
    into the matching HTTP response.
    """
    if result.is_failure:
        raise result.unwrap_error()
    return result.unwrap()
