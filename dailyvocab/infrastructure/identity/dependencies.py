"""FastAPI dependencies for identifying the acting user."""

from typing import Annotated

from fastapi import Depends, Header

from dailyvocab.core import container
from dailyvocab.database import DatabaseSession
from dailyvocab.domain.common.exceptions import NotFoundError
from dailyvocab.domain.identity.entities.user import User
from dailyvocab.exceptions import CredentialsException
from dailyvocab.infrastructure.common.di import build_with_session


def get_current_user(
    db: DatabaseSession,
    x_user_id: Annotated[int | None, Header()] = None,
) -> User:
    """
    Resolve the acting user from the X-User-Id header.

    Authentication happens upstream; the gateway forwards the
    authenticated user's id in this header.

    Raises:
        CredentialsException: If the header is missing or names no known user
    """
    if x_user_id is None or x_user_id <= 0:
        raise CredentialsException

    lookup = build_with_session(container.learner_lookup, db)

    try:
        return lookup.get_user(x_user_id)
    except NotFoundError:
        raise CredentialsException from None


CurrentUser = Annotated[User, Depends(get_current_user)]
