"""Protocol for User repository."""

from typing import Protocol

from dailyvocab.domain.common.value_objects.ids import UserId
from dailyvocab.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Read access to users. Account management lives outside this service."""

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Returns:
            User entity if found, None otherwise
        """
        ...
