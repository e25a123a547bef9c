"""Resolves user ids into learners for the practice use cases."""

from dailyvocab.application.identity.protocols.user_repository import UserRepositoryProtocol
from dailyvocab.domain.common.exceptions import NotFoundError
from dailyvocab.domain.common.value_objects.ids import UserId
from dailyvocab.domain.identity.entities.user import Learner, User


class LearnerLookupService:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Raises:
            NotFoundError: If no user has this id
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_learner(self, user_id: int) -> Learner:
        """
        Raises:
            NotFoundError: If no user has this id
            ValidationError: If the user is not a student
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if user is None:
            raise NotFoundError("Learner", user_id)
        return user.as_learner()
