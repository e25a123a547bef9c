"""Repository for User domain entities."""

from sqlalchemy.orm import Session

from dailyvocab.domain.common.value_objects.ids import UserId
from dailyvocab.domain.identity.entities.user import User
from dailyvocab.infrastructure.identity.mappers.user_mapper import UserMapper
from dailyvocab.models import User as UserORM


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        orm_model = self.db.get(UserORM, user_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None
