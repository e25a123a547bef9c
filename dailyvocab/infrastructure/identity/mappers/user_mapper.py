"""Mapper for User ORM ↔ Domain conversion."""

from dailyvocab.domain.common.value_objects import UserId
from dailyvocab.domain.identity.entities.user import Role, User
from dailyvocab.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            name=orm_model.name,
            role=Role(orm_model.role),
            enrolled_on=orm_model.enrolled_on,
            created_at=orm_model.created_at,
        )
