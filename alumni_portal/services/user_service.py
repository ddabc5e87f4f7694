"""
User Service

Students and alumni. A user is a duplicate only when enrollment number,
email and mobile all match an existing user. Passwords are hashed on the
way in and never leave this layer.
"""

import logging

from sqlalchemy.orm import selectinload

from alumni_portal.core.exceptions import ConflictError, NotFoundError
from alumni_portal.core.security import hash_password
from alumni_portal.models import User
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope, UserCreate, UserUpdate, UserRead, UserDetail
)
from alumni_portal.services.base import BaseService
from alumni_portal.services.filters import AnyRole, RoleFilter

logger = logging.getLogger(__name__)

WITH_RELATIONS = (
    selectinload(User.professional_informations),
    selectinload(User.interview_experiences),
    selectinload(User.society_memberships),
)


class UserService(BaseService):
    model = User
    entity = "User"

    def create(self, data: UserCreate) -> ItemEnvelope[UserRead]:
        """
        Insert a user unless one with the same enrollment number, email
        and mobile exists. The check and the insert are separate
        statements; the composite unique constraint catches the race.
        """
        with self._db_errors():
            existing = self.repo.first(
                self.repo.select().where(
                    User.enrollment_number == data.enrollment_number,
                    User.email == data.email,
                    User.mobile == data.mobile,
                )
            )
            if existing is not None:
                raise ConflictError("User already exists!")

            fields = data.model_dump()
            fields["password"] = hash_password(data.password)
            row = self.repo.add(**fields)
            item = UserRead.model_validate(row)
            self.db.commit()
        logger.info("Created user %s (%s)", item.user_id, item.role.value)
        return ItemEnvelope[UserRead](item=item, message="User added successfully")

    def find_all(self, page: int, role_filter: RoleFilter = AnyRole()) -> ListEnvelope[UserDetail]:
        stmt = self.repo.select().where(User.is_approved.is_(True))
        stmt = role_filter.apply(stmt)
        return self._list(stmt, page, UserDetail, WITH_RELATIONS)

    def find_one(self, user_id: int) -> ItemEnvelope[UserDetail]:
        with self._db_errors():
            row = self.repo.get(user_id, WITH_RELATIONS)
            if row is None:
                raise NotFoundError("User not found")
            item = UserDetail.model_validate(row)
        return ItemEnvelope[UserDetail](item=item)

    def update(self, user_id: int, data: UserUpdate) -> ItemEnvelope[UserRead]:
        fields = self._changes(data)
        if fields.get("password") is not None:
            fields["password"] = hash_password(fields["password"])
        with self._db_errors():
            row = self.repo.update(user_id, fields)
            if row is None:
                raise NotFoundError("User not found")
            item = UserRead.model_validate(row)
            self.db.commit()
        logger.info("Updated user %s", user_id)
        return ItemEnvelope[UserRead](item=item, message="User updated successfully")

    def remove(self, user_id: int) -> ItemEnvelope[UserRead]:
        with self._db_errors():
            row = self.repo.delete(user_id)
            if row is None:
                raise NotFoundError("User not found")
            item = UserRead.model_validate(row)
            self.db.commit()
        logger.info("Deleted user %s", user_id)
        return ItemEnvelope[UserRead](item=item, message="User deleted successfully")
