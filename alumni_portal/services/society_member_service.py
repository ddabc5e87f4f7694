"""
Society Member Service

Society memberships are keyed by the member's enrollment number and
carry no approval flag of their own. Public listings only show members
whose user profile is approved and project the user through
UserSummary; the admin listings show every member with the full
(password-free) profile.
"""

import logging

from sqlalchemy.orm import joinedload

from alumni_portal.core.exceptions import NotFoundError
from alumni_portal.models import SocietyMember, User
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope,
    SocietyMemberCreate, SocietyMemberUpdate,
    SocietyMemberRead, SocietyMemberDetail, SocietyMemberAdminView,
)
from alumni_portal.services.base import BaseService
from alumni_portal.services.filters import AnyRole, RoleFilter

logger = logging.getLogger(__name__)

WITH_USER = (joinedload(SocietyMember.user),)


class SocietyMemberService(BaseService):
    model = SocietyMember
    entity = "Society member"

    def _public(self):
        return (
            self.repo.select()
            .join(SocietyMember.user)
            .where(User.is_approved.is_(True))
        )

    def create(self, data: SocietyMemberCreate) -> ItemEnvelope[SocietyMemberRead]:
        with self._db_errors():
            row = self.repo.add(**data.model_dump())
            item = SocietyMemberRead.model_validate(row)
            self.db.commit()
        logger.info("Added member %s to society %s", item.enrollment_number, item.society_id)
        return ItemEnvelope[SocietyMemberRead](item=item, message="Society member added successfully")

    def find_all(self, page: int, role_filter: RoleFilter = AnyRole()) -> ListEnvelope[SocietyMemberDetail]:
        # users already joined by _public()
        stmt = role_filter.apply(self._public())
        return self._list(stmt, page, SocietyMemberDetail, WITH_USER)

    def find_one(self, enrollment_number: int) -> ItemEnvelope[SocietyMemberDetail]:
        with self._db_errors():
            row = self.repo.get(enrollment_number, WITH_USER)
            if row is None:
                raise NotFoundError("Society member not found")
            item = SocietyMemberDetail.model_validate(row)
        return ItemEnvelope[SocietyMemberDetail](item=item)

    def find_by_user_id(self, user_id: int, page: int) -> ListEnvelope[SocietyMemberDetail]:
        stmt = self.repo.select().where(SocietyMember.user_id == user_id)
        return self._list(stmt, page, SocietyMemberDetail, WITH_USER)

    def find_by_society_id(self, society_id: int, page: int) -> ListEnvelope[SocietyMemberDetail]:
        stmt = self._public().where(SocietyMember.society_id == society_id)
        return self._list(stmt, page, SocietyMemberDetail, WITH_USER)

    def find_all_admin(self, page: int) -> ListEnvelope[SocietyMemberAdminView]:
        return self._list(self.repo.select(), page, SocietyMemberAdminView, WITH_USER)

    def find_by_society_id_admin(self, society_id: int, page: int) -> ListEnvelope[SocietyMemberAdminView]:
        stmt = self.repo.select().where(SocietyMember.society_id == society_id)
        return self._list(stmt, page, SocietyMemberAdminView, WITH_USER)

    def update(self, enrollment_number: int, data: SocietyMemberUpdate) -> ItemEnvelope[SocietyMemberRead]:
        fields = self._changes(data)
        with self._db_errors():
            row = self.repo.update(enrollment_number, fields)
            if row is None:
                raise NotFoundError("Society member not found")
            item = SocietyMemberRead.model_validate(row)
            self.db.commit()
        logger.info("Updated society member %s", enrollment_number)
        return ItemEnvelope[SocietyMemberRead](item=item, message="Society member updated successfully")

    def remove(self, enrollment_number: int) -> ItemEnvelope[SocietyMemberRead]:
        with self._db_errors():
            row = self.repo.delete(enrollment_number)
            if row is None:
                raise NotFoundError("Society member not found")
            item = SocietyMemberRead.model_validate(row)
            self.db.commit()
        logger.info("Removed society member %s", enrollment_number)
        return ItemEnvelope[SocietyMemberRead](item=item, message="Society member removed successfully")
