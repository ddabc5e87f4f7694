"""
Interview Experience Service

Interview write-ups are moderated: they stay out of public listings
until is_approved is set, but their author always sees them.
"""

import logging

from sqlalchemy.orm import joinedload

from alumni_portal.core.exceptions import NotFoundError
from alumni_portal.models import InterviewExperience
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope,
    InterviewExperienceCreate, InterviewExperienceUpdate,
    InterviewExperienceRead, InterviewExperienceDetail,
)
from alumni_portal.services.base import BaseService
from alumni_portal.services.filters import AnyRole, RoleFilter

logger = logging.getLogger(__name__)

WITH_USER = (joinedload(InterviewExperience.user),)


class InterviewExperienceService(BaseService):
    model = InterviewExperience
    entity = "Interview experience"

    def create(self, data: InterviewExperienceCreate) -> ItemEnvelope[InterviewExperienceRead]:
        with self._db_errors():
            row = self.repo.add(**data.model_dump())
            item = InterviewExperienceRead.model_validate(row)
            self.db.commit()
        logger.info("Created interview experience %s for user %s",
                    item.interview_experience_id, item.user_id)
        return ItemEnvelope[InterviewExperienceRead](
            item=item, message="Interview experience created successfully"
        )

    def find_all(self, page: int, role_filter: RoleFilter = AnyRole()) -> ListEnvelope[InterviewExperienceDetail]:
        stmt = self.repo.select().where(InterviewExperience.is_approved.is_(True))
        stmt = role_filter.apply(stmt, owner=InterviewExperience.user)
        return self._list(stmt, page, InterviewExperienceDetail, WITH_USER)

    def find_one(self, interview_experience_id: int) -> ItemEnvelope[InterviewExperienceDetail]:
        with self._db_errors():
            row = self.repo.get(interview_experience_id, WITH_USER)
            if row is None:
                raise NotFoundError("Interview experience not found")
            item = InterviewExperienceDetail.model_validate(row)
        return ItemEnvelope[InterviewExperienceDetail](item=item)

    def find_by_user_id(self, user_id: int, page: int) -> ListEnvelope[InterviewExperienceDetail]:
        stmt = self.repo.select().where(InterviewExperience.user_id == user_id)
        return self._list(stmt, page, InterviewExperienceDetail, WITH_USER)

    def update(self, interview_experience_id: int,
               data: InterviewExperienceUpdate) -> ItemEnvelope[InterviewExperienceRead]:
        fields = self._changes(data)
        with self._db_errors():
            row = self.repo.update(interview_experience_id, fields)
            if row is None:
                raise NotFoundError("Interview experience not found")
            item = InterviewExperienceRead.model_validate(row)
            self.db.commit()
        logger.info("Updated interview experience %s", interview_experience_id)
        return ItemEnvelope[InterviewExperienceRead](
            item=item, message="Interview experience updated successfully"
        )

    def remove(self, interview_experience_id: int) -> ItemEnvelope[InterviewExperienceRead]:
        with self._db_errors():
            row = self.repo.delete(interview_experience_id)
            if row is None:
                raise NotFoundError("Interview experience not found")
            item = InterviewExperienceRead.model_validate(row)
            self.db.commit()
        logger.info("Deleted interview experience %s", interview_experience_id)
        return ItemEnvelope[InterviewExperienceRead](
            item=item, message="Interview experience deleted successfully"
        )
