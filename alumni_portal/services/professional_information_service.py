"""
Professional Information Service

Employment history rows. Public listings show approved rows only; an
owner's listing shows everything they submitted. The "current company"
of a user is the row with no end date, or failing that the row that
ended most recently.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from alumni_portal.core.exceptions import NotFoundError, ValidationError
from alumni_portal.models import ProfessionalInformation
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope,
    ProfessionalInformationCreate, ProfessionalInformationUpdate,
    ProfessionalInformationRead, ProfessionalInformationDetail,
)
from alumni_portal.services.base import BaseService
from alumni_portal.services.filters import AnyRole, RoleFilter

logger = logging.getLogger(__name__)

WITH_USER = (joinedload(ProfessionalInformation.user),)


class ProfessionalInformationService(BaseService):
    model = ProfessionalInformation
    entity = "Professional information"

    def create(self, data: ProfessionalInformationCreate) -> ItemEnvelope[ProfessionalInformationRead]:
        with self._db_errors():
            row = self.repo.add(**data.model_dump())
            item = ProfessionalInformationRead.model_validate(row)
            self.db.commit()
        logger.info("Created professional information %s for user %s",
                    item.professional_information_id, item.user_id)
        return ItemEnvelope[ProfessionalInformationRead](
            item=item, message="Professional information created successfully"
        )

    def find_all(self, page: int, role_filter: RoleFilter = AnyRole()) -> ListEnvelope[ProfessionalInformationDetail]:
        stmt = self.repo.select().where(ProfessionalInformation.is_approved.is_(True))
        stmt = role_filter.apply(stmt, owner=ProfessionalInformation.user)
        return self._list(stmt, page, ProfessionalInformationDetail, WITH_USER)

    def find_one(self, professional_information_id: int) -> ItemEnvelope[ProfessionalInformationDetail]:
        with self._db_errors():
            row = self.repo.get(professional_information_id, WITH_USER)
            if row is None:
                raise NotFoundError("Professional information not found")
            item = ProfessionalInformationDetail.model_validate(row)
        return ItemEnvelope[ProfessionalInformationDetail](item=item)

    def find_by_user_id(self, user_id: int, page: int) -> ListEnvelope[ProfessionalInformationDetail]:
        stmt = self.repo.select().where(ProfessionalInformation.user_id == user_id)
        return self._list(stmt, page, ProfessionalInformationDetail, WITH_USER)

    def find_current_company_by_user_id(self, user_id: int) -> ItemEnvelope[ProfessionalInformationDetail]:
        by_user = self.repo.select().where(ProfessionalInformation.user_id == user_id)
        with self._db_errors():
            row = self.repo.first(
                by_user.where(ProfessionalInformation.end_date.is_(None))
                .order_by(ProfessionalInformation.professional_information_id),
                WITH_USER,
            )
            if row is None:
                row = self.repo.first(
                    by_user.order_by(
                        ProfessionalInformation.end_date.desc().nulls_last(),
                        ProfessionalInformation.professional_information_id.desc(),
                    ),
                    WITH_USER,
                )
            if row is None:
                raise NotFoundError("Current or past company not found")
            item = ProfessionalInformationDetail.model_validate(row)
        return ItemEnvelope[ProfessionalInformationDetail](item=item)

    def _check_dates(self, professional_information_id: int, fields: dict) -> None:
        """A lone startDate or endDate is checked against the stored other half."""
        if ("start_date" in fields) == ("end_date" in fields):
            return
        stored = self.db.execute(
            select(ProfessionalInformation.start_date, ProfessionalInformation.end_date)
            .where(ProfessionalInformation.professional_information_id == professional_information_id)
        ).first()
        if stored is None:
            raise NotFoundError("Professional information not found")
        start = fields.get("start_date", stored.start_date)
        end = fields.get("end_date", stored.end_date)
        if start is not None and end is not None and end < start:
            raise ValidationError("endDate must not be before startDate")

    def update(self, professional_information_id: int,
               data: ProfessionalInformationUpdate) -> ItemEnvelope[ProfessionalInformationRead]:
        fields = self._changes(data)
        with self._db_errors():
            self._check_dates(professional_information_id, fields)
            row = self.repo.update(professional_information_id, fields)
            if row is None:
                raise NotFoundError("Professional information not found")
            item = ProfessionalInformationRead.model_validate(row)
            self.db.commit()
        logger.info("Updated professional information %s", professional_information_id)
        return ItemEnvelope[ProfessionalInformationRead](
            item=item, message="Professional information updated successfully"
        )

    def remove(self, professional_information_id: int) -> ItemEnvelope[ProfessionalInformationRead]:
        with self._db_errors():
            row = self.repo.delete(professional_information_id)
            if row is None:
                raise NotFoundError("Professional information not found")
            item = ProfessionalInformationRead.model_validate(row)
            self.db.commit()
        logger.info("Deleted professional information %s", professional_information_id)
        return ItemEnvelope[ProfessionalInformationRead](
            item=item, message="Professional information deleted successfully"
        )
