"""
API Dependencies

Per-request service instances bound to a database session.
Tests swap the session by overriding get_db.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from alumni_portal.db.session import get_db
from alumni_portal.services import (
    UserService,
    ProfessionalInformationService,
    InterviewExperienceService,
    SocietyMemberService,
)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_professional_information_service(db: Session = Depends(get_db)) -> ProfessionalInformationService:
    return ProfessionalInformationService(db)


def get_interview_experience_service(db: Session = Depends(get_db)) -> InterviewExperienceService:
    return InterviewExperienceService(db)


def get_society_member_service(db: Session = Depends(get_db)) -> SocietyMemberService:
    return SocietyMemberService(db)
