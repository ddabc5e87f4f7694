"""
Services module - one class per resource, each bound to a Session.
"""

from alumni_portal.services.user_service import UserService
from alumni_portal.services.professional_information_service import ProfessionalInformationService
from alumni_portal.services.interview_experience_service import InterviewExperienceService
from alumni_portal.services.society_member_service import SocietyMemberService

__all__ = [
    "UserService",
    "ProfessionalInformationService",
    "InterviewExperienceService",
    "SocietyMemberService",
]
