"""
Models module - SQLAlchemy ORM tables.

Importing this package registers every table on Base.metadata.
"""

from alumni_portal.models.models import (
    User,
    ProfessionalInformation,
    InterviewExperience,
    SocietyMember,
)

__all__ = [
    "User",
    "ProfessionalInformation",
    "InterviewExperience",
    "SocietyMember",
]
