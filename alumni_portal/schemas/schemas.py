"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
JSON keys are camelCase on the wire; bodies also accept snake_case.
"""

from datetime import date, datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    STUDENT = "STUDENT"
    ALUMNI = "ALUMNI"


# ============================================================
# ENVELOPES
# ============================================================

class PageMeta(CamelModel):
    total_items: int
    total_pages: int
    current_page: int
    items_per_page: int


class ItemEnvelope(CamelModel, Generic[T]):
    status: str = "success"
    item: Optional[T] = None
    message: Optional[str] = None


class ListEnvelope(CamelModel, Generic[T]):
    status: str = "success"
    items: List[T] = []
    meta: PageMeta


class ErrorEnvelope(BaseModel):
    status: str = "error"
    message: str


# ============================================================
# USER PROJECTION (safe fields shown next to child records)
# ============================================================

class UserSummary(CamelModel):
    first_name: str
    last_name: Optional[str] = None
    branch: Optional[str] = None
    passing_year: Optional[int] = None
    section: Optional[str] = None
    email: str
    github_profile_url: Optional[str] = None
    linked_in_profile_url: Optional[str] = None


# ============================================================
# PROFESSIONAL INFORMATION SCHEMAS
# ============================================================

class ProfessionalInformationCreate(CamelModel):
    user_id: int = Field(..., ge=1, le=2**63 - 1)
    company_name: str = Field(..., min_length=1, max_length=200)
    role: str = Field(..., min_length=1, max_length=200)
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class ProfessionalInformationUpdate(CamelModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_approved: Optional[bool] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class ProfessionalInformationRead(CamelModel):
    professional_information_id: int
    user_id: int
    company_name: str
    role: str
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    is_approved: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProfessionalInformationDetail(ProfessionalInformationRead):
    user: Optional[UserSummary] = None


# ============================================================
# INTERVIEW EXPERIENCE SCHEMAS
# ============================================================

class InterviewExperienceCreate(CamelModel):
    user_id: int = Field(..., ge=1, le=2**63 - 1)
    company_name: str = Field(..., min_length=1, max_length=200)
    role: str = Field(..., min_length=1, max_length=200)
    experience: str = Field(..., min_length=1)
    interview_date: Optional[date] = None


class InterviewExperienceUpdate(CamelModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[str] = Field(None, min_length=1, max_length=200)
    experience: Optional[str] = Field(None, min_length=1)
    interview_date: Optional[date] = None
    is_approved: Optional[bool] = None


class InterviewExperienceRead(CamelModel):
    interview_experience_id: int
    user_id: int
    company_name: str
    role: str
    experience: str
    interview_date: Optional[date] = None
    is_approved: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InterviewExperienceDetail(InterviewExperienceRead):
    user: Optional[UserSummary] = None


# ============================================================
# SOCIETY MEMBER SCHEMAS
# ============================================================

class SocietyMemberCreate(CamelModel):
    enrollment_number: int = Field(..., ge=0, le=2**63 - 1)
    society_id: int = Field(..., ge=1, le=2**31 - 1)
    user_id: int = Field(..., ge=1, le=2**63 - 1)
    position: str = Field("MEMBER", min_length=1, max_length=100)


class SocietyMemberUpdate(CamelModel):
    society_id: Optional[int] = Field(None, ge=1, le=2**31 - 1)
    user_id: Optional[int] = Field(None, ge=1, le=2**63 - 1)
    position: Optional[str] = Field(None, min_length=1, max_length=100)


class SocietyMemberRead(CamelModel):
    enrollment_number: int
    society_id: int
    user_id: int
    position: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SocietyMemberDetail(SocietyMemberRead):
    user: Optional[UserSummary] = None


# ============================================================
# USER SCHEMAS
# ============================================================

class UserCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: EmailStr
    mobile: str = Field(..., min_length=7, max_length=20)
    enrollment_number: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=8, max_length=72)
    branch: Optional[str] = None
    passing_year: Optional[int] = Field(None, ge=1950, le=2100)
    section: Optional[str] = Field(None, max_length=10)
    github_profile_url: Optional[str] = None
    linked_in_profile_url: Optional[str] = None
    role: UserRole = UserRole.STUDENT


class UserUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    mobile: Optional[str] = Field(None, min_length=7, max_length=20)
    enrollment_number: Optional[str] = Field(None, min_length=1, max_length=50)
    password: Optional[str] = Field(None, min_length=8, max_length=72)
    branch: Optional[str] = None
    passing_year: Optional[int] = Field(None, ge=1950, le=2100)
    section: Optional[str] = Field(None, max_length=10)
    github_profile_url: Optional[str] = None
    linked_in_profile_url: Optional[str] = None
    role: Optional[UserRole] = None
    is_approved: Optional[bool] = None


class UserRead(CamelModel):
    user_id: int
    first_name: str
    last_name: Optional[str] = None
    email: str
    mobile: str
    enrollment_number: str
    branch: Optional[str] = None
    passing_year: Optional[int] = None
    section: Optional[str] = None
    github_profile_url: Optional[str] = None
    linked_in_profile_url: Optional[str] = None
    role: UserRole
    is_approved: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserDetail(UserRead):
    professional_informations: List[ProfessionalInformationRead] = []
    interview_experiences: List[InterviewExperienceRead] = []
    society_memberships: List[SocietyMemberRead] = []


class SocietyMemberAdminView(SocietyMemberRead):
    """Membership row with the full (password-free) user profile."""
    user: Optional[UserRead] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class HealthResponse(BaseModel):
    status: str
    database: str
