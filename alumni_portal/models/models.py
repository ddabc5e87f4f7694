"""
ORM Models - SQLAlchemy declarative tables.

Tables:
1. users                     - profiles of students and alumni
2. professional_information  - one row per job held by a user
3. interview_experiences     - interview write-ups, moderated before listing
4. society_members           - society membership keyed by enrollment number

Child rows cascade on user deletion (ON DELETE CASCADE in the DB).
"""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import (
    BigInteger, Boolean, Date, DateTime, Enum, ForeignKey, Integer,
    String, Text, UniqueConstraint, false, func
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from alumni_portal.db.session import Base
from alumni_portal.schemas.schemas import UserRole

# 64-bit ids; SQLite only autoincrements INTEGER PRIMARY KEY
BigId = BigInteger().with_variant(Integer, "sqlite")


# ============================================================
# USERS
# ============================================================

class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("enrollment_number", "email", "mobile", name="uq_users_identity"),
    )
    __mapper_args__ = {"eager_defaults": True}

    user_id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), index=True)
    mobile: Mapped[str] = mapped_column(String(20))
    enrollment_number: Mapped[str] = mapped_column(String(50), index=True)
    password: Mapped[str] = mapped_column(String(255))
    branch: Mapped[Optional[str]] = mapped_column(String(100))
    passing_year: Mapped[Optional[int]] = mapped_column(Integer)
    section: Mapped[Optional[str]] = mapped_column(String(10))
    github_profile_url: Mapped[Optional[str]] = mapped_column(String(255))
    linked_in_profile_url: Mapped[Optional[str]] = mapped_column(String(255))
    role: Mapped[UserRole] = mapped_column(Enum(UserRole, name="user_role"), default=UserRole.STUDENT)
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    professional_informations: Mapped[List["ProfessionalInformation"]] = relationship(
        back_populates="user", passive_deletes=True,
        order_by="ProfessionalInformation.professional_information_id",
    )
    interview_experiences: Mapped[List["InterviewExperience"]] = relationship(
        back_populates="user", passive_deletes=True,
        order_by="InterviewExperience.interview_experience_id",
    )
    society_memberships: Mapped[List["SocietyMember"]] = relationship(
        back_populates="user", passive_deletes=True,
        order_by="SocietyMember.enrollment_number",
    )


# ============================================================
# PROFESSIONAL INFORMATION
# ============================================================

class ProfessionalInformation(Base):
    __tablename__ = "professional_information"
    __mapper_args__ = {"eager_defaults": True}

    professional_information_id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.user_id", ondelete="CASCADE"), index=True
    )
    company_name: Mapped[str] = mapped_column(String(200))
    role: Mapped[str] = mapped_column(String(200))
    location: Mapped[Optional[str]] = mapped_column(String(200))
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[Optional[date]] = mapped_column(Date)  # NULL = currently employed
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    user: Mapped["User"] = relationship(back_populates="professional_informations")


# ============================================================
# INTERVIEW EXPERIENCES
# ============================================================

class InterviewExperience(Base):
    __tablename__ = "interview_experiences"
    __mapper_args__ = {"eager_defaults": True}

    interview_experience_id: Mapped[int] = mapped_column(BigId, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.user_id", ondelete="CASCADE"), index=True
    )
    company_name: Mapped[str] = mapped_column(String(200))
    role: Mapped[str] = mapped_column(String(200))
    experience: Mapped[str] = mapped_column(Text)
    interview_date: Mapped[Optional[date]] = mapped_column(Date)
    is_approved: Mapped[bool] = mapped_column(Boolean, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    user: Mapped["User"] = relationship(back_populates="interview_experiences")


# ============================================================
# SOCIETY MEMBERS
# ============================================================

class SocietyMember(Base):
    __tablename__ = "society_members"
    __mapper_args__ = {"eager_defaults": True}

    enrollment_number: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    society_id: Mapped[int] = mapped_column(Integer, index=True)
    user_id: Mapped[int] = mapped_column(
        BigId, ForeignKey("users.user_id", ondelete="CASCADE"), index=True
    )
    position: Mapped[str] = mapped_column(String(100), default="MEMBER")
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), onupdate=func.now())

    user: Mapped["User"] = relationship(back_populates="society_memberships")
