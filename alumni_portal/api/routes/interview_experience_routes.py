"""
Interview Experience Routes

POST   /interview-experience                      - Submit an experience
GET    /interview-experience?role=&page=          - List approved experiences
GET    /interview-experience/{id}                 - Get one experience
GET    /interview-experience/user/{user_id}?page= - All experiences of a user
PUT    /interview-experience/{id}                 - Partial update
DELETE /interview-experience/{id}                 - Delete
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alumni_portal.api.dependencies import get_interview_experience_service
from alumni_portal.services import InterviewExperienceService
from alumni_portal.services.filters import parse_role_filter
from alumni_portal.utils.params import parse_id, parse_page
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope,
    InterviewExperienceCreate, InterviewExperienceUpdate,
    InterviewExperienceRead, InterviewExperienceDetail,
)

router = APIRouter(prefix="/interview-experience", tags=["Interview Experience"])


@router.post("", response_model=ItemEnvelope[InterviewExperienceRead], status_code=201)
def create(
    data: InterviewExperienceCreate,
    service: InterviewExperienceService = Depends(get_interview_experience_service),
):
    """Submit an interview experience for moderation."""
    return service.create(data)


@router.get("", response_model=ListEnvelope[InterviewExperienceDetail])
def find_all(
    role: Optional[str] = Query(None, description="ALUMNI or STUDENT"),
    page: Optional[str] = Query(None),
    service: InterviewExperienceService = Depends(get_interview_experience_service),
):
    """Approved experiences only."""
    return service.find_all(parse_page(page), parse_role_filter(role))


@router.get("/user/{user_id}", response_model=ListEnvelope[InterviewExperienceDetail])
def find_by_user_id(
    user_id: str,
    page: Optional[str] = Query(None),
    service: InterviewExperienceService = Depends(get_interview_experience_service),
):
    """Approved and pending experiences of one user."""
    user_id = parse_id(user_id, "Invalid ID")
    return service.find_by_user_id(user_id, parse_page(page))


@router.get("/{id}", response_model=ItemEnvelope[InterviewExperienceDetail])
def find_one(
    id: str,
    service: InterviewExperienceService = Depends(get_interview_experience_service),
):
    interview_experience_id = parse_id(id, "Invalid ID")
    return service.find_one(interview_experience_id)


@router.put("/{id}", response_model=ItemEnvelope[InterviewExperienceRead])
def update(
    id: str,
    data: InterviewExperienceUpdate,
    service: InterviewExperienceService = Depends(get_interview_experience_service),
):
    interview_experience_id = parse_id(id, "Invalid ID")
    return service.update(interview_experience_id, data)


@router.delete("/{id}", response_model=ItemEnvelope[InterviewExperienceRead])
def remove(
    id: str,
    service: InterviewExperienceService = Depends(get_interview_experience_service),
):
    interview_experience_id = parse_id(id, "Invalid ID")
    return service.remove(interview_experience_id)
