"""
Professional Information Routes

POST   /professional-information                          - Add a job entry
GET    /professional-information?role=&page=              - List approved entries
GET    /professional-information/{id}                     - Get one entry
GET    /professional-information/user/{user_id}?page=     - All entries of a user
GET    /professional-information/current-company/{user_id} - Current or latest job
PUT    /professional-information/{id}                     - Partial update
DELETE /professional-information/{id}                     - Delete
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alumni_portal.api.dependencies import get_professional_information_service
from alumni_portal.services import ProfessionalInformationService
from alumni_portal.services.filters import parse_role_filter
from alumni_portal.utils.params import parse_id, parse_page
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope,
    ProfessionalInformationCreate, ProfessionalInformationUpdate,
    ProfessionalInformationRead, ProfessionalInformationDetail,
)

router = APIRouter(prefix="/professional-information", tags=["Professional Information"])


@router.post("", response_model=ItemEnvelope[ProfessionalInformationRead], status_code=201)
def create(
    data: ProfessionalInformationCreate,
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    """Add a job entry. New entries start unapproved."""
    return service.create(data)


@router.get("", response_model=ListEnvelope[ProfessionalInformationDetail])
def find_all(
    role: Optional[str] = Query(None, description="ALUMNI or STUDENT"),
    page: Optional[str] = Query(None),
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    """List approved entries, optionally only those of alumni or students."""
    return service.find_all(parse_page(page), parse_role_filter(role))


@router.get("/user/{user_id}", response_model=ListEnvelope[ProfessionalInformationDetail])
def find_all_by_user_id(
    user_id: str,
    page: Optional[str] = Query(None),
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    """All entries of one user, approved or not."""
    user_id = parse_id(user_id)
    return service.find_by_user_id(user_id, parse_page(page))


@router.get("/current-company/{user_id}", response_model=ItemEnvelope[ProfessionalInformationDetail])
def find_current_company(
    user_id: str,
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    """The job without an end date, else the one that ended last."""
    user_id = parse_id(user_id)
    return service.find_current_company_by_user_id(user_id)


@router.get("/{id}", response_model=ItemEnvelope[ProfessionalInformationDetail])
def find_one(
    id: str,
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    professional_information_id = parse_id(id)
    return service.find_one(professional_information_id)


@router.put("/{id}", response_model=ItemEnvelope[ProfessionalInformationRead])
def update(
    id: str,
    data: ProfessionalInformationUpdate,
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    """Update only the fields present in the body."""
    professional_information_id = parse_id(id)
    return service.update(professional_information_id, data)


@router.delete("/{id}", response_model=ItemEnvelope[ProfessionalInformationRead])
def remove(
    id: str,
    service: ProfessionalInformationService = Depends(get_professional_information_service),
):
    professional_information_id = parse_id(id)
    return service.remove(professional_information_id)
