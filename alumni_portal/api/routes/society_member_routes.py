"""
Society Member Routes

POST   /societyStudents                              - Add a member
GET    /societyStudents?role=&page=                  - Members with approved profiles
GET    /societyStudents/{enrollment_no}              - Get one member
GET    /societyStudents/user/{user_id}?page=         - Memberships of a user
GET    /societyStudents/society/{society_id}?page=   - Members of a society
PUT    /societyStudents/{enrollment_no}              - Partial update
DELETE /societyStudents/{enrollment_no}              - Remove a member

GET    /admin/societyStudents/all?page=              - Every member, full profile
GET    /admin/societyStudents/{society_id}?page=     - Every member of a society
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alumni_portal.api.dependencies import get_society_member_service
from alumni_portal.services import SocietyMemberService
from alumni_portal.services.filters import parse_role_filter
from alumni_portal.utils.params import parse_id, parse_page
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope,
    SocietyMemberCreate, SocietyMemberUpdate,
    SocietyMemberRead, SocietyMemberDetail, SocietyMemberAdminView,
)

router = APIRouter(prefix="/societyStudents", tags=["Society Members"])
admin_router = APIRouter(prefix="/admin/societyStudents", tags=["Society Members (admin)"])


@router.post("", response_model=ItemEnvelope[SocietyMemberRead], status_code=201)
def add_member(
    data: SocietyMemberCreate,
    service: SocietyMemberService = Depends(get_society_member_service),
):
    return service.create(data)


@router.get("", response_model=ListEnvelope[SocietyMemberDetail])
def list_members(
    role: Optional[str] = Query(None, description="ALUMNI or STUDENT"),
    page: Optional[str] = Query(None),
    service: SocietyMemberService = Depends(get_society_member_service),
):
    return service.find_all(parse_page(page), parse_role_filter(role))


@router.get("/user/{user_id}", response_model=ListEnvelope[SocietyMemberDetail])
def list_user_memberships(
    user_id: str,
    page: Optional[str] = Query(None),
    service: SocietyMemberService = Depends(get_society_member_service),
):
    user_id = parse_id(user_id)
    return service.find_by_user_id(user_id, parse_page(page))


@router.get("/society/{society_id}", response_model=ListEnvelope[SocietyMemberDetail])
def list_society_members(
    society_id: str,
    page: Optional[str] = Query(None),
    service: SocietyMemberService = Depends(get_society_member_service),
):
    """Members of one society whose profiles are approved."""
    society_id = parse_id(society_id, "Invalid society id")
    return service.find_by_society_id(society_id, parse_page(page))


@router.get("/{enrollment_no}", response_model=ItemEnvelope[SocietyMemberDetail])
def get_member(
    enrollment_no: str,
    service: SocietyMemberService = Depends(get_society_member_service),
):
    enrollment_no = parse_id(enrollment_no, "Invalid enrollment number")
    return service.find_one(enrollment_no)


@router.put("/{enrollment_no}", response_model=ItemEnvelope[SocietyMemberRead])
def update_member(
    enrollment_no: str,
    data: SocietyMemberUpdate,
    service: SocietyMemberService = Depends(get_society_member_service),
):
    enrollment_no = parse_id(enrollment_no, "Invalid enrollment number")
    return service.update(enrollment_no, data)


@router.delete("/{enrollment_no}", response_model=ItemEnvelope[SocietyMemberRead])
def remove_member(
    enrollment_no: str,
    service: SocietyMemberService = Depends(get_society_member_service),
):
    enrollment_no = parse_id(enrollment_no, "Invalid enrollment number")
    return service.remove(enrollment_no)


# "/all" must be registered before "/{society_id}"
@admin_router.get("/all", response_model=ListEnvelope[SocietyMemberAdminView])
def admin_list_members(
    page: Optional[str] = Query(None),
    service: SocietyMemberService = Depends(get_society_member_service),
):
    """Every membership regardless of approval, with the full user profile."""
    return service.find_all_admin(parse_page(page))


@admin_router.get("/{society_id}", response_model=ListEnvelope[SocietyMemberAdminView])
def admin_list_society_members(
    society_id: str,
    page: Optional[str] = Query(None),
    service: SocietyMemberService = Depends(get_society_member_service),
):
    society_id = parse_id(society_id, "Invalid society id")
    return service.find_by_society_id_admin(society_id, parse_page(page))
