"""
User Routes

POST   /users                - Register a student or alumnus
GET    /users?role=&page=    - List approved users
GET    /users/{id}           - Get a user with their records
PUT    /users/{id}           - Partial update (also used to approve)
DELETE /users/{id}           - Delete a user and their records
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from alumni_portal.api.dependencies import get_user_service
from alumni_portal.services import UserService
from alumni_portal.services.filters import parse_role_filter
from alumni_portal.utils.params import parse_id, parse_page
from alumni_portal.schemas.schemas import (
    ItemEnvelope, ListEnvelope, UserCreate, UserUpdate, UserRead, UserDetail
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=ItemEnvelope[UserRead], status_code=201)
def create_user(data: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Register a user.

    Fails with 409 if a user with the same enrollment number, email and
    mobile already exists. New users are unapproved.
    """
    return service.create(data)


@router.get("", response_model=ListEnvelope[UserDetail])
def list_users(
    role: Optional[str] = Query(None, description="ALUMNI or STUDENT"),
    page: Optional[str] = Query(None),
    service: UserService = Depends(get_user_service),
):
    """List approved users, 10 per page."""
    return service.find_all(parse_page(page), parse_role_filter(role, strict=True))


@router.get("/{id}", response_model=ItemEnvelope[UserDetail])
def get_user(id: str, service: UserService = Depends(get_user_service)):
    user_id = parse_id(id)
    return service.find_one(user_id)


@router.put("/{id}", response_model=ItemEnvelope[UserRead])
def update_user(id: str, data: UserUpdate, service: UserService = Depends(get_user_service)):
    user_id = parse_id(id)
    return service.update(user_id, data)


@router.delete("/{id}", response_model=ItemEnvelope[UserRead])
def delete_user(id: str, service: UserService = Depends(get_user_service)):
    user_id = parse_id(id)
    return service.remove(user_id)
