"""
Role filters for listing endpoints.

A listing can be narrowed to records whose owning user has a given role.
Each supported value of the ?role= query parameter has its own variant;
parse_role_filter() is the only place raw strings are interpreted.
"""

from typing import Optional

from sqlalchemy import Select

from alumni_portal.core.exceptions import ValidationError
from alumni_portal.models import User
from alumni_portal.schemas.schemas import UserRole


class RoleFilter:
    """Base variant. role is None means no narrowing."""

    role: Optional[UserRole] = None

    def apply(self, stmt: Select, owner=None) -> Select:
        """
        Add the role predicate to stmt.

        owner is the relationship attribute leading to User (e.g.
        ProfessionalInformation.user) for child resources, or None when
        stmt already selects users.
        """
        if self.role is None:
            return stmt
        if owner is not None:
            stmt = stmt.join(owner)
        return stmt.where(User.role == self.role)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class AnyRole(RoleFilter):
    role = None


class AlumniOnly(RoleFilter):
    role = UserRole.ALUMNI


class StudentsOnly(RoleFilter):
    role = UserRole.STUDENT


_VARIANTS = {
    UserRole.ALUMNI.value: AlumniOnly,
    UserRole.STUDENT.value: StudentsOnly,
}


def parse_role_filter(raw: Optional[str], strict: bool = False) -> RoleFilter:
    """
    Map ?role= to a filter. Unknown values list every role, except on
    the users listing (strict=True) where role is the column itself.
    """
    if raw is None or raw == "":
        return AnyRole()
    try:
        return _VARIANTS[raw]()
    except KeyError:
        if not strict:
            return AnyRole()
        raise ValidationError(f"Invalid role '{raw}'. Expected one of: ALUMNI, STUDENT") from None
