"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: ORM tables (what is stored)
- Schemas: API contract (what client sends/receives)
"""

from alumni_portal.schemas.schemas import (
    UserRole,
    PageMeta,
    ItemEnvelope,
    ListEnvelope,
    ErrorEnvelope,
)

__all__ = ["UserRole", "PageMeta", "ItemEnvelope", "ListEnvelope", "ErrorEnvelope"]
