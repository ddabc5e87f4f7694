"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from alumni_portal.api.routes.user_routes import router as user_router
from alumni_portal.api.routes.professional_information_routes import router as professional_information_router
from alumni_portal.api.routes.interview_experience_routes import router as interview_experience_router
from alumni_portal.api.routes.society_member_routes import router as society_member_router
from alumni_portal.api.routes.society_member_routes import admin_router as society_member_admin_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(user_router)
api_router.include_router(professional_information_router)
api_router.include_router(interview_experience_router)
api_router.include_router(society_member_router)
api_router.include_router(society_member_admin_router)
