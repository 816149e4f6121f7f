"""
API main router
Combines all endpoint routers
"""

from fastapi import APIRouter

from quizapp.api.endpoints import admin, health, quizzes

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(quizzes.router, prefix="/quiz", tags=["Quizzes"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
