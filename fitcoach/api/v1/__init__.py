"""API v1 router aggregation."""

from fastapi import APIRouter

from fitcoach.api.v1.endpoints import (
    analytics,
    coach,
    exercises,
    health,
    plans,
    sessions,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(plans.router, prefix="/plans", tags=["plans"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(coach.router, prefix="/coach", tags=["coach"])
