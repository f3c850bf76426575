# api/v1/router.py
from fastapi import APIRouter

from . import activities, auth, profile, stats

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(activities.router, prefix="/activities", tags=["Activities"])
api_router.include_router(stats.router, prefix="/stats", tags=["Stats"])
