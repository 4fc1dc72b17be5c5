from fastapi import APIRouter

from hiring_api.modules.applications import router as applications_router
from hiring_api.modules.auth import router as auth_router

api_router = APIRouter()

api_router.include_router(auth_router, tags=["Authentication"])

api_router.include_router(applications_router, tags=["Applications"])
