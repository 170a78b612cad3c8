"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from bookmyblock.api.routes import admin, auth, events, theaters

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(events.router)
api_router.include_router(admin.router)
api_router.include_router(theaters.router)
