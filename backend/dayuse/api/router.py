"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from dayuse.api.routes import admin, auth, bookings, calendar, catalog, chat

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(calendar.router)
api_router.include_router(bookings.router)
api_router.include_router(admin.router)
api_router.include_router(chat.router)
api_router.include_router(catalog.router)
