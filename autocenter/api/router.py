# autocenter/api/router.py
from fastapi import APIRouter
from autocenter.api.routes import admin, bookings, site

api_router = APIRouter(prefix="/api")
api_router.include_router(site.router, tags=["site"])
api_router.include_router(bookings.router, tags=["bookings"])
api_router.include_router(admin.router, tags=["admin"])
