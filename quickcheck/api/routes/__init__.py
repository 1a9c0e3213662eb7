from fastapi import APIRouter

from quickcheck.api.routes import admin, appointments, auth, dashboard, guests, health, host, reviews, visits

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(guests.router, prefix="/guests", tags=["guests"])
api_router.include_router(visits.router, prefix="/visits", tags=["visits"])
api_router.include_router(host.router, prefix="/host", tags=["host"])
api_router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
