"""Routes API / API routes."""

from fastapi import APIRouter

from fuel_tracker.api import refuelings, vehicles

api_router = APIRouter(prefix="/api")

api_router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
api_router.include_router(refuelings.router, prefix="/refuelings", tags=["refuelings"])
