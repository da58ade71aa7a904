"""
Top‑level router for version 1 of the API.

When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import companies

router = APIRouter()

router.include_router(companies.router, prefix="/companies", tags=["companies"])
