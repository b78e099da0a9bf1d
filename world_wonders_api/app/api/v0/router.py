"""
Top-level router for version 0 of the API.

Wonder listings, lookups and the auxiliary enumerations all live under
``/wonders``.  When new resources are added, include their routers
here.
"""

from fastapi import APIRouter

from .endpoints import wonders

router = APIRouter()

router.include_router(wonders.router, prefix="/wonders", tags=["wonders"])
