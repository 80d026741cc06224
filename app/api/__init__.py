"""
API routes for the financial calculator.
"""

from fastapi import APIRouter

from app.api import calculations, snapshot

router = APIRouter()

# Include sub-routers
router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
router.include_router(snapshot.router, prefix="/snapshot", tags=["snapshot"])
