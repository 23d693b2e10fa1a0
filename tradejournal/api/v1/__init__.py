"""
API v1 Router

All API endpoints for the frontend.
"""

from fastapi import APIRouter

from tradejournal.api.v1.endpoints import calculator, forms

router = APIRouter()

# Include all endpoint routers
router.include_router(calculator.router, prefix="/calculator", tags=["Calculator"])
router.include_router(forms.router, prefix="/forms", tags=["Forms"])
