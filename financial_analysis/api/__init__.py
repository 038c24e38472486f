"""
API routes for the analysis engine.
"""

from fastapi import APIRouter

from financial_analysis.api import analysis, mcp

router = APIRouter()

# Include sub-routers
router.include_router(analysis.router, prefix="/analyze", tags=["analysis"])
router.include_router(mcp.router, tags=["tools"])
