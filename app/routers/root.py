# =============================================================================
# app/routers/root.py - Root Endpoint
# =============================================================================
# The server's only route. It touches no database or third-party service,
# so it answers the same way whatever their health.
# =============================================================================

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_TEXT = "Welcome to the Express App!"


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """
    Root endpoint - returns the welcome text.
    """
    return WELCOME_TEXT
