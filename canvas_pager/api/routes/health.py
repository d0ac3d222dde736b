from fastapi import APIRouter
from pydantic import BaseModel

from canvas_pager import __version__

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Check API health."""
    return HealthResponse(status="healthy", version=__version__)
