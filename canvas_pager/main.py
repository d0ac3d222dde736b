import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from canvas_pager import __version__
from canvas_pager.api.routes import health, split
from canvas_pager.config import settings

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Canvas Pager API")
    logger.info(
        f"Default page height: {settings.pagination.page_height}px, "
        f"step: {settings.pagination.step}, "
        f"split line: {settings.pagination.split_line_pixels}px"
    )

    yield

    logger.info("Shutting down Canvas Pager API")


app = FastAPI(
    title="Canvas Pager API",
    description="Splits tall rendered images into pages at blank horizontal bands",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(split.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Canvas Pager API",
        "version": __version__,
        "docs": "/docs",
    }
