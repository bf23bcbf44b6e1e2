"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from iss_passes.config import Settings
from iss_passes.passes.routes import router
from iss_passes.passes.service import PassService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the pass service on startup and close its session on teardown."""
    settings = Settings.from_env()
    service = PassService(settings)
    app.state.pass_service = service
    logger.info("Pass service initialized")
    yield
    service.close()
    logger.info("Pass service shut down")


app = FastAPI(title="ISS Passes API", lifespan=lifespan)
app.include_router(router)
