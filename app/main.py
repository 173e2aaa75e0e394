from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.api import router
from logging_config import configure_logging
from services.decoder import build_default_decoder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    decoder = build_default_decoder()
    logger.info("Decoder ready", extra={"timezone": decoder.location})
    try:
        yield
    finally:
        build_default_decoder.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="SkyAlert Decoder",
        description="Decodes SkyAlert cloud sensor lines into structured records.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(router)
    return app

app = create_app()
