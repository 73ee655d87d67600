import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from cvgen.api.routes.generator import resume_store_for, router as generator_router
from cvgen.api.routes.health import router as health_router
from cvgen.config import configuration_warnings, configure_logging, get_settings

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    resume_store_for(settings.resume_dir).warm()

    warnings = configuration_warnings(settings)
    if warnings:
        logger.warning("--- Configuration Issues Detected ---")
        for warning in warnings:
            logger.warning(f"- {warning}")
        logger.warning("------------------------------------")
    yield


def create_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(title="CV & Cover Letter Generator", version="0.1.0", lifespan=lifespan)
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.include_router(health_router)
    app.include_router(generator_router)
    return app

app = create_app()
