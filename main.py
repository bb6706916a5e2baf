from fastapi import FastAPI
from contextlib import asynccontextmanager
from cardgen.core.config import settings
from cardgen.core.logging import get_logger, setup_logging
from cardgen.apis.flashcards.main import router as flashcards_router
from cardgen.apis.flashcards.main import get_flashcards_generator

import uvicorn
from fastapi.middleware.cors import CORSMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the generator (and its backend, if any) once at startup
    generator = get_flashcards_generator()
    logger.info(generator.api_status()["message"])
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app.name, version=settings.app.version, lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(flashcards_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    setup_logging()
    try:
        uvicorn.run(
            "main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        logger.error(f"An error occurred when starting the server: {e}.")
