import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from poster.api import auth, catalog, character_generations, image_generations, projects, text_summaries
from poster.core.config import settings
from poster.core.db import close_db, init_db
from poster.core.errors import (
    PosterError,
    http_exception_handler,
    poster_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from poster.services.reference_service import ReferenceDataService


def create_app(init_database: bool = True) -> FastAPI:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Poster API",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PosterError, poster_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(auth.router, prefix="/api")
    app.include_router(projects.router, prefix="/api")
    app.include_router(text_summaries.router, prefix="/api")
    app.include_router(image_generations.router, prefix="/api")
    app.include_router(character_generations.router, prefix="/api")
    app.include_router(catalog.router, prefix="/api")

    if init_database:
        @app.on_event("startup")
        async def startup_event():
            await init_db()
            await ReferenceDataService.initialize_defaults()
            settings.warn_missing_keys()

        @app.on_event("shutdown")
        async def shutdown_event():
            await close_db()

    return app
