import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from reflections_api.api.router import api_router
from reflections_api.core.config import get_settings
from reflections_api.core.logging_config import configure_logging
from reflections_api.db.base import Base
from reflections_api.db.session import get_engine
from reflections_api.models import ApiKey  # noqa: F401
from reflections_api.services.storage import build_storage_service

logger = logging.getLogger(__name__)


def _error_body(detail) -> dict:
    if isinstance(detail, dict) and "error" in detail:
        return detail
    return {"error": detail}


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.detail), headers=exc.headers)


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        engine = get_engine()
        # An unreachable database aborts startup.
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        if settings.auto_create_tables:
            Base.metadata.create_all(bind=engine)
        logger.info(
            "%s %s started in %s, image upload enabled: %s",
            settings.app_name,
            settings.app_version,
            settings.app_env,
            app.state.storage is not None,
        )
        yield

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.storage = build_storage_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    if app.state.storage is not None and app.state.storage.backend == "local":
        app.mount("/media", StaticFiles(directory=str(settings.media_path)), name="media")
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
