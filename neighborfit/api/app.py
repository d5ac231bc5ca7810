"""FastAPI application entry point."""

import logging
import random

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from neighborfit.api.routes import matching, neighborhoods, preferences
from neighborfit.api.schemas import failure
from neighborfit.config import settings
from neighborfit.data.base import NeighborhoodSource, PreferenceStore
from neighborfit.data.mock_neighborhoods import MockNeighborhoodSource
from neighborfit.data.preferences import InMemoryPreferenceStore
from neighborfit.engine.validation import InvalidInputError

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid input: " + "; ".join(parts)


async def _invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content=failure(f"Invalid input: {exc}"))


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    reason = _describe_validation_error(exc)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, reason)
    return JSONResponse(status_code=400, content=failure(reason))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=failure(str(exc.detail)))


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=failure("Internal Server Error"))


def create_app(
    preference_store: PreferenceStore | None = None,
    neighborhood_source: NeighborhoodSource | None = None,
) -> FastAPI:
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(
        title="NeighborFit",
        description="Neighborhood compatibility matching",
        version="0.1.0",
        debug=settings.debug,
    )

    app.state.preference_store = preference_store or InMemoryPreferenceStore()
    app.state.neighborhood_source = neighborhood_source or MockNeighborhoodSource(
        random.Random(settings.mock_seed)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InvalidInputError, _invalid_input_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    app.include_router(neighborhoods.router)
    app.include_router(matching.router)
    app.include_router(preferences.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
