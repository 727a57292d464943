"""HTTP surface — a single POST endpoint that answers with JSON."""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from photo_describer.config import Config
from photo_describer.constants import (
    CORS_HEADERS,
    MSG_ERR_INTERNAL,
    MSG_ERR_METHOD_NOT_ALLOWED,
    MSG_ERR_NO_IMAGE,
    MSG_REQUEST_RECEIVED,
    MSG_STORE_FAILED,
    MSG_UNEXPECTED_FAILURE,
)
from photo_describer.describer import DescriptionResult, DescriptionService
from photo_describer.errors import ErrorKind, StorageWriteFailure, status_for
from photo_describer.temp_store import transient_image

logger = logging.getLogger(__name__)


def _error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_for(kind))


def _result_response(result: DescriptionResult) -> JSONResponse:
    match result.kind:
        case None:
            return JSONResponse(result.to_json())
        case kind:
            return JSONResponse(result.to_json(), status_code=status_for(kind))


async def _describe_safely(service: DescriptionService, image_path: Path) -> DescriptionResult:
    try:
        return await service.describe(image_path)
    except Exception:
        logger.exception(MSG_UNEXPECTED_FAILURE, image_path)
        return DescriptionResult(error=MSG_ERR_INTERNAL, kind=ErrorKind.INTERNAL_FAILURE)


def create_app(config: Config, service: DescriptionService) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        await service.aclose()

    app = FastAPI(
        title="Photo Describer",
        description="Short Latvian descriptions of uploaded photos.",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    # Every verb other than POST on the endpoint path ends up here as a 405.
    @app.exception_handler(StarletteHTTPException)
    async def reject_method(request: Request, exc: StarletteHTTPException):
        match exc.status_code:
            case 405:
                return _error_response(ErrorKind.INVALID_METHOD, MSG_ERR_METHOD_NOT_ALLOWED)
            case _:
                return await http_exception_handler(request, exc)

    @app.post(config.endpoint_path)
    async def describe(request: Request) -> JSONResponse:
        """Body is the raw image; no multipart or JSON envelope."""
        body = await request.body()
        logger.info(MSG_REQUEST_RECEIVED, len(body))

        match body:
            case b"":
                return _error_response(ErrorKind.EMPTY_PAYLOAD, MSG_ERR_NO_IMAGE)
            case _:
                pass

        try:
            async with transient_image(body, config.temp_dir) as image_path:
                result = await _describe_safely(service, image_path)
        except StorageWriteFailure as exc:
            logger.error(MSG_STORE_FAILED, exc.__cause__)
            return _error_response(exc.kind, exc.message)

        return _result_response(result)

    return app
