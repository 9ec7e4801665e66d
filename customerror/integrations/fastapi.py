"""
FastAPI integration

    app = FastAPI()
    install_error_handlers(app)

Raised CustomErrors become JSON responses carrying the error's status code
(500 when unset) and its ``to_dict()`` view. When the request's
Accept-Language names a language the error has a translation for, the
localized message is returned.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse

from customerror.errors.custom_error import CustomError, WrappedError, as_custom_error
from customerror.errors.options import with_language
from customerror.i18n.language import parse_accept_language
from customerror.utils.app_logger import get_logger

logger = get_logger(__name__)


def localize(exc: CustomError, accept_language: Optional[str]) -> CustomError:
    """Instantiate ``exc`` in the preferred language it has a translation for"""
    for language in parse_accept_language(accept_language):
        if language in exc.language_messages:
            localized = exc.new(with_language(language))
            if localized is not None:
                return localized
    return exc


def build_error_response(request: Request, exc: CustomError) -> JSONResponse:
    error = localize(exc, request.headers.get("accept-language"))
    status_code = error.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {error.api_error()}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {error.api_error()}")

    return JSONResponse(status_code=status_code, content=error.to_dict())


def install_error_handlers(app) -> None:
    """Register the CustomError and WrappedError exception handlers on ``app``"""

    @app.exception_handler(CustomError)
    async def custom_error_handler(request: Request, exc: CustomError):
        return build_error_response(request, exc)

    @app.exception_handler(WrappedError)
    async def wrapped_error_handler(request: Request, exc: WrappedError):
        custom = as_custom_error(exc)
        if custom is None:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"message": str(exc)},
            )
        return build_error_response(request, custom)
