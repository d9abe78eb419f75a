"""
Error handling for the Catalog API

- ErrorHandlerMiddleware: last line of defence, turns any exception that
  escapes a route into a {"code", "message"} JSON response
- Exception handlers for request validation and HTTP errors so every
  error body has the same shape
"""
import logging
import re
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from catalog.shared.app_error import AppError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"

# Messages matching any of these are never shown to clients in production
SENSITIVE_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (r"password", r"token", r"secret", r"key", r"connection", r"database")
]


def _sanitize_message(message: str, environment: str) -> str:
    if not message:
        return GENERIC_ERROR_MESSAGE
    if environment == "production" and any(p.search(message) for p in SENSITIVE_PATTERNS):
        return GENERIC_ERROR_MESSAGE
    return message


def build_error_response(error: Exception, environment: str = "development") -> JSONResponse:
    """
    Map an exception to the API error body

    AppError keeps its own status and code; anything else is a 500
    INTERNAL_ERROR.
    """
    if isinstance(error, AppError):
        status_code = error.http_code
        code = error.code
        message = _sanitize_message(error.message, environment)
    else:
        status_code = 500
        code = "INTERNAL_ERROR"
        message = _sanitize_message(str(error), environment)

    content = {"code": code, "message": message}

    if environment == "development":
        content["timestamp"] = datetime.now(timezone.utc).isoformat()

    return JSONResponse(status_code=status_code, content=content)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Catch-all for exceptions raised while handling a request

    Unexpected errors are logged with their traceback and answered with a
    sanitized 500.
    """

    def __init__(self, app, environment: str = "development"):
        super().__init__(app)
        self.environment = environment

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except AppError as e:
            logger.warning(f"{request.method} {request.url.path} -> {e}")
            return build_error_response(e, self.environment)
        except Exception as e:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}: {e}")
            return build_error_response(e, self.environment)


def register_exception_handlers(app: FastAPI) -> None:
    """Give framework-level errors the {"code", "message"} shape"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(
            status_code=400,
            content={"code": "VALIDATION_ERROR", "message": f"Invalid request: {details}"}
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        try:
            code = HTTPStatus(exc.status_code).name
        except ValueError:
            code = "HTTP_ERROR"
        return JSONResponse(
            status_code=exc.status_code,
            content={"code": code, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )
