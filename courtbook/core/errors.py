"""Exception handlers rendering failures in the response envelope."""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from courtbook.core.exceptions import CourtBookingError

logger = logging.getLogger(__name__)


def error_body(error: str, details: Optional[Any] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": error}
    if details:
        body["details"] = jsonable_encoder(details)
    return body


def _describe_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CourtBookingError)
    async def domain_exception_handler(request: Request, exc: CourtBookingError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            error_body(exc.message, exc.details),
            status_code=exc.status_code,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            error_body(str(exc.detail)),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            error_body(
                _describe_validation_errors(exc.errors()),
                [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
                    for err in exc.errors()
                ],
            ),
            status_code=400,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(error_body(str(exc) or "Internal server error"), status_code=500)
