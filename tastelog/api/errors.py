"""Error payloads with fixed string codes.

Every error leaves the API as ``{"error": <code>}`` with an optional
``message`` / ``detail`` so clients can branch on the code.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 400
    code = "bad_request"

    def __init__(self, message: str | None = None, detail: Any = None) -> None:
        super().__init__(message or self.code)
        self.message = message
        self.detail = detail

    def payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.code}
        if self.message:
            body["message"] = self.message
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class InvalidId(ApiError):
    code = "invalid_id"


class NoFields(ApiError):
    code = "no_fields"


class PlaceNameRequired(ApiError):
    code = "place_name_required"


class QueryRequired(ApiError):
    code = "query_required"


class NotFound(ApiError):
    status_code = 404
    code = "not_found"


class SearchNotConfigured(ApiError):
    status_code = 500
    code = "api_key_not_configured"


class SearchUpstreamFailed(ApiError):
    status_code = 502
    code = "naver_api_error"


BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1


def parse_id(raw: str) -> int:
    """Path id -> int. Anything that is not a non-zero BIGINT is invalid."""
    try:
        visit_id = int(raw)
    except (TypeError, ValueError):
        raise InvalidId() from None
    if visit_id == 0 or not BIGINT_MIN <= visit_id <= BIGINT_MAX:
        raise InvalidId()
    return visit_id


def _json(status_code: int, body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _json(exc.status_code, exc.payload())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return _json(422, {"error": "invalid_payload", "detail": detail})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        return _json(404, {"error": "not_found"})
    return _json(exc.status_code, {"error": "http_error", "detail": exc.detail})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return _json(500, {"error": "internal_error", "message": "서버 오류가 발생했습니다."})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
