"""Per-request log context and access logging."""

import time
import uuid

from fastapi import Request
from fastapi.exceptions import HTTPException, RequestValidationError
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import JSONResponse, Response

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip(request: Request) -> str:
    # first hop of X-Forwarded-For when behind a proxy
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind request_id, method, path and client IP to every log record.

    Logs `request.start` and `request.end`, and turns anything that escapes
    the app into a JSON error carrying the request id.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        with logger.contextualize(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=_client_ip(request),
            user_agent=request.headers.get("user-agent", "unknown"),
        ):
            logger.info("request.start")
            try:
                response = await call_next(request)
            except HTTPException as exc:
                return self._error(exc, exc.status_code, exc.detail, request_id, started)
            except RequestValidationError as exc:
                return self._error(exc, 422, exc.errors(), request_id, started)
            except Exception as exc:
                return self._error(exc, 500, "Internal Server Error", request_id, started)

            logger.bind(
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            ).info("request.end")
            response.headers.setdefault(REQUEST_ID_HEADER, request_id)
            return response

    @staticmethod
    def _error(
        exc: Exception, status_code: int, detail: object, request_id: str, started: float
    ) -> JSONResponse:
        logger.bind(
            status_code=status_code,
            duration_ms=_elapsed_ms(started),
            error_type=type(exc).__name__,
        ).opt(exception=exc).error("request.error")
        return JSONResponse(
            status_code=status_code,
            content={"detail": detail, "request_id": request_id},
            headers={REQUEST_ID_HEADER: request_id},
        )


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)
