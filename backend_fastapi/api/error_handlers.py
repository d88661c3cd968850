"""
Responder único de errores.

Es el único lugar donde se construyen cuerpos de error HTTP, así todas las
rutas devuelven la misma forma: {"message": ..., **metadatos}. Cada fallo se
registra una sola vez; las trazas quedan en el log y nunca llegan al cliente.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from core.domain.errors import InternalError, TaskError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """
    Registra los handlers globales en la app.

    Las excepciones desconocidas se capturan en un middleware y no con un
    handler de Exception: Starlette vuelve a lanzar estas últimas después de
    responder y el servidor las registraría por segunda vez.
    """
    app.add_exception_handler(TaskError, task_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unhandled_errors)


def render_error(
    request: Request,
    status_code: int,
    message: str,
    meta: dict[str, Any] | None = None,
    exc_info: BaseException | None = None,
) -> JSONResponse:
    meta = meta or {}
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} -> {status_code}: {message}",
        extra={"status_code": status_code, "meta": meta},
        exc_info=exc_info,
    )
    return JSONResponse(status_code=status_code, content={"message": message, **meta})


async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    return render_error(
        request,
        exc.status_code,
        exc.message,
        exc.meta,
        exc_info=exc if exc.status_code >= 500 else None,
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
        }
        for e in exc.errors()
    ]
    return render_error(
        request, status.HTTP_400_BAD_REQUEST, "Invalid request data", {"errors": errors}
    )


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return render_error(request, exc.status_code, str(exc.detail))


async def catch_unhandled_errors(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        internal = InternalError()
        return render_error(
            request, internal.status_code, internal.message, internal.meta, exc_info=exc
        )
