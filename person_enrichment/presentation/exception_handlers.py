from http import HTTPStatus
from typing import Any, Callable

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from person_enrichment.domain.exceptions import DomainError, ValidationError
from person_enrichment.domain.ports.services.logger import LoggerPort


def _error(status: HTTPStatus, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def _logger(request: Request) -> LoggerPort:
    return request.app.state.logger


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    _logger(request).warning("Rejected request", path=request.url.path, reason=str(exc))
    return _error(HTTPStatus.BAD_REQUEST, str(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    message = f"{location}: {error['msg']}"
    _logger(request).warning("Malformed request", path=request.url.path, reason=message)
    return _error(HTTPStatus.BAD_REQUEST, message)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    _logger(request).exception("Request failed", exc=exc, path=request.url.path, reason=str(exc))
    return _error(HTTPStatus.INTERNAL_SERVER_ERROR, str(exc))


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    _logger(request).exception("Unhandled error", exc=exc, path=request.url.path)
    return _error(HTTPStatus.INTERNAL_SERVER_ERROR, "internal server error")


roster: list[tuple[type[Exception], Callable[..., Any]]] = [
    (RequestValidationError, request_validation_error_handler),
    (ValidationError, validation_error_handler),
    (DomainError, domain_error_handler),
    (Exception, unexpected_exception_handler),
]
