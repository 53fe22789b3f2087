from http import HTTPStatus

from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


async def request_logging_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    try:
        response = await call_next(request)
    except Exception:
        # the outer error middleware turns this into a 500
        request.app.state.logger.info(
            "Request", method=request.method, uri=str(request.url.path), status=HTTPStatus.INTERNAL_SERVER_ERROR.value
        )
        raise
    request.app.state.logger.info(
        "Request", method=request.method, uri=str(request.url.path), status=response.status_code
    )
    return response
