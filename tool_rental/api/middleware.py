"""FastAPI middleware for request tracing and latency metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from tool_rental.infrastructure.observability.metrics import request_duration_histogram


UNMATCHED_ENDPOINT = "unmatched"


def _route_template(request: Request) -> str:
    """
    /v1/tools/{tool_code} rather than /v1/tools/LADW, to bound label values.

    Requests no route matched share a single label.
    """
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ENDPOINT)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an ID and time it.

    A client-supplied X-Request-ID is reused so callers can correlate logs.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        response = await call_next(request)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=_route_template(request),
            status=response.status_code,
        ).observe(time.perf_counter() - start_time)

        response.headers["X-Request-ID"] = request_id
        return response
