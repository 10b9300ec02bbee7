# dummygen/middleware/request_context.py
import time
import uuid
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from dummygen.core.constants import HTTPHeaders

# accept any casing on the way in, always answer with X-Request-Id
HDR_OUT = HTTPHeaders.REQUEST_ID


def _get_req_id_from_headers(request: Request) -> Optional[str]:
    # Starlette headers are case-insensitive
    return request.headers.get(HDR_OUT)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()

        trace_id = _get_req_id_from_headers(request) or str(uuid.uuid4())
        request.state.trace_id = trace_id

        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            request.state.elapsed_ms = int((time.perf_counter() - start) * 1000)

            if response is not None:
                response.headers[HDR_OUT] = trace_id

                expose = response.headers.get(HTTPHeaders.EXPOSE_HEADERS)
                if expose:
                    items = {h.strip() for h in expose.split(",")}
                    items.add(HDR_OUT)
                    response.headers[HTTPHeaders.EXPOSE_HEADERS] = ", ".join(sorted(items))
                else:
                    response.headers[HTTPHeaders.EXPOSE_HEADERS] = HDR_OUT
