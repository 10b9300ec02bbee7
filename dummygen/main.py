# dummygen/main.py
from fastapi import FastAPI, Request
from fastapi.responses import Response

import time

from dummygen import __version__
from dummygen.core.constants import HTTPHeaders
from dummygen.core.settings import settings, validate_required_settings
from dummygen.core.logging import configure_logging, get_logger
from dummygen.middleware.error_handler import setup_exception_handlers
from dummygen.middleware.request_context import RequestContextMiddleware

from dummygen.routes.generate import router as generate_router
from dummygen.routes.pages import router as pages_router

# ---------- App ----------
configure_logging(settings.LOG_LEVEL)

for name in validate_required_settings():
    get_logger("dummygen").warning("invalid_setting", extra={"setting": name})

app = FastAPI(title=settings.SERVICE_NAME, version=__version__)

# ---------- Middleware ----------
access_logger = get_logger("access")

@app.middleware("http")
async def access_log_middleware(request: Request, call_next):
    start = time.perf_counter()
    trace_id = getattr(request.state, "trace_id", None)

    response: Response | None = None
    try:
        response = await call_next(request)
        if settings.DEBUG:
            response.headers[HTTPHeaders.DEBUG_MODE] = "1"
        return response
    finally:
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        access_logger.info(
            "request_done",
            extra={
                "trace_id": trace_id,
                "method": request.method,
                "path": request.url.path,
                "status": getattr(response, "status_code", None),
                "latency_ms": elapsed_ms,
            },
        )

# added last so it runs first and the access log sees the trace id
app.add_middleware(RequestContextMiddleware)

setup_exception_handlers(app)

# ---------- Routers ----------
app.include_router(generate_router)
app.include_router(pages_router)  # catch-all, keep last
