# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Who You Gonna Call
==================
Resolves who is currently on call for an OpsGenie schedule and, on request,
rings them through Twilio.

Endpoints:
    GET /whosoncall?id=...|name=...   current on-call people and numbers
    GET /alert?id=...|name=...        same lookup, then call everybody on it
    GET /status                       liveness
    GET /metrics                      Prometheus

Port: 8080
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wygc.controllers import oncall_controller, system_controller
from wygc.core import dependencies
from wygc.core.config import settings
from wygc.core.errors import WhosOnCallError
from wygc.core.logging import get_logger
from wygc.middleware import MetricsMiddleware, RequestIDMiddleware
from wygc.schemas import ErrorResponse

logger = get_logger("main")


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    # A ConfigError here aborts startup; uvicorn exits non-zero
    settings.validate()
    logger.info("Config parsed successfully: %s", settings.describe())
    dependencies.init_http_client(settings)
    logger.debug("HTTP client initialised with timeout=%ss", settings.HTTP_TIMEOUT)
    yield
    await dependencies.close_http_client()
    logger.info("Shutting down — HTTP client closed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Who You Gonna Call",
    description="Looks up the on-call person for an OpsGenie schedule and alerts them.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@app.exception_handler(WhosOnCallError)
async def whosoncall_exception_handler(request: Request, exc: WhosOnCallError):
    request_id = _request_id(request)
    logger.warning(
        "Error while processing request: %s", exc, extra={"request_id": request_id}
    )
    body = ErrorResponse(**exc.to_dict(), request_id=request_id)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.exception("Unhandled exception", extra={"request_id": request_id})
    body = ErrorResponse(error="internal_server_error", detail=str(exc), request_id=request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


app.include_router(oncall_controller.router)
app.include_router(system_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.BIND_ADDRESS,
        port=settings.BIND_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
