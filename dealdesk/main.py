# dealdesk/main.py
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware

from dealdesk.core.settings import settings
from dealdesk.core.logging_config import setup_logging, logger
from dealdesk.middleware.request_id import RequestIdMiddleware
from dealdesk.fees.api.fees import router as fees_router
from dealdesk.observability.metrics import router as metrics_router


# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title=settings.APP_NAME, version="0.1.0")

setup_logging()
logger.info("startup", service="dealdesk-api", env=settings.ENV)


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID", "unknown"
    )
    client_ip = request.client.host if request.client else "unknown"

    bound_logger = logger.bind(
        request_id=request_id,
        ip=client_ip,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    try:
        response = await call_next(request)
    except Exception:
        latency_ms = round((time.time() - start) * 1000, 2)
        bound_logger.bind(latency_ms=latency_ms).exception("request_failed")
        raise
    latency_ms = round((time.time() - start) * 1000, 2)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info(
        "request_finished"
    )
    return response


# ----------------------------------------------------
# Middleware
# ----------------------------------------------------
# laatst toegevoegd = buitenste laag: request_id staat klaar voor de logging middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)


@app.exception_handler(RequestValidationError)
async def validation_handler(request: Request, exc: RequestValidationError):
    logger.bind(
        request_id=getattr(request.state, "request_id", None),
        endpoint=str(request.url.path),
        errors=len(exc.errors()),
    ).warning("fee_input_rejected")
    return await request_validation_exception_handler(request, exc)


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(fees_router)
app.include_router(metrics_router)  # /metrics
