from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from booking_engine.api import form_schema, health, quotes
from booking_engine.core.config import settings
from booking_engine.core.errors import register_error_handlers
from booking_engine.core.logger_config import configure_logging
from booking_engine.core.metrics import request_count, request_duration, get_metrics_text
from booking_engine.core.security import ApiKeyGate
from booking_engine.db.session import close_engine
import time
import logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            self._record(request, 500, time.time() - start_time)
            raise

        self._record(request, response.status_code, time.time() - start_time)
        return response

    @staticmethod
    def _record(request: Request, status: int, duration: float):
        # Route templates keep label cardinality bounded
        route = request.scope.get("route")
        endpoint = getattr(route, "path", "unmatched")
        request_count.labels(method=request.method, endpoint=endpoint, status=status).inc()
        request_duration.labels(method=request.method, endpoint=endpoint).observe(duration)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")
    if app.state.api_key_gate.open_mode:
        logger.warning("API_KEY is not set: /api routes accept unauthenticated requests")

    yield

    logger.info("Application shutting down...")
    await close_engine()
    logger.info("Shutdown complete")


app = FastAPI(
    title=settings.API_TITLE,
    description=settings.API_DESCRIPTION,
    version=settings.API_VERSION,
    lifespan=lifespan
)

app.state.api_key_gate = ApiKeyGate(settings.API_KEY)

app.add_middleware(MetricsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(form_schema.router)
app.include_router(quotes.router)


@app.get("/metrics", tags=["monitoring"])
async def metrics():
    return Response(
        content=get_metrics_text(),
        media_type="text/plain; version=0.0.4; charset=utf-8"
    )


@app.get("/", tags=["root"])
async def root():
    return {
        "message": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "metrics": "/metrics"
    }
