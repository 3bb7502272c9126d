from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Routers
from .routers.prediction import router as prediction_router
from .routers.regions import router as regions_router
from .routers.properties import router as properties_router

# Core modules
from .core.config import settings
from .core.errors import PredictionValidationError
from .core.logging import configure_logging, CorrelationIdMiddleware
from .core.metrics import PREDICTIONS, PromMiddleware, metrics_endpoint
from .services.validation import violations_from_errors

async def request_validation_handler(request: Request, exc: RequestValidationError):
    if request.url.path == "/predict":
        PREDICTIONS.labels(outcome="invalid").inc()
    # Every violated field is reported, as 400 rather than FastAPI's default 422
    errors = [{"field": v.field, "message": v.message} for v in violations_from_errors(exc.errors())]
    return JSONResponse(status_code=400, content={"message": "Invalid request", "errors": errors})

async def prediction_validation_handler(request: Request, exc: PredictionValidationError):
    if request.url.path == "/predict":
        PREDICTIONS.labels(outcome="invalid").inc()
    return JSONResponse(status_code=400, content={"message": "Invalid request", "errors": exc.as_dicts()})

def create_app() -> FastAPI:
    """
    App factory so tests and ASGI servers can instantiate cleanly.
    """
    configure_logging()  # Set up JSON logs + correlation-id filter

    app = FastAPI(
        title="London Housing API",
        version="1.0.0",
        description="Synthetic London house-price prediction, region insights and listing exploration.",
    )

    # CORS: allow the front-end to call the API.
    allow_origins = [o.strip() for o in settings.ALLOW_ORIGINS.split(",")] if settings.ALLOW_ORIGINS else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    # Observability middlewares
    app.add_middleware(CorrelationIdMiddleware)  # Adds/propagates X-Request-Id
    if settings.PROMETHEUS_ENABLED:
        app.add_middleware(PromMiddleware)       # Records req/latency metrics

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PredictionValidationError, prediction_validation_handler)

    # Meta routes
    @app.get("/health", tags=["meta"])
    def health():
        return {"status": "ok"}

    @app.get("/ping", tags=["meta"])
    def ping():
        return {"pong": True}

    if settings.PROMETHEUS_ENABLED:
        # Standard Prometheus scrape endpoint
        app.add_route("/metrics", metrics_endpoint, methods=["GET"])

    # Business routes
    app.include_router(prediction_router, tags=["prediction"])
    app.include_router(regions_router, tags=["regions"])
    app.include_router(properties_router, tags=["properties"])

    return app

app = create_app()
