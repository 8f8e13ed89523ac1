"""
FastAPI application entry point for Weather Inference Layer.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from weather_inference.api.dependencies import close_predictor, get_predictor
from weather_inference.api.error_handlers import EXCEPTION_HANDLERS
from weather_inference.api.middleware import RequestTracingMiddleware
from weather_inference.api.routes import router
from weather_inference.config import settings
from weather_inference.engine.exceptions import EngineInitializationError
from weather_inference.logging_config import configure_logging
from weather_inference.presentation import model_init_failed_message

# Configure structured logging before anything else logs
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


def startup() -> None:
    """Load the model eagerly so the first request does not pay for it."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        engine=settings.INFERENCE_ENGINE,
        model_path=settings.MODEL_PATH,
    )
    
    try:
        predictor = get_predictor()
        logger.info("Model loaded", engine=predictor.engine_name)
    except EngineInitializationError as e:
        # Keep serving: /predict answers 503 and retries the load per request
        logger.error(model_init_failed_message(e), details=e.details)
    
    logger.info("Application startup complete")


def shutdown() -> None:
    """Release the model handle exactly once."""
    logger.info("Application shutdown")
    close_predictor()
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI):
    startup()
    yield
    shutdown()


app = FastAPI(
    title=settings.APP_NAME,
    description="Weather classification from temperature and humidity with a pretrained model",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(RequestTracingMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["prediction"])


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "engine": settings.INFERENCE_ENGINE,
        "docs": "/docs",
        "health": "/health",
        "predict": "/predict",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "weather_inference.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
