"""
API routes for weather prediction.

Endpoints are plain ``def`` functions: inference is blocking, so FastAPI runs
them in its threadpool and the predictor's lock serializes engine access.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from weather_inference.api.dependencies import get_predictor, get_settings
from weather_inference.api.models import (
    CategoriesResponse,
    CategoryInfo,
    ErrorResponse,
    HealthResponse,
    PredictionResponse,
    PredictRequest,
)
from weather_inference.config import Settings
from weather_inference.engine.exceptions import EngineInitializationError
from weather_inference.exceptions import InvalidInputError
from weather_inference.models.enums import CATEGORY_TABLE
from weather_inference.models.result import Err
from weather_inference.presentation import icon_for
from weather_inference.service import WeatherPredictor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/predict",
    response_model=PredictionResponse,
    status_code=status.HTTP_200_OK,
    summary="Predict weather from temperature and humidity",
    responses={
        200: {"description": "Prediction completed"},
        400: {"model": ErrorResponse, "description": "Malformed request body"},
        422: {"model": ErrorResponse, "description": "Temperature or humidity missing or not a number"},
        502: {"model": ErrorResponse, "description": "Model invocation failed"},
        503: {"model": ErrorResponse, "description": "Model could not be initialized"},
    },
)
def predict_weather(
    request: PredictRequest,
    predictor: WeatherPredictor = Depends(get_predictor),
) -> PredictionResponse:
    """
    Classify one temperature/humidity pair.
    
    Args:
        request: Raw form values
        predictor: Predictor singleton (injected)
    
    Returns:
        PredictionResponse with label, icon and display text
    """
    outcome = predictor.predict_text(request.temperature, request.humidity)
    if isinstance(outcome, Err):
        raise InvalidInputError(outcome.error)
    
    result = outcome.value
    return PredictionResponse(
        label=result.label,
        class_index=result.class_index,
        icon=result.icon,
        message=result.message,
        scores=result.scores,
        engine=predictor.engine_name,
        latency_ms=result.latency_ms,
    )


@router.get(
    "/categories",
    response_model=CategoriesResponse,
    summary="Category table in model output order",
)
def list_categories() -> CategoriesResponse:
    return CategoriesResponse(
        categories=[
            CategoryInfo(index=i, label=label, icon=icon_for(label))
            for i, label in enumerate(CATEGORY_TABLE)
        ]
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={
        200: {"description": "Model loaded and usable"},
        503: {"description": "Model could not be loaded or was released"},
    },
)
def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Report whether the model engine is loaded.
    
    Resolves the predictor by hand so a load failure becomes an "unhealthy"
    report instead of an error response. Dependency overrides are honored.
    """
    factory = request.app.dependency_overrides.get(get_predictor, get_predictor)
    
    try:
        predictor = factory()
        model_status = "closed" if predictor.closed else "ok"
        engine = predictor.engine_name
    except EngineInitializationError as e:
        logger.warning("Health check: model unavailable", extra={"error": e.message})
        model_status = f"error: {e.message}"
        engine = settings.INFERENCE_ENGINE
    
    healthy = model_status == "ok"
    body = HealthResponse(
        status="healthy" if healthy else "unhealthy",
        version=settings.APP_VERSION,
        engine=engine,
        services={"model": model_status},
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )
