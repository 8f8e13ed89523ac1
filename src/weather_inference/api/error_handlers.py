"""
FastAPI exception handlers for structured error responses.

Maps domain exceptions to HTTP status codes and user-facing messages:
- InvalidInputError -> 422 invalid_input
- EngineInitializationError -> 503 model_unavailable
- InferenceFailure -> 502 inference_failed
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from weather_inference.api.models import ErrorResponse
from weather_inference.engine.exceptions import EngineInitializationError, InferenceFailure
from weather_inference.exceptions import InvalidInputError
from weather_inference.monitoring.metrics import prediction_errors_total
from weather_inference.presentation import message_for, model_init_failed_message

logger = logging.getLogger(__name__)


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    """
    Handle rejected temperature/humidity input.
    
    Maps to 422 Unprocessable Entity with the message the user should see.
    """
    logger.info(
        "Invalid prediction input",
        extra={"details": exc.details},
    )
    
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorResponse(
            error="invalid_input",
            message=message_for(exc.invalid_input),
            details=exc.details,
        ),
    )


async def engine_initialization_error_handler(
    request: Request, exc: EngineInitializationError
) -> JSONResponse:
    """
    Handle an engine that could not be loaded.
    
    Maps to 503 Service Unavailable (the model may appear after a redeploy).
    """
    prediction_errors_total.labels(error_type="engine_unavailable").inc()
    logger.error(
        "Model unavailable",
        extra={"error": exc.message, "details": exc.details},
    )
    
    return _error_response(
        status.HTTP_503_SERVICE_UNAVAILABLE,
        ErrorResponse(
            error="model_unavailable",
            message=model_init_failed_message(exc),
            details=exc.details,
        ),
    )


async def inference_failure_handler(request: Request, exc: InferenceFailure) -> JSONResponse:
    """
    Handle engine faults during invocation.
    
    Maps to 502 Bad Gateway (the model runtime is the upstream).
    """
    logger.error(
        "Inference failure",
        extra={"error_type": type(exc).__name__, "error": exc.message},
    )
    
    return _error_response(
        status.HTTP_502_BAD_GATEWAY,
        ErrorResponse(
            error="inference_failed",
            message="The weather model failed to produce a prediction",
            details=exc.details,
        ),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (not JSON, wrong field types).
    
    Maps to 400 Bad Request (client error).
    """
    logger.warning(
        "Invalid request format",
        extra={"errors": exc.errors()},
    )
    
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            error="invalid_request",
            message="Request validation failed",
            details={"errors": [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
                for e in exc.errors()
            ]},
        ),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    """
    logger.exception(
        "Unexpected error",
        extra={"error_type": type(exc).__name__},
    )
    
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            error="internal_error",
            message="An unexpected error occurred",
        ),
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    InvalidInputError: invalid_input_handler,
    EngineInitializationError: engine_initialization_error_handler,
    InferenceFailure: inference_failure_handler,
    RequestValidationError: request_validation_error_handler,
    Exception: generic_error_handler,
}
