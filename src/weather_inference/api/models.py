"""
API-specific request and response models for FastAPI endpoints.

The request carries the two form fields as typed text; parsing and validation
happen in weather_inference.parsing so the API reports the same structured
errors as any other caller.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from weather_inference.models.enums import WeatherCategory


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PredictRequest(BaseModel):
    """Request for the predict endpoint (raw form values)."""
    
    temperature: Optional[str] = Field(
        default=None,
        description="Temperature in degrees Celsius, as typed",
        examples=["25", "-3.5"],
    )
    humidity: Optional[str] = Field(
        default=None,
        description="Relative humidity in percent, as typed",
        examples=["60"],
    )
    
    @field_validator("temperature", "humidity", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        # JSON clients may send numbers instead of strings
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return repr(float(value))
            except OverflowError:
                # int beyond float range; parsing reports it as not finite
                return str(value)
        return value


class PredictionResponse(BaseModel):
    """Response for the predict endpoint."""
    
    status: str = Field(default="success", examples=["success"])
    label: WeatherCategory = Field(description="Predicted weather category")
    class_index: int = Field(ge=0, description="Index of the label in the category table")
    icon: Optional[str] = Field(default=None, description="Icon asset name", examples=["sunny"])
    message: str = Field(description="Display text for the result")
    scores: list[float] = Field(default_factory=list, description="Model output distribution")
    engine: str = Field(description="Inference engine that produced the result", examples=["tflite"])
    latency_ms: float = Field(ge=0.0)
    timestamp: datetime = Field(default_factory=_utcnow)


class ErrorResponse(BaseModel):
    """Structured error body returned by all exception handlers."""
    
    error: str = Field(examples=["invalid_input", "model_unavailable", "inference_failed"])
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utcnow)


class CategoryInfo(BaseModel):
    """One entry of the category table."""
    
    index: int = Field(ge=0)
    label: WeatherCategory
    icon: Optional[str] = None


class CategoriesResponse(BaseModel):
    """Response for the categories endpoint (model output order)."""
    
    categories: list[CategoryInfo]


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["healthy", "unhealthy"]
    )
    version: str = Field(examples=["0.1.0"])
    engine: str = Field(description="Configured inference engine", examples=["tflite"])
    services: dict[str, str] = Field(
        description="Component health status",
        examples=[{"model": "ok"}]
    )
    timestamp: datetime = Field(default_factory=_utcnow)
