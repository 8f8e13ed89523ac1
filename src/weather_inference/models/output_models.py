"""
Output data models for Weather Inference Layer.

Classification is what the adapter decodes from the engine output.
PredictionResult adds the display fields the service layer hands to clients.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_inference.models.enums import WeatherCategory


class Classification(BaseModel):
    """Decoded model output: winning index, its label, and the raw scores."""
    
    model_config = ConfigDict(frozen=True)
    
    class_index: int = Field(..., ge=0, description="Index of the selected category")
    label: WeatherCategory = Field(..., description="Selected weather category")
    scores: list[float] = Field(
        default_factory=list,
        description="Output distribution in category table order",
    )


class PredictionResult(BaseModel):
    """Classification plus presentation data for one prediction."""
    
    model_config = ConfigDict(frozen=True)
    
    label: WeatherCategory
    class_index: int = Field(..., ge=0)
    scores: list[float] = Field(default_factory=list)
    icon: Optional[str] = Field(default=None, description="Icon asset name for the label")
    message: str = Field(..., description="Display text, e.g. 'Predicted Weather: \\nSunny'")
    latency_ms: float = Field(..., ge=0.0, description="Wall time spent in the adapter")
