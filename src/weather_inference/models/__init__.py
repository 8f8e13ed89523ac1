"""
Pydantic data models for Weather Inference Layer.

Includes:
- Enums (WeatherCategory, InvalidInputReason) and the CATEGORY_TABLE
- Input models (WeatherSample, InvalidInput)
- Output models (Classification, PredictionResult)
- Ok/Err result container for the parsing step
"""

from weather_inference.models.enums import CATEGORY_TABLE, InvalidInputReason, WeatherCategory
from weather_inference.models.input_models import InvalidInput, WeatherSample, to_float32
from weather_inference.models.output_models import Classification, PredictionResult
from weather_inference.models.result import Err, Ok, Result

__all__ = [
    # Enums
    "CATEGORY_TABLE",
    "InvalidInputReason",
    "WeatherCategory",
    # Input models
    "InvalidInput",
    "WeatherSample",
    "to_float32",
    # Output models
    "Classification",
    "PredictionResult",
    # Result container
    "Ok",
    "Err",
    "Result",
]
