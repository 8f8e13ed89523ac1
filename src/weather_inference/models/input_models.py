"""
Input data models for Weather Inference Layer.

WeatherSample is the validated two-feature input to the classifier. Values are
stored already rounded to float32 so that the encoded buffer reproduces them
bit-for-bit.
"""

import math
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from weather_inference.models.enums import InvalidInputReason

FLOAT32_MAX = float(np.finfo(np.float32).max)


def to_float32(value: float) -> float:
    """
    Round a Python float to the nearest float32 value.
    
    Raises:
        ValueError: value is NaN, infinite, or outside the float32 range
    """
    if not math.isfinite(value):
        raise ValueError("must be a finite number")
    with np.errstate(over="ignore"):
        rounded = np.float32(value)
    if np.isinf(rounded):
        raise ValueError("is outside the float32 range")
    return float(rounded)


class WeatherSample(BaseModel):
    """
    One prediction request: temperature and humidity.
    
    No range clamping or plausibility check is done here; -300 degrees or
    250% humidity are accepted and encoded as-is.
    """
    
    model_config = ConfigDict(frozen=True, extra="forbid")
    
    temperature_celsius: float = Field(..., description="Air temperature in degrees Celsius (float32)")
    humidity_percent: float = Field(..., description="Relative humidity in percent (float32)")
    
    @field_validator("temperature_celsius", "humidity_percent")
    @classmethod
    def _round_to_float32(cls, value: float) -> float:
        return to_float32(value)


class InvalidInput(BaseModel):
    """
    Structured description of a rejected raw input.
    
    This is a value, not an exception: the parsing step returns it inside
    Err so callers branch on it explicitly.
    """
    
    model_config = ConfigDict(frozen=True)
    
    reason: InvalidInputReason = Field(..., description="Rejection reason")
    field: str = Field(..., description="Input field name (temperature or humidity)")
    value: Optional[str] = Field(default=None, description="Raw text as received")
