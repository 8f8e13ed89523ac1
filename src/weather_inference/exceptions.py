"""
Custom exceptions for the Weather Inference Layer.

Two failure kinds reach callers of the core:
- InvalidInputError: numeric input could not be turned into a WeatherSample
- InferenceFailure (see weather_inference.engine.exceptions): the engine failed

The HTTP layer maps each kind to its own status code and user-facing message.
"""

from typing import Any

from weather_inference.models.input_models import InvalidInput


class WeatherInferenceError(Exception):
    """
    Base exception for all weather inference errors.
    
    Carries a human-readable message plus structured details for logs
    and error responses.
    """
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidInputError(WeatherInferenceError):
    """
    Raised when a value that should be a finite float32 is not.
    
    The parsing step reports this condition as an Err(InvalidInput) value;
    the exception form is only used where raising is unavoidable (the
    adapter's defensive check and the HTTP layer).
    """
    
    def __init__(self, invalid_input: InvalidInput):
        super().__init__(
            f"Invalid {invalid_input.field}: {invalid_input.reason.value}",
            details=invalid_input.model_dump(mode="json"),
        )
        self.invalid_input = invalid_input
