"""
InferenceAdapter: encode, invoke, decode.

The adapter owns one engine. Each call is an independent inference: no
retry, no caching, no suspension point. Engine failures propagate unchanged.
A single adapter is not safe for concurrent use; callers serialize access
(see weather_inference.service.WeatherPredictor).
"""

import math

import numpy as np
from pydantic import ValidationError as PydanticValidationError

from weather_inference.decoding import argmax
from weather_inference.encoding import (
    FLOAT32,
    OUTPUT_BUFFER_SIZE,
    OUTPUT_CLASS_COUNT,
    decode_output_buffer,
    encode_sample,
)
from weather_inference.engine.base_engine import InferenceEngine
from weather_inference.engine.exceptions import MalformedOutputError
from weather_inference.exceptions import InvalidInputError
from weather_inference.models.enums import InvalidInputReason, WeatherCategory
from weather_inference.models.input_models import InvalidInput, WeatherSample
from weather_inference.models.output_models import Classification

# pydantic error types meaning "could not be read as a number at all"
NON_NUMERIC_ERROR_TYPES = {"float_parsing", "float_type"}


class InferenceAdapter:
    """
    Drives the external model and decodes its result.
    
    Lifecycle: the engine handle must be valid when the adapter is built and
    is released by close() (or by leaving a ``with`` block). Using the
    adapter after close raises EngineClosedError.
    """
    
    def __init__(self, engine: InferenceEngine):
        self.engine = engine
    
    @property
    def closed(self) -> bool:
        return self.engine.closed
    
    def classify(self, sample: WeatherSample) -> Classification:
        """
        Run one prediction and return index, label and scores.
        
        Raises:
            InvalidInputError: sample is not a valid WeatherSample
            InferenceFailure: the engine failed (propagated unchanged)
            MalformedOutputError: the engine returned a non-empty buffer of the wrong size
        """
        _check_sample(sample)
        
        input_buffer = encode_sample(sample)
        output = np.zeros(OUTPUT_CLASS_COUNT, dtype=FLOAT32)
        
        raw_output = self.engine.invoke(input_buffer)
        # An engine that writes nothing leaves the zeroed region, which decodes to index 0
        if raw_output and len(raw_output) != OUTPUT_BUFFER_SIZE:
            raise MalformedOutputError(
                f"Expected {OUTPUT_BUFFER_SIZE} output bytes, got {len(raw_output)}",
                details={"engine": self.engine.name, "received_bytes": len(raw_output)},
            )
        if raw_output:
            output[:] = decode_output_buffer(raw_output)
        
        index = argmax(output)
        return Classification(
            class_index=index,
            label=WeatherCategory.from_index(index),
            scores=output.tolist(),
        )
    
    def predict(self, sample: WeatherSample) -> WeatherCategory:
        """Predict the weather label for one sample."""
        return self.classify(sample).label
    
    def predict_values(self, temperature_celsius: float, humidity_percent: float) -> WeatherCategory:
        """
        Predict from two plain numbers.
        
        Raises:
            InvalidInputError: a value is not a finite float32
        """
        try:
            sample = WeatherSample(
                temperature_celsius=temperature_celsius,
                humidity_percent=humidity_percent,
            )
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = "temperature" if first["loc"][0] == "temperature_celsius" else "humidity"
            reason = (
                InvalidInputReason.NOT_A_NUMBER
                if first["type"] in NON_NUMERIC_ERROR_TYPES
                else InvalidInputReason.NOT_FINITE
            )
            raise InvalidInputError(
                InvalidInput(reason=reason, field=field, value=str(first.get("input")))
            ) from e
        return self.predict(sample)
    
    def close(self) -> None:
        """Release the engine handle (exactly once)."""
        self.engine.close()
    
    def __enter__(self) -> "InferenceAdapter":
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(engine={self.engine!r})"


def _check_sample(sample: object) -> None:
    # Guards against model_construct() or duck-typed objects slipping past validation
    if not isinstance(sample, WeatherSample):
        raise InvalidInputError(
            InvalidInput(reason=InvalidInputReason.NOT_A_NUMBER, field="sample", value=repr(sample))
        )
    for field, value in (
        ("temperature", sample.temperature_celsius),
        ("humidity", sample.humidity_percent),
    ):
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise InvalidInputError(
                InvalidInput(reason=InvalidInputReason.NOT_FINITE, field=field, value=str(value))
            )
