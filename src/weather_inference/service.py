"""
WeatherPredictor: the entry point used by the HTTP layer.

Adds what the core deliberately leaves out: serialized access to the single
engine handle, logging, metrics and display fields.
"""

import threading
import time
from typing import Optional

import structlog

from weather_inference.adapter import InferenceAdapter
from weather_inference.engine.exceptions import InferenceFailure
from weather_inference.models.input_models import InvalidInput, WeatherSample
from weather_inference.models.output_models import PredictionResult
from weather_inference.models.result import Err, Ok, Result
from weather_inference.monitoring.metrics import (
    inference_latency_seconds,
    prediction_errors_total,
    predictions_total,
)
from weather_inference.parsing import parse_sample
from weather_inference.presentation import format_prediction, icon_for

logger = structlog.get_logger(__name__)


class WeatherPredictor:
    """
    Thread-safe wrapper around one InferenceAdapter.
    
    The lock is held for the whole encode/invoke/decode cycle, so concurrent
    requests queue up instead of sharing the engine handle.
    """
    
    def __init__(self, adapter: InferenceAdapter):
        self.adapter = adapter
        self._lock = threading.Lock()
    
    @property
    def engine_name(self) -> str:
        return self.adapter.engine.name
    
    @property
    def closed(self) -> bool:
        return self.adapter.closed
    
    def predict(self, sample: WeatherSample) -> PredictionResult:
        """
        Predict the weather for a validated sample.
        
        Raises:
            InferenceFailure: Engine failed (propagated from the adapter)
        """
        start = time.perf_counter()
        try:
            with self._lock:
                classification = self.adapter.classify(sample)
        except InferenceFailure as e:
            prediction_errors_total.labels(error_type="inference_failure").inc()
            logger.error(
                "Inference failed",
                engine=self.engine_name,
                error_type=type(e).__name__,
                details=e.details,
            )
            raise
        elapsed = time.perf_counter() - start
        
        inference_latency_seconds.labels(engine=self.engine_name).observe(elapsed)
        predictions_total.labels(label=classification.label.value).inc()
        logger.debug(
            "Weather predicted",
            temperature_celsius=sample.temperature_celsius,
            humidity_percent=sample.humidity_percent,
            class_index=classification.class_index,
            label=classification.label.value,
        )
        
        return PredictionResult(
            label=classification.label,
            class_index=classification.class_index,
            scores=classification.scores,
            icon=icon_for(classification.label),
            message=format_prediction(classification.label),
            latency_ms=round(elapsed * 1000, 3),
        )
    
    def predict_text(
        self,
        temperature_text: Optional[str],
        humidity_text: Optional[str],
    ) -> Result[PredictionResult, InvalidInput]:
        """
        Parse raw form input and predict.
        
        Returns:
            Ok(PredictionResult), or Err(InvalidInput) when the text is not usable
        """
        parsed = parse_sample(temperature_text, humidity_text)
        if isinstance(parsed, Err):
            prediction_errors_total.labels(error_type="invalid_input").inc()
            logger.info(
                "Rejected prediction input",
                field=parsed.error.field,
                reason=parsed.error.reason.value,
            )
            return parsed
        return Ok(self.predict(parsed.value))
    
    def close(self) -> None:
        with self._lock:
            self.adapter.close()
        logger.info("Weather predictor closed", engine=self.engine_name)
