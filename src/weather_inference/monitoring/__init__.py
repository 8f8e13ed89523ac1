"""Monitoring and metrics instrumentation for the Weather Inference Layer."""

from weather_inference.monitoring.metrics import (
    inference_latency_seconds,
    prediction_errors_total,
    predictions_total,
)

__all__ = [
    "predictions_total",
    "prediction_errors_total",
    "inference_latency_seconds",
]
