"""Custom Prometheus metrics for Weather Inference Layer.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- prediction_errors_total{error_type="inference_failure"} (engine faults)
- inference_latency_seconds (slow engine, e.g. wrong execution provider)
"""

from prometheus_client import Counter, Histogram

# === Prediction Metrics ===

predictions_total = Counter(
    "weather_predictions_total",
    "Total successful predictions by predicted label",
    ["label"],
)
"""
Prediction counter by label.

Labels:
- label: Cloudy, Cold, Rainy, Sunny, Partly Cloudy

A sudden shift in the label mix with unchanged traffic usually means the
wrong model asset was deployed.
"""

prediction_errors_total = Counter(
    "weather_prediction_errors_total",
    "Total failed predictions by error type",
    ["error_type"],
)
"""
Prediction failure counter.

Labels:
- error_type: invalid_input, inference_failure, engine_unavailable
"""

# === Engine Performance Metrics ===

inference_latency_seconds = Histogram(
    "weather_inference_latency_seconds",
    "Adapter latency (encode + invoke + decode) in seconds",
    ["engine"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5, 1.0],
)
"""
Inference latency histogram.

Labels:
- engine: tflite, onnx, stub

Buckets sized for a two-feature model (sub-millisecond to 1s).
"""
