"""Unit tests for API request/response models."""

import pytest
from pydantic import ValidationError

from weather_inference.api.models import ErrorResponse, HealthResponse, PredictionResponse, PredictRequest


def test_predict_request_keeps_text():
    request = PredictRequest(temperature=" 25 ", humidity="60")
    assert request.temperature == " 25 "
    assert request.humidity == "60"


def test_predict_request_accepts_numbers():
    request = PredictRequest(temperature=25, humidity=60.5)
    assert request.temperature == "25.0"
    assert request.humidity == "60.5"


def test_predict_request_integer_beyond_float_range():
    huge = 10 ** 400
    request = PredictRequest(temperature=huge, humidity=50)
    assert request.temperature == str(huge)
    assert request.humidity == "50.0"


def test_predict_request_fields_optional():
    request = PredictRequest()
    assert request.temperature is None
    assert request.humidity is None


def test_predict_request_rejects_structures():
    with pytest.raises(ValidationError):
        PredictRequest(temperature=[25], humidity="60")


def test_prediction_response():
    response = PredictionResponse(
        label="Sunny",
        class_index=3,
        icon="sunny",
        message="Predicted Weather: \nSunny",
        scores=[0.0, 0.0, 0.0, 1.0, 0.0],
        engine="stub",
        latency_ms=0.2,
    )
    data = response.model_dump(mode="json")
    assert data["status"] == "success"
    assert data["label"] == "Sunny"
    assert "timestamp" in data


def test_prediction_response_rejects_unknown_label():
    with pytest.raises(ValidationError):
        PredictionResponse(label="Snowy", class_index=0, message="x", engine="stub", latency_ms=0.0)


def test_error_response_defaults():
    error = ErrorResponse(error="invalid_input", message="Please enter both temperature and humidity")
    assert error.details == {}
    assert error.timestamp is not None


def test_health_response():
    health = HealthResponse(status="healthy", version="0.1.0", engine="stub", services={"model": "ok"})
    assert health.services["model"] == "ok"
