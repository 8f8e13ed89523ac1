"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

from typing import Optional, Sequence

import pytest

from weather_inference.adapter import InferenceAdapter
from weather_inference.config import Settings
from weather_inference.engine.stub_engine import StubEngine
from weather_inference.models.input_models import WeatherSample
from weather_inference.service import WeatherPredictor

SUNNY_SCORES = (0.0, 0.0, 0.0, 1.0, 0.0)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Test settings with safe defaults for local testing.
    
    Uses the stub engine so no model runtime is needed. Override specific
    settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.INFERENCE_ENGINE = "onnx"
    """
    return Settings(
        # === Application ===
        APP_NAME="Weather Inference Layer (Test)",
        APP_VERSION="0.1.0",
        ENVIRONMENT="development",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        
        # === Inference Engine ===
        INFERENCE_ENGINE="stub",
        MODEL_PATH=str(tmp_path / "Weather_predictor.tflite"),
        MODEL_NUM_THREADS=1,
        STUB_SCORES=list(SUNNY_SCORES),
        
        # === Monitoring ===
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def create_stub_engine():
    """Factory fixture to create a StubEngine with custom scores or error.
    
    Usage:
        def test_something(create_stub_engine):
            engine = create_stub_engine(scores=[0.1, 0.9, 0.0, 0.0, 0.0])
    """
    def _create(
        scores: Sequence[float] = SUNNY_SCORES,
        error: Optional[Exception] = None,
    ) -> StubEngine:
        return StubEngine(scores=scores, error=error)
    
    return _create


@pytest.fixture
def stub_engine(create_stub_engine) -> StubEngine:
    """Stub engine that always answers Sunny."""
    return create_stub_engine()


@pytest.fixture
def adapter(stub_engine: StubEngine):
    """InferenceAdapter over the Sunny stub; closed after the test."""
    adapter = InferenceAdapter(stub_engine)
    yield adapter
    adapter.close()


@pytest.fixture
def predictor(adapter: InferenceAdapter) -> WeatherPredictor:
    """WeatherPredictor over the Sunny stub adapter."""
    return WeatherPredictor(adapter)


@pytest.fixture
def sample() -> WeatherSample:
    """Standard sample: 25 degrees Celsius, 60% humidity."""
    return WeatherSample(temperature_celsius=25.0, humidity_percent=60.0)
