"""Integration test fixtures (HTTP client and runtime checks).

API tests run the real FastAPI app with the predictor dependency replaced by
a stub-engine predictor. Runtime tests are skipped if the runtime is missing.
"""

import pytest
from fastapi.testclient import TestClient

from weather_inference.adapter import InferenceAdapter
from weather_inference.api.dependencies import get_predictor
from weather_inference.main import app
from weather_inference.service import WeatherPredictor


@pytest.fixture
def override_predictor():
    """Install a predictor built from the given engine for the app.
    
    Usage:
        def test_something(override_predictor, create_stub_engine):
            override_predictor(create_stub_engine(scores=[...]))
    """
    installed = []
    
    def _install(engine) -> WeatherPredictor:
        predictor = WeatherPredictor(InferenceAdapter(engine))
        app.dependency_overrides[get_predictor] = lambda: predictor
        installed.append(predictor)
        return predictor
    
    yield _install
    
    app.dependency_overrides.pop(get_predictor, None)
    for predictor in installed:
        predictor.close()


@pytest.fixture
def client():
    """TestClient for the app (startup/shutdown events are not run)."""
    return TestClient(app)


@pytest.fixture(scope="session")
def check_onnx():
    """Skip if onnx (model builder) or onnxruntime is not installed."""
    onnx = pytest.importorskip("onnx")
    pytest.importorskip("onnxruntime")
    return onnx
