"""Unit tests for settings loading and logging configuration."""

import json
import logging

import structlog

from weather_inference.config import Settings
from weather_inference.logging_config import SERVICE_NAME, add_service_context, configure_logging


class TestSettings:
    
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INFERENCE_ENGINE", raising=False)
        monkeypatch.delenv("MODEL_PATH", raising=False)
        settings = Settings(_env_file=None)
        assert settings.INFERENCE_ENGINE == "tflite"
        assert settings.MODEL_PATH == "models/Weather_predictor.tflite"
        assert settings.STUB_SCORES == [0.0, 0.0, 0.0, 1.0, 0.0]
    
    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("INFERENCE_ENGINE", "onnx")
        monkeypatch.setenv("model_path", "/srv/models/weather.onnx")
        monkeypatch.setenv("ONNX_PROVIDERS", '["CUDAExecutionProvider", "CPUExecutionProvider"]')
        settings = Settings(_env_file=None)
        assert settings.INFERENCE_ENGINE == "onnx"
        assert settings.MODEL_PATH == "/srv/models/weather.onnx"
        assert settings.ONNX_PROVIDERS == ["CUDAExecutionProvider", "CPUExecutionProvider"]


class TestLogging:
    
    def test_service_context_processor(self):
        event = add_service_context(None, "info", {"event": "x"})
        assert event["service"] == SERVICE_NAME
        assert "version" in event
    
    def test_production_renders_json(self, capsys):
        configure_logging("INFO", "production")
        logging.getLogger("weather_inference.test").info("hello")
        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        payload = json.loads(lines[-1])
        assert payload["event"] == "hello"
        assert payload["service"] == SERVICE_NAME
        assert payload["level"] == "info"
    
    def test_unknown_level_falls_back_to_info(self):
        configure_logging("CHATTY", "development")
        assert logging.getLogger().level == logging.INFO
    
    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()
