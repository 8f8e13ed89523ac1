"""
Integration tests for OnnxEngine against a real onnxruntime session.

A tiny linear classifier (scores = x @ W + b) is built with the onnx helper
API so no model asset is needed. Skipped when onnx/onnxruntime are missing.
"""

import numpy as np
import pytest

from weather_inference.adapter import InferenceAdapter
from weather_inference.engine.exceptions import EngineInitializationError
from weather_inference.engine.onnx_engine import OnnxEngine
from weather_inference.models import WeatherSample

pytestmark = pytest.mark.integration

# Column j scores category j: Cloudy, Cold, Rainy, Sunny, Partly Cloudy
WEIGHTS = np.array(
    [
        [0.0, -1.0, 0.0, 1.0, 0.5],   # temperature
        [1.0, 0.0, 1.5, -1.0, 0.5],   # humidity
    ],
    dtype=np.float32,
)
BIAS = np.array([0.0, 10.0, -60.0, 0.0, 0.0], dtype=np.float32)


@pytest.fixture
def linear_model(check_onnx, tmp_path):
    onnx = check_onnx
    from onnx import helper, numpy_helper
    
    graph = helper.make_graph(
        nodes=[
            helper.make_node("MatMul", ["float_input", "W"], ["logits"]),
            helper.make_node("Add", ["logits", "B"], ["scores"]),
        ],
        name="weather_linear",
        inputs=[helper.make_tensor_value_info("float_input", onnx.TensorProto.FLOAT, [1, 2])],
        outputs=[helper.make_tensor_value_info("scores", onnx.TensorProto.FLOAT, [1, 5])],
        initializer=[
            numpy_helper.from_array(WEIGHTS, name="W"),
            numpy_helper.from_array(BIAS, name="B"),
        ],
    )
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", 13)])
    model.ir_version = 8
    
    path = tmp_path / "weather_linear.onnx"
    onnx.save(model, str(path))
    return path


def _expected_label(temperature, humidity):
    scores = np.array([temperature, humidity], dtype=np.float32) @ WEIGHTS + BIAS
    return ["Cloudy", "Cold", "Rainy", "Sunny", "Partly Cloudy"][int(np.argmax(scores))]


@pytest.mark.parametrize("temperature, humidity", [(30.0, 20.0), (-5.0, 10.0), (15.0, 90.0), (5.0, 40.0)])
def test_predictions_match_reference(linear_model, temperature, humidity):
    with InferenceAdapter(OnnxEngine(str(linear_model))) as adapter:
        assert adapter.predict_values(temperature, humidity) == _expected_label(temperature, humidity)


def test_scores_are_raw_model_output(linear_model):
    with InferenceAdapter(OnnxEngine(str(linear_model))) as adapter:
        result = adapter.classify(WeatherSample(temperature_celsius=30.0, humidity_percent=20.0))
    expected = np.array([30.0, 20.0], dtype=np.float32) @ WEIGHTS + BIAS
    assert result.scores == pytest.approx(expected.tolist())


def test_corrupt_model_file(check_onnx, tmp_path):
    path = tmp_path / "broken.onnx"
    path.write_bytes(b"not a model")
    with pytest.raises(EngineInitializationError, match="Failed to load ONNX model"):
        OnnxEngine(str(path))
