"""Unit test fixtures (mocks and fakes).

Provides engine doubles for testing the adapter and the runtime-backed
engines without LiteRT or onnxruntime installed.
"""

from types import SimpleNamespace
from unittest.mock import Mock

import numpy as np
import pytest

from weather_inference.engine.base_engine import InferenceEngine


@pytest.fixture
def mock_engine():
    """Mock InferenceEngine; set ``mock_engine.invoke.return_value`` per test."""
    mock = Mock(spec=InferenceEngine)
    mock.name = "mock"
    mock.closed = False
    mock.invoke = Mock(return_value=np.zeros(5, dtype=np.float32).tobytes())
    return mock


class FakeInterpreter:
    """Stand-in for the LiteRT Interpreter.
    
    Output is one-hot at index ``int(temperature) % 5`` so tests can steer
    the label through the input.
    """
    
    input_shape = [1, 2]
    output_shape = [1, 5]
    dtype = np.float32
    fail_on_invoke = False
    
    def __init__(self, model_path=None, num_threads=None):
        self.model_path = model_path
        self.num_threads = num_threads
        self.allocated = False
        self._input = None
        self._output = None
    
    def allocate_tensors(self):
        self.allocated = True
    
    def get_input_details(self):
        return [{"index": 0, "shape": np.array(self.input_shape), "dtype": self.dtype}]
    
    def get_output_details(self):
        return [{"index": 7, "shape": np.array(self.output_shape), "dtype": self.dtype}]
    
    def set_tensor(self, index, value):
        assert index == 0
        self._input = np.array(value, dtype=np.float32)
    
    def invoke(self):
        if self.fail_on_invoke:
            raise RuntimeError("Fake interpreter failure")
        output = np.zeros(self.output_shape, dtype=np.float32)
        output.flat[int(self._input.flat[0]) % 5] = 1.0
        self._output = output
    
    def get_tensor(self, index):
        assert index == 7
        return self._output


@pytest.fixture
def fake_interpreter_class():
    """A fresh FakeInterpreter subclass per test (class attributes are tweakable)."""
    return type("FakeInterpreterForTest", (FakeInterpreter,), {})


class FakeOnnxSession:
    """Stand-in for onnxruntime.InferenceSession.
    
    Emits a label output first (as sklearn-onnx classifiers do), then the
    score tensor: softmax-free scores equal to [h, t, 0, 0, 0].
    """
    
    def __init__(self, path, providers=None):
        self.path = path
        self.providers = list(providers or [])
    
    def get_inputs(self):
        return [SimpleNamespace(name="float_input", type="tensor(float)", shape=[None, 2])]
    
    def get_outputs(self):
        return [
            SimpleNamespace(name="output_label", type="tensor(int64)", shape=[None]),
            SimpleNamespace(name="output_probability", type="tensor(float)", shape=[None, 5]),
        ]
    
    def get_providers(self):
        return self.providers
    
    def run(self, output_names, feeds):
        assert output_names == ["output_probability"]
        features = feeds["float_input"]
        assert features.shape == (1, 2)
        temperature, humidity = features[0]
        return [np.array([[humidity, temperature, 0.0, 0.0, 0.0]], dtype=np.float32)]


@pytest.fixture
def fake_onnxruntime():
    """Namespace mimicking the parts of onnxruntime the engine uses."""
    return SimpleNamespace(
        get_available_providers=lambda: ["CPUExecutionProvider"],
        InferenceSession=FakeOnnxSession,
    )
