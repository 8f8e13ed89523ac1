"""
Inference engine abstraction and implementations.

Components:
- InferenceEngine: Abstract invoke(bytes) -> bytes capability
- TFLiteEngine: LiteRT interpreter for the bundled .tflite model
- OnnxEngine: ONNX Runtime session for an ONNX export of the model
- StubEngine: Fixed-output engine for tests and local development
- create_engine: Backend factory driven by Settings
- exceptions: Engine-specific exceptions
"""

from weather_inference.engine.base_engine import InferenceEngine
from weather_inference.engine.exceptions import (
    EngineClosedError,
    EngineInitializationError,
    InferenceFailure,
    MalformedOutputError,
)
from weather_inference.engine.factory import SUPPORTED_ENGINES, create_engine
from weather_inference.engine.onnx_engine import OnnxEngine
from weather_inference.engine.stub_engine import StubEngine
from weather_inference.engine.tflite_engine import TFLiteEngine

__all__ = [
    "InferenceEngine",
    "TFLiteEngine",
    "OnnxEngine",
    "StubEngine",
    "create_engine",
    "SUPPORTED_ENGINES",
    "InferenceFailure",
    "EngineInitializationError",
    "EngineClosedError",
    "MalformedOutputError",
]
