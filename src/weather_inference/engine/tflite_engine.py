"""
TensorFlow Lite engine backed by the LiteRT interpreter.

Loads the bundled Weather_predictor.tflite model. The interpreter package is
an optional dependency: pip install "weather-inference[tflite]".
"""

from pathlib import Path
from typing import Any

import numpy as np
import structlog

from weather_inference.encoding import FLOAT32, INPUT_FEATURE_COUNT, OUTPUT_CLASS_COUNT
from weather_inference.engine.base_engine import InferenceEngine
from weather_inference.engine.exceptions import EngineInitializationError

logger = structlog.get_logger(__name__)


def _load_interpreter_class() -> Any:
    try:
        from ai_edge_litert.interpreter import Interpreter
    except ImportError as e:
        raise EngineInitializationError(
            "LiteRT runtime not installed. "
            "Install with: pip install 'weather-inference[tflite]'",
            details={"missing_package": "ai-edge-litert"},
        ) from e
    return Interpreter


class TFLiteEngine(InferenceEngine):
    """
    Runs a .tflite classifier with one [1, 2] float32 input and one
    [1, 5] float32 output.
    
    The interpreter is created and its tensors allocated once, in __init__.
    """
    
    name = "tflite"
    
    def __init__(self, model_path: str, num_threads: int = 1):
        path = Path(model_path)
        if not path.is_file():
            raise EngineInitializationError(
                f"TFLite model not found: {path}",
                details={"model_path": str(path)},
            )
        
        interpreter_class = _load_interpreter_class()
        try:
            interpreter = interpreter_class(model_path=str(path), num_threads=num_threads)
            interpreter.allocate_tensors()
        except (ValueError, RuntimeError) as e:
            raise EngineInitializationError(
                f"Failed to load TFLite model: {e}",
                details={"model_path": str(path)},
            ) from e
        
        input_detail = interpreter.get_input_details()[0]
        output_detail = interpreter.get_output_details()[0]
        
        input_shape = tuple(int(d) for d in input_detail["shape"])
        output_shape = tuple(int(d) for d in output_detail["shape"])
        if int(np.prod(input_shape)) != INPUT_FEATURE_COUNT or int(np.prod(output_shape)) != OUTPUT_CLASS_COUNT:
            raise EngineInitializationError(
                "TFLite model tensors do not match the weather classifier layout",
                details={
                    "input_shape": list(input_shape),
                    "output_shape": list(output_shape),
                    "expected_input_size": INPUT_FEATURE_COUNT,
                    "expected_output_size": OUTPUT_CLASS_COUNT,
                },
            )
        if np.dtype(input_detail["dtype"]) != np.float32 or np.dtype(output_detail["dtype"]) != np.float32:
            raise EngineInitializationError(
                "TFLite model tensors must be float32",
                details={
                    "input_dtype": str(np.dtype(input_detail["dtype"])),
                    "output_dtype": str(np.dtype(output_detail["dtype"])),
                },
            )
        
        self._interpreter = interpreter
        self._input_index = input_detail["index"]
        self._output_index = output_detail["index"]
        self._input_shape = input_shape
        
        super().__init__(model_path=str(path), num_threads=num_threads)
    
    def _run(self, input_buffer: bytes) -> bytes:
        features = np.frombuffer(input_buffer, dtype=FLOAT32).reshape(self._input_shape).copy()
        self._interpreter.set_tensor(self._input_index, features)
        self._interpreter.invoke()
        output = self._interpreter.get_tensor(self._output_index)
        return np.ascontiguousarray(output, dtype=FLOAT32).tobytes()
    
    def _release(self) -> None:
        # LiteRT frees native buffers when the interpreter is collected
        self._interpreter = None
