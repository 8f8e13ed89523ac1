"""
ONNX Runtime engine for the same classifier exported to ONNX.

onnxruntime is an optional dependency: pip install "weather-inference[onnx]".
"""

from pathlib import Path
from typing import Any, Optional, Sequence

import numpy as np
import structlog

from weather_inference.encoding import FLOAT32, INPUT_FEATURE_COUNT, OUTPUT_CLASS_COUNT
from weather_inference.engine.base_engine import InferenceEngine
from weather_inference.engine.exceptions import EngineInitializationError

logger = structlog.get_logger(__name__)

FLOAT_TENSOR_TYPE = "tensor(float)"


def _load_onnxruntime() -> Any:
    try:
        import onnxruntime as ort
    except ImportError as e:
        raise EngineInitializationError(
            "onnxruntime not installed. "
            "Install with: pip install 'weather-inference[onnx]'",
            details={"missing_package": "onnxruntime"},
        ) from e
    return ort


class OnnxEngine(InferenceEngine):
    """
    Runs an ONNX classifier with a [batch, 2] float32 input.
    
    The first float tensor output is taken as the 5-class score vector, which
    skips the label output that sklearn-onnx classifiers emit first.
    """
    
    name = "onnx"
    
    def __init__(self, model_path: str, providers: Optional[Sequence[str]] = None):
        path = Path(model_path)
        if not path.is_file():
            raise EngineInitializationError(
                f"ONNX model not found: {path}",
                details={"model_path": str(path)},
            )
        
        ort = _load_onnxruntime()
        
        available = ort.get_available_providers()
        requested = list(providers or ["CPUExecutionProvider"])
        selected = [p for p in requested if p in available] or ["CPUExecutionProvider"]
        logger.debug(
            "Selected ONNX execution providers",
            requested=requested,
            available=available,
            selected=selected,
        )
        
        try:
            session = ort.InferenceSession(str(path), providers=selected)
        except Exception as e:
            raise EngineInitializationError(
                f"Failed to load ONNX model: {e}",
                details={"model_path": str(path)},
            ) from e
        
        score_outputs = [o for o in session.get_outputs() if o.type == FLOAT_TENSOR_TYPE]
        if not score_outputs:
            raise EngineInitializationError(
                "ONNX model has no float tensor output",
                details={"outputs": [o.name for o in session.get_outputs()]},
            )
        
        self._session = session
        self._input_name = session.get_inputs()[0].name
        self._output_name = score_outputs[0].name
        
        super().__init__(model_path=str(path), providers=session.get_providers())
    
    def _run(self, input_buffer: bytes) -> bytes:
        features = np.frombuffer(input_buffer, dtype=FLOAT32).reshape(1, INPUT_FEATURE_COUNT).copy()
        (scores,) = self._session.run([self._output_name], {self._input_name: features})
        scores = np.ascontiguousarray(scores, dtype=FLOAT32)
        if scores.size != OUTPUT_CLASS_COUNT:
            logger.warning(
                "ONNX model returned unexpected score count",
                expected=OUTPUT_CLASS_COUNT,
                received=int(scores.size),
            )
        return scores.tobytes()
    
    def _release(self) -> None:
        self._session = None
