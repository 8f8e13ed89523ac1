"""Engine factory: builds the backend named in settings."""

import structlog

from weather_inference.config import Settings
from weather_inference.engine.base_engine import InferenceEngine
from weather_inference.engine.exceptions import EngineInitializationError
from weather_inference.engine.onnx_engine import OnnxEngine
from weather_inference.engine.stub_engine import StubEngine
from weather_inference.engine.tflite_engine import TFLiteEngine

logger = structlog.get_logger(__name__)

SUPPORTED_ENGINES = ("tflite", "onnx", "stub")


def create_engine(settings: Settings) -> InferenceEngine:
    """
    Create the inference engine selected by INFERENCE_ENGINE.
    
    Raises:
        EngineInitializationError: Unknown backend, missing runtime or model
    """
    backend = settings.INFERENCE_ENGINE.strip().lower()
    logger.info("Creating inference engine", backend=backend, model_path=settings.MODEL_PATH)
    
    if backend == "tflite":
        return TFLiteEngine(settings.MODEL_PATH, num_threads=settings.MODEL_NUM_THREADS)
    if backend == "onnx":
        return OnnxEngine(settings.MODEL_PATH, providers=settings.ONNX_PROVIDERS)
    if backend == "stub":
        return StubEngine(settings.STUB_SCORES)
    
    raise EngineInitializationError(
        f"Unknown inference engine: {settings.INFERENCE_ENGINE}",
        details={"supported": list(SUPPORTED_ENGINES)},
    )
