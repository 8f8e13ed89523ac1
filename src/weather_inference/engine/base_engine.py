"""
Abstract base class for inference engines.

An engine is the black box behind the adapter: it takes the encoded input
buffer and returns the raw output buffer. Swapping TFLite for ONNX, or for a
stub in tests, does not touch encoding or decoding.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from weather_inference.engine.exceptions import EngineClosedError, InferenceFailure

logger = structlog.get_logger(__name__)


class InferenceEngine(ABC):
    """
    Capability interface: invoke(bytes) -> bytes.
    
    Responsibilities:
    - Own the underlying model handle (acquired in __init__, released in close)
    - Run one synchronous inference per invoke() call
    - Wrap runtime errors into InferenceFailure
    
    Does NOT handle:
    - Feature encoding or output decoding (that's the adapter's job)
    - Concurrency: one engine serves one caller at a time
    
    Subclasses implement _run() and, if they hold native resources, _release().
    """
    
    name: str = "base"
    
    def __init__(self, model_path: Optional[str] = None, **kwargs: Any):
        self.model_path = model_path
        self.extra_config = kwargs
        self._closed = False
        
        logger.info(
            "Initialized inference engine",
            engine=self.name,
            engine_class=self.__class__.__name__,
            model_path=model_path,
            **kwargs,
        )
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    def invoke(self, input_buffer: bytes) -> bytes:
        """
        Run the model on one encoded input.
        
        Args:
            input_buffer: Encoded features (8 bytes for the weather model)
        
        Returns:
            Raw output buffer (20 bytes for the weather model)
        
        Raises:
            EngineClosedError: Engine was already closed
            InferenceFailure: The runtime failed while executing the model
        """
        if self._closed:
            raise EngineClosedError(
                "Inference engine used after close",
                details={"engine": self.name},
            )
        
        try:
            return self._run(input_buffer)
        except InferenceFailure:
            raise
        except Exception as e:
            logger.error(
                "Model invocation failed",
                engine=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise InferenceFailure(
                f"Model invocation failed: {e}",
                details={"engine": self.name, "error_type": type(e).__name__},
            ) from e
    
    @abstractmethod
    def _run(self, input_buffer: bytes) -> bytes:
        """Execute the model. Exceptions are wrapped by invoke()."""
        pass
    
    def _release(self) -> None:
        """Free native resources. Default implementation does nothing."""
        pass
    
    def close(self) -> None:
        """
        Release the model handle.
        
        The handle is released exactly once; further calls are no-ops.
        """
        if self._closed:
            return
        self._closed = True
        self._release()
        logger.debug("Closed inference engine", engine=self.name)
    
    def __enter__(self) -> "InferenceEngine":
        return self
    
    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"model_path={self.model_path}, "
            f"closed={self._closed})"
        )
