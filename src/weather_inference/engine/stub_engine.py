"""
Stub engine returning a fixed output distribution.

Used by the test suite and as the "stub" backend when no model asset is
available (local development, API smoke tests).
"""

from typing import Optional, Sequence

import numpy as np
import structlog

from weather_inference.encoding import FLOAT32
from weather_inference.engine.base_engine import InferenceEngine

logger = structlog.get_logger(__name__)

DEFAULT_STUB_SCORES = (0.0, 0.0, 0.0, 1.0, 0.0)  # always "Sunny"


class StubEngine(InferenceEngine):
    """
    Engine that ignores its input and returns the configured scores.
    
    Every received buffer is recorded in ``calls`` so tests can assert on
    what the adapter sent. Pass ``error`` to make every invoke() fail.
    """
    
    name = "stub"
    
    def __init__(
        self,
        scores: Sequence[float] = DEFAULT_STUB_SCORES,
        error: Optional[Exception] = None,
    ):
        self.scores = tuple(float(s) for s in scores)
        self.error = error
        self.calls: list[bytes] = []
        super().__init__(model_path=None, scores=list(self.scores))
    
    @property
    def call_count(self) -> int:
        return len(self.calls)
    
    def _run(self, input_buffer: bytes) -> bytes:
        self.calls.append(bytes(input_buffer))
        if self.error is not None:
            raise self.error
        return np.asarray(self.scores, dtype=FLOAT32).tobytes()
