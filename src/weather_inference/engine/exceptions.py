"""
Exceptions raised by inference engines.

All of them are InferenceFailure subclasses, so callers that only care about
"the model could not produce an answer" catch one type. The adapter never
catches these; they reach the caller unchanged.
"""

from weather_inference.exceptions import WeatherInferenceError


class InferenceFailure(WeatherInferenceError):
    """
    Raised when the model invocation fails.
    
    Examples:
    - Runtime raised while executing the graph
    - Input tensor could not be filled
    """
    pass


class EngineInitializationError(InferenceFailure):
    """
    Raised when an engine cannot be brought up.
    
    Examples:
    - Runtime package (LiteRT, onnxruntime) not installed
    - Model file missing or not a valid model
    - Model tensors do not match the 2-in / 5-out contract
    """
    pass


class EngineClosedError(InferenceFailure):
    """
    Raised when an engine is used after close().
    
    This is a programming error in the owner, not a runtime condition.
    """
    pass


class MalformedOutputError(InferenceFailure):
    """Raised when the engine returns a buffer of the wrong size."""
    pass
