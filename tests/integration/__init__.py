"""
Integration tests for the weather inference layer.

API tests run the FastAPI app end to end; runtime tests need onnxruntime.
"""
