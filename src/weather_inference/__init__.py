"""
Weather Inference Layer.

Maps a temperature and humidity reading to one of five weather categories
using a small pretrained classifier:
- Feature encoding (two float32 values, native byte order)
- Black-box model invocation through a pluggable inference engine
- Argmax decode over a fixed category table

Architecture: FastAPI surface + TFLite/ONNX inference engine + pure encode/decode core
"""

__version__ = "0.1.0"
