"""
Feature encoding between WeatherSample and the model's raw tensor buffers.

Input layout (8 bytes):  [temperature float32][humidity float32]
Output layout (20 bytes): five float32 scores, CATEGORY_TABLE order

Both buffers use the platform's native byte order, which is what the model
was exported with.
"""

import numpy as np

from weather_inference.models.input_models import WeatherSample

FLOAT32 = np.dtype(np.float32)  # native byte order

FLOAT32_SIZE = FLOAT32.itemsize
INPUT_FEATURE_COUNT = 2
OUTPUT_CLASS_COUNT = 5
INPUT_BUFFER_SIZE = INPUT_FEATURE_COUNT * FLOAT32_SIZE
OUTPUT_BUFFER_SIZE = OUTPUT_CLASS_COUNT * FLOAT32_SIZE


def encode_features(temperature_celsius: float, humidity_percent: float) -> bytes:
    """Pack temperature then humidity as two native-endian float32 values."""
    return np.array([temperature_celsius, humidity_percent], dtype=FLOAT32).tobytes()


def encode_sample(sample: WeatherSample) -> bytes:
    """Encode a validated sample into the 8-byte model input buffer."""
    return encode_features(sample.temperature_celsius, sample.humidity_percent)


def decode_input_buffer(buffer: bytes) -> tuple[float, float]:
    """
    Inverse of encode_features.
    
    Raises:
        ValueError: buffer is not exactly INPUT_BUFFER_SIZE bytes
    """
    if len(buffer) != INPUT_BUFFER_SIZE:
        raise ValueError(
            f"Input buffer must be {INPUT_BUFFER_SIZE} bytes, got {len(buffer)}"
        )
    temperature, humidity = np.frombuffer(buffer, dtype=FLOAT32)
    return float(temperature), float(humidity)


def decode_output_buffer(buffer: bytes) -> np.ndarray:
    """
    Read raw engine output as a float32 score array.
    
    Raises:
        ValueError: buffer length is not a whole number of float32 values
    """
    if len(buffer) % FLOAT32_SIZE:
        raise ValueError(
            f"Output buffer length {len(buffer)} is not a multiple of {FLOAT32_SIZE}"
        )
    return np.frombuffer(buffer, dtype=FLOAT32)
