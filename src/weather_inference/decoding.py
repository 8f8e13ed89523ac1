"""Argmax decode of the model output distribution into a WeatherCategory."""

from typing import Sequence

import numpy as np

from weather_inference.models.enums import WeatherCategory

# Index used when there is no maximum to pick (empty output)
FALLBACK_INDEX = 0


def argmax(scores: Sequence[float]) -> int:
    """
    Index of the largest score.
    
    Ties go to the lowest index. NaN compares greater than every number, so
    the first NaN wins if one is present. An empty sequence yields
    FALLBACK_INDEX instead of raising.
    """
    values = np.asarray(scores, dtype=np.float64)
    if values.size == 0:
        return FALLBACK_INDEX
    # np.argmax scans left to right and keeps the first maximum (or first NaN)
    return int(np.argmax(values))


def decode_category(scores: Sequence[float]) -> WeatherCategory:
    """Map an output distribution to its weather label."""
    return WeatherCategory.from_index(argmax(scores))
