"""
FastAPI dependency injection for the weather inference layer.

The predictor (engine + adapter + lock) is an expensive singleton: the model
is loaded on first use and released on application shutdown.
"""

from functools import lru_cache

import structlog

from weather_inference.adapter import InferenceAdapter
from weather_inference.config import Settings, settings
from weather_inference.engine.factory import create_engine
from weather_inference.service import WeatherPredictor

logger = structlog.get_logger(__name__)


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_predictor() -> WeatherPredictor:
    """
    Get singleton predictor.
    
    A failed engine load raises EngineInitializationError and is not cached,
    so the next request retries the load.
    
    Returns:
        WeatherPredictor wrapping the configured engine
    """
    engine = create_engine(get_settings())
    return WeatherPredictor(InferenceAdapter(engine))


def close_predictor() -> None:
    """Release the cached predictor, if one was created."""
    if get_predictor.cache_info().currsize == 0:
        return
    get_predictor().close()
    get_predictor.cache_clear()
    logger.info("Predictor released")
