"""
Display helpers for prediction results and input errors.

Icon names match the drawable assets shipped with the client
(sunny, cloudy, partly_cloudy, rainy, cold).
"""

from typing import Optional, Union

from weather_inference.models.enums import InvalidInputReason, WeatherCategory
from weather_inference.models.input_models import InvalidInput

WEATHER_ICONS: dict[WeatherCategory, str] = {
    WeatherCategory.SUNNY: "sunny",
    WeatherCategory.CLOUDY: "cloudy",
    WeatherCategory.PARTLY_CLOUDY: "partly_cloudy",
    WeatherCategory.RAINY: "rainy",
    WeatherCategory.COLD: "cold",
}

MISSING_VALUES_MESSAGE = "Please enter both temperature and humidity"
INVALID_NUMBER_MESSAGE = "Please enter valid numeric values for temperature and humidity"


def _as_category(label: Union[WeatherCategory, str]) -> Optional[WeatherCategory]:
    try:
        return WeatherCategory(label)
    except ValueError:
        return None


def icon_for(label: Union[WeatherCategory, str]) -> Optional[str]:
    """Icon asset name for a label, None for anything outside the table."""
    category = _as_category(label)
    return WEATHER_ICONS.get(category) if category is not None else None


def format_prediction(label: Union[WeatherCategory, str]) -> str:
    """Result text shown under the icon."""
    text = label.value if isinstance(label, WeatherCategory) else label
    return f"Predicted Weather: \n{text}"


def message_for(invalid_input: InvalidInput) -> str:
    """User-facing message for a rejected input."""
    if invalid_input.reason is InvalidInputReason.MISSING_VALUE:
        return MISSING_VALUES_MESSAGE
    return INVALID_NUMBER_MESSAGE


def model_init_failed_message(error: Union[BaseException, str]) -> str:
    message = getattr(error, "message", None) or str(error)
    return f"Failed to initialize model: {message}"
