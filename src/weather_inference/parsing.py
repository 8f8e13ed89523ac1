"""
Parsing of raw text input into a WeatherSample.

Returns Ok(WeatherSample) or Err(InvalidInput); bad input is never raised.
"""

from typing import Optional

from weather_inference.models.enums import InvalidInputReason
from weather_inference.models.input_models import InvalidInput, WeatherSample, to_float32
from weather_inference.models.result import Err, Ok, Result

TEMPERATURE_FIELD = "temperature"
HUMIDITY_FIELD = "humidity"


def _reject(reason: InvalidInputReason, field: str, value: Optional[str]) -> Err[InvalidInput]:
    return Err(InvalidInput(reason=reason, field=field, value=value))


def parse_number(field: str, text: Optional[str]) -> Result[float, InvalidInput]:
    """
    Parse one trimmed decimal number that must fit a finite float32.
    
    Args:
        field: Field name reported in the error
        text: Raw text (None is treated as empty)
    
    Returns:
        Ok(float) already rounded to float32, or Err(InvalidInput)
    """
    stripped = (text or "").strip()
    if not stripped:
        return _reject(InvalidInputReason.MISSING_VALUE, field, text)
    
    # float() accepts digit separators ("1_000"); form input does not
    if "_" in stripped:
        return _reject(InvalidInputReason.NOT_A_NUMBER, field, text)
    
    try:
        value = float(stripped)
    except ValueError:
        return _reject(InvalidInputReason.NOT_A_NUMBER, field, text)
    
    try:
        return Ok(to_float32(value))
    except ValueError:
        return _reject(InvalidInputReason.NOT_FINITE, field, text)


def parse_sample(
    temperature_text: Optional[str],
    humidity_text: Optional[str],
) -> Result[WeatherSample, InvalidInput]:
    """
    Build a WeatherSample from the two form fields.
    
    Missing values are reported before malformed ones, and temperature is
    checked before humidity, so the first problem the user should fix wins.
    
    Args:
        temperature_text: Temperature in degrees Celsius, as typed
        humidity_text: Relative humidity in percent, as typed
    
    Returns:
        Ok(WeatherSample) or Err(InvalidInput)
    """
    for field, text in ((TEMPERATURE_FIELD, temperature_text), (HUMIDITY_FIELD, humidity_text)):
        if not (text or "").strip():
            return _reject(InvalidInputReason.MISSING_VALUE, field, text)
    
    temperature = parse_number(TEMPERATURE_FIELD, temperature_text)
    if isinstance(temperature, Err):
        return temperature
    
    humidity = parse_number(HUMIDITY_FIELD, humidity_text)
    if isinstance(humidity, Err):
        return humidity
    
    return Ok(WeatherSample(temperature_celsius=temperature.value, humidity_percent=humidity.value))
