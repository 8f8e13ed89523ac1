"""
Enumerations for Weather Inference Layer data models.

WeatherCategory is the closed output taxonomy of the pretrained classifier.
Member order IS the model's output index order and must never change.
"""

from enum import Enum


class WeatherCategory(str, Enum):
    """
    Weather label predicted by the classifier.
    
    Declared in model output order: index 0 is CLOUDY, index 4 is PARTLY_CLOUDY.
    Not alphabetical on purpose; the order comes from the trained model.
    """
    
    CLOUDY = "Cloudy"
    COLD = "Cold"
    RAINY = "Rainy"
    SUNNY = "Sunny"
    PARTLY_CLOUDY = "Partly Cloudy"
    
    @classmethod
    def from_index(cls, index: int) -> "WeatherCategory":
        """Map a model output index to its category (raises IndexError if out of range)."""
        if index < 0:
            raise IndexError(f"Category index must be >= 0, got {index}")
        return CATEGORY_TABLE[index]
    
    @property
    def index(self) -> int:
        """Position of this category in the model output."""
        return CATEGORY_TABLE.index(self)


class InvalidInputReason(str, Enum):
    """Why a raw numeric input was rejected."""
    
    MISSING_VALUE = "missing_value"
    NOT_A_NUMBER = "not_a_number"
    NOT_FINITE = "not_finite"


# Index-aligned with the model output distribution
CATEGORY_TABLE: tuple[WeatherCategory, ...] = tuple(WeatherCategory)
