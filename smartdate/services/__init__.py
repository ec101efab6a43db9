"""Services for the smartdate library."""

from .normalizer import InputNormalizer
from .dispatcher import FormatDispatcher
from .smart_selector import SmartSelector

__all__ = ["InputNormalizer", "FormatDispatcher", "SmartSelector"]
