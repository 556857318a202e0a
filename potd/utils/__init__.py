"""
Utility modules for the POTD generator.
"""

from .config import Config, verbosity_to_level, DEFAULT_SEED, DEFAULT_DATE_FORMAT
from .exceptions import (
    PotdError,
    InvalidSeedError,
    InvalidSeedLengthError,
    InvalidSeedCharacterError,
    InvalidDateError,
    InvalidCalendarDateError,
    InvalidDateFormatError,
    InvalidRangeError,
    ConfigError,
    OutputError,
)
from .logger import Logger
