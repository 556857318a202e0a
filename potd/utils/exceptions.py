"""
Custom exceptions for the POTD generator.
"""

class PotdError(Exception):
    """Base exception for POTD generator errors"""
    pass


class InvalidSeedError(PotdError):
    """Seed rejected before any key material is derived"""
    pass


class InvalidSeedLengthError(InvalidSeedError):
    """Seed is shorter or longer than the accepted length"""
    pass


class InvalidSeedCharacterError(InvalidSeedError):
    """Seed contains a character outside the accepted set"""
    pass


class InvalidDateError(PotdError):
    """Date input could not be turned into a calendar date"""
    pass


class InvalidCalendarDateError(InvalidDateError):
    """Year, month and day do not denote a real calendar date"""
    pass


class InvalidDateFormatError(InvalidDateError):
    """Date string does not match the expected format"""
    pass


class InvalidRangeError(PotdError):
    """Range start falls after range end"""
    pass


class ConfigError(PotdError):
    """Error in configuration"""
    pass


class OutputError(PotdError):
    """Error writing results"""
    pass
