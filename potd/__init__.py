"""
ARRIS/CommScope Password-of-the-Day Generator

Derives the per-day technician password a modem computes from its seed,
for a single date or a range of dates.
"""

from potd.core.dates import CalendarDate, DateRange, date_range, format_date, parse_date
from potd.core.seed import DerivedKey, derive_key, validate_seed
from potd.core.engine import (
    PotdEngine,
    PotdRecord,
    describe_key,
    generate,
    generate_multiple,
    seed_to_des,
)
from potd.core.worker import generate_parallel
from potd.utils.exceptions import (
    PotdError,
    InvalidSeedLengthError,
    InvalidSeedCharacterError,
    InvalidCalendarDateError,
    InvalidDateFormatError,
    InvalidRangeError,
)

__version__ = "0.1.0"
