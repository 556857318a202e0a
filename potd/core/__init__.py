"""
Core functionality for the POTD generator.
"""

from .dates import (
    CalendarDate,
    DateRange,
    date_range,
    days_in_month,
    format_date,
    is_leap_year,
    parse_date,
)
from .des import encrypt_block
from .block import encode_date
from .seed import DerivedKey, derive_key, validate_seed
from .engine import (
    ALPHABET,
    PASSWORD_LENGTH,
    PotdEngine,
    PotdRecord,
    describe_key,
    generate,
    generate_multiple,
    seed_to_des,
)
from .worker import ParallelRangeRunner, generate_parallel, worker_process
