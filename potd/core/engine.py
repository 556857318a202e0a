"""
Password-of-the-day engine.

This module ties the pieces together: the seed is turned into a DES key
once, each requested date is encoded into a plaintext block, the block is
encrypted, and the eight ciphertext bytes are mapped onto a 36-character
alphabet to form the password.
"""

import logging
import string
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from potd.core.block import encode_date
from potd.core.dates import CalendarDate, date_range, format_date, parse_date
from potd.core.des import encrypt_block
from potd.core.seed import DerivedKey, derive_key
from potd.utils.config import DEFAULT_SEED

ALPHABET = string.digits + string.ascii_uppercase
PASSWORD_LENGTH = 8

DateLike = Union[CalendarDate, str]


@dataclass(frozen=True)
class PotdRecord:
    """Password for one calendar date

    ``ciphertext`` and ``key`` are only filled in when diagnostics were
    requested.
    """

    date: CalendarDate
    password: str
    ciphertext: Optional[bytes] = None
    key: Optional[DerivedKey] = None

    def to_dict(self, date_format: Optional[str] = None, include_key: bool = False) -> Dict[str, Any]:
        """Plain dictionary suitable for JSON output"""
        result = {
            "date": format_date(self.date, date_format),
            "password": self.password,
        }
        if include_key:
            if self.ciphertext is not None:
                result["ciphertext"] = self.ciphertext.hex().upper()
            if self.key is not None:
                result["des"] = describe_key(self.key)
        return result


def map_password(ciphertext: bytes) -> str:
    """Map ciphertext bytes onto the password alphabet"""
    return "".join(ALPHABET[byte % len(ALPHABET)] for byte in ciphertext[:PASSWORD_LENGTH])


def compute_password(key: bytes, date: CalendarDate) -> Tuple[str, bytes]:
    """Password and ciphertext for one date under an already derived key"""
    ciphertext = encrypt_block(bytes(key), encode_date(date))
    return map_password(ciphertext), ciphertext


def describe_key(key: DerivedKey) -> str:
    """DES representation of a derived key: 16 upper-case hex digits"""
    return key.hex()


def _as_date(value: DateLike) -> CalendarDate:
    if isinstance(value, CalendarDate):
        return value
    return parse_date(value)


class PotdEngine:
    """Generates passwords of the day for one seed

    The key is derived when the engine is created and reused for every date,
    so one engine should serve a whole date range.
    """

    def __init__(self, seed: str = DEFAULT_SEED, logger: Optional[logging.Logger] = None):
        """Initialize with a seed

        Args:
            seed: Seed string of 4 to 8 printable ASCII characters
            logger: Optional logger instance

        Raises:
            InvalidSeedLengthError, InvalidSeedCharacterError
        """
        self.logger = logger or logging.getLogger(__name__)
        self.key = derive_key(seed)
        self.seed = seed

    def describe_key(self) -> str:
        """DES representation of this engine's key"""
        return describe_key(self.key)

    def generate(self, date: DateLike, diagnostics: bool = False) -> PotdRecord:
        """Generate the password for one date

        Args:
            date: CalendarDate, or a ``YYYY-MM-DD`` string
            diagnostics: Attach ciphertext and key to the record

        Returns:
            PotdRecord for the date
        """
        date = _as_date(date)
        password, ciphertext = compute_password(self.key.data, date)
        self.logger.debug("Generated password for %s", date)
        if diagnostics:
            return PotdRecord(date, password, ciphertext, self.key)
        return PotdRecord(date, password)

    def generate_range(self, start: DateLike, end: DateLike,
                       diagnostics: bool = False) -> Iterator[PotdRecord]:
        """Lazily generate passwords for every date from start to end inclusive

        Raises:
            InvalidRangeError: start is after end
        """
        dates = date_range(_as_date(start), _as_date(end))
        self.logger.info("Generating %d passwords from %s to %s", len(dates), dates.start, dates.end)
        return (self.generate(day, diagnostics) for day in dates)


def generate(seed: str, date: DateLike) -> PotdRecord:
    """Generate the password for ``date`` using ``seed``"""
    return PotdEngine(seed).generate(date)


def generate_multiple(start: DateLike, end: DateLike, seed: str = DEFAULT_SEED) -> List[PotdRecord]:
    """Generate passwords for every date from start to end inclusive"""
    return list(PotdEngine(seed).generate_range(start, end))


def seed_to_des(seed: str) -> str:
    """DES representation of the key derived from ``seed``"""
    return describe_key(derive_key(seed))
