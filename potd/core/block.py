"""
Date to plaintext block encoding.

Layout of the 8-byte block:

    bytes 0-1  day of month, ASCII digits
    bytes 2-3  month, ASCII digits
    bytes 4-5  year modulo 100, ASCII digits
    bytes 6-7  pad byte 0x00
"""

from potd.core.des import BLOCK_SIZE
from potd.core.dates import CalendarDate

BLOCK_PAD_BYTE = b"\x00"


def encode_date(date: CalendarDate) -> bytes:
    """Encode a calendar date as a DES plaintext block"""
    digits = f"{date.day:02d}{date.month:02d}{date.year % 100:02d}".encode("ascii")
    return digits.ljust(BLOCK_SIZE, BLOCK_PAD_BYTE)
