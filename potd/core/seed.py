"""
Seed validation and key derivation for the POTD generator.

A seed of 4 to 8 printable ASCII characters is packed into an 8-byte DES key:

1. each character contributes its 7-bit ASCII code;
2. the codes are right-padded with 0x00 to eight bytes;
3. every byte is shifted left by one bit so the code fills bits 7..1;
4. bit 0 is set or cleared to give the byte odd parity.
"""

import logging
import string
from dataclasses import dataclass

from potd.core.des import KEY_SIZE
from potd.utils.exceptions import InvalidSeedLengthError, InvalidSeedCharacterError

logger = logging.getLogger(__name__)

MIN_SEED_LENGTH = 4
MAX_SEED_LENGTH = 8

SEED_CHARSET = frozenset(string.ascii_letters + string.digits + string.punctuation)

PAD_BYTE = 0x00


def validate_seed(raw: str) -> str:
    """Check a raw seed string and return it unchanged

    Raises:
        InvalidSeedLengthError: seed shorter than 4 or longer than 8 characters
        InvalidSeedCharacterError: seed contains whitespace, control or non-ASCII characters
    """
    if not isinstance(raw, str):
        raise InvalidSeedCharacterError(f"Seed must be a string, got {type(raw).__name__}")

    if not MIN_SEED_LENGTH <= len(raw) <= MAX_SEED_LENGTH:
        raise InvalidSeedLengthError(
            f"Seed must be between {MIN_SEED_LENGTH} and {MAX_SEED_LENGTH} characters, "
            f"got {len(raw)}"
        )

    for position, char in enumerate(raw):
        if char not in SEED_CHARSET:
            raise InvalidSeedCharacterError(
                f"Seed character {char!r} at position {position} is not a printable ASCII character"
            )

    return raw


def set_odd_parity(byte: int) -> int:
    """Return ``byte`` with bit 0 adjusted so the byte has odd parity"""
    high = byte & 0xFE
    ones = bin(high).count("1")
    return high | (0 if ones % 2 else 1)


@dataclass(frozen=True)
class DerivedKey:
    """Immutable 8-byte DES key derived from a seed"""

    data: bytes

    def __post_init__(self):
        if len(self.data) != KEY_SIZE:
            raise ValueError(f"Derived key must be {KEY_SIZE} bytes, got {len(self.data)}")

    def __bytes__(self) -> bytes:
        return self.data

    def hex(self) -> str:
        """Upper-case hexadecimal rendering, parity bits included"""
        return self.data.hex().upper()


def derive_key(seed: str) -> DerivedKey:
    """Derive the DES key for a seed

    Args:
        seed: Seed string; validated before any key byte is produced

    Returns:
        The derived key
    """
    validate_seed(seed)

    codes = [ord(char) for char in seed]
    codes.extend([PAD_BYTE] * (KEY_SIZE - len(codes)))
    key = DerivedKey(bytes(set_odd_parity(code << 1) for code in codes))

    logger.debug("Derived key for %d-character seed", len(seed))
    return key
