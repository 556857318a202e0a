"""
Single-block DES encryption for the POTD generator.

The plaintext handed to the cipher is always exactly one 64-bit block, so
DES is used in ECB mode with no padding and no chaining.
"""

from Crypto.Cipher import DES

BLOCK_SIZE = DES.block_size
KEY_SIZE = DES.key_size


def encrypt_block(key: bytes, block: bytes) -> bytes:
    """Encrypt one 8-byte block with DES

    Args:
        key: 8-byte DES key; the low bit of every byte is parity and is ignored
        block: 8-byte plaintext block

    Returns:
        8-byte ciphertext block
    """
    if len(key) != KEY_SIZE:
        raise ValueError(f"DES key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"DES block must be {BLOCK_SIZE} bytes, got {len(block)}")

    return DES.new(bytes(key), DES.MODE_ECB).encrypt(bytes(block))
