"""
Word/byte conversions and 32-bit rotations.

RC6 treats a 16-byte block as four 32-bit words A, B, C, D, each stored
little-endian:

  bytes[0..3]   -> A
  bytes[4..7]   -> B
  bytes[8..11]  -> C
  bytes[12..15] -> D
"""

from .config import BLOCK_SIZE, WORD_BITS

WORD_MASK = (1 << WORD_BITS) - 1
WORD_BYTES = WORD_BITS // 8


def bytes_to_word(buffer: bytes, offset: int = 0) -> int:
    """
    Read a little-endian 32-bit word starting at offset.

    Bytes beyond the end of the buffer count as zero, so a short tail
    never raises IndexError.

    Args:
        buffer: Source bytes
        offset: Index of the least significant byte

    Returns:
        Unsigned 32-bit integer
    """
    value = 0
    for i in range(WORD_BYTES):
        if offset + i < len(buffer):
            value |= buffer[offset + i] << (8 * i)
    return value


def word_to_bytes(word: int, buffer: bytearray, offset: int = 0) -> None:
    """
    Write a 32-bit word as 4 little-endian bytes at offset.

    Args:
        word: Value to store (reduced modulo 2^32)
        buffer: Destination, must hold offset + 4 bytes
        offset: Index of the least significant byte
    """
    for i in range(WORD_BYTES):
        buffer[offset + i] = (word >> (8 * i)) & 0xFF


def block_to_words(block: bytes) -> tuple[int, int, int, int]:
    """Split a 16-byte block into (A, B, C, D)."""
    return (
        bytes_to_word(block, 0),
        bytes_to_word(block, 4),
        bytes_to_word(block, 8),
        bytes_to_word(block, 12),
    )


def words_to_block(words: tuple[int, int, int, int]) -> bytes:
    """Join (A, B, C, D) into a 16-byte block."""
    out = bytearray(BLOCK_SIZE)
    for i, word in enumerate(words):
        word_to_bytes(word, out, i * WORD_BYTES)
    return bytes(out)


def rotl(value: int, shift: int) -> int:
    """Rotate a 32-bit word left; shift is taken modulo 32."""
    shift %= WORD_BITS
    value &= WORD_MASK
    return ((value << shift) | (value >> (WORD_BITS - shift))) & WORD_MASK


def rotr(value: int, shift: int) -> int:
    """Rotate a 32-bit word right; shift is taken modulo 32."""
    shift %= WORD_BITS
    value &= WORD_MASK
    return ((value >> shift) | (value << (WORD_BITS - shift))) & WORD_MASK


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hex string to bytes.

    Whitespace between byte pairs is accepted.
    """
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to lowercase hex string.
    """
    return data.hex()


def format_words(data: bytes) -> str:
    """
    Format data as little-endian 32-bit words, one per line.

    Returns multi-line string like:
      Word 0: 6843969 (0x00686E41)
      Word 1: 0 (0x00000000)

    A trailing partial word is zero-extended.
    """
    lines = []
    for offset in range(0, len(data), WORD_BYTES):
        word = bytes_to_word(data, offset)
        lines.append(f"Word {offset // WORD_BYTES}: {word} (0x{word:08X})")
    return "\n".join(lines)
