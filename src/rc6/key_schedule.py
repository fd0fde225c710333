"""
RC6 key schedule.

Derives the 2R+4 round subkeys S[0..2R+3] from a user key of any length:

  1. S[0] = P32, S[i] = S[i-1] + Q32
  2. Pack the key bytes into c = max(1, ceil(b/4)) words L[0..c-1]
  3. Mix S and L for 3 * max(c, 2R+4) iterations

Key packing accumulates bytes into each word most significant byte first.
Only keys made of zero bytes give the same words as the little-endian
packing of the RC6 paper, so other keys produce ciphertexts that differ
from the paper's test vectors. Existing ciphertexts depend on this order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .config import DEFAULT_ROUNDS, P32, Q32, CipherConfig
from .words import WORD_BYTES, WORD_MASK, rotl


@dataclass
class CyclicIndex:
    """Index that wraps around a fixed modulus."""

    modulus: int
    value: int = 0

    def __post_init__(self) -> None:
        if self.modulus < 1:
            raise ValueError(f"modulus must be positive, got {self.modulus}")
        self.value %= self.modulus

    def advance(self) -> int:
        """Move to the next position and return it."""
        self.value = (self.value + 1) % self.modulus
        return self.value


@dataclass(frozen=True)
class SubkeyArray:
    """Immutable round subkeys S[0..2R+3]."""

    words: tuple[int, ...]
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        if len(self.words) != 2 * self.rounds + 4:
            raise ValueError(
                f"Expected {2 * self.rounds + 4} subkeys for {self.rounds} rounds, "
                f"got {len(self.words)}"
            )

    def __len__(self) -> int:
        return len(self.words)

    def __getitem__(self, index: int) -> int:
        return self.words[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.words)

    def hex(self) -> list[str]:
        """Subkeys as 8-digit lowercase hex strings."""
        return [f"{w:08x}" for w in self.words]


def pack_key_words(key: bytes) -> list[int]:
    """
    Pack key bytes into 32-bit words, four bytes per word.

    Each byte is shifted in at the low end, so the first byte of a group
    ends up most significant. A final short group is not left-aligned:
    b"ABC" packs to [0x00414243].

    An empty key packs to a single zero word, so it derives the same
    subkeys as b"\\x00\\x00\\x00\\x00".

    Args:
        key: Raw key bytes (any length)

    Returns:
        List of max(1, ceil(len(key)/4)) words
    """
    count = max(1, (len(key) + WORD_BYTES - 1) // WORD_BYTES)
    words = [0] * count
    for i, byte in enumerate(key):
        words[i // WORD_BYTES] = ((words[i // WORD_BYTES] << 8) + byte) & WORD_MASK
    return words


def initial_subkeys(count: int) -> list[int]:
    """Magic-constant table S[i] = P32 + i*Q32 (mod 2^32)."""
    table = [P32]
    for _ in range(1, count):
        table.append((table[-1] + Q32) & WORD_MASK)
    return table


def expand_key(key: bytes, rounds: int = DEFAULT_ROUNDS) -> SubkeyArray:
    """
    Derive the subkey array for a key.

    Args:
        key: Raw key bytes (any length, including empty)
        rounds: Number of rounds R

    Returns:
        SubkeyArray holding 2R+4 words
    """
    t = CipherConfig(rounds=rounds).subkey_count
    S = initial_subkeys(t)
    L = pack_key_words(key)
    c = len(L)

    A = B = 0
    i = CyclicIndex(t)
    j = CyclicIndex(c)
    for _ in range(3 * max(c, t)):
        A = S[i.value] = rotl(S[i.value] + A + B, 3)
        B = L[j.value] = rotl(L[j.value] + A + B, (A + B) % 32)
        i.advance()
        j.advance()

    return SubkeyArray(words=tuple(S), rounds=rounds)
