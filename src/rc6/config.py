"""Cipher parameters and the magic constants of RC6-32."""

from __future__ import annotations

from dataclasses import dataclass

# Word size in bits and log2 of it
WORD_BITS = 32
LOG_W = 5

# Block size in bytes (four 32-bit words)
BLOCK_SIZE = 16

DEFAULT_ROUNDS = 20
MAX_ROUNDS = 255

# Odd(e - 2) and Odd(phi - 1) scaled to 32 bits
P32 = 0xB7E15163
Q32 = 0x9E3779B9


@dataclass(frozen=True)
class CipherConfig:
    """Configuration object for an RC6 cipher instance.

    Word size is fixed at 32 bits; only the round count varies. The
    default is the standard RC6-32/20 parameter set.
    """

    # Number of rounds R (subkey array holds 2R+4 words)
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.rounds, bool) or not isinstance(self.rounds, int):
            raise ValueError(f"rounds must be an integer, got {self.rounds!r}")
        if not 1 <= self.rounds <= MAX_ROUNDS:
            raise ValueError(f"rounds must be 1..{MAX_ROUNDS}, got {self.rounds}")

    @property
    def subkey_count(self) -> int:
        """Length of the subkey array (2R+4)."""
        return 2 * self.rounds + 4

    @property
    def block_size(self) -> int:
        return BLOCK_SIZE

    @property
    def word_bits(self) -> int:
        return WORD_BITS
