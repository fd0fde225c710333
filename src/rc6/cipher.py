"""
RC6 block cipher engine.

Each 16-byte block is processed independently (no chaining):

  B += S[0]; D += S[1]
  for j = 1..R:
      t = (B * (2B + 1)) <<< 5
      u = (D * (2D + 1)) <<< 5
      A = ((A ^ t) <<< u) + S[2j]
      C = ((C ^ u) <<< t) + S[2j + 1]
      (A, B, C, D) = (B, C, D, A)
  A += S[2R + 2]; C += S[2R + 3]

All additions are modulo 2^32.
"""

from __future__ import annotations

from .config import BLOCK_SIZE, LOG_W, CipherConfig
from .errors import InvalidInputLength
from .key_schedule import SubkeyArray, expand_key
from .trace import TraceRecorder
from .words import WORD_MASK, block_to_words, rotl, rotr, words_to_block


def _check_bytes(value, name: str) -> bytes:
    if isinstance(value, str):
        raise TypeError(f"{name} must be bytes, not str; encode it first")
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
    return bytes(value)


def zero_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Append zero bytes up to the next multiple of block_size."""
    remainder = len(data) % block_size
    if remainder == 0:
        return bytes(data)
    return bytes(data) + bytes(block_size - remainder)


class RC6Cipher:
    """
    RC6-32/R block cipher bound to one key.

    The subkey array is derived once in the constructor and never
    changes, so one instance can serve any number of calls, including
    concurrent ones.
    """

    def __init__(
        self,
        key: bytes,
        config: CipherConfig | None = None,
        tracer: TraceRecorder | None = None,
    ):
        """
        Derive subkeys for key.

        Args:
            key: Raw key bytes of any length (an empty key is allowed)
            config: Cipher parameters (defaults to 20 rounds)
            tracer: Optional trace recorder for round-by-round output
        """
        key = _check_bytes(key, "key")
        self.config = config if config is not None else CipherConfig()
        self.tracer = tracer
        self._subkeys = expand_key(key, self.config.rounds)

    @property
    def subkeys(self) -> SubkeyArray:
        return self._subkeys

    @property
    def rounds(self) -> int:
        return self.config.rounds

    @property
    def block_size(self) -> int:
        return BLOCK_SIZE

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rounds={self.rounds})"

    # ------------------------------------------------------------------
    # Single block
    # ------------------------------------------------------------------

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt exactly one 16-byte block."""
        block = _check_bytes(block, "block")
        if len(block) != BLOCK_SIZE:
            raise InvalidInputLength(len(block), BLOCK_SIZE, "Block", exact=True)
        return self._encrypt_block(block, 0)

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt exactly one 16-byte block."""
        block = _check_bytes(block, "block")
        if len(block) != BLOCK_SIZE:
            raise InvalidInputLength(len(block), BLOCK_SIZE, "Block", exact=True)
        return self._decrypt_block(block, 0)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def encrypt(self, plaintext: bytes) -> bytes:
        """
        Encrypt a message of any length.

        The plaintext is zero-padded to a multiple of 16 bytes; an empty
        plaintext gives an empty ciphertext.

        Returns:
            Ciphertext of the padded length
        """
        data = zero_pad(_check_bytes(plaintext, "plaintext"))
        out = bytearray()
        for index, offset in enumerate(range(0, len(data), BLOCK_SIZE)):
            out += self._encrypt_block(data[offset:offset + BLOCK_SIZE], index)
        return bytes(out)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """
        Decrypt a whole number of blocks.

        Padding is left in place; see rc6.padding for removing it.

        Raises:
            InvalidInputLength: If len(ciphertext) is not a multiple of 16
        """
        data = _check_bytes(ciphertext, "ciphertext")
        if len(data) % BLOCK_SIZE:
            raise InvalidInputLength(len(data), BLOCK_SIZE)
        out = bytearray()
        for index, offset in enumerate(range(0, len(data), BLOCK_SIZE)):
            out += self._decrypt_block(data[offset:offset + BLOCK_SIZE], index)
        return bytes(out)

    # ------------------------------------------------------------------
    # Round transform
    # ------------------------------------------------------------------

    def _trace(self, direction: str, block: int, round_num: int, op: str,
               words: tuple[int, int, int, int]) -> None:
        if self.tracer is not None:
            self.tracer.record(
                direction=direction,
                block=block,
                round=round_num,
                operation=op,
                words=list(words),
            )

    def _encrypt_block(self, block: bytes, index: int) -> bytes:
        S = self._subkeys
        R = self.rounds
        A, B, C, D = block_to_words(block)

        B = (B + S[0]) & WORD_MASK
        D = (D + S[1]) & WORD_MASK
        self._trace("encrypt", index, 0, "whiten_in", (A, B, C, D))

        for j in range(1, R + 1):
            t = rotl(B * (2 * B + 1), LOG_W)
            u = rotl(D * (2 * D + 1), LOG_W)
            A = (rotl(A ^ t, u % 32) + S[2 * j]) & WORD_MASK
            C = (rotl(C ^ u, t % 32) + S[2 * j + 1]) & WORD_MASK
            A, B, C, D = B, C, D, A
            self._trace("encrypt", index, j, "round", (A, B, C, D))

        A = (A + S[2 * R + 2]) & WORD_MASK
        C = (C + S[2 * R + 3]) & WORD_MASK
        self._trace("encrypt", index, R + 1, "whiten_out", (A, B, C, D))

        return words_to_block((A, B, C, D))

    def _decrypt_block(self, block: bytes, index: int) -> bytes:
        S = self._subkeys
        R = self.rounds
        A, B, C, D = block_to_words(block)

        C = (C - S[2 * R + 3]) & WORD_MASK
        A = (A - S[2 * R + 2]) & WORD_MASK
        self._trace("decrypt", index, R + 1, "whiten_out", (A, B, C, D))

        for j in range(R, 0, -1):
            A, B, C, D = D, A, B, C
            u = rotl(D * (2 * D + 1), LOG_W)
            t = rotl(B * (2 * B + 1), LOG_W)
            C = rotr((C - S[2 * j + 1]) & WORD_MASK, t % 32) ^ u
            A = rotr((A - S[2 * j]) & WORD_MASK, u % 32) ^ t
            self._trace("decrypt", index, j, "round", (A, B, C, D))

        D = (D - S[1]) & WORD_MASK
        B = (B - S[0]) & WORD_MASK
        self._trace("decrypt", index, 0, "whiten_in", (A, B, C, D))

        return words_to_block((A, B, C, D))
